"""Apply edited field values back onto a copy of the original document."""
from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Set

from .accessors import get_value_by_path, path_exists, set_value_by_path
from .errors import ElementorTextError, RebuildFailure
from .paths import Index, Key, Steps, alternate_paths, format_path, parse_path
from .records import EditableField

logger = logging.getLogger(__name__)


class FieldStatus(str, Enum):
    APPLIED = 'applied'
    REPAIRED = 'repaired'
    ALTERNATE_PATH = 'alternate_path'
    UNRESOLVED = 'unresolved'


@dataclass
class FieldOutcome:
    index: int
    path: Optional[str]
    status: FieldStatus
    applied_path: Optional[str] = None
    message: str = ''


@dataclass
class RebuildResult:
    document: Any
    outcomes: List[FieldOutcome] = field(default_factory=list)

    @property
    def unresolved(self) -> List[FieldOutcome]:
        return [o for o in self.outcomes if o.status is FieldStatus.UNRESOLVED]

    @property
    def ok(self) -> bool:
        return not self.unresolved


def _plan_repair(document: Any, steps: Steps) -> Optional[int]:
    """Find where missing containers must start for steps to become settable.

    Returns the index of the first missing step, or None when the path cannot
    be repaired: the resolved parent is not a container, or its kind does not
    match the step (an index needs a list, a key needs an object).
    """
    node = document
    for i, step in enumerate(steps):
        if path_exists(node, (step,)):
            child = get_value_by_path(node, (step,))
            if child is None and i < len(steps) - 1:
                # null placeholder, e.g. a padded list slot
                return i
            node = child
            continue
        if isinstance(step, Index) and not isinstance(node, list):
            return None
        if isinstance(step, Key) and not isinstance(node, dict):
            return None
        return i
    return len(steps)


def _repair_and_set(document: Any, steps: Steps, value: Any) -> bool:
    start = _plan_repair(document, steps)
    if start is None:
        return False

    # Containers for every missing step except the leaf; the kind follows the next step.
    for i in range(start, len(steps) - 1):
        default = [] if isinstance(steps[i + 1], Index) else {}
        set_value_by_path(document, steps[:i + 1], default)
        logger.debug("Created default value at %s", format_path(steps[:i + 1]))

    set_value_by_path(document, steps, value)
    return True


def _apply_field(document: Any, idx: int, item: Any) -> FieldOutcome:
    try:
        record = EditableField.from_value(item)
        steps = parse_path(record.path)
    except ElementorTextError as e:
        raw_path = item.get('path') if isinstance(item, dict) else getattr(item, 'path', None)
        return FieldOutcome(idx, raw_path if isinstance(raw_path, str) else None, FieldStatus.UNRESOLVED, message=str(e))

    normalized = format_path(steps)

    if path_exists(document, steps):
        set_value_by_path(document, steps, record.value)
        logger.debug("Field updated: %s", normalized)
        return FieldOutcome(idx, record.path, FieldStatus.APPLIED, normalized)

    logger.info("Path not found, attempting repair: %s", normalized)
    try:
        if _repair_and_set(document, steps, record.value):
            logger.info("Field created and updated: %s", normalized)
            return FieldOutcome(idx, record.path, FieldStatus.REPAIRED, normalized)
    except (KeyError, TypeError) as e:
        logger.warning("Repair failed for %s: %s", normalized, e)

    tried: Set[Steps] = {steps}
    for candidate in alternate_paths(steps):
        candidate_steps = parse_path(candidate)
        if candidate_steps in tried:
            continue
        tried.add(candidate_steps)
        if path_exists(document, candidate_steps):
            set_value_by_path(document, candidate_steps, record.value)
            logger.info("Field %s applied at alternate path %s", normalized, candidate)
            return FieldOutcome(idx, record.path, FieldStatus.ALTERNATE_PATH, candidate)

    logger.warning("Could not apply field at %s", normalized)
    return FieldOutcome(idx, record.path, FieldStatus.UNRESOLVED, message=f"Path not found: {record.path}")


def rebuild(original_document: Any, edited_fields: Iterable[Any]) -> RebuildResult:
    """Rebuild a copy of original_document with the edited field values.

    The original is never mutated. A field that cannot be applied is reported
    as UNRESOLVED in the result and does not stop the others.
    """
    try:
        result = RebuildResult(document=deepcopy(original_document))
        items = list(edited_fields or [])
    except Exception as e:
        logger.exception("Error rebuilding JSON")
        raise RebuildFailure("Failed to rebuild JSON with updated fields") from e

    for idx, item in enumerate(items):
        try:
            outcome = _apply_field(result.document, idx, item)
        except Exception as e:
            logger.exception("Error updating field #%d", idx + 1)
            outcome = FieldOutcome(idx, None, FieldStatus.UNRESOLVED, message=str(e))
        result.outcomes.append(outcome)

    logger.info(
        "Rebuilt document: %d fields, %d unresolved",
        len(result.outcomes),
        len(result.unresolved),
    )
    return result


def rebuild_json_with_updated_fields(original_document: Any, updated_fields: Iterable[Any]) -> Any:
    return rebuild(original_document, updated_fields).document
