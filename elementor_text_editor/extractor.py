"""Walk an Elementor document and collect its editable text fields.

Each node is classified by ``widgetType``:

- divider / spacer: nothing is emitted, children are still walked
- heading / text-editor / button: the single text setting for that widget
- any other type: recognized keys under ``settings``
- no type: recognized keys directly on the node

``elements`` and ``widgets`` lists are walked after classification, in that
order, so records come out depth-first in document order.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .constants import (
    BARE_WIDGET_KEYS,
    CONTAINER_KEYS,
    EXTENDED_SETTINGS_TEXT_KEYS,
    SETTINGS_KEY,
    SETTINGS_TEXT_KEYS,
    SKIPPED_WIDGET_TYPES,
    WIDGET_TEXT_FIELDS,
    WIDGET_TYPE_KEY,
)
from .errors import ExtractionFailure
from .paths import Index, Key, Steps, format_path
from .records import EditableField

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionOptions:
    extended_keys: bool = False
    # Treat a document without widgets/elements as one widget.
    single_widget: bool = False

    @property
    def settings_keys(self) -> Tuple[str, ...]:
        return EXTENDED_SETTINGS_TEXT_KEYS if self.extended_keys else SETTINGS_TEXT_KEYS


def is_editable_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ''


def widget_type_of(node: dict) -> Optional[str]:
    """The node's widgetType, or None when it is absent, blank or not a string."""
    widget_type = node.get(WIDGET_TYPE_KEY)
    if isinstance(widget_type, str) and widget_type.strip():
        return widget_type
    return None


def _record(result: List[EditableField], field_type: str, steps: Steps, value: str) -> None:
    result.append(EditableField(type=field_type, path=format_path(steps), value=value))


def _classify(node: dict, steps: Steps, options: ExtractionOptions, result: List[EditableField]) -> None:
    widget_type = widget_type_of(node)

    if widget_type in SKIPPED_WIDGET_TYPES:
        return

    settings = node.get(SETTINGS_KEY)

    if widget_type in WIDGET_TEXT_FIELDS:
        key = WIDGET_TEXT_FIELDS[widget_type]
        if isinstance(settings, dict) and is_editable_text(settings.get(key)):
            _record(result, widget_type, steps + (Key(SETTINGS_KEY), Key(key)), settings[key])
        return

    if widget_type is not None:
        if isinstance(settings, dict):
            allowed = options.settings_keys
            for key, value in settings.items():
                if key in allowed and is_editable_text(value):
                    _record(result, key, steps + (Key(SETTINGS_KEY), Key(key)), value)
        return

    for key, value in node.items():
        if key in BARE_WIDGET_KEYS and is_editable_text(value):
            _record(result, key, steps + (Key(key),), value)


def _walk_node(node: Any, steps: Steps, options: ExtractionOptions, result: List[EditableField]) -> None:
    if not isinstance(node, dict):
        return

    _classify(node, steps, options, result)

    for container_key in CONTAINER_KEYS:
        children = node.get(container_key)
        if isinstance(children, list):
            _walk_list(children, steps + (Key(container_key),), options, result)


def _walk_list(items: list, steps: Steps, options: ExtractionOptions, result: List[EditableField]) -> None:
    for idx, item in enumerate(items):
        _walk_node(item, steps + (Index(idx),), options, result)


def extract_editable_fields(document: Any, options: Optional[ExtractionOptions] = None) -> List[EditableField]:
    """Extract every editable text field from a parsed Elementor document.

    Absent, blank and non-string fields are skipped. Only an unexpected error
    during the walk is raised, as ExtractionFailure.
    """
    options = options or ExtractionOptions()
    result: List[EditableField] = []

    try:
        if isinstance(document, dict) and isinstance(document.get('widgets'), list):
            _walk_list(document['widgets'], (Key('widgets'),), options, result)
        elif isinstance(document, dict) and isinstance(document.get('elements'), list):
            _walk_list(document['elements'], (Key('elements'),), options, result)
        elif isinstance(document, list):
            _walk_list(document, (), options, result)
        elif options.single_widget and isinstance(document, dict):
            _walk_node(document, (), options, result)
    except Exception as e:
        logger.exception("Error extracting editable fields")
        raise ExtractionFailure("Failed to extract editable fields from JSON") from e

    logger.info("Extracted %d editable fields", len(result))
    return result
