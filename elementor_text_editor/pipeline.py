from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, List, Optional

from .extractor import ExtractionOptions, extract_editable_fields
from .rebuilder import rebuild

logger = logging.getLogger(__name__)


@dataclass
class RoundTripReport:
    total: int
    updated: int
    missing: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.updated == self.total and not self.missing


def verify_round_trip(
    document: Any,
    marker: str = ' (edited)',
    options: Optional[ExtractionOptions] = None,
) -> RoundTripReport:
    """Extract, mark every value, rebuild and re-extract.

    Every field extracted from the rebuilt document should carry the marker.
    The input document is left untouched.
    """
    fields = extract_editable_fields(document, options)
    if not fields:
        return RoundTripReport(total=0, updated=0)

    edited = [replace(f, value=f"{f.value}{marker}") for f in fields]
    rebuilt = rebuild(document, edited).document

    missing: List[str] = []
    updated = 0
    for f in extract_editable_fields(rebuilt, options):
        if isinstance(f.value, str) and f.value.endswith(marker):
            updated += 1
        else:
            missing.append(f.path)

    report = RoundTripReport(total=len(fields), updated=updated, missing=missing)
    logger.info("Round-trip check: %d/%d fields updated", report.updated, report.total)
    return report
