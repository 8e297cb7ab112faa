from __future__ import annotations

from typing import Any

import gradio as gr

from .errors import ExtractionFailure, MalformedInput, RebuildFailure
from .extractor import extract_editable_fields
from .io_utils import dump_json, is_valid_json, parse_json_text
from .pipeline import verify_round_trip
from .rebuilder import rebuild
from .records import fields_to_json

EXTRACT_TAB = "extract"
REBUILD_TAB = "rebuild"
RESULT_TAB = "result"


def extract_fields_handler(original_text):
    """Parse the pasted Elementor JSON and list its editable fields."""
    if not original_text or not original_text.strip():
        return None, "", "Please paste the original Elementor JSON.", gr.update()

    if not is_valid_json(original_text):
        return None, "", "The JSON entered is not valid. Check the formatting.", gr.update()

    try:
        data = parse_json_text(original_text)
        fields = extract_editable_fields(data)
    except (MalformedInput, ExtractionFailure) as e:
        return None, "", f"Error processing JSON: {str(e)}", gr.update()

    tabs = gr.update(selected=REBUILD_TAB) if fields else gr.update()
    message = f"{len(fields)} editable fields were extracted from the original JSON."
    return data, fields_to_json(fields), message, tabs


def rebuild_json_handler(original_data: Any, fields_text):
    """Apply the edited field list to the stored original document."""
    if original_data is None:
        return "", "Original JSON not available. Run step 1 first.", gr.update()

    if not fields_text or not fields_text.strip():
        return "", "Please paste the filled-in field list.", gr.update()

    if not is_valid_json(fields_text):
        return "", "The filled-in JSON is not valid. Check the formatting.", gr.update()

    try:
        items = parse_json_text(fields_text)
        if not isinstance(items, list):
            raise MalformedInput("The field list must be a JSON array.")
        result = rebuild(original_data, items)
    except (MalformedInput, RebuildFailure) as e:
        return "", f"Error rebuilding JSON: {str(e)}", gr.update()

    message = "JSON rebuilt with the updated values."
    if result.unresolved:
        paths = ", ".join(o.path or f"#{o.index + 1}" for o in result.unresolved)
        message += f" Warning: {len(result.unresolved)} fields could not be applied: {paths}"
    return dump_json(result.document), message, gr.update(selected=RESULT_TAB)


def round_trip_check_handler(original_data: Any) -> str:
    if original_data is None:
        return "Original JSON not available. Run step 1 first."

    try:
        report = verify_round_trip(original_data)
    except ExtractionFailure as e:
        return f"Error processing JSON: {str(e)}"

    if report.ok:
        return f"Round-trip check passed: {report.updated}/{report.total} fields updated."
    return (
        f"Round-trip check failed: {report.updated}/{report.total} fields updated. "
        f"Not updated: {', '.join(report.missing)}"
    )
