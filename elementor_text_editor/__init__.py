"""Core logic for the Elementor Text Editor.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- validate and parse pasted JSON
- extract editable text fields with their paths
- rebuild the original document with edited values
"""
from .errors import ExtractionFailure, MalformedInput, PathSyntaxError, RebuildFailure
from .extractor import ExtractionOptions, extract_editable_fields
from .io_utils import is_valid_json
from .rebuilder import FieldStatus, RebuildResult, rebuild, rebuild_json_with_updated_fields
from .records import EditableField

__all__ = [
    'EditableField',
    'ExtractionFailure',
    'ExtractionOptions',
    'FieldStatus',
    'MalformedInput',
    'PathSyntaxError',
    'RebuildFailure',
    'RebuildResult',
    'extract_editable_fields',
    'is_valid_json',
    'rebuild',
    'rebuild_json_with_updated_fields',
]
