from __future__ import annotations

import json
from typing import Any

from .constants import JSON_INDENT
from .errors import MalformedInput


def is_valid_json(text: Any) -> bool:
    """Whether text parses as JSON. Never raises."""
    if not isinstance(text, (str, bytes, bytearray)):
        return False
    try:
        json.loads(text)
    except (ValueError, RecursionError):
        return False
    return True


def parse_json_text(text: Any) -> Any:
    """Parse pasted JSON text, raising MalformedInput with the parser's reason."""
    if text is None or (isinstance(text, str) and not text.strip()):
        raise MalformedInput("No JSON provided.")
    if isinstance(text, (bytes, bytearray)):
        text = text.decode('utf-8')
    if not isinstance(text, str):
        raise MalformedInput(f"Expected JSON text, got {type(text).__name__}.")
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedInput(f"Invalid JSON: {e}") from e


def dump_json(value: Any) -> str:
    return json.dumps(value, indent=JSON_INDENT, ensure_ascii=False)
