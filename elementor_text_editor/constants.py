from __future__ import annotations

from typing import Dict, Tuple

# Widgets that never carry editable text of their own.
SKIPPED_WIDGET_TYPES: Tuple[str, ...] = ('divider', 'spacer')

# widgetType -> key under `settings` holding its text.
WIDGET_TEXT_FIELDS: Dict[str, str] = {
    'heading': 'title',
    'text-editor': 'editor',
    'button': 'text',
}

# Keys scanned under `settings` for any other widgetType.
SETTINGS_TEXT_KEYS: Tuple[str, ...] = ('title', 'text', 'content', 'description', 'caption')
EXTENDED_SETTINGS_TEXT_KEYS: Tuple[str, ...] = SETTINGS_TEXT_KEYS + ('button_text', 'heading', 'sub_heading')

# Direct keys scanned on nodes without a widgetType.
BARE_WIDGET_KEYS: Tuple[str, ...] = ('title', 'editor', 'text', 'content', 'description', 'caption')

# Recursive container keys, in traversal order.
CONTAINER_KEYS: Tuple[str, ...] = ('elements', 'widgets')

SETTINGS_KEY = 'settings'
WIDGET_TYPE_KEY = 'widgetType'

JSON_INDENT = 2
