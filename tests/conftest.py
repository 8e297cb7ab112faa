"""Shared test fixtures."""

import copy
import json

import pytest


# ── Sample Documents ─────────────────────────────────────────────────────

SIMPLE_DOCUMENT = {
    "widgets": [
        {"widgetType": "heading", "settings": {"title": "Hello"}},
        {"widgetType": "divider"},
        {"widgetType": "button", "settings": {"text": ""}},
    ]
}

PAGE_DOCUMENT = {
    "version": "0.4",
    "title": "Landing",
    "type": "page",
    "elements": [
        {
            "id": "sec1",
            "elType": "section",
            "settings": {"layout": "boxed"},
            "elements": [
                {
                    "id": "col1",
                    "elType": "column",
                    "settings": {"_column_size": 100},
                    "elements": [
                        {
                            "id": "w1",
                            "elType": "widget",
                            "widgetType": "heading",
                            "settings": {"title": "Welcome", "align": "center"},
                        },
                        {
                            "id": "w2",
                            "elType": "widget",
                            "widgetType": "text-editor",
                            "settings": {"editor": "<p>Intro text</p>"},
                        },
                        {
                            "id": "w3",
                            "elType": "widget",
                            "widgetType": "spacer",
                            "settings": {"space": {"size": 50}},
                        },
                        {
                            "id": "w4",
                            "elType": "widget",
                            "widgetType": "button",
                            "settings": {"text": "Buy now", "link": {"url": "#"}},
                        },
                    ],
                }
            ],
        },
        {
            "id": "sec2",
            "elType": "section",
            "settings": {},
            "elements": [
                {
                    "id": "col2",
                    "elType": "column",
                    "settings": {},
                    "elements": [
                        {
                            "id": "w5",
                            "elType": "widget",
                            "widgetType": "icon-box",
                            "settings": {
                                "title_text": "ignored key",
                                "title": "Fast",
                                "description": "Ships in a day",
                                "caption": "   ",
                            },
                        },
                        {
                            "id": "w6",
                            "elType": "widget",
                            "widgetType": "call-to-action",
                            "settings": {"heading": "Join", "button_text": "Sign up", "text": "Today"},
                        },
                    ],
                    "widgets": [
                        {"title": "Bare title", "text": 42, "caption": "Bare caption"},
                    ],
                }
            ],
        },
    ],
}


@pytest.fixture
def simple_document():
    return copy.deepcopy(SIMPLE_DOCUMENT)


@pytest.fixture
def page_document():
    return copy.deepcopy(PAGE_DOCUMENT)


@pytest.fixture
def page_document_text():
    return json.dumps(PAGE_DOCUMENT)
