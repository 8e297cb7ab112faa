"""Tests for extract_editable_fields."""

import copy

import pytest

from elementor_text_editor.accessors import get_value_by_path
from elementor_text_editor.constants import BARE_WIDGET_KEYS, SETTINGS_TEXT_KEYS
from elementor_text_editor.errors import ExtractionFailure
from elementor_text_editor.extractor import ExtractionOptions, extract_editable_fields
from elementor_text_editor.records import EditableField


def _as_tuples(fields):
    return [(f.type, f.path, f.value) for f in fields]


class TestExtractSimpleDocument:

    def test_single_heading_record(self, simple_document):
        fields = extract_editable_fields(simple_document)
        assert fields == [EditableField(type='heading', path='widgets[0].settings.title', value='Hello')]

    def test_does_not_mutate_input(self, simple_document):
        before = copy.deepcopy(simple_document)
        extract_editable_fields(simple_document)
        assert simple_document == before


class TestExtractPageDocument:

    def test_records_in_traversal_order(self, page_document):
        assert _as_tuples(extract_editable_fields(page_document)) == [
            ('heading', 'elements[0].elements[0].elements[0].settings.title', 'Welcome'),
            ('text-editor', 'elements[0].elements[0].elements[1].settings.editor', '<p>Intro text</p>'),
            ('button', 'elements[0].elements[0].elements[3].settings.text', 'Buy now'),
            ('title', 'elements[1].elements[0].elements[0].settings.title', 'Fast'),
            ('description', 'elements[1].elements[0].elements[0].settings.description', 'Ships in a day'),
            ('text', 'elements[1].elements[0].elements[1].settings.text', 'Today'),
            ('title', 'elements[1].elements[0].widgets[0].title', 'Bare title'),
            ('caption', 'elements[1].elements[0].widgets[0].caption', 'Bare caption'),
        ]

    def test_every_path_resolves_to_its_value(self, page_document):
        for f in extract_editable_fields(page_document):
            assert get_value_by_path(page_document, f.path) == f.value

    def test_extended_keys(self, page_document):
        fields = extract_editable_fields(page_document, ExtractionOptions(extended_keys=True))
        cta = [f for f in fields if f.path.startswith('elements[1].elements[0].elements[1].')]
        assert [f.type for f in cta] == ['heading', 'button_text', 'text']

    def test_widgets_preferred_over_elements(self):
        doc = {
            'widgets': [{'widgetType': 'heading', 'settings': {'title': 'W'}}],
            'elements': [{'widgetType': 'heading', 'settings': {'title': 'E'}}],
        }
        assert [f.value for f in extract_editable_fields(doc)] == ['W']


class TestClassification:

    @pytest.mark.parametrize('blank', ['', '   ', '\n\t', None, 12, ['x']])
    def test_blank_or_non_string_suppressed(self, blank):
        doc = {'widgets': [
            {'widgetType': 'heading', 'settings': {'title': blank}},
            {'widgetType': 'icon-box', 'settings': {'description': blank}},
            {'title': blank},
        ]}
        assert extract_editable_fields(doc) == []

    def test_missing_settings(self):
        doc = {'widgets': [{'widgetType': 'heading'}, {'widgetType': 'image', 'settings': 'oops'}]}
        assert extract_editable_fields(doc) == []

    @pytest.mark.parametrize('skipped', ['divider', 'spacer'])
    def test_skip_types_never_emit_for_themselves(self, skipped):
        doc = {'widgets': [{'widgetType': skipped, 'settings': {'title': 'x', 'text': 'y'}, 'title': 'z'}]}
        assert extract_editable_fields(doc) == []

    def test_skip_types_children_still_walked(self):
        doc = {'widgets': [{
            'widgetType': 'divider',
            'widgets': [{'widgetType': 'heading', 'settings': {'title': 'Inner'}}],
        }]}
        assert _as_tuples(extract_editable_fields(doc)) == [
            ('heading', 'widgets[0].widgets[0].settings.title', 'Inner'),
        ]

    def test_known_widget_ignores_other_keys(self):
        doc = {'widgets': [{'widgetType': 'button', 'settings': {'text': 'Go', 'title': 'not scanned'}}]}
        assert _as_tuples(extract_editable_fields(doc)) == [('button', 'widgets[0].settings.text', 'Go')]

    def test_unknown_widget_scans_settings_in_key_order(self):
        doc = {'widgets': [{'widgetType': 'testimonial', 'settings': {
            'caption': 'C', 'content': 'B', 'title': 'A', 'image': {'url': 'x'},
        }}]}
        assert [f.type for f in extract_editable_fields(doc)] == ['caption', 'content', 'title']

    def test_bare_node_keys(self):
        doc = {'widgets': [{'editor': 'E', 'settings': {'title': 'not scanned'}}]}
        assert _as_tuples(extract_editable_fields(doc)) == [('editor', 'widgets[0].editor', 'E')]

    def test_blank_widget_type_is_bare(self):
        doc = {'widgets': [{'widgetType': '  ', 'title': 'T'}]}
        assert _as_tuples(extract_editable_fields(doc)) == [('title', 'widgets[0].title', 'T')]

    def test_both_containers_walked(self):
        doc = {'elements': [{
            'elements': [{'widgetType': 'heading', 'settings': {'title': 'A'}}],
            'widgets': [{'widgetType': 'heading', 'settings': {'title': 'B'}}],
        }]}
        assert [f.path for f in extract_editable_fields(doc)] == [
            'elements[0].elements[0].settings.title',
            'elements[0].widgets[0].settings.title',
        ]

    def test_non_dict_items_skipped(self):
        doc = {'widgets': [None, 'text', 3, {'widgetType': 'heading', 'settings': {'title': 'X'}}]}
        assert [f.path for f in extract_editable_fields(doc)] == ['widgets[3].settings.title']

    def test_key_lists_are_constants(self):
        assert 'caption' in SETTINGS_TEXT_KEYS
        assert 'editor' in BARE_WIDGET_KEYS
        assert 'editor' not in SETTINGS_TEXT_KEYS


class TestTraversalRoots:

    def test_top_level_list(self):
        doc = [{'widgetType': 'heading', 'settings': {'title': 'L'}}]
        assert [f.path for f in extract_editable_fields(doc)] == ['[0].settings.title']

    def test_single_widget_requires_option(self):
        doc = {'widgetType': 'heading', 'settings': {'title': 'Solo'}}
        assert extract_editable_fields(doc) == []
        fields = extract_editable_fields(doc, ExtractionOptions(single_widget=True))
        assert _as_tuples(fields) == [('heading', 'settings.title', 'Solo')]

    @pytest.mark.parametrize('doc', [{}, None, 'text', 5, {'widgets': 'nope'}])
    def test_nothing_to_walk(self, doc):
        assert extract_editable_fields(doc) == []


class TestExtractionFailure:

    def test_unexpected_error_is_wrapped(self):
        class Exploding(dict):
            def get(self, key, default=None):
                raise RuntimeError('boom')

        doc = {'widgets': [Exploding(widgetType='heading')]}
        with pytest.raises(ExtractionFailure) as excinfo:
            extract_editable_fields(doc)
        assert isinstance(excinfo.value.__cause__, RuntimeError)
