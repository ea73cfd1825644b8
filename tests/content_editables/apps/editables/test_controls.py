"""
Tests for the editor controls.
"""
from datetime import datetime, timezone

import pytest
from django.core.exceptions import ValidationError
from django.test import SimpleTestCase

from content_editables.apps.editables.controls import (
    DatePicker,
    EditorContainer,
    Hyperlink,
    Label,
    Literal,
    UrlSelector,
    UrlSelectorMode,
)


class EditorContainerTestCase(SimpleTestCase):
    """
    Attaching, detaching, finding and rendering controls.
    """

    def test_add_and_remove(self):
        container = EditorContainer("content")
        literal = container.add(Literal("Hello", id="greeting"))
        assert literal.parent is container
        assert list(container) == [literal]
        container.remove(literal)
        assert literal.parent is None
        assert len(container) == 0

    def test_moving_between_containers(self):
        first, second = EditorContainer("first"), EditorContainer("second")
        literal = first.add(Literal("Hello"))
        second.add(literal)
        assert len(first) == 0
        assert literal.parent is second

    def test_find_nested(self):
        outer = EditorContainer("outer")
        inner = outer.add(EditorContainer("inner"))
        picker = inner.add(DatePicker("published"))
        assert outer.find("published") is picker
        assert outer.find("inner") is inner
        assert outer.find("missing") is None

    def test_render_skips_hidden(self):
        container = EditorContainer()
        container.add(Literal("<b>shown</b>"))
        container.add(Literal("hidden")).visible = False
        container.add(Label("Title", for_id="title"))
        container.add(Hyperlink("News", "/news/"))
        html = container.render()
        assert "&lt;b&gt;shown&lt;/b&gt;" in html
        assert "hidden" not in html
        assert '<label for="title">Title</label>' in html
        assert '<a href="/news/">News</a>' in html


class DatePickerTestCase(SimpleTestCase):
    """
    Rendering and posting the date/time picker.
    """

    def setUp(self):
        super().setUp()
        self.picker = DatePicker("published")
        EditorContainer().add(self.picker)

    def test_render_both_boxes(self):
        self.picker.selected_date = datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc)
        html = self.picker.render()
        assert 'type="date"' in html
        assert 'name="published_date"' in html
        assert 'value="2024-05-06"' in html
        assert 'type="time"' in html
        assert 'name="published_time"' in html
        assert 'value="07:08"' in html

    def test_render_hidden_time_box(self):
        self.picker.time_box.visible = False
        html = self.picker.render()
        assert 'name="published_date"' in html
        assert "published_time" not in html

    def test_render_without_selection(self):
        html = self.picker.render()
        assert "value=" not in html

    def test_post_date_and_time(self):
        self.picker.load_post_data({"published_date": "2024-05-06", "published_time": "07:08"})
        assert self.picker.selected_date == datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc)

    def test_post_date_only(self):
        self.picker.load_post_data({"published_date": "2024-05-06", "published_time": ""})
        assert self.picker.selected_date == datetime(2024, 5, 6, tzinfo=timezone.utc)

    def test_post_empty_date_clears_selection(self):
        self.picker.selected_date = datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc)
        self.picker.load_post_data({"published_date": "", "published_time": "07:08"})
        assert self.picker.selected_date is None

    def test_hidden_time_box_keeps_time(self):
        self.picker.selected_date = datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc)
        self.picker.time_box.visible = False
        self.picker.load_post_data({"published_date": "2024-06-01", "published_time": "23:59"})
        assert self.picker.selected_date == datetime(2024, 6, 1, 7, 8, tzinfo=timezone.utc)

    def test_hidden_date_box_keeps_date(self):
        self.picker.selected_date = datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc)
        self.picker.date_box.visible = False
        self.picker.load_post_data({"published_time": "12:30"})
        assert self.picker.selected_date == datetime(2024, 5, 6, 12, 30, tzinfo=timezone.utc)

    def test_hidden_date_box_without_selection(self):
        self.picker.date_box.visible = False
        self.picker.load_post_data({"published_time": "12:30"})
        assert self.picker.selected_date is None

    def test_invalid_date(self):
        with pytest.raises(ValidationError):
            self.picker.load_post_data({"published_date": "not a date"})

    def test_box_names_follow_picker_id(self):
        self.picker.id = "expires"
        assert self.picker.date_box.name == "expires_date"
        assert self.picker.time_box.name == "expires_time"
        assert self.picker.local_selection() is None


class UrlSelectorTestCase(SimpleTestCase):
    """
    Rendering and posting the URL selector.
    """

    def test_render_modes(self):
        selector = UrlSelector(
            "link",
            url="~/news",
            available_modes=UrlSelectorMode.ALL,
            default_mode=UrlSelectorMode.FILES,
        )
        html = selector.render()
        assert 'name="link"' in html
        assert 'value="~/news"' in html
        assert 'data-available-modes="items files"' in html
        assert 'data-default-mode="files"' in html

    def test_post(self):
        selector = UrlSelector("link")
        selector.load_post_data({"link": "  /news/launch  "})
        assert selector.url == "/news/launch"

    def test_post_blank_is_no_url(self):
        selector = UrlSelector("link", url="/news")
        selector.load_post_data({"link": "   "})
        assert selector.url is None
        selector.load_post_data({})
        assert selector.url is None

    def test_mode_labels(self):
        assert UrlSelectorMode.ALL.labels == ["items", "files"]
        assert UrlSelectorMode.ITEMS.labels == ["items"]
