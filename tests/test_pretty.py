"""Tests for the tool-argument pretty-printer and JSON value variants."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from streamscribe.pretty import (
    format_list_entry,
    format_map_item,
    format_params,
    parse_params,
    render_params,
)
from streamscribe.theme import STYLE, status_glyph
from streamscribe.values import (
    ListValue,
    MapValue,
    ScalarValue,
    StringValue,
    classify,
    compact_json,
)


def _plain_lines(params: dict) -> list[str]:
    return [line.plain for line in format_params(params)]


# ── Value variants ───────────────────────────────────────────────


class TestClassify:
    """JSON value variant tests."""

    def test_string(self):
        assert classify("x") == StringValue("x")

    def test_list(self):
        assert classify([1, "a"]) == ListValue([1, "a"])

    def test_map(self):
        assert classify({"a": 1}) == MapValue({"a": 1})

    @pytest.mark.parametrize("value", [0, 1.5, True, False, None])
    def test_scalars(self, value):
        assert classify(value) == ScalarValue(value)


class TestCompactJson:
    """Compact JSON serialization tests."""

    def test_no_spaces(self):
        assert compact_json({"a": [1, 2], "b": None}) == '{"a":[1,2],"b":null}'

    def test_keeps_unicode(self):
        assert compact_json("héllo") == '"héllo"'

    def test_scalars(self):
        assert compact_json(True) == "true"
        assert compact_json(42) == "42"


# ── Parsing ──────────────────────────────────────────────────────


class TestParseParams:
    """Tool input parsing tests."""

    def test_object(self):
        assert parse_params('{"a": "b"}') == {"a": "b"}

    def test_incomplete_json(self):
        assert parse_params('{"a":') is None

    def test_empty_text(self):
        assert parse_params("") is None

    @pytest.mark.parametrize("raw", ["[1, 2]", '"str"', "3", "null"])
    def test_non_object_rejected(self, raw):
        assert parse_params(raw) is None

    def test_deeply_nested_rejected(self):
        assert parse_params('{"a": ' + "[" * 5000 + "]" * 5000 + "}") is None

    def test_preserves_document_order(self):
        assert list(parse_params('{"z": 1, "a": 2, "m": 3}')) == ["z", "a", "m"]


# ── Checklist glyphs ─────────────────────────────────────────────


class TestStatusGlyph:
    """Checklist status glyph tests."""

    def test_completed(self):
        assert status_glyph("completed") == ("✓", "green")

    def test_in_progress(self):
        assert status_glyph("in_progress") == ("→", "cyan")

    @pytest.mark.parametrize("status", ["pending", "blocked", "", None, 3])
    def test_default(self, status):
        assert status_glyph(status) == ("○", "dim")


# ── Map items ────────────────────────────────────────────────────


class TestFormatMapItem:
    """Map list-item formatting tests."""

    def test_completed_checklist_item(self):
        line = format_map_item({"content": "Task A", "status": "completed"})
        assert line.plain == "    ✓ Task A"

    def test_checklist_item_without_status(self):
        line = format_map_item({"content": "Task B"})
        assert line.plain == "    ○ Task B"

    def test_in_progress_checklist_item(self):
        line = format_map_item({"content": "Task C", "status": "in_progress", "activeForm": "Doing C"})
        assert line.plain == "    → Task C"

    def test_checklist_item_styles_glyph_and_content(self):
        line = format_map_item({"content": "Task A", "status": "completed"})
        styles = {str(span.style) for span in line.spans}
        assert styles == {"green"}

    def test_non_string_content_renders_empty(self):
        line = format_map_item({"content": 5, "status": "completed"})
        assert line.plain == "    ✓ "

    def test_generic_map(self):
        line = format_map_item({"path": "/tmp/x", "line": 3, "ok": True})
        assert line.plain == "    - path=/tmp/x, line=3, ok=true"

    def test_generic_map_value_styles(self):
        line = format_map_item({"path": "/tmp/x", "line": 3})
        styled = {line.plain[s.start:s.end]: str(s.style) for s in line.spans}
        assert styled["path"] == STYLE["key"]
        assert styled["/tmp/x"] == STYLE["string"]
        assert styled["3"] == STYLE["other"]

    def test_empty_map(self):
        assert format_map_item({}).plain == "    - "


class TestFormatListEntry:
    """List entry formatting tests."""

    def test_string_entry(self):
        assert format_list_entry("src/main.py").plain == "    - src/main.py"

    def test_number_entry(self):
        assert format_list_entry(7).plain == "    - 7"

    def test_null_entry(self):
        assert format_list_entry(None).plain == "    - null"

    def test_nested_list_entry(self):
        assert format_list_entry([1, "a"]).plain == '    - [1,"a"]'

    def test_map_entry_uses_item_formatter(self):
        assert format_list_entry({"content": "x", "status": "completed"}).plain == "    ✓ x"


# ── Parameter blocks ─────────────────────────────────────────────


class TestFormatParams:
    """Parameter block formatting tests."""

    def test_single_string(self):
        assert _plain_lines({"a": "b"}) == ["  a: b"]

    def test_string_styles(self):
        (line,) = format_params({"file_path": "/x"})
        styled = {line.plain[s.start:s.end]: str(s.style) for s in line.spans}
        assert styled == {"file_path": "yellow", "/x": "green"}

    def test_scalar_fallback(self):
        assert _plain_lines({"limit": 10, "flag": False, "none": None}) == [
            "  limit: 10",
            "  flag: false",
            "  none: null",
        ]

    def test_nested_object_fallback(self):
        assert _plain_lines({"opts": {"x": 1, "y": "z"}}) == ['  opts: {"x":1,"y":"z"}']

    def test_list_expanded(self):
        assert _plain_lines({"todos": [
            {"content": "Task A", "status": "completed"},
            {"content": "Task B"},
            "loose",
        ]}) == [
            "  todos: ",
            "    ✓ Task A",
            "    ○ Task B",
            "    - loose",
        ]

    def test_empty_list(self):
        assert _plain_lines({"items": []}) == ["  items: "]

    def test_document_order(self):
        assert _plain_lines({"b": "1", "a": "2"}) == ["  b: 1", "  a: 2"]

    def test_empty_params(self):
        assert format_params({}) == []


class TestRenderParams:
    """Parameter block printing tests."""

    def test_prints_one_line_per_entry(self):
        buf = io.StringIO()
        console = Console(file=buf, color_system=None, width=40, highlight=False)
        render_params(console, {"command": "x" * 100, "tags": ["a"]})
        lines = buf.getvalue().splitlines()
        assert lines[0] == "  command: " + "x" * 100
        assert lines[1].rstrip() == "  tags:"
        assert lines[2] == "    - a"
        assert len(lines) == 3

    def test_markup_not_interpreted(self):
        buf = io.StringIO()
        console = Console(file=buf, color_system=None, width=120)
        render_params(console, {"pattern": "[bold]x[/bold]"})
        assert buf.getvalue() == "  pattern: [bold]x[/bold]\n"
