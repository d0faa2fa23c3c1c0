"""Pretty-printer for reassembled tool-call arguments.

Renders a JSON object as an indented, colorized block: one ``key: value``
line per top-level key, list values expanded one entry per line, and
checklist-shaped entries (``content`` plus optional ``status``) shown with
a status glyph. Keys are printed in document order.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.text import Text

from streamscribe.theme import STYLE, status_glyph
from streamscribe.values import (
    ListValue,
    MapValue,
    ScalarValue,
    StringValue,
    classify,
    compact_json,
)

KEY_INDENT = "  "
ITEM_INDENT = "    "


def parse_params(raw: str) -> dict[str, Any] | None:
    """Parse accumulated tool input; None unless it is a JSON object."""
    try:
        params = json.loads(raw)
    except (ValueError, RecursionError):
        return None
    if not isinstance(params, dict):
        return None
    return params


def _literal(value: Any) -> str:
    if isinstance(value, str):
        return value
    return compact_json(value)


def format_map_item(item: dict[str, Any]) -> Text:
    """Format one map entry of a list value as a single line."""
    text = Text(ITEM_INDENT)

    if "content" in item:
        content = item["content"]
        glyph, style = status_glyph(item.get("status"))
        text.append(glyph, style=style)
        text.append(" ")
        text.append(content if isinstance(content, str) else "", style=style)
        return text

    text.append("-", style=STYLE["muted"])
    text.append(" ")
    for i, (key, value) in enumerate(item.items()):
        if i:
            text.append(", ", style=STYLE["muted"])
        text.append(key, style=STYLE["key"])
        text.append("=")
        match classify(value):
            case StringValue(value=s):
                text.append(s, style=STYLE["string"])
            case _:
                text.append(compact_json(value), style=STYLE["other"])
    return text


def format_list_entry(entry: Any) -> Text:
    """Format one entry of a list value."""
    match classify(entry):
        case MapValue(entries=entries):
            return format_map_item(entries)
        case _:
            text = Text(ITEM_INDENT)
            text.append("-", style=STYLE["muted"])
            text.append(" ")
            text.append(_literal(entry), style=STYLE["muted"])
            return text


def format_params(params: dict[str, Any]) -> list[Text]:
    """Format a parameter object into transcript lines."""
    lines: list[Text] = []
    for key, value in params.items():
        head = Text(KEY_INDENT)
        head.append(key, style=STYLE["key"])
        head.append(": ")

        match classify(value):
            case StringValue(value=s):
                head.append(s, style=STYLE["string"])
                lines.append(head)
            case ListValue(items=items):
                lines.append(head)
                lines.extend(format_list_entry(entry) for entry in items)
            case MapValue() | ScalarValue():
                head.append(compact_json(value), style=STYLE["other"])
                lines.append(head)
    return lines


def render_params(console: Console, params: dict[str, Any]) -> None:
    """Print a parameter object to the console.

    All lines are formatted before the first is printed, so a failure while
    formatting leaves the console untouched.
    """
    lines = format_params(params)
    for line in lines:
        console.print(line, soft_wrap=True)
