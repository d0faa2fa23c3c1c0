"""Closed variant over decoded JSON values.

The pretty-printer branches on the shape of each tool-call argument.
:func:`classify` wraps a value from :func:`json.loads` in exactly one of
four variants so the printer can ``match`` on them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class ListValue:
    items: list[Any]


@dataclass(frozen=True)
class MapValue:
    entries: dict[str, Any]


@dataclass(frozen=True)
class ScalarValue:
    """Number, boolean or null."""

    value: int | float | bool | None


JsonValue = StringValue | ListValue | MapValue | ScalarValue


def classify(value: Any) -> JsonValue:
    """Wrap a decoded JSON value in its variant."""
    if isinstance(value, str):
        return StringValue(value)
    if isinstance(value, list):
        return ListValue(value)
    if isinstance(value, dict):
        return MapValue(value)
    return ScalarValue(value)


def compact_json(value: Any) -> str:
    """Serialize to compact JSON text, keeping non-ASCII characters."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
