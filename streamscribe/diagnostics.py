"""Drop accounting for the tolerant decode path.

Malformed lines, unknown discriminators, stray deltas and unparseable
tool inputs never surface to the transcript. They are recorded here so
the silent-drop policy stays observable: counted per reason, logged at
DEBUG, and forwarded to any registered listener.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class DropReason(StrEnum):
    """Why a line or event produced no output."""

    BLANK = "blank"
    MALFORMED_JSON = "malformed_json"
    UNKNOWN_ENVELOPE = "unknown_envelope"
    INVALID_EVENT = "invalid_event"
    UNKNOWN_STREAM_EVENT = "unknown_stream_event"
    ORPHAN_DELTA = "orphan_delta"
    ORPHAN_STOP = "orphan_stop"
    INVALID_TOOL_INPUT = "invalid_tool_input"


# Type alias for drop listener callbacks
DropListener = Callable[[DropReason, str], Any]


class Diagnostics:
    """Counts dropped input by reason and notifies listeners.

    One instance is shared by the decoder and the renderer of a run.
    Listener exceptions are logged but never propagate.
    """

    def __init__(self) -> None:
        self._counts: Counter[DropReason] = Counter()
        self._listeners: list[DropListener] = []

    @property
    def counts(self) -> dict[DropReason, int]:
        """Drops recorded so far, keyed by reason."""
        return dict(self._counts)

    @property
    def total(self) -> int:
        """Number of drops recorded, excluding blank lines."""
        return sum(
            n for reason, n in self._counts.items()
            if reason is not DropReason.BLANK
        )

    def add_listener(self, listener: DropListener) -> None:
        """Register a listener called on every recorded drop."""
        self._listeners.append(listener)

    def remove_listener(self, listener: DropListener) -> None:
        """Remove a previously registered listener."""
        self._listeners = [ln for ln in self._listeners if ln is not listener]

    def record(self, reason: DropReason, detail: str = "") -> None:
        """Record one drop."""
        self._counts[reason] += 1
        if reason is not DropReason.BLANK:
            logger.debug("Dropped input (%s): %s", reason, detail)

        for listener in self._listeners:
            try:
                listener(reason, detail)
            except Exception:
                logger.exception("Drop listener error for %s", reason)

    def summary(self) -> str:
        """One-line human summary, e.g. ``malformed_json=2, orphan_stop=1``."""
        parts = [
            f"{reason}={n}"
            for reason, n in sorted(self._counts.items())
            if reason is not DropReason.BLANK
        ]
        return ", ".join(parts) if parts else "none"
