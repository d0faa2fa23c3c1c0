"""Line classifier and dispatcher for the stream-json transcript.

Each input line becomes at most one handler call. Lines that are not JSON
objects, carry no string ``type``, name an unknown envelope, or fail
schema validation are dropped without raising; the drop is recorded in
the shared :class:`Diagnostics`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ValidationError

from streamscribe.diagnostics import Diagnostics, DropReason
from streamscribe.schemas.events import (
    AssistantEnvelope,
    Envelope,
    EnvelopeType,
    ResultEvent,
    StreamEnvelope,
    StreamEvent,
)

# Longest slice of an offending line quoted in diagnostics
_DETAIL_LIMIT = 120


class EventHandler(Protocol):
    """Receiver of decoded events, one method per envelope family."""

    def on_stream_event(self, event: StreamEvent) -> None: ...

    def on_assistant(self, envelope: AssistantEnvelope) -> None: ...

    def on_result(self, result: ResultEvent) -> None: ...


@dataclass(frozen=True)
class Dispatch:
    """A classified line: the route and its validated payload."""

    route: EnvelopeType
    event: BaseModel


def _preview(line: bytes | str) -> str:
    if isinstance(line, bytes):
        line = line.decode("utf-8", errors="replace")
    if len(line) > _DETAIL_LIMIT:
        return line[:_DETAIL_LIMIT] + "…"
    return line


class Decoder:
    """Classifies raw lines by their ``type`` discriminator.

    The decoder holds no transcript state; it only validates and routes.
    """

    def __init__(self, diagnostics: Diagnostics | None = None) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    def decode(self, line: bytes | str) -> Dispatch | None:
        """Classify one line.

        Returns:
            The dispatch action, or None when the line is dropped.
        """
        line = line.strip()
        if not line:
            self.diagnostics.record(DropReason.BLANK)
            return None

        try:
            payload = json.loads(line)
        except (ValueError, RecursionError):
            self.diagnostics.record(DropReason.MALFORMED_JSON, _preview(line))
            return None

        try:
            envelope = Envelope.model_validate(payload)
        except ValidationError:
            self.diagnostics.record(DropReason.MALFORMED_JSON, _preview(line))
            return None

        try:
            route = EnvelopeType(envelope.type)
        except ValueError:
            self.diagnostics.record(DropReason.UNKNOWN_ENVELOPE, envelope.type)
            return None

        try:
            match route:
                case EnvelopeType.STREAM_EVENT:
                    wrapper = StreamEnvelope.model_validate(payload)
                    event: BaseModel = StreamEvent.model_validate(wrapper.event)
                case EnvelopeType.ASSISTANT:
                    event = AssistantEnvelope.model_validate(payload)
                case EnvelopeType.RESULT:
                    event = ResultEvent.model_validate(payload)
        except ValidationError as exc:
            self.diagnostics.record(
                DropReason.INVALID_EVENT,
                f"{route}: {exc.error_count()} validation error(s)",
            )
            return None

        return Dispatch(route=route, event=event)

    def dispatch(self, line: bytes | str, handler: EventHandler) -> bool:
        """Decode one line and hand it to exactly one handler method.

        Returns:
            True if a handler was called, False if the line was dropped.
        """
        action = self.decode(line)
        if action is None:
            return False

        match action.route:
            case EnvelopeType.STREAM_EVENT:
                handler.on_stream_event(action.event)
            case EnvelopeType.ASSISTANT:
                handler.on_assistant(action.event)
            case EnvelopeType.RESULT:
                handler.on_result(action.event)
        return True
