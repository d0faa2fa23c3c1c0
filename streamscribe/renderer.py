"""Transcript renderer: owns all per-run state and all terminal output.

The renderer receives decoded events from the :class:`Decoder` and keeps
two pieces of state for the life of the run:

- one :class:`ToolInputAccumulator` per open ``tool_use`` content block,
  keyed by block index, filled from ``input_json_delta`` fragments and
  consumed on the matching ``content_block_stop``;
- the last non-empty assistant text, used to suppress a trailing result
  error that was already shown.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text

from streamscribe.diagnostics import Diagnostics, DropReason
from streamscribe.pretty import parse_params, render_params
from streamscribe.schemas.events import (
    AssistantEnvelope,
    BlockType,
    DeltaType,
    ResultEvent,
    StreamEvent,
    StreamEventType,
)
from streamscribe.theme import STYLE

logger = logging.getLogger(__name__)


@dataclass
class ToolInputAccumulator:
    """Partial-JSON text collected for one open tool call."""

    name: str
    fragments: list[str] = field(default_factory=list)

    def append(self, fragment: str) -> None:
        self.fragments.append(fragment)

    @property
    def text(self) -> str:
        return "".join(self.fragments)


class Renderer:
    """Writes the live transcript for one conversation turn stream."""

    def __init__(
        self,
        console: Console | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self.console = console if console is not None else Console(highlight=False)
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.tool_inputs: dict[int, ToolInputAccumulator] = {}
        self.last_assistant_text = ""

    # ── Streamed deltas ───────────────────────────────────────────

    def on_stream_event(self, event: StreamEvent) -> None:
        """Advance the per-index state machine for one nested event."""
        match event.type:
            case StreamEventType.CONTENT_BLOCK_START:
                self._block_start(event)
            case StreamEventType.CONTENT_BLOCK_DELTA:
                self._block_delta(event)
            case StreamEventType.CONTENT_BLOCK_STOP:
                self._block_stop(event)
            case _:
                self.diagnostics.record(DropReason.UNKNOWN_STREAM_EVENT, event.type)

    def _block_start(self, event: StreamEvent) -> None:
        block = event.content_block
        if block is None or block.type != BlockType.TOOL_USE:
            return

        name = block.name or ""
        if event.index in self.tool_inputs:
            logger.debug("Tool block %d reopened before stop", event.index)
        self.tool_inputs[event.index] = ToolInputAccumulator(name=name)

        header = Text("\n")
        header.append("[Tool: ", style=STYLE["bracket"])
        header.append(name, style=STYLE["tool"])
        header.append("]", style=STYLE["bracket"])
        self.console.print(header, soft_wrap=True)

    def _block_delta(self, event: StreamEvent) -> None:
        delta = event.delta
        if delta is None:
            return

        match delta.type:
            case DeltaType.TEXT_DELTA:
                if delta.text:
                    self._write_raw(delta.text)
            case DeltaType.INPUT_JSON_DELTA:
                accumulator = self.tool_inputs.get(event.index)
                if accumulator is None:
                    self.diagnostics.record(
                        DropReason.ORPHAN_DELTA, f"index {event.index}",
                    )
                    return
                accumulator.append(delta.partial_json or "")

    def _block_stop(self, event: StreamEvent) -> None:
        accumulator = self.tool_inputs.pop(event.index, None)
        if accumulator is None:
            self.diagnostics.record(DropReason.ORPHAN_STOP, f"index {event.index}")
            return

        params = parse_params(accumulator.text)
        if params is None:
            self.diagnostics.record(
                DropReason.INVALID_TOOL_INPUT,
                f"{accumulator.name or '?'} at index {event.index}",
            )
            return
        try:
            render_params(self.console, params)
        except RecursionError:
            self.diagnostics.record(
                DropReason.INVALID_TOOL_INPUT,
                f"{accumulator.name or '?'} at index {event.index}: nested too deeply",
            )

    def _write_raw(self, text: str) -> None:
        # Bypass rich rendering so tabs and control characters pass through.
        self.console.file.write(text)
        self.console.file.flush()

    # ── Complete turns ────────────────────────────────────────────

    def on_assistant(self, envelope: AssistantEnvelope) -> None:
        """Remember the turn's text; print an inline error if there is no message."""
        if envelope.message is None:
            if envelope.error:
                self._print_error(envelope.error)
                self.last_assistant_text = envelope.error
            return

        text = envelope.message.joined_text()
        if text:
            self.last_assistant_text = text

    # ── Result summary ────────────────────────────────────────────

    def on_result(self, result: ResultEvent) -> None:
        """Print a failing result unless it repeats the last assistant text."""
        if not result.is_error:
            return

        message = result.message
        if message and message != self.last_assistant_text:
            self._print_error(message)
        else:
            logger.debug("Suppressed result error already shown")

    def _print_error(self, message: str) -> None:
        self.console.print(Text(message, style=STYLE["error"]), soft_wrap=True)

    def finish(self) -> None:
        """End the transcript with a single blank line."""
        if self.tool_inputs:
            logger.debug(
                "Abandoning %d unterminated tool block(s): %s",
                len(self.tool_inputs), sorted(self.tool_inputs),
            )
        self.console.print()
