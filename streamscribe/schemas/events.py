"""Wire schemas for the agent stream-json transcript.

Every input line is one JSON object with a ``type`` discriminator. These
models describe the three envelope families the renderer understands:
streamed content-block events, complete assistant turns, and the final
result summary. Fields not listed here are ignored.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class EnvelopeType(StrEnum):
    """Outer discriminator values routed by the decoder."""

    STREAM_EVENT = "stream_event"
    ASSISTANT = "assistant"
    RESULT = "result"


class StreamEventType(StrEnum):
    """Nested discriminator values of a ``stream_event`` payload."""

    CONTENT_BLOCK_START = "content_block_start"
    CONTENT_BLOCK_DELTA = "content_block_delta"
    CONTENT_BLOCK_STOP = "content_block_stop"


class BlockType(StrEnum):
    """Content block kinds announced by ``content_block_start``."""

    TEXT = "text"
    TOOL_USE = "tool_use"


class DeltaType(StrEnum):
    """Delta payload kinds carried by ``content_block_delta``."""

    TEXT_DELTA = "text_delta"
    INPUT_JSON_DELTA = "input_json_delta"


class Envelope(BaseModel):
    """Minimal view of a line: only the discriminator."""

    type: str = Field(description="Envelope discriminator")


class StreamEnvelope(Envelope):
    """A ``stream_event`` line wrapping one nested event."""

    event: dict[str, Any] = Field(description="Nested streaming event payload")


class ContentBlock(BaseModel):
    """Descriptor of a content block opened by ``content_block_start``."""

    type: str = ""
    id: str | None = None
    name: str | None = None
    text: str | None = None
    input: Any = None


class Delta(BaseModel):
    """Incremental payload for one content block."""

    type: str = ""
    text: str | None = None
    partial_json: str | None = None


class StreamEvent(BaseModel):
    """A nested streaming event addressed to one content-block index."""

    type: str = Field(description="Nested event discriminator")
    index: int = Field(default=0, ge=0, strict=True, description="Content-block index")
    content_block: ContentBlock | None = None
    delta: Delta | None = None


class AssistantContent(BaseModel):
    """One content item of an assistant turn."""

    type: str = ""
    text: str | None = None


class AssistantMessage(BaseModel):
    """A complete assistant message for one turn."""

    id: str | None = None
    role: str | None = None
    content: list[AssistantContent] | None = None

    def joined_text(self) -> str:
        """Concatenate the text items in order, without separators."""
        return "".join(
            item.text or ""
            for item in self.content or []
            if item.type == BlockType.TEXT
        )


class AssistantEnvelope(Envelope):
    """An ``assistant`` line: a full turn, or an inline error."""

    message: AssistantMessage | None = None
    error: str | None = None


class ResultEvent(Envelope):
    """The terminal ``result`` summary of a run."""

    subtype: str | None = None
    is_error: bool = Field(default=False, strict=True)
    result: str | None = None
    error: str | None = None

    @property
    def message(self) -> str:
        """The result text if present, otherwise the error text."""
        return self.result or self.error or ""
