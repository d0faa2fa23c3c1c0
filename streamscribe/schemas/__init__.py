"""streamscribe schema definitions.

Pydantic v2 models for the stream-json wire format.
"""

from streamscribe.schemas.events import (
    AssistantContent,
    AssistantEnvelope,
    AssistantMessage,
    BlockType,
    ContentBlock,
    Delta,
    DeltaType,
    Envelope,
    EnvelopeType,
    ResultEvent,
    StreamEnvelope,
    StreamEvent,
    StreamEventType,
)

__all__ = [
    "AssistantContent",
    "AssistantEnvelope",
    "AssistantMessage",
    "BlockType",
    "ContentBlock",
    "Delta",
    "DeltaType",
    "Envelope",
    "EnvelopeType",
    "ResultEvent",
    "StreamEnvelope",
    "StreamEvent",
    "StreamEventType",
]
