"""streamscribe — live terminal transcripts from agent stream-json output."""

__version__ = "0.1.0"

from .decoder import Decoder, Dispatch, EventHandler
from .diagnostics import Diagnostics, DropReason
from .renderer import Renderer, ToolInputAccumulator

__all__ = [
    "Decoder",
    "Diagnostics",
    "Dispatch",
    "DropReason",
    "EventHandler",
    "Renderer",
    "ToolInputAccumulator",
]
