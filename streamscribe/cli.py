"""streamscribe CLI — Typer + Rich transcript viewer.

Reads agent stream-json lines from stdin (or a file) and renders the live
transcript to stdout.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

# Ensure stdout/stderr use UTF-8 on Windows so status glyphs (✓, →, ○)
# survive a codepage like cp1252.  No-op when already UTF-8.
if sys.platform == "win32":
    for _stream_name in ("stdout", "stderr"):
        _stream = getattr(sys, _stream_name, None)
        if _stream and hasattr(_stream, "reconfigure"):
            try:
                _stream.reconfigure(encoding="utf-8")
            except (OSError, ValueError):
                pass

import typer
from rich.console import Console

from streamscribe import __version__
from streamscribe.decoder import Decoder
from streamscribe.diagnostics import Diagnostics
from streamscribe.renderer import Renderer

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="streamscribe",
    help="Render agent stream-json output as a live terminal transcript.",
    add_completion=False,
    rich_markup_mode="rich",
)


# ── Version callback ───────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        Console(highlight=False).print(f"streamscribe {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run_stream(
    lines: Iterable[bytes | str],
    renderer: Renderer,
    decoder: Decoder | None = None,
) -> None:
    """Drive every line through the decoder into the renderer, then finish."""
    decoder = decoder if decoder is not None else Decoder(renderer.diagnostics)
    for line in lines:
        decoder.dispatch(line, renderer)
    renderer.finish()


# ── Command ──────────────────────────────────────────────────────


@app.command()
def main(
    source: str = typer.Argument(
        "-",
        help="stream-json file to render, or '-' for stdin.",
        show_default=True,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log dropped lines and a drop summary to stderr.",
    ),
    version: bool = typer.Option(
        False, "--version", "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Render a stream-json transcript."""
    _configure_logging(verbose)

    diagnostics = Diagnostics()
    renderer = Renderer(Console(highlight=False), diagnostics)

    try:
        if source == "-":
            run_stream(sys.stdin.buffer, renderer)
        else:
            path = Path(source)
            if not path.is_file():
                raise typer.BadParameter(
                    f"File not found: {source}", param_hint="SOURCE",
                )
            with path.open("rb") as fh:
                run_stream(fh, renderer)
    except KeyboardInterrupt:
        raise typer.Exit(code=130)
    finally:
        logger.debug("Dropped input: %s", diagnostics.summary())


if __name__ == "__main__":
    app()
