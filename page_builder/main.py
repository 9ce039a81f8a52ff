"""Entry-point that replays a builder event script and writes the resulting pages."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from page_builder.model.errors import PageBuilderError
from page_builder.parser.event_script import load_event_script, replay
from page_builder.session import BuilderSession
from page_builder.utils.debug import DebugDumper
from page_builder.utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)

PREVIEW_FILENAME = "preview.html"
DEBUG_DIRNAME = "debug"


def build_session(script_path: Path) -> BuilderSession:
    """Load an event script and replay it into a fresh session."""
    events = load_event_script(script_path)
    session = replay(BuilderSession(), events)
    LOGGER.info("Replayed %d event(s); document has %d element(s)", len(events), len(session.document))
    return session


def render_outputs(session: BuilderSession, output_dir: Path, *, preview: bool = True, export: bool = True) -> None:
    """Write the requested renderings of the session's document."""
    output_dir.mkdir(parents=True, exist_ok=True)
    if preview:
        preview_path = output_dir / PREVIEW_FILENAME
        preview_path.write_text(session.on_preview_requested(), encoding="utf-8")
        LOGGER.info("Wrote %s", preview_path)
    if export:
        session.on_export_requested().write_to(output_dir)


def main(script_file: str, output_dir: Optional[str] = None, *, preview: bool = True, debug: bool = False) -> BuilderSession:
    """Run the event script → document → HTML pipeline."""
    script_path = Path(script_file).resolve()
    if not script_path.exists():
        raise FileNotFoundError(f"Event script not found: {script_path}")

    LOGGER.info("Building page from %s", script_path.name)
    session = build_session(script_path)

    if output_dir is None:
        output_dir = str(script_path.with_suffix(""))

    output_path = Path(output_dir).resolve()
    LOGGER.info("Rendering outputs into %s", output_path)
    render_outputs(session, output_path, preview=preview)

    if debug:
        DebugDumper(output_path / DEBUG_DIRNAME).dump(session.document)
    return session


def cli(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Replay a page builder event script and export the page as HTML")
    parser.add_argument("script", help="Path to the JSON event script")
    parser.add_argument("--output", help="Directory to write generated pages")
    parser.add_argument("--no-preview", action="store_true", help="Only write the exported page")
    parser.add_argument("--debug", action="store_true", help="Dump the document model as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)
    try:
        main(args.script, args.output, preview=not args.no_preview, debug=args.debug)
    except (PageBuilderError, FileNotFoundError) as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(cli())
