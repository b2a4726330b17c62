#!/usr/bin/env python3
"""Explain a span of a source file and write the explanation as HTML.

Usage:
    explaincode path/to/file.py --start-line 10 --end-line 24 --output out.html
    explaincode notes.md --render-only --dark
    python -m explaincode.cli.explain path/to/file.py --debug

In debug mode (``--debug`` or ``EXPLAINCODE_DEBUG=1``) the bare rendered
HTML, the original markdown and the selected code are written next to the
output as ``<output>.source.html``, ``<output>.md`` and
``<output>.selection.txt``, where ``<output>`` is the full output file name.
Render-only runs have no selection file.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from explaincode.config import Settings, get_config_dict, validate_critical_settings
from explaincode.logging_config import setup_logging
from explaincode.rendering import render, render_document
from explaincode.services import CodeAnalyzerService, select_lines, surrounding_context

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_USAGE = 2

SOURCE_SEPARATOR = "----- HTML Source -----"
MARKDOWN_SEPARATOR = "----- Original Markdown -----"
SELECTION_SEPARATOR = "----- Selected Code -----"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="explaincode",
        description="Explain selected code via the explanation API and render it as HTML",
    )
    parser.add_argument("file", type=Path, help="Source file (or markdown file with --render-only)")
    parser.add_argument("--start-line", type=int, default=None, help="First selected line (1-based)")
    parser.add_argument("--end-line", type=int, default=None, help="Last selected line (inclusive)")

    theme = parser.add_mutually_exclusive_group()
    theme.add_argument("--dark", dest="dark_theme", action="store_true", default=None, help="Use the dark theme")
    theme.add_argument("--light", dest="dark_theme", action="store_false", default=None, help="Use the light theme")

    parser.add_argument("--output", "-o", type=Path, default=None, help="Write HTML here instead of stdout")
    parser.add_argument(
        "--render-only",
        action="store_true",
        help="Treat FILE as markdown and render it without calling the API",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Also emit HTML source and markdown")
    return parser


def debug_paths(output: Path) -> tuple[Path, Path, Path]:
    """Paths of the HTML source, original markdown and selection files for ``output``.

    Suffixes are appended to the full file name, so no debug file can land
    on the output itself whatever its extension.
    """
    return (
        output.with_name(output.name + ".source.html"),
        output.with_name(output.name + ".md"),
        output.with_name(output.name + ".selection.txt"),
    )


def write_outputs(
    document: str,
    source_html: str,
    markdown: str,
    output: Path | None,
    debug: bool,
    selection: str | None = None,
) -> None:
    """Write the rendered document, plus the debug views when enabled.

    ``selection`` is the code sent to the API; it is None for render-only runs.
    """
    if output is None:
        sys.stdout.write(document + "\n")
        if debug:
            if selection is not None:
                sys.stdout.write(f"{SELECTION_SEPARATOR}\n{selection}\n")
            sys.stdout.write(f"{SOURCE_SEPARATOR}\n{source_html}\n")
            sys.stdout.write(f"{MARKDOWN_SEPARATOR}\n{markdown}\n")
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    logger.info(f"Wrote explanation to {output}")

    if debug:
        source_path, markdown_path, selection_path = debug_paths(output)
        source_path.write_text(source_html, encoding="utf-8")
        markdown_path.write_text(markdown, encoding="utf-8")
        logger.debug(f"Wrote HTML source to {source_path} and markdown to {markdown_path}")
        if selection is not None:
            selection_path.write_text(selection, encoding="utf-8")
            logger.debug(f"Wrote selected code to {selection_path}")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return an exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    debug = settings.debug if args.debug is None else args.debug
    dark_theme = settings.dark_theme if args.dark_theme is None else args.dark_theme

    setup_logging(debug=debug, json_logs=settings.json_logs)
    validate_critical_settings(settings)
    if debug:
        logger.debug(f"Configuration: {get_config_dict(settings)}")

    try:
        text = args.file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {args.file}: {e}")
        return EXIT_USAGE

    exit_code = EXIT_OK
    selection = None
    if args.render_only:
        markdown = text
    else:
        try:
            selection = select_lines(text, args.start_line, args.end_line)
        except ValueError as e:
            logger.error(f"Invalid selection: {e}")
            return EXIT_USAGE

        context = surrounding_context(text, selection)
        service = CodeAnalyzerService(
            api_url=settings.api_url,
            connect_timeout=settings.connect_timeout,
            request_timeout=settings.request_timeout,
        )
        logger.info(f"Analyzing {args.file} ({len(selection)} selected chars)")
        result = service.analyze_code_sync(selection, context)
        markdown = result.explanation
        if not result.success:
            exit_code = EXIT_API_ERROR

    document = render_document(markdown, dark_theme)
    source_html = render(markdown, dark_theme)

    try:
        write_outputs(document, source_html, markdown, args.output, debug, selection)
    except OSError as e:
        logger.error(f"Could not write output: {e}")
        return EXIT_USAGE

    return exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
