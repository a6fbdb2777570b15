"""Command-line host for the nlsassist providers.

Examples:
  # Preview the string behind the placeholder at line 3, character 24:
  nlsassist hover ext/package.json 3 24

  # List keys completing the placeholder being typed:
  nlsassist complete ext/package.json 5 21 --format json

  # Find where the key is defined in package.nls.json:
  nlsassist definition ext/package.json 3 24

Lines and characters are zero-based, as in the editor protocol.

Exit codes:
  0 - a result was printed
  1 - no result (not on a placeholder, no file, key missing, ...)
  2 - usage error or unreadable manifest
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from nlsassist.assistant import NlsAssistant
from nlsassist.config import AssistConfig
from nlsassist.constants import NLS_FILENAME
from nlsassist.diagnostics import DiagnosticFormatter, OutputFormat
from nlsassist.providers import CompletionItem, Hover, Location
from nlsassist.syntax.position import Position
from nlsassist.workspace import WorkspaceFolder

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_RESULT = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="nlsassist",
        description="Resolve %key% placeholders in package.json against package.nls.json.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Lines and characters", 1)[0] if __doc__ else None,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log resolution steps to stderr",
    )
    parser.add_argument(
        "--format",
        type=OutputFormat,
        choices=list(OutputFormat),
        default=OutputFormat.SIMPLE,
        help="Output format (default: simple)",
    )
    parser.add_argument(
        "--nls-filename",
        default=NLS_FILENAME,
        help=f"Localization filename next to the manifest (default: {NLS_FILENAME})",
    )
    parser.add_argument(
        "--folder",
        type=Path,
        default=None,
        help="Workspace folder (default: the manifest's directory)",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("hover", "Show the localized string for the placeholder at a position"),
        ("complete", "List keys completing the placeholder being typed"),
        ("definition", "Show where the placeholder's key is defined"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("manifest", type=Path, help="Path to package.json")
        command.add_argument("line", type=int, help="Zero-based line")
        command.add_argument("character", type=int, help="Zero-based character")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.line < 0 or args.character < 0:
        parser.error("line and character must be >= 0")

    try:
        config = AssistConfig(nls_filename=args.nls_filename)
    except ValueError as e:
        parser.error(str(e))

    manifest: Path = args.manifest.resolve()
    folder: Path = args.folder.resolve() if args.folder else manifest.parent

    assistant = NlsAssistant(config)
    assistant.add_folder(WorkspaceFolder(folder))

    try:
        document = assistant.open_document(manifest)
    except (OSError, UnicodeDecodeError) as e:
        print(f"nlsassist: cannot read {manifest}: {e}", file=sys.stderr)
        return EXIT_USAGE

    position = Position(args.line, args.character)
    formatter = DiagnosticFormatter(output_format=args.format)

    match args.command:
        case "hover":
            hover = asyncio.run(assistant.hover(document, position))
            return _print_hover(hover, formatter)
        case "complete":
            items = asyncio.run(assistant.complete(document, position))
            return _print_completions(items, formatter.output_format)
        case "definition":
            location = asyncio.run(assistant.definition(document, position))
            return _print_location(location, formatter.output_format)
    return EXIT_USAGE


def _print_hover(hover: Hover | None, formatter: DiagnosticFormatter) -> int:
    if hover is None:
        logger.debug("Position is not on a placeholder")
        return EXIT_NO_RESULT
    if hover.diagnostic is not None:
        print(formatter.format(hover.diagnostic))
        return EXIT_NO_RESULT
    if formatter.output_format == OutputFormat.JSON:
        print(json.dumps({"contents": hover.contents}, ensure_ascii=False))
    else:
        print(hover.contents)
    return EXIT_OK


def _print_completions(items: list[CompletionItem], output_format: OutputFormat) -> int:
    if output_format == OutputFormat.JSON:
        payload = [{"label": i.label, "kind": str(i.kind), "detail": i.detail} for i in items]
        print(json.dumps(payload, ensure_ascii=False))
    else:
        for item in items:
            print(f"{item.label}\t{item.detail or ''}")
    return EXIT_OK if items else EXIT_NO_RESULT


def _print_location(location: Location | None, output_format: OutputFormat) -> int:
    if location is None:
        return EXIT_NO_RESULT
    start = location.range.start
    end = location.range.end
    if output_format == OutputFormat.JSON:
        payload = {
            "path": str(location.path),
            "start": {"line": start.line, "character": start.character},
            "end": {"line": end.line, "character": end.character},
        }
        print(json.dumps(payload, ensure_ascii=False))
    else:
        # Editor-style 1-based location
        print(f"{location.path}:{start.line + 1}:{start.character + 1}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
