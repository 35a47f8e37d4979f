"""
CLI for translating parse trees handed over as JSON.

Reads a tree produced by the query front end and prints it in the selected
target's syntax.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import TranslatorSettings, load_settings
from .strategies import default_registry
from .translator import DIALECTS, Target, TranslationError, load_tree
from .translator.translator import translate

logger = logging.getLogger(__name__)


def cmd_translate(args, settings: TranslatorSettings) -> int:
    """Translate one tree and print the result."""
    try:
        data = Path(args.file).read_text() if args.file else sys.stdin.read()
    except OSError as e:
        print(f"Cannot read parse tree: {e}", file=sys.stderr)
        return 1

    try:
        tree = load_tree(data)
    except ValidationError as e:
        print(f"Invalid parse tree: {e}", file=sys.stderr)
        return 1

    strict = args.strict or settings.strict_strategies
    try:
        translation = translate(
            tree,
            args.target or settings.default_target,
            args.source_name or settings.source_name,
            registry=default_registry() if strict else None,
        )
    except TranslationError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.json:
        print(translation.model_dump_json())
        return 0

    print(translation.translated)
    for name in sorted(translation.parameters):
        print(f"  parameter: {name}")
    return 0


def cmd_targets(args, settings: TranslatorSettings) -> int:
    """List the available targets."""
    print(f"\n{'Target':<12} {'Display Name':<12}")
    print("-" * 25)
    for target, dialect in DIALECTS.items():
        marker = " *" if target is settings.default_target else ""
        print(f"{target.value:<12} {dialect.display_name:<12}{marker}")
    return 0


def cmd_strategies(args, settings: TranslatorSettings) -> int:
    """List the registered strategies."""
    registry = default_registry()
    print(f"\n{'Strategy':<36} {'Construction':<16}")
    print("-" * 53)
    for entry in sorted(registry, key=lambda e: e.name):
        print(f"{entry.name:<36} {entry.kind.value:<16}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Translate Gremlin parse trees")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Translate command
    translate_parser = subparsers.add_parser("translate", help="Translate a JSON parse tree")
    translate_parser.add_argument("file", nargs="?", help="Parse tree JSON file (default: stdin)")
    translate_parser.add_argument(
        "--target",
        choices=[t.value for t in Target],
        help="Output target (default: from settings)",
    )
    translate_parser.add_argument("--source-name", help="Traversal source name (default: from settings)")
    translate_parser.add_argument(
        "--strict", action="store_true", help="Reject strategies missing from the registry"
    )
    translate_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    # Targets command
    subparsers.add_parser("targets", help="List output targets")

    # Strategies command
    subparsers.add_parser("strategies", help="List registered strategies")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "translate": cmd_translate,
        "targets": cmd_targets,
        "strategies": cmd_strategies,
    }

    return commands[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
