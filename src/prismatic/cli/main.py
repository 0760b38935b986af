"""
Command line front end for prismatic.

Examples:
    prismatic colorize "<#ff0000>Hello</#0000ff> &lworld"
    prismatic gradient "Hello" ff0000 0000ff --legacy
    prismatic rainbow "Hello" --saturation 0.8
    prismatic strip "§aHello &lworld"
    prismatic inspect "&x&f&f&0&0&0&0Hi&a!"
"""

import argparse
import logging
import sys
from pathlib import Path

from ..color.types import Color
from ..config import PrismaticConfig, load_config
from ..errors import FormatError
from ..pipeline import colorize, end_color, start_color, strip_all, translate_markers
from ..text.annotate import apply_gradient, apply_rainbow
from ..text.markers import find_markers

logger = logging.getLogger(__name__)


def parse_color(value: str, fallback: Color) -> Color:
    """Parse a hex color argument, falling back to `fallback` if invalid."""
    try:
        return Color.from_hex(value)
    except FormatError as e:
        logger.warning("%s, using %s", e, fallback)
        return fallback


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="prismatic",
        description="Colorize, strip and inspect color-marked text",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: built-in defaults)",
    )
    parser.add_argument(
        "--legacy",
        action="store_true",
        default=None,
        help="Restrict output to the 16-color palette",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    colorize_cmd = commands.add_parser("colorize", help="Expand all color syntax")
    colorize_cmd.add_argument("text")

    strip_cmd = commands.add_parser("strip", help="Remove all color syntax")
    strip_cmd.add_argument("text")

    gradient_cmd = commands.add_parser("gradient", help="Apply a two-color gradient")
    gradient_cmd.add_argument("text")
    gradient_cmd.add_argument("start", help="Start color, hex (e.g. ff0000)")
    gradient_cmd.add_argument("end", help="End color, hex (e.g. 0000ff)")

    rainbow_cmd = commands.add_parser("rainbow", help="Apply a rainbow")
    rainbow_cmd.add_argument("text")
    rainbow_cmd.add_argument(
        "--saturation",
        type=float,
        default=None,
        help="Saturation and brightness, 0.0-1.0 (default: from config)",
    )

    inspect_cmd = commands.add_parser("inspect", help="List the markers in text")
    inspect_cmd.add_argument("text")

    return parser


def run(args: argparse.Namespace, config: PrismaticConfig) -> str:
    """Execute a parsed command and return its output."""
    legacy = config.legacy if args.legacy is None else args.legacy
    patterns = config.enabled_patterns()

    if args.command == "colorize":
        return colorize(args.text, legacy, patterns)

    if args.command == "strip":
        return strip_all(args.text, patterns)

    if args.command == "gradient":
        start = parse_color(args.start, config.fallback)
        end = parse_color(args.end, config.fallback)
        return translate_markers(apply_gradient(args.text, start, end, legacy))

    if args.command == "rainbow":
        saturation = config.rainbow_saturation if args.saturation is None else args.saturation
        return translate_markers(apply_rainbow(args.text, saturation, legacy))

    # inspect
    text = colorize(args.text, legacy, patterns)
    lines = [f"  [{span.start:3d}] {span.kind.name.lower():8s} {span.text!r}"
             for span in find_markers(text)]
    lines.append(f"start: {start_color(args.text, legacy, patterns)!r}")
    lines.append(f"end:   {end_color(args.text, legacy, patterns)!r}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the prismatic command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else PrismaticConfig()
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        print(run(args, config))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
