"""Command-line interface for conslist.

Provides the ``conslist`` command with subcommands for:
- Showing a list document
- Reversing it
- Counting and peeking
- Checking that it survives a decode/encode round trip
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from conslist.codec import CODEC_NAMES, dumps, dumps_element, loads
from conslist.config import CodecConfig, load_config
from conslist.errors import ConsListError, DecodeError
from conslist.linked_list import LinkedList


def read_list(args: argparse.Namespace, config: CodecConfig) -> LinkedList[Any]:
    """Decode the list document named on the command line."""
    source = "<stdin>" if args.file == "-" else args.file
    try:
        if args.file == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.file).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"{source} is not valid UTF-8: {e}"
        raise DecodeError(msg) from e
    except OSError as e:
        msg = f"cannot read {source}: {e}"
        raise ConsListError(msg) from e
    return loads(text, config.codec())


def write_list(lst: LinkedList[Any], config: CodecConfig) -> None:
    print(dumps(lst, config.codec(), indent=config.indent, sort_keys=config.sort_keys))


def cmd_show(args: argparse.Namespace, config: CodecConfig) -> int:
    """Print the decoded list."""
    print(read_list(args, config))
    return 0


def cmd_reverse(args: argparse.Namespace, config: CodecConfig) -> int:
    """Print the list in reverse order."""
    write_list(read_list(args, config).reverse(), config)
    return 0


def cmd_length(args: argparse.Namespace, config: CodecConfig) -> int:
    """Print the number of elements."""
    print(read_list(args, config).length())
    return 0


def cmd_peek(args: argparse.Namespace, config: CodecConfig) -> int:
    """Print the head element."""
    lst = read_list(args, config)
    if lst.is_empty():
        print("Error: list is empty", file=sys.stderr)
        return 1
    print(
        dumps_element(
            lst.peek(), config.codec(), indent=config.indent, sort_keys=config.sort_keys
        )
    )
    return 0


def cmd_check(args: argparse.Namespace, config: CodecConfig) -> int:
    """Verify that the document survives a round trip."""
    codec = config.codec()
    original = read_list(args, config)
    restored = loads(dumps(original, codec), codec)
    if restored != original:
        print("Error: round trip changed the list", file=sys.stderr)
        return 1
    print("ok")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="conslist",
        description="Inspect and transform JSON array documents as linked lists",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML codec configuration",
    )
    parser.add_argument(
        "--type",
        dest="element_type",
        choices=CODEC_NAMES,
        help="Element type (default: json)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        help="Indent output by this many spaces (default: compact)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    commands = [
        ("show", cmd_show, "Print the decoded list"),
        ("reverse", cmd_reverse, "Print the list reversed"),
        ("length", cmd_length, "Print the number of elements"),
        ("peek", cmd_peek, "Print the head element"),
        ("check", cmd_check, "Verify a decode/encode round trip"),
    ]
    for name, func, help_text in commands:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "file",
            nargs="?",
            default="-",
            help="JSON array document (default: stdin)",
        )
        sub.set_defaults(func=func)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config) if args.config else CodecConfig()
        config = config.override(element_type=args.element_type, indent=args.indent)
        return args.func(args, config)
    except ConsListError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
