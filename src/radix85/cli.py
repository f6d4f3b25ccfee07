"""Command line interface for the radix-85 toolkit."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from .api import decode_text, encode_text
from .exceptions import ConfigurationError, Radix85Error
from .framing import format_guard_line, generate_guards
from .schemes import Scheme, resolve_scheme
from .utils import configure_logging

console = Console(stderr=True)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _read_bytes(path: str | None) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_bytes(path: str | None, data: bytes) -> None:
    if not path or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
        return
    Path(path).write_bytes(data)


def _read_text(path: str | None, *, encoding: str = "ascii") -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding=encoding)


def _write_text(path: str | None, data: str, *, encoding: str = "ascii") -> None:
    if not path or path == "-":
        sys.stdout.write(data)
        sys.stdout.flush()
        return
    Path(path).write_text(data, encoding=encoding)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-i", "--in", dest="input_path", default="-", help="Input file (default: stdin)")
    parser.add_argument("-o", "--out", dest="output_path", default="-", help="Output file (default: stdout)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level for this invocation (default: $RADIX85_LOG_LEVEL or INFO)",
    )


def _add_scheme_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s",
        "--scheme",
        default=Scheme.ADOBE.value,
        choices=[scheme.value for scheme in Scheme],
        type=str.lower,
        help="Radix-85 variant (default: adobe)",
    )


def _handle_encode(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="radix85 encode", description="Encode binary data as radix-85 text.")
    _add_scheme_argument(parser)
    _add_common_arguments(parser)
    parser.add_argument("--wrap", type=int, default=None, help="Wrap the body at this column (0 disables)")
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    try:
        scheme = resolve_scheme(args.scheme)
        if args.wrap is not None and args.wrap < 0:
            raise ConfigurationError("--wrap must not be negative")
        text = encode_text(_read_bytes(args.input_path), scheme, line_length=args.wrap)
    except Radix85Error as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1

    _write_text(args.output_path, text + "\n")
    return 0


def _handle_decode(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="radix85 decode", description="Decode radix-85 text into binary data.")
    _add_scheme_argument(parser)
    _add_common_arguments(parser)
    parser.add_argument("--verify", action="store_true", help="Check BTOA guard checksums after decoding")
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    try:
        text = _read_text(args.input_path)
    except UnicodeDecodeError:
        console.print("[red]Error:[/red] input is not ASCII text")
        return 1

    try:
        data = decode_text(text, resolve_scheme(args.scheme), verify=args.verify)
    except Radix85Error as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1

    _write_bytes(args.output_path, data)
    return 0


def _handle_guards(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="radix85 guards", description="Print the BTOA guard line for a file.")
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    guards = generate_guards(_read_bytes(args.input_path))
    _write_text(args.output_path, format_guard_line(guards) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radix85",
        description="Command line interface for the radix-85 toolkit.",
    )
    subparsers = parser.add_subparsers(dest="command")
    for command in ["encode", "decode", "guards"]:
        subparsers.add_parser(command)
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    if not args:
        build_parser().print_help()
        return 0

    command, rest = args[0], args[1:]

    if command == "encode":
        return _handle_encode(rest)
    if command == "decode":
        return _handle_decode(rest)
    if command == "guards":
        return _handle_guards(rest)
    if command in {"-h", "--help"}:
        build_parser().print_help()
        return 0

    console.print(f"[red]Error:[/red] unknown command '{command}'")
    build_parser().print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
