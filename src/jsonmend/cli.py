from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from jsonmend import config
from jsonmend.error import UnsupportedLanguageError
from jsonmend.messages import Localizer
from jsonmend.operations import run_operation
from jsonmend.types import Language, Operation


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="jsonmend",
        description="jsonmend CLI for decoding escape sequences and repairing malformed JSON",
    )
    parser.add_argument(
        "--lang",
        choices=[lang.value for lang in Language],
        default=None,
        help="Language for status messages (default: $JSONMEND_LANGUAGE or en)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    english = Localizer(Language.EN)
    for operation in Operation:
        op_parser = subparsers.add_parser(
            operation.value,
            help=english.text(f"{operation.value}-help"),
        )
        op_parser.add_argument(
            "file",
            nargs="?",
            type=Path,
            default=None,
            help="Input file (default: stdin)",
        )

    args = parser.parse_args()
    command: str | None = args.command

    if command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        localizer = Localizer(args.lang)
    except UnsupportedLanguageError as e:
        parser.error(str(e))
    exit_code = operation_command(Operation(command), args.file, localizer)
    sys.exit(exit_code)


def operation_command(operation: Operation, file: Path | None, localizer: Localizer) -> int:
    text = _read_input(file)
    result = run_operation(operation, text, localizer)

    if result.output is not None:
        _write_output(result.output)
    print(f"[{result.message.severity.value}] {result.message.text}", file=sys.stderr)

    return 0 if result.ok else 1


def _read_input(file: Path | None) -> str:
    if file is None or str(file) == "-":
        raw = sys.stdin.buffer.read()
    else:
        raw = file.read_bytes()
    return raw.decode("utf-8", errors="replace")


def _write_output(text: str) -> None:
    # Decoded \uXXXX escapes may leave surrogate code units; pair them, replace strays
    sys.stdout.write(text.encode("utf-16", "surrogatepass").decode("utf-16", "replace"))


if __name__ == "__main__":
    main()
