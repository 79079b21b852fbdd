"""Command-line interface for charwalk."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO

import charwalk
from charwalk._utils import DEFAULT_CHUNK_SIZE
from charwalk.charsets import DecodeError, ValidationResult
from charwalk.enums import Charset, ValidationStatus
from charwalk.registry import get_charset
from charwalk.validator import IncrementalValidator

logger = logging.getLogger(__name__)

_CHARSET_NAMES = [c.name.lower() for c in Charset]


def _validate_stream(
    stream: BinaryIO, validator: IncrementalValidator
) -> ValidationResult:
    while chunk := stream.read(DEFAULT_CHUNK_SIZE):
        validator.feed(chunk)
        if validator.done:
            break
    return validator.close()


def _describe(result: ValidationResult, minimal: bool) -> str:
    if minimal:
        return result.status.value
    if result.status is ValidationStatus.VALID:
        return f"valid ({result.offset} bytes)"
    error = result.error.value if result.error is not None else "error"
    return f"{result.status.value} at byte {result.offset} ({error})"


def _write_split(data: bytes, charset: Charset, mode: str) -> None:
    ops = get_charset(charset)
    out = sys.stdout.buffer
    if mode == "int":
        for codepoint in ops.split_int(data):
            out.write(b"%d\n" % codepoint)
    else:
        for char in ops.split_char(data):
            out.write(char + b"\n")
    out.flush()


def _check(
    name: str, stream: BinaryIO, args: argparse.Namespace, charset: Charset
) -> bool:
    validator = IncrementalValidator(charset, strict=args.strict)
    if args.split:
        data = stream.read()
        validator.feed(data)
        result = validator.close()
    else:
        data = b""
        result = _validate_stream(stream, validator)
    logger.debug("%s: %s", name, result.to_dict())

    if args.split and result.is_valid:
        try:
            _write_split(data, charset, args.split)
        except DecodeError as e:
            print(f"charwalk: {name}: {e}", file=sys.stderr)
            return False
        return True
    if args.minimal:
        print(_describe(result, minimal=True))
    else:
        print(f"{name}: {_describe(result, minimal=False)}")
    return result.is_valid


def main(argv: list[str] | None = None) -> None:
    """Run the ``charwalk`` command-line tool.

    Exits with status 1 if any input could not be read or was not valid.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Validate and split byte strings by charset."
    )
    parser.add_argument("files", nargs="*", help="Files to validate")
    parser.add_argument(
        "-c",
        "--charset",
        default="utf_8",
        choices=_CHARSET_NAMES,
        help="Charset to validate against (default: utf_8)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject overlong forms, surrogates and codepoints above U+10FFFF",
    )
    parser.add_argument(
        "--split",
        choices=["char", "int"],
        default=None,
        help="Print each character (or codepoint) on its own line",
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the validation status"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debugging output"
    )
    parser.add_argument(
        "--version", action="version", version=f"charwalk {charwalk.__version__}"
    )

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    charset = Charset[args.charset.upper()]
    if args.strict and charset is not Charset.UTF_8:
        parser.error("--strict only applies to the utf_8 charset")

    ok = True
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    ok &= _check(filepath, f, args, charset)
            except OSError as e:
                print(f"charwalk: {filepath}: {e}", file=sys.stderr)
                ok = False
    else:
        ok = _check("stdin", sys.stdin.buffer, args, charset)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
