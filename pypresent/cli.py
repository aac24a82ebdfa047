"""Command line: encrypt or decrypt a file or stdin with PRESENT."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack

from pypresent.blockio import KeyFormatError, read_blocks, read_key, write_block
from pypresent.cipher import Present


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the command."""
    parser = argparse.ArgumentParser(
        description=(
            "PRESENT implementation: read from a file/stdin and encrypt/decrypt "
            "to a file/stdout."
        )
    )
    parser.add_argument("keyfile", metavar="KEYFILE", help="file holding the 80-bit key")
    parser.add_argument(
        "-e",
        "--encrypt",
        dest="mode",
        action="store_const",
        const="encrypt",
        help="encrypt input (default if neither -e nor -d is given)",
    )
    parser.add_argument(
        "-d", "--decrypt", dest="mode", action="store_const", const="decrypt", help="decrypt input"
    )
    parser.add_argument("-i", "--input", metavar="FILE", help="read input from FILE instead of stdin")
    parser.add_argument("-o", "--output", metavar="FILE", help="write output to FILE instead of stdout")
    parser.set_defaults(mode="encrypt")
    return parser


def _error(message: str) -> int:
    print(f"ERROR - {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        with open(args.keyfile, "rb") as key_stream:
            key = read_key(key_stream)
    except OSError as exc:
        return _error(f"open key: {exc}")
    except KeyFormatError as exc:
        return _error(str(exc))

    cipher = Present(key)
    transform = cipher.decrypt_block if args.mode == "decrypt" else cipher.encrypt_block

    with ExitStack() as stack:
        stack.callback(cipher.clear)
        try:
            source = stack.enter_context(open(args.input, "rb")) if args.input else sys.stdin.buffer
        except OSError:
            return _error("fopen in")
        try:
            sink = stack.enter_context(open(args.output, "wb")) if args.output else sys.stdout.buffer
        except OSError:
            return _error("fopen out")

        blocks = read_blocks(source)
        while True:
            try:
                block = next(blocks)
            except StopIteration:
                break
            except OSError:
                return _error("fread")
            try:
                write_block(sink, transform(block))
            except OSError:
                return _error("fwrite")
        try:
            sink.flush()
        except OSError:
            return _error("fwrite")
    return 0


if __name__ == "__main__":
    sys.exit(main())