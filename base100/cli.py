"""Command-line interface: encode or decode a stream with base💯."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from functools import partial

from base100.codec import Base100Error, Decoder, Encoder

_PRODUCT_FULL_NAME = "base💯"
_IO_BUFFER_SIZE = 64 * 1024


def parse_args(argv=None):
    """Parse command-line options."""
    parser = argparse.ArgumentParser(
        prog="base100",
        description=f"{_PRODUCT_FULL_NAME}\nEncodes things into emoji",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-d", "--decode", action="store_true", help="Decodes input"
    )
    parser.add_argument(
        "-i", "--input", default="", help="Input file (default use STDIN)"
    )
    parser.add_argument(
        "-o", "--output", default="", help="Output file (default use STDOUT)"
    )
    return parser.parse_args(argv)


def run(decode, source, sink):
    """Copy *source* to *sink*, encoding or decoding; return bytes of raw data."""
    if decode:
        decoder = Decoder(source)
        total = 0
        for chunk in iter(partial(decoder.read, _IO_BUFFER_SIZE), b""):
            sink.write(chunk)
            total += len(chunk)
        return total
    encoder = Encoder(sink)
    return sum(
        encoder.write(chunk)
        for chunk in iter(partial(source.read, _IO_BUFFER_SIZE), b"")
    )


def main(argv=None):
    """Run the command and return its exit status."""
    options = parse_args(argv)
    with ExitStack() as stack:
        try:
            source = (
                stack.enter_context(open(options.input, "rb"))
                if options.input
                else sys.stdin.buffer
            )
            sink = (
                stack.enter_context(open(options.output, "wb"))
                if options.output
                else sys.stdout.buffer
            )
        except OSError as exc:
            print(exc, file=sys.stderr)
            return 1
        try:
            run(options.decode, source, sink)
            sink.flush()
        except (Base100Error, OSError) as exc:
            print(f"FATAL: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())