"""Command-line interface for osc633."""

import argparse
import codecs
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, TextIO

from osc633 import __version__
from osc633.config import Osc633Config, load_config
from osc633.models import event_adapter
from osc633.scanner import parse

log = logging.getLogger(__name__)


def iter_text_chunks(stream: BinaryIO, config: Osc633Config) -> Iterator[str]:
    """Read *stream* in chunks and decode it incrementally.

    A multi-byte character split across two reads is decoded once both
    halves have arrived.
    """
    decoder = codecs.getincrementaldecoder(config.encoding)(errors=config.errors)
    read = getattr(stream, "read1", stream.read)
    while True:
        data = read(config.chunk_size)
        if not data:
            break
        if text := decoder.decode(data):
            yield text
    if tail := decoder.decode(b"", final=True):
        yield tail


def decode_stream(stream: BinaryIO, out: TextIO, config: Osc633Config) -> int:
    """Write one JSON object per parsed event to *out*. Returns the event count."""
    count = 0
    for event in parse(iter_text_chunks(stream, config)):
        if config.skip_output and event.type == "output":
            continue
        out.write(event.model_dump_json(exclude_none=True) + "\n")
        out.flush()
        count += 1
    log.debug("wrote %d events", count)
    return count


def encode_stream(stream: BinaryIO, out: BinaryIO, config: Osc633Config) -> int:
    """Turn JSON-lines events back into raw terminal text. Returns the event count."""
    count = 0
    for line in stream:
        text = line.decode(config.encoding, errors=config.errors)
        if not text.strip():
            continue
        event = event_adapter.validate_json(text)
        out.write(event.to_sequence().encode(config.encoding, errors=config.errors))
        count += 1
    out.flush()
    log.debug("encoded %d events", count)
    return count


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the osc633 command."""
    parser = argparse.ArgumentParser(
        prog="osc633",
        description=(
            "Parse OSC 633 shell integration sequences from stdin and print "
            "one JSON event per line"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Read configuration from this JSON file instead of ~/.osc633/config.json",
    )
    parser.add_argument(
        "--encode",
        action="store_true",
        help="Read JSON-lines events from stdin and write the raw terminal stream",
    )
    parser.add_argument(
        "--skip-output",
        action="store_true",
        help="Only print sequence events, not plain output text",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.skip_output:
            config.skip_output = True

        if args.encode:
            sys.stdout.flush()
            encode_stream(sys.stdin.buffer, sys.stdout.buffer, config)
        else:
            decode_stream(sys.stdin.buffer, sys.stdout, config)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def entrypoint() -> None:
    raise SystemExit(main())
