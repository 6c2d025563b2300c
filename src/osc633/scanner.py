"""Incremental scanner that splits a text stream into OSC 633 events.

Input arrives in arbitrary chunks. A sequence may be split across any number
of chunks, including one character at a time, and the resulting events are
the same however the text was chunked.
"""

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from osc633.constants import ESC, OSC633_START, ST
from osc633.decoder import decode_sequence
from osc633.models import Event, Output

log = logging.getLogger(__name__)


def is_partial_prefix(text: str) -> bool:
    """Return whether *text* could still grow into the OSC 633 prefix."""
    return text == OSC633_START[: len(text)]


class Osc633Scanner:
    """Stateful scanner for a single input stream.

    Holds unconsumed input in ``_buffer`` and literal text not yet emitted in
    ``_pending_output``, so a run of plain text spanning several chunks is
    emitted as one ``Output`` event.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._pending_output = ""

    def feed(self, chunk: str) -> Iterator[Event]:
        """Consume *chunk* and return an iterator over the events it completes.

        The chunk is buffered immediately. Events left unconsumed in the
        returned iterator are produced again by the next ``feed`` or ``close``.
        """
        self._buffer += chunk
        return self._drain()

    def _drain(self) -> Iterator[Event]:
        while self._buffer:
            buffer = self._buffer
            esc_index = buffer.find(ESC)
            if esc_index == -1:
                self._pending_output += buffer
                self._buffer = ""
                return

            remaining = buffer[esc_index:]
            if not remaining.startswith(OSC633_START):
                if is_partial_prefix(remaining):
                    # Wait for more input to decide.
                    self._pending_output += buffer[:esc_index]
                    self._buffer = remaining
                    return
                # Some other escape sequence or a stray ESC.
                self._pending_output += buffer[: esc_index + 1]
                self._buffer = buffer[esc_index + 1 :]
                continue

            st_index = buffer.find(ST, esc_index + len(OSC633_START))
            self._pending_output += buffer[:esc_index]
            if st_index == -1:
                self._buffer = remaining
                return

            # State is consistent at each yield, so an abandoned iterator
            # loses nothing.
            self._buffer = remaining
            if self._pending_output:
                output, self._pending_output = self._pending_output, ""
                yield Output(value=output)

            body = buffer[esc_index + len(OSC633_START) : st_index]
            self._buffer = buffer[st_index + 1 :]
            yield decode_sequence(body)

    def close(self) -> Iterator[Event]:
        """Flush whatever is left once the input is exhausted.

        Unterminated sequences and partial prefixes are emitted as literal
        output. The scanner is reset and may be reused for a new stream.
        """
        yield from self._drain()
        rest = self._pending_output + self._buffer
        self._pending_output = ""
        self._buffer = ""
        if rest:
            log.debug("flushing %d trailing characters as output", len(rest))
            yield Output(value=rest)


def parse(chunks: Iterable[str]) -> Iterator[Event]:
    """Lazily parse OSC 633 events from an iterable of text chunks.

    Args:
        chunks: Text fragments in stream order, split at arbitrary points.

    Yields:
        Events in input order. Exceptions raised by *chunks* propagate
        unchanged.
    """
    scanner = Osc633Scanner()
    for chunk in chunks:
        yield from scanner.feed(chunk)
    yield from scanner.close()


async def parse_async(chunks: AsyncIterable[str]) -> AsyncIterator[Event]:
    """Async counterpart of :func:`parse` for async text sources."""
    scanner = Osc633Scanner()
    async for chunk in chunks:
        for event in scanner.feed(chunk):
            yield event
    for event in scanner.close():
        yield event
