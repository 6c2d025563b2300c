"""Decoding of OSC 633 sequence bodies into events."""

import logging

from osc633.constants import (
    COMMAND_END,
    COMMAND_LINE,
    COMMAND_START,
    PROMPT_END,
    PROMPT_START,
    PROPERTY,
    SEPARATOR,
)
from osc633.escaping import unescape_value
from osc633.models import (
    CommandEnd,
    CommandLine,
    CommandStart,
    Event,
    Invalid,
    PromptEnd,
    PromptStart,
    PropertyUpdate,
)

log = logging.getLogger(__name__)


def _invalid(parts: list[str], reason: str) -> Invalid:
    log.debug("invalid sequence %r: %s", parts, reason)
    return Invalid.from_parts(parts, reason)


def _parse_command_end(parts: list[str]) -> CommandEnd:
    exit_code = parts[1] if len(parts) > 1 else None
    return CommandEnd(exit_code=exit_code)


def _parse_command_line(parts: list[str]) -> CommandLine | Invalid:
    if len(parts) < 2:
        return _invalid(parts, "Missing command parameter")
    nonce = parts[2] if len(parts) > 2 else None
    return CommandLine(command=unescape_value(parts[1]), nonce=nonce)


def _parse_property_update(parts: list[str]) -> PropertyUpdate | Invalid:
    if len(parts) < 2:
        return _invalid(parts, "Missing name-value parameter")
    name, sep, value = parts[1].partition("=")
    if not sep:
        return _invalid(parts, "Invalid property format: missing '='")
    if not name:
        return _invalid(parts, "Missing property name")
    return PropertyUpdate(name=name, value=unescape_value(value))


def decode_sequence(body: str) -> Event:
    """Decode the text between the OSC 633 prefix and its terminator.

    The body is split on ``;``; the first field selects the event type.
    Extra fields on ``A``/``B``/``C`` are ignored.

    Args:
        body: Sequence body, e.g. ``"E;echo hi"`` or ``"P;Cwd=/tmp"``.

    Returns:
        The decoded event, or an ``Invalid`` event describing why the body
        could not be decoded.
    """
    parts = body.split(SEPARATOR)
    osc_type = parts[0]

    if osc_type == PROMPT_START:
        return PromptStart()
    if osc_type == PROMPT_END:
        return PromptEnd()
    if osc_type == COMMAND_START:
        return CommandStart()
    if osc_type == COMMAND_END:
        return _parse_command_end(parts)
    if osc_type == COMMAND_LINE:
        return _parse_command_line(parts)
    if osc_type == PROPERTY:
        return _parse_property_update(parts)
    return _invalid(parts, f"Unknown sequence type: {osc_type}")
