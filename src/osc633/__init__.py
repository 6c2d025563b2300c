"""osc633 - incremental parser for OSC 633 shell integration sequences."""

from importlib.metadata import PackageNotFoundError, version

from osc633.models import (
    CommandEnd,
    CommandLine,
    CommandStart,
    Event,
    Invalid,
    Output,
    PromptEnd,
    PromptStart,
    PropertyUpdate,
)
from osc633.scanner import Osc633Scanner, parse, parse_async

try:
    __version__ = version("osc633")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "CommandEnd",
    "CommandLine",
    "CommandStart",
    "Event",
    "Invalid",
    "Osc633Scanner",
    "Output",
    "PromptEnd",
    "PromptStart",
    "PropertyUpdate",
    "parse",
    "parse_async",
]
