"""Event models for osc633."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from osc633.constants import (
    COMMAND_END,
    COMMAND_LINE,
    COMMAND_START,
    OSC633_START,
    PROMPT_END,
    PROMPT_START,
    PROPERTY,
    SEPARATOR,
    ST,
)
from osc633.escaping import escape_value


def _wrap(*parts: str) -> str:
    return f"{OSC633_START}{SEPARATOR.join(parts)}{ST}"


class _EventModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class PromptStart(_EventModel):
    type: Literal["A"] = PROMPT_START

    def to_sequence(self) -> str:
        return _wrap(self.type)


class PromptEnd(_EventModel):
    type: Literal["B"] = PROMPT_END

    def to_sequence(self) -> str:
        return _wrap(self.type)


class CommandStart(_EventModel):
    type: Literal["C"] = COMMAND_START

    def to_sequence(self) -> str:
        return _wrap(self.type)


class CommandEnd(_EventModel):
    type: Literal["D"] = COMMAND_END
    exit_code: str | None = Field(
        default=None,
        description="Exit code exactly as reported by the shell; None when the field was absent.",
    )

    def to_sequence(self) -> str:
        if self.exit_code is None:
            return _wrap(self.type)
        return _wrap(self.type, self.exit_code)


class CommandLine(_EventModel):
    type: Literal["E"] = COMMAND_LINE
    command: str = Field(description="Command line text with escape markers decoded.")
    nonce: str | None = Field(
        default=None,
        description="Optional nonce the shell uses to prove the command line is genuine.",
    )

    def to_sequence(self) -> str:
        if self.nonce is None:
            return _wrap(self.type, escape_value(self.command))
        return _wrap(self.type, escape_value(self.command), self.nonce)


class PropertyUpdate(_EventModel):
    type: Literal["P"] = PROPERTY
    name: str = Field(min_length=1, description="Property name, e.g. 'Cwd' or 'IsWindows'.")
    value: str = Field(description="Property value with escape markers decoded. May be empty.")

    def to_sequence(self) -> str:
        return _wrap(self.type, f"{self.name}={escape_value(self.value)}")


class Output(_EventModel):
    """Literal text found between sequences, preserved character for character."""

    type: Literal["output"] = "output"
    value: str

    def to_sequence(self) -> str:
        return self.value


class Invalid(_EventModel):
    """A malformed OSC 633 sequence.

    Carried through the event stream as data rather than raised, so scanning
    continues after the offending terminator.
    """

    type: Literal["invalid"] = "invalid"
    sequence: str = Field(description="Reconstructed sequence text including prefix and terminator.")
    osc_type: str = Field(description="Type identifier, or an empty string when absent.")
    parts: tuple[str, ...] = Field(description="Raw fields split on ';' before unescaping.")
    reason: str = Field(description="Human-readable description of what is wrong.")

    @classmethod
    def from_parts(cls, parts: list[str] | tuple[str, ...], reason: str) -> "Invalid":
        """Build an ``Invalid`` event from the raw fields of a sequence body."""
        return cls(
            sequence=_wrap(*parts),
            osc_type=parts[0] if parts else "",
            parts=tuple(parts),
            reason=reason,
        )

    def to_sequence(self) -> str:
        return self.sequence


Event = Annotated[
    Union[
        PromptStart,
        PromptEnd,
        CommandStart,
        CommandEnd,
        CommandLine,
        PropertyUpdate,
        Output,
        Invalid,
    ],
    Field(discriminator="type"),
]

event_adapter: TypeAdapter[Event] = TypeAdapter(Event)
