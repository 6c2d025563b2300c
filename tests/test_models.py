"""Unit tests for osc633.models."""

import json

import pytest
from pydantic import ValidationError

from osc633.models import (
    CommandEnd,
    CommandLine,
    CommandStart,
    Invalid,
    Output,
    PromptEnd,
    PromptStart,
    PropertyUpdate,
    event_adapter,
)


class TestToSequence:
    def test_zero_argument_events(self):
        assert PromptStart().to_sequence() == "\x1b]633;A\x07"
        assert PromptEnd().to_sequence() == "\x1b]633;B\x07"
        assert CommandStart().to_sequence() == "\x1b]633;C\x07"

    def test_command_end_with_and_without_exit_code(self):
        assert CommandEnd(exit_code="127").to_sequence() == "\x1b]633;D;127\x07"
        assert CommandEnd().to_sequence() == "\x1b]633;D\x07"

    def test_command_line_escapes_command(self):
        event = CommandLine(command="echo a;b", nonce="n1")
        assert event.to_sequence() == "\x1b]633;E;echo a\\x3bb;n1\x07"

    def test_property_update_escapes_value_only(self):
        event = PropertyUpdate(name="Cwd", value="/tmp\nx")
        assert event.to_sequence() == "\x1b]633;P;Cwd=/tmp\\x0ax\x07"

    def test_output_is_literal(self):
        assert Output(value="a;b\n").to_sequence() == "a;b\n"


class TestInvalid:
    def test_from_parts(self):
        event = Invalid.from_parts(["P", "=value"], "Missing property name")
        assert event.sequence == "\x1b]633;P;=value\x07"
        assert event.osc_type == "P"
        assert event.parts == ("P", "=value")
        assert event.reason == "Missing property name"
        assert event.to_sequence() == event.sequence

    def test_from_empty_parts(self):
        event = Invalid.from_parts([], "Unknown sequence type: ")
        assert event.osc_type == ""
        assert event.sequence == "\x1b]633;\x07"

    def test_is_not_an_exception(self):
        assert not isinstance(Invalid.from_parts(["X"], "bad"), BaseException)


class TestEventModels:
    def test_events_are_frozen(self):
        event = CommandLine(command="ls")
        with pytest.raises(ValidationError):
            event.command = "rm"

    def test_events_compare_by_value(self):
        assert Output(value="x") == Output(value="x")
        assert PromptStart() != PromptEnd()

    def test_property_name_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            PropertyUpdate(name="", value="x")

    def test_json_dump_omits_missing_optional_fields(self):
        data = json.loads(CommandEnd().model_dump_json(exclude_none=True))
        assert data == {"type": "D"}


class TestEventAdapter:
    @pytest.mark.parametrize(
        "event",
        [
            PromptStart(),
            CommandEnd(exit_code="0"),
            CommandLine(command="echo hi", nonce="abc"),
            PropertyUpdate(name="Cwd", value="/"),
            Output(value="hello\n"),
            Invalid.from_parts(["X", "foo"], "Unknown sequence type: X"),
        ],
    )
    def test_validates_dumped_json(self, event):
        loaded = event_adapter.validate_json(event.model_dump_json(exclude_none=True))
        assert loaded == event
        assert type(loaded) is type(event)

    def test_unknown_discriminator_is_rejected(self):
        with pytest.raises(ValidationError):
            event_adapter.validate_json('{"type": "Z"}')
