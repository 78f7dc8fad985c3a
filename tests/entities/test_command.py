"""
Tests for the command entities.
"""

import pytest

from src.entities.Command import ArgumentSpec, CommandDefinition, OptionSpec, ParsedArguments


class TestCommandDefinition:
    def test_arity_and_option_tags(self):
        definition = CommandDefinition(
            name="cpy",
            arguments=(ArgumentSpec("source"), ArgumentSpec("destination")),
            options=(OptionSpec("rf", "true|false"),),
        )

        assert definition.arity == 2
        assert definition.option_tags == ("rf",)

    def test_command_without_arguments(self):
        definition = CommandDefinition(name="exit")

        assert definition.arity == 0
        assert definition.option_tags == ()


class TestParsedArguments:
    """Test cases for ParsedArguments."""

    def test_values_are_required_then_optional(self):
        args = ParsedArguments(("C:\\Users",), ("2",), ("p",))

        assert args.values == ("C:\\Users", "2")
        assert len(args) == 2
        assert args[0] == "C:\\Users"
        assert args[1] == "2"
        assert list(args) == ["C:\\Users", "2"]

    def test_absent_option_differs_from_empty_value(self):
        absent = ParsedArguments(("x",), (None,), ("p",))
        empty = ParsedArguments(("x",), ("",), ("p",))

        assert absent.option("p") is None
        assert empty.option("p") == ""

    def test_unknown_option(self):
        args = ParsedArguments(("x",), (None,), ("p",))

        with pytest.raises(KeyError, match="Unknown option"):
            args.option("r")

    def test_optional_values_need_tags(self):
        with pytest.raises(ValueError, match="option tag"):
            ParsedArguments(("x",), ("2",), ())
