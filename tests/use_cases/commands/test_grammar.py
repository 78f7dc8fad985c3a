"""
Tests for the CommandGrammar.
"""

import pytest

from src.entities.Command import ArgumentSpec, CommandDefinition
from src.exceptions import CommandError
from src.use_cases.commands.grammar import CommandGrammar, default_commands
from src.utils.paths import POSIX, WINDOWS


@pytest.fixture
def grammar(mock_logger):
    return CommandGrammar(default_commands(), WINDOWS, mock_logger)


@pytest.fixture
def posix_grammar(mock_logger):
    return CommandGrammar(default_commands(), POSIX, mock_logger)


class TestMatch:
    """Recognition of command lines."""

    @pytest.mark.parametrize(
        "line, name",
        [
            ('gotd "C:\\Users"', "gotd"),
            ('gotd "C:\\Users" -p 2', "gotd"),
            ('gotd "C:\\Program Files"', "gotd"),
            ('gotd ""', "gotd"),
            ('cpy "C:\\a.txt" "D:\\"', "cpy"),
            ('cpy "C:\\a.txt" "" -rf false', "cpy"),
            ('del "C:\\tmp" -r true', "del"),
            ('info "C:\\tmp"', "info"),
            ("exit", "exit"),
            ("  exit  ", "exit"),
        ],
    )
    def test_recognized_lines(self, grammar, line, name):
        assert grammar.match(line).name == name

    @pytest.mark.parametrize(
        "line",
        [
            "gotd C:\\Users",
            'gotd "C:\\Users" -p',
            'gotd "C:\\Users" -p two',
            'gotd "C:\\Users" "D:\\"',
            'gotd "C:/Users"',
            'gotd "C:\\a*b"',
            'cpy "" "D:\\"',
            'cpy "C:\\a.txt" "D:\\" -rf maybe',
            'del "C:\\tmp" -r false',
            'info "C:\\tmp" -p 1',
            "exit now",
            "remove everything",
            "",
        ],
    )
    def test_unrecognized_lines(self, grammar, line):
        assert grammar.match(line) is None

    def test_forward_slash_allowed_in_posix_style(self, posix_grammar):
        assert posix_grammar.match('gotd "/home/user"').name == "gotd"
        assert posix_grammar.match('gotd "/home/*"') is None

    def test_custom_matcher(self, mock_logger):
        hello = CommandDefinition(name="hello", matcher=lambda line: line.startswith("hi"))
        grammar = CommandGrammar((hello,), WINDOWS, mock_logger)

        assert grammar.match("hi there") is hello
        assert grammar.match("hello") is None

    def test_duplicate_names(self, mock_logger):
        with pytest.raises(CommandError, match="Duplicate command names: exit"):
            CommandGrammar(
                (CommandDefinition(name="exit"), CommandDefinition(name="exit")),
                WINDOWS,
                mock_logger,
            )

    def test_definitions_keep_order(self, grammar):
        assert [d.name for d in grammar.definitions] == ["gotd", "cpy", "del", "info", "exit"]


class TestExtract:
    """Extraction of argument values."""

    def test_path_and_page(self, grammar):
        definition, args = grammar.parse('gotd "C:\\Users" -p 2')

        assert definition.name == "gotd"
        assert args.required == ("C:\\Users",)
        assert args.option("p") == "2"
        assert args.values == ("C:\\Users", "2")

    def test_absent_option_is_none(self, grammar):
        _, args = grammar.parse('gotd "C:\\Users"')

        assert args.values == ("C:\\Users", None)

    def test_empty_argument_is_empty_string(self, grammar):
        _, args = grammar.parse('cpy "C:\\a.txt" ""')

        assert args.values == ("C:\\a.txt", "", None)

    def test_argument_with_spaces(self, grammar):
        _, args = grammar.parse('cpy "C:\\My Files\\a b.txt" "D:\\new folder" -rf true')

        assert args.values == ("C:\\My Files\\a b.txt", "D:\\new folder", "true")

    def test_command_without_arguments(self, grammar):
        definition, args = grammar.parse("exit")

        assert definition.name == "exit"
        assert len(args) == 0

    def test_missing_values_are_padded(self, mock_logger):
        pair = CommandDefinition(
            name="pair",
            arguments=(ArgumentSpec("first"), ArgumentSpec("second")),
            matcher=lambda line: line.startswith("pair"),
        )
        grammar = CommandGrammar((pair,), WINDOWS, mock_logger)

        _, args = grammar.parse('pair "a"')

        assert args.values == ("a", None)

    def test_extra_values_are_dropped(self, grammar):
        info = grammar.match('info "x"')

        args = grammar.extract(info, 'info "x" "y"')

        assert args.values == ("x",)

    def test_quoted_option_value_is_unquoted(self, grammar):
        gotd = grammar.match('gotd "x"')

        args = grammar.extract(gotd, 'gotd "x" -p "3"')

        assert args.values == ("x", "3")

    def test_empty_option_value_differs_from_absent(self, grammar):
        gotd = grammar.match('gotd "x"')

        args = grammar.extract(gotd, 'gotd "C:\\Users" -p ""')

        assert args.values == ("C:\\Users", "")
        assert args.option("p") is not None

    def test_unrecognized_line_is_logged(self, grammar, mock_logger):
        assert grammar.parse("format c:") is None
        mock_logger.info.assert_called_once()
