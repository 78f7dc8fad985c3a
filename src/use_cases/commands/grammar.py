"""
Command grammar: matches typed lines against a table of command definitions
and extracts their arguments.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence

from src.entities.Command import ArgumentSpec, CommandDefinition, OptionSpec, ParsedArguments
from src.exceptions import CommandError
from src.utils.paths import PathStyle, host_style

# a quoted string or a bare word
_TOKEN = re.compile(r'"[^"]*"|\S+')


def default_commands() -> tuple[CommandDefinition, ...]:
    """Command table of the file manager."""
    return (
        CommandDefinition(
            name="gotd",
            arguments=(ArgumentSpec("path"),),
            options=(OptionSpec("p", r"\d+"),),
            description='gotd "<path>" [-p <page>]',
        ),
        CommandDefinition(
            name="cpy",
            arguments=(
                ArgumentSpec("source", allow_empty=False),
                ArgumentSpec("destination"),
            ),
            options=(OptionSpec("rf", "true|false"),),
            description='cpy "<source>" "<destination>" [-rf <true|false>]',
        ),
        CommandDefinition(
            name="del",
            arguments=(ArgumentSpec("path"),),
            options=(OptionSpec("r", "true"),),
            description='del "<path>" [-r true]',
        ),
        CommandDefinition(
            name="info",
            arguments=(ArgumentSpec("path"),),
            description='info "<path>"',
        ),
        CommandDefinition(name="exit", description="exit"),
    )


class CommandGrammar:
    """Matches command lines against an ordered table of definitions."""

    def __init__(
        self,
        definitions: Sequence[CommandDefinition],
        style: Optional[PathStyle] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the grammar.

        Args:
            definitions: Command definitions, tried in order
            style: Path style deciding which characters are forbidden in quotes
            logger: Logger instance to use for logging

        Raises:
            CommandError: If two definitions share a name
        """
        self._style = style or host_style()
        self._logger = logger or logging.getLogger(__name__)

        names = [definition.name for definition in definitions]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise CommandError(f"Duplicate command names: {', '.join(duplicates)}")

        forbidden = re.escape(self._style.forbidden_chars)
        self._forbidden = set(self._style.forbidden_chars)
        self._quoted_empty = f'"[^{forbidden}]*"'
        self._quoted_nonempty = f'"[^{forbidden}]+"'
        self._table: list[tuple[CommandDefinition, Callable[[str], bool]]] = [
            (definition, definition.matcher or self._build_matcher(definition))
            for definition in definitions
        ]

    @property
    def definitions(self) -> list[CommandDefinition]:
        return [definition for definition, _ in self._table]

    def _build_matcher(self, definition: CommandDefinition) -> Callable[[str], bool]:
        """
        Compile the structural signature of a definition.

        e.g. cpy "<src>" "<dst>" [-rf true|false] becomes
        ^cpy\\s+"[^...]+"\\s+"[^...]*"(?:\\s+-rf\\s+(?:true|false))?$
        """
        parts = [re.escape(definition.name)]
        for argument in definition.arguments:
            quoted = self._quoted_empty if argument.allow_empty else self._quoted_nonempty
            parts.append(rf"\s+{quoted}")
        for option in definition.options:
            parts.append(rf"(?:\s+-{re.escape(option.tag)}\s+(?:{option.value_pattern}))?")
        signature = re.compile("^" + "".join(parts) + "$")
        return lambda line: signature.match(line) is not None

    def match(self, line: str) -> Optional[CommandDefinition]:
        """
        Find the first definition accepting the line.

        Returns:
            The matching definition, or None if the line is not a known command
        """
        text = line.strip()
        for definition, matcher in self._table:
            if matcher(text):
                return definition
        return None

    def extract(self, definition: CommandDefinition, line: str) -> ParsedArguments:
        """
        Extract argument values from a line of the given command.

        Example:
            'gotd "C:\\Users" -p 2' gives required ("C:\\Users",), optional ("2",)
            'gotd "C:\\Users"'      gives required ("C:\\Users",), optional (None,)

        Returns:
            ParsedArguments with exactly arity + number of options slots
        """
        tokens = _TOKEN.findall(line.strip())[1:]
        flags = {f"-{tag}": index for index, tag in enumerate(definition.option_tags)}

        required: list[Optional[str]] = []
        optional: list[Optional[str]] = [None] * len(flags)
        position = 0
        while position < len(tokens):
            token = tokens[position]
            if token in flags and position + 1 < len(tokens):
                optional[flags[token]] = self._unquote(tokens[position + 1])
                position += 2
                continue
            if self._is_quoted_argument(token):
                required.append(token[1:-1])
            position += 1

        required = required[: definition.arity]
        required.extend([None] * (definition.arity - len(required)))
        return ParsedArguments(
            required=tuple(required),
            optional=tuple(optional),
            option_tags=definition.option_tags,
        )

    def parse(self, line: str) -> Optional[tuple[CommandDefinition, ParsedArguments]]:
        definition = self.match(line)
        if definition is None:
            self._logger.info(f"Unrecognized command line: {line!r}")
            return None
        return definition, self.extract(definition, line)

    def _is_quoted_argument(self, token: str) -> bool:
        if len(token) < 2 or not (token.startswith('"') and token.endswith('"')):
            return False
        return not any(char in self._forbidden for char in token[1:-1])

    @staticmethod
    def _unquote(token: str) -> str:
        if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
            return token[1:-1]
        return token
