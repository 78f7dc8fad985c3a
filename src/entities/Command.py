"""
Command domain entities: the declaration of a console command and the
arguments parsed from one typed line.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional


@dataclass(frozen=True)
class ArgumentSpec:
    """A required, double-quoted argument."""

    name: str
    allow_empty: bool = True


@dataclass(frozen=True)
class OptionSpec:
    """An optional '-tag value' pair; value_pattern is a regex for legal values."""

    tag: str
    value_pattern: str = r"\S+"


@dataclass(frozen=True)
class CommandDefinition:
    """
    Declaration of one console command.

    Attributes:
        name: Command word, unique within a command table
        arguments: Required quoted arguments, in order
        options: Optional named arguments, in the order they may appear
        description: Usage line shown to the user
        matcher: Custom predicate replacing the signature built from the declaration
    """

    name: str
    arguments: tuple[ArgumentSpec, ...] = ()
    options: tuple[OptionSpec, ...] = ()
    description: str = ""
    matcher: Optional[Callable[[str], bool]] = field(default=None, compare=False)

    @property
    def arity(self) -> int:
        return len(self.arguments)

    @property
    def option_tags(self) -> tuple[str, ...]:
        return tuple(option.tag for option in self.options)


@dataclass(frozen=True)
class ParsedArguments:
    """
    Values extracted from a command line.

    Required values come first, then one slot per optional argument. A slot is
    None when the value is absent, which is different from an empty string.
    """

    required: tuple[Optional[str], ...]
    optional: tuple[Optional[str], ...] = ()
    option_tags: tuple[str, ...] = ()

    def __post_init__(self):
        if len(self.optional) != len(self.option_tags):
            raise ValueError("Every optional value needs exactly one option tag")

    @property
    def values(self) -> tuple[Optional[str], ...]:
        return self.required + self.optional

    def option(self, tag: str) -> Optional[str]:
        """Get the value of an optional argument by its tag."""
        try:
            return self.optional[self.option_tags.index(tag)]
        except ValueError:
            raise KeyError(f"Unknown option: -{tag}")

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Optional[str]:
        return self.values[index]

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter(self.values)
