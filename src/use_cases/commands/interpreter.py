"""
Use case executing one typed command line against the session.
"""

import logging
from typing import Mapping, Optional

from src.entities.Notification import Notification
from src.entities.Session import SessionState
from src.exceptions import BaseAppError, CommandError
from src.use_cases.commands.grammar import CommandGrammar
from src.use_cases.commands.handlers import Handler

UNRECOGNIZED_COMMAND = (
    "The command is not recognized. This happens if the command does not exist "
    "or if one or more arguments have a wrong format."
)


class CommandInterpreter:
    """Dispatches command lines to the handler registered for the matched command."""

    def __init__(
        self,
        grammar: CommandGrammar,
        handlers: Mapping[str, Handler],
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the interpreter.

        Args:
            grammar: Grammar matching lines to command definitions
            handlers: Handler for every command name of the grammar
            logger: Logger instance to use for logging

        Raises:
            CommandError: If a command of the grammar has no handler
        """
        missing = [
            definition.name
            for definition in grammar.definitions
            if definition.name not in handlers
        ]
        if missing:
            raise CommandError(f"No handler for commands: {', '.join(missing)}")

        self._grammar = grammar
        self._handlers = dict(handlers)
        self._logger = logger or logging.getLogger(__name__)

    def unrecognized_message(self) -> str:
        """Warning for a line no command matches, listing the usage of every command."""
        usage = [
            definition.description
            for definition in self._grammar.definitions
            if definition.description
        ]
        if not usage:
            return UNRECOGNIZED_COMMAND
        return UNRECOGNIZED_COMMAND + "\nAvailable commands:\n" + "\n".join(usage)

    def execute(self, session: SessionState, line: str) -> bool:
        """
        Execute a command line.

        Args:
            session: Session the command applies to
            line: Line typed by the user

        Returns:
            True if a handler was invoked, False if the line was not recognized
        """
        parsed = self._grammar.parse(line)
        if parsed is None:
            session.notify(Notification.warning(self.unrecognized_message()))
            return False

        definition, args = parsed
        self._logger.info(f"Executing '{definition.name}' with {args.values}")
        try:
            self._handlers[definition.name](session, args)
        except BaseAppError as e:
            self._logger.error(f"Command '{definition.name}' failed: {e}")
            session.notify(Notification.error(f"An error occurred: {e}"))
        except Exception as e:
            # the loop must survive anything a command runs into
            self._logger.exception(f"Unexpected error in command '{definition.name}'")
            session.notify(Notification.error(f"An unexpected error occurred: {e}"))
        return True
