"""
Console adapter for conflict decisions, rendered with rich.
"""

import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from typing_extensions import override

from src.entities.Operation import ConflictDecision
from src.ports.prompt.conflict_prompt_port import ConflictPromptPort

_LABELS = {
    ConflictDecision.REPLACE: "replace the file in the destination folder",
    ConflictDecision.RETRY: "try again",
    ConflictDecision.SKIP: "skip this item",
    ConflictDecision.ABORT: "abort the operation",
}


class ConsoleConflictPrompt(ConflictPromptPort):
    """Shows the conflict in a panel and asks for a numbered choice."""

    def __init__(
        self, console: Optional[Console] = None, logger: Optional[logging.Logger] = None
    ):
        self._console = console or Console()
        self._logger = logger or logging.getLogger(__name__)

    @override
    def ask(
        self, title: str, message: str, options: Sequence[ConflictDecision]
    ) -> ConflictDecision:
        if not options:
            raise ValueError("At least one option is required")

        choices = {str(number): option for number, option in enumerate(options, start=1)}
        lines = [message, ""]
        lines.extend(f"{key}. {_LABELS[option]}" for key, option in choices.items())
        self._console.print(
            Panel("\n".join(lines), title=title, border_style="yellow", expand=True)
        )
        answer = Prompt.ask(
            "Your choice", choices=list(choices), console=self._console
        )
        decision = choices[answer]
        self._logger.info(f"Conflict '{title}': user chose {decision.value}")

        # let the user know the program is not frozen while the operation goes on
        self._console.print("Please wait... the operation is in progress.")
        return decision
