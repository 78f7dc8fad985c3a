"""
Conflict prompt port interface: asks the user how to handle a conflict met
during a file operation.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from src.entities.Operation import ConflictDecision


class ConflictPromptPort(ABC):
    """Port interface for interactive conflict decisions."""

    @abstractmethod
    def ask(
        self, title: str, message: str, options: Sequence[ConflictDecision]
    ) -> ConflictDecision:
        """
        Present a conflict and wait for the user's decision.

        The call blocks until the user answers; the file operation is suspended
        meanwhile.

        Args:
            title: Short title of the conflict
            message: Description of the conflicting item
            options: Decisions offered to the user, in display order

        Returns:
            One of the offered decisions
        """
        pass
