"""
Session store port interface: persistence of the last visited directory and
page between runs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SavedSession:
    """Raw saved state; the page is kept as text and validated by the caller."""

    directory: Optional[str]
    page: Optional[str]


class SessionStorePort(ABC):
    """Port interface for saving and restoring session state."""

    @abstractmethod
    def load(self) -> Optional[SavedSession]:
        """
        Load the state saved by the previous run.

        Returns:
            SavedSession, or None if nothing was saved yet

        Raises:
            SessionStoreError: If the saved state can not be read
        """
        pass

    @abstractmethod
    def save(self, directory: Optional[str], page: int) -> None:
        """
        Save the current directory and page.

        Raises:
            SessionStoreError: If the state can not be written
        """
        pass
