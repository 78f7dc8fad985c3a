"""
Session store keeping the last state in a two-line text file.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from src.exceptions import SessionStoreError
from src.ports.state.session_store_port import SavedSession, SessionStorePort


class TextFileSessionStore(SessionStorePort):
    """
    Stores the session as two lines of UTF-8 text: the directory, then the page.
    """

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        """
        Initialize the store.

        Args:
            path: Path of the state file
            logger: Logger instance to use for logging
        """
        self._path = path
        self._logger = logger or logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return self._path

    @override
    def load(self) -> Optional[SavedSession]:
        if not os.path.exists(self._path):
            self._logger.info(f"No saved session at {self._path}")
            return None
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise SessionStoreError(f"Failed to read session from {self._path}: {e}")

        directory = lines[0].strip() if len(lines) > 0 else ""
        page = lines[1].strip() if len(lines) > 1 else ""
        return SavedSession(directory=directory or None, page=page or None)

    @override
    def save(self, directory: Optional[str], page: int) -> None:
        try:
            parent = os.path.dirname(self._path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(f"{directory or ''}\n{page}\n")
        except OSError as e:
            raise SessionStoreError(f"Failed to save session to {self._path}: {e}")
        self._logger.info(f"Saved session: {directory} (page {page})")
