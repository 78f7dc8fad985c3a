"""
Use case restoring the session at startup and saving it at shutdown.
"""

import logging
from typing import Optional

from src.entities.Notification import Notification
from src.entities.Session import SessionState
from src.exceptions import FileRepositoryError, SessionStoreError
from src.ports.files.file_repository_port import FileRepositoryPort
from src.ports.state.session_store_port import SavedSession, SessionStorePort


class SessionLifecycle:
    """Creates the session from the saved state and persists it again."""

    def __init__(
        self,
        store: SessionStorePort,
        file_repository: FileRepositoryPort,
        default_page: int = 1,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            store: Store holding the state of the previous run
            file_repository: Repository used to check the restored directory
            default_page: Page used when no valid page was saved
            logger: Logger instance to use for logging
        """
        self._store = store
        self._file_repository = file_repository
        self._default_page = default_page
        self._logger = logger or logging.getLogger(__name__)

    def restore(self) -> SessionState:
        """
        Restore the directory and page of the previous run.

        Falls back to the root of an available drive when nothing usable was
        saved.

        Returns:
            The session to start with
        """
        saved = self._load()
        if saved is None or not saved.directory:
            return self._from_any_root()

        try:
            self._file_repository.list_directory(saved.directory)
        except FileRepositoryError as e:
            self._logger.warning(f"Saved directory {saved.directory} is not usable: {e}")
            return self._from_any_root()

        self._logger.info(f"Restored session in {saved.directory}")
        return SessionState(saved.directory, self._parse_page(saved.page))

    def save(self, session: SessionState) -> None:
        """Save the session; failures are logged and never raised."""
        try:
            self._store.save(session.current_directory, session.current_page)
        except SessionStoreError as e:
            self._logger.error(f"Could not save the session: {e}")

    def _load(self) -> Optional[SavedSession]:
        try:
            return self._store.load()
        except SessionStoreError as e:
            self._logger.error(f"Could not restore the session: {e}")
            return None

    def _parse_page(self, raw: Optional[str]) -> int:
        try:
            page = int(raw) if raw is not None else self._default_page
        except ValueError:
            self._logger.warning(f"Ignoring invalid saved page '{raw}'")
            return self._default_page
        return page if page > 0 else self._default_page

    def _from_any_root(self) -> SessionState:
        try:
            roots = self._file_repository.available_roots()
        except Exception as e:
            self._logger.error(f"Could not enumerate drives: {e}")
            roots = []

        if not roots:
            return SessionState(
                None,
                self._default_page,
                Notification.error(
                    "Could not load folders and files: there is no available drive."
                ),
            )

        return SessionState(
            roots[0],
            self._default_page,
            Notification.warning(
                "The previous session can not be restored. The root folder of a drive is shown."
            ),
        )
