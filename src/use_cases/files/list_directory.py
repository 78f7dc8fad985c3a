"""
Use case for listing one page of the current directory.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from src.entities.Notification import Notification
from src.entities.Session import SessionState
from src.exceptions import FileRepositoryError
from src.ports.files.file_repository_port import FileRepositoryPort


@dataclass(frozen=True)
class DirectoryPage:
    """One page of a directory listing, ready to render."""

    directory: Optional[str]
    page: int
    total_pages: int
    entries: list[str] = field(default_factory=list)


class ListDirectoryUseCase:
    """Use case for listing the current directory page by page."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        files_per_page: int,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            files_per_page: Amount of entries shown per page
            logger: Logger instance to use for logging
        """
        if files_per_page <= 0:
            raise ValueError("files_per_page must be positive")
        self._file_repository = file_repository
        self._files_per_page = files_per_page
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: SessionState) -> DirectoryPage:
        """
        List the page of the current directory the session points to.

        A page past the end resets the session to the first page with a
        warning; listing problems are reported through the session notification.

        Args:
            session: Session to read and update

        Returns:
            DirectoryPage with the entries of the page
        """
        directory = session.current_directory
        if directory is None:
            return DirectoryPage(directory=None, page=session.current_page, total_pages=0)

        try:
            self._logger.info(f"Listing directory: {directory}")
            listing = self._file_repository.list_directory(directory)
        except FileRepositoryError as e:
            self._logger.error(f"Error listing {directory}: {e}")
            session.notify(
                Notification.error(
                    "There is a problem with the current directory. "
                    "Try to go to another directory."
                )
            )
            return DirectoryPage(directory=directory, page=session.current_page, total_pages=0)

        entries = [f"[D] {os.path.basename(path)}" for path in listing.directories]
        entries.extend(f"[F] {os.path.basename(path)}" for path in listing.files)
        total_pages = -(-len(entries) // self._files_per_page)

        first = (session.current_page - 1) * self._files_per_page
        if first > len(entries) - 1:
            if not entries:
                # keep the outcome of the last command visible
                if session.notification.is_empty:
                    session.notify(Notification.warning("The directory is empty."))
            else:
                session.set_page(
                    1,
                    Notification.warning(
                        f"There are no entries on page {session.current_page}. "
                        "The first page is shown."
                    ),
                )
                first = 0

        return DirectoryPage(
            directory=directory,
            page=session.current_page,
            total_pages=total_pages,
            entries=entries[first : first + self._files_per_page],
        )
