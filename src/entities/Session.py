"""
Session state domain entity.
"""

from typing import Optional

from src.entities.Notification import Notification


class SessionState:
    """
    State of one interactive session: where the user is, which page is shown
    and what the last command reported.

    The state is owned by the main loop and passed explicitly to every command
    handler. Each mutator updates its fields together, so a failed command only
    ever changes the notification.
    """

    def __init__(
        self,
        current_directory: Optional[str] = None,
        current_page: int = 1,
        notification: Optional[Notification] = None,
    ):
        """
        Initialize the session state.

        Args:
            current_directory: Canonical current directory, None if unknown
            current_page: Page of the listing to show (positive)
            notification: Notification to show, empty by default

        Raises:
            ValueError: If the page is not positive
        """
        if current_page < 1:
            raise ValueError(f"Page number must be positive, got {current_page}")

        self._current_directory = current_directory
        self._current_page = current_page
        self._notification = notification or Notification.empty()
        self._exit_requested = False

    @property
    def current_directory(self) -> Optional[str]:
        return self._current_directory

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def notification(self) -> Notification:
        return self._notification

    @property
    def exit_requested(self) -> bool:
        return self._exit_requested

    def navigate(
        self, directory: str, page: int, notification: Optional[Notification] = None
    ) -> None:
        """Move to another directory and page in one step."""
        if page < 1:
            raise ValueError(f"Page number must be positive, got {page}")
        self._current_directory = directory
        self._current_page = page
        self._notification = notification or Notification.empty()

    def set_page(self, page: int, notification: Optional[Notification] = None) -> None:
        if page < 1:
            raise ValueError(f"Page number must be positive, got {page}")
        self._current_page = page
        self._notification = notification or Notification.empty()

    def notify(self, notification: Notification) -> None:
        self._notification = notification

    def request_exit(self) -> None:
        self._exit_requested = True

    def __repr__(self) -> str:
        return (
            f"SessionState(current_directory={self._current_directory!r}, "
            f"current_page={self._current_page})"
        )
