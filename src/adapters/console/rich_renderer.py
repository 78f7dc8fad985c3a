"""
Console rendering of the listing and notification windows with rich.
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from src.entities.Notification import Notification, NotificationKind
from src.use_cases.files.list_directory import DirectoryPage

_STYLES = {
    NotificationKind.INFO: "",
    NotificationKind.WARNING: "yellow",
    NotificationKind.ERROR: "bold red",
}


class RichConsoleRenderer:
    """Draws the file window and the information window, and reads commands."""

    def __init__(
        self,
        files_per_page: int,
        border_symbol: str = "=",
        console: Optional[Console] = None,
    ):
        self._files_per_page = files_per_page
        self._border_symbol = border_symbol
        self._console = console or Console(highlight=False)

    @property
    def console(self) -> Console:
        return self._console

    def _border(self) -> None:
        self._console.print()
        self._console.print(self._border_symbol * self._console.width)

    def render(self, page: DirectoryPage, notification: Notification) -> None:
        self._console.clear()

        self._border()
        self._console.print(Text(f"> {page.directory or '???'}"))
        # pad to a full page so the windows keep their height
        for index in range(self._files_per_page):
            entry = page.entries[index] if index < len(page.entries) else ""
            self._console.print(Text(f"    {entry}"))
        if page.total_pages:
            self._console.print(Text(f"page {page.page} of {page.total_pages}", style="dim"))
        self._border()

        self._console.print(Text(notification.render(), style=_STYLES[notification.kind]))
        self._border()

    def read_command(self) -> str:
        """Read one command line; raises EOFError when input is closed."""
        return self._console.input("> ")
