"""
Notification domain entity shown to the user after each command.
"""

from dataclasses import dataclass
from enum import Enum


class NotificationKind(Enum):
    """Kind of a notification; decides how it is marked when rendered."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """
    Message describing the outcome of the last command.
    """

    text: str = ""
    kind: NotificationKind = NotificationKind.INFO

    @classmethod
    def empty(cls) -> "Notification":
        return cls()

    @classmethod
    def info(cls, text: str) -> "Notification":
        return cls(text, NotificationKind.INFO)

    @classmethod
    def warning(cls, text: str) -> "Notification":
        return cls(text, NotificationKind.WARNING)

    @classmethod
    def error(cls, text: str) -> "Notification":
        return cls(text, NotificationKind.ERROR)

    @property
    def is_empty(self) -> bool:
        return len(self.text) == 0

    def render(self) -> str:
        """
        Get the text wrapped with the marker of its kind.

        Returns:
            "! text !" for warnings, "!!! text !!!" for errors, the bare text otherwise
        """
        if self.kind is NotificationKind.WARNING:
            return f"! {self.text} !"
        if self.kind is NotificationKind.ERROR:
            return f"!!! {self.text} !!!"
        return self.text

    def __str__(self) -> str:
        return self.render()
