"""
Outcome and decision types of file operations.
"""

from enum import Enum


class ConflictDecision(Enum):
    """Answer of the user to a conflict met during a file operation."""

    REPLACE = "replace"
    SKIP = "skip"
    ABORT = "abort"
    RETRY = "retry"


class OperationOutcome(Enum):
    """
    Result of a tree operation.

    ABORTED is not an error: the traversal stopped at the user's request and
    whatever was already copied or deleted stays that way.
    """

    COMPLETED = "completed"
    ABORTED = "aborted"


class ItemOutcome(Enum):
    """Result of an operation on a single file or directory."""

    DONE = "done"
    SKIPPED = "skipped"
    ABORTED = "aborted"
