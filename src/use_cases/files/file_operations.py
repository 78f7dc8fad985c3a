"""
Use case for copying and deleting files and directory trees with interactive
conflict handling.
"""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from src.entities.Operation import ConflictDecision, ItemOutcome, OperationOutcome
from src.exceptions import AccessDeniedError, ResourceBusyError
from src.ports.files.file_repository_port import DirectoryListing, FileRepositoryPort
from src.ports.prompt.conflict_prompt_port import ConflictPromptPort

RETRY_SKIP_ABORT = (ConflictDecision.RETRY, ConflictDecision.SKIP, ConflictDecision.ABORT)
REPLACE_SKIP_ABORT = (
    ConflictDecision.REPLACE,
    ConflictDecision.SKIP,
    ConflictDecision.ABORT,
)
SKIP_ABORT = (ConflictDecision.SKIP, ConflictDecision.ABORT)


def copy_file_name(
    directory: str, file_name: str, exists: Callable[[str], bool]
) -> str:
    """
    Get a free name for a copy of a file in a directory.

    Args:
        directory: Directory the copy goes to
        file_name: Name of the copied file, e.g. "report.txt"
        exists: Predicate telling whether a path is taken

    Returns:
        The first free name of the form "report - copy (n).txt"
    """
    stem, extension = os.path.splitext(file_name)
    number = 1
    while True:
        candidate = f"{stem} - copy ({number}){extension}"
        if not exists(os.path.join(directory, candidate)):
            return candidate
        number += 1


@dataclass
class _DeleteFrame:
    path: str
    parent: Optional["_DeleteFrame"]
    expanded: bool = False
    skipped: bool = False


class FileOperationEngine:
    """
    Copies and deletes directory trees, asking the user what to do whenever an
    item conflicts.

    Traversal is depth first over an explicit stack, so an abort at any depth
    simply returns; no state outlives a call.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        prompt: ConflictPromptPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the engine.

        Args:
            file_repository: Repository for file operations
            prompt: Source of the user's conflict decisions
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._prompt = prompt
        self._logger = logger or logging.getLogger(__name__)

    # ------------------------- tree operations -------------------------
    def copy_tree(
        self, source: str, destination: str, replace_by_default: bool = False
    ) -> OperationOutcome:
        """
        Copy the content of a directory into another directory.

        Args:
            source: Directory whose files and subdirectories are copied
            destination: Existing directory receiving the copies
            replace_by_default: Replace existing files without asking

        Returns:
            COMPLETED if every item was copied or skipped, ABORTED otherwise

        Raises:
            FileRepositoryError: On an I/O failure that is not a conflict
        """
        self._logger.info(f"Copying tree {source} to {destination}")
        stack: list[tuple[str, str]] = [(source, destination)]

        while stack:
            from_dir, to_dir = stack.pop()
            if not self._file_repository.exists(to_dir):
                self._file_repository.make_directory(to_dir)

            listing = self._list_or_ask(from_dir)
            if listing is ConflictDecision.ABORT:
                return self._aborted("copy", source)
            if listing is None:
                continue

            for file_path in listing.files:
                target = os.path.join(to_dir, os.path.basename(file_path))
                outcome = self._copy_one(file_path, target, replace_by_default)
                if outcome is ItemOutcome.ABORTED:
                    return self._aborted("copy", source)

            for dir_path in reversed(listing.directories):
                stack.append((dir_path, os.path.join(to_dir, os.path.basename(dir_path))))

        self._logger.info(f"Copied tree {source} to {destination}")
        return OperationOutcome.COMPLETED

    def delete_tree(self, path: str) -> OperationOutcome:
        """
        Delete everything inside a directory.

        The directory itself is kept; the caller removes it once the result is
        COMPLETED. Subdirectories holding skipped items are kept as well.

        Args:
            path: Directory to empty

        Returns:
            COMPLETED if every item was deleted or skipped, ABORTED otherwise

        Raises:
            FileRepositoryError: On an I/O failure that is not a conflict
        """
        self._logger.info(f"Deleting tree {path}")
        stack = [_DeleteFrame(path, None)]

        while stack:
            frame = stack[-1]
            if not frame.expanded:
                frame.expanded = True
                listing = self._list_or_ask(frame.path)
                if listing is ConflictDecision.ABORT:
                    return self._aborted("delete", path)
                if listing is None:
                    frame.skipped = True
                    continue

                for file_path in listing.files:
                    outcome = self._delete_one(
                        file_path, retry_on=(ResourceBusyError, AccessDeniedError)
                    )
                    if outcome is ItemOutcome.ABORTED:
                        return self._aborted("delete", path)
                    if outcome is ItemOutcome.SKIPPED:
                        frame.skipped = True

                for dir_path in reversed(listing.directories):
                    stack.append(_DeleteFrame(dir_path, frame))
                continue

            stack.pop()
            if frame.parent is None:
                continue
            if frame.skipped:
                # a directory with skipped items can not be empty
                frame.parent.skipped = True
                continue

            outcome = self.remove_directory(frame.path)
            if outcome is ItemOutcome.ABORTED:
                return self._aborted("delete", path)
            if outcome is ItemOutcome.SKIPPED:
                frame.parent.skipped = True

        self._logger.info(f"Deleted content of {path}")
        return OperationOutcome.COMPLETED

    # ------------------------- single items -------------------------
    def copy_file(self, source: str, target: str) -> ItemOutcome:
        """
        Copy one file to its full target path, replacing an existing target.

        Returns:
            DONE, SKIPPED or ABORTED according to the user's decisions on locks
            or on a folder standing at the target
        """
        return self._copy_one(source, target, replace=True)

    def delete_file(self, path: str) -> ItemOutcome:
        """
        Delete one file, asking to retry while it is locked.

        Raises:
            AccessDeniedError: If the file may not be deleted
        """
        return self._delete_one(path, retry_on=(ResourceBusyError,))

    def remove_directory(self, path: str) -> ItemOutcome:
        """Remove one empty directory, asking to retry while it is in use."""
        name = os.path.basename(path)
        return self._with_retry(
            functools.partial(self._file_repository.remove_directory, path),
            retry_on=(ResourceBusyError, AccessDeniedError),
            title="Directory is in use",
            message=f"The directory {name} could not be removed.\n"
            "Close the programs using it and try again.",
        )

    # ------------------------- internal helpers -------------------------
    def _copy_one(self, source: str, target: str, replace: bool) -> ItemOutcome:
        name = os.path.basename(source)
        repository = self._file_repository
        if repository.is_directory(target) and not repository.is_link(target):
            decision = self._ask(
                "Folder with the same name",
                f"The destination folder already contains a folder named {name}, "
                "so the file can not be copied",
                SKIP_ABORT,
            )
            if decision is ConflictDecision.ABORT:
                return ItemOutcome.ABORTED
            self._logger.info(f"Skipped {source}, {target} is a directory")
            return ItemOutcome.SKIPPED

        if not replace and self._file_repository.exists(target):
            decision = self._ask(
                "Replace or skip files",
                f"The destination folder already contains the file {name}",
                REPLACE_SKIP_ABORT,
            )
            if decision is ConflictDecision.SKIP:
                self._logger.info(f"Skipped existing file {target}")
                return ItemOutcome.SKIPPED
            if decision is ConflictDecision.ABORT:
                return ItemOutcome.ABORTED

        return self._with_retry(
            functools.partial(self._file_repository.copy_file, source, target),
            retry_on=(ResourceBusyError,),
            title="File is in use",
            message=f"The operation can not be completed because the file {name} "
            "is open in another program.\nClose the program and try again.",
        )

    def _delete_one(
        self, path: str, retry_on: tuple[type[Exception], ...]
    ) -> ItemOutcome:
        name = os.path.basename(path)
        return self._with_retry(
            functools.partial(self._file_repository.delete_file, path),
            retry_on=retry_on,
            title="File can not be deleted",
            message=f"The file {name} could not be deleted.\n"
            "It may be open in another program or protected.",
        )

    def _with_retry(
        self,
        action: Callable[[], None],
        retry_on: tuple[type[Exception], ...],
        title: str,
        message: str,
    ) -> ItemOutcome:
        """Run an action until it succeeds or the user skips or aborts."""
        while True:
            try:
                action()
                return ItemOutcome.DONE
            except retry_on as e:
                self._logger.warning(str(e))
                decision = self._ask(title, f"{message}\n\n{e}", RETRY_SKIP_ABORT)
                if decision is ConflictDecision.SKIP:
                    return ItemOutcome.SKIPPED
                if decision is ConflictDecision.ABORT:
                    return ItemOutcome.ABORTED

    def _list_or_ask(self, directory: str) -> DirectoryListing | ConflictDecision | None:
        """
        List a directory; on access problems ask whether to skip it.

        Returns:
            The listing, None when the user skips the directory, or
            ConflictDecision.ABORT when the user aborts
        """
        try:
            return self._file_repository.list_directory(directory)
        except (AccessDeniedError, ResourceBusyError) as e:
            self._logger.warning(str(e))
            decision = self._ask(
                "Access denied",
                f"The content of the directory {directory} can not be read.\n\n{e}",
                SKIP_ABORT,
            )
            if decision is ConflictDecision.ABORT:
                return ConflictDecision.ABORT
            return None

    def _ask(
        self, title: str, message: str, options: Sequence[ConflictDecision]
    ) -> ConflictDecision:
        decision = self._prompt.ask(title, message, options)
        if decision not in options:
            raise ValueError(
                f"Decision {decision} is not one of the offered options"
            )
        return decision

    def _aborted(self, operation: str, path: str) -> OperationOutcome:
        self._logger.info(f"The {operation} of {path} was aborted by the user")
        return OperationOutcome.ABORTED
