"""
Local file system adapter implementation for file operations.
"""

import errno
import logging
import os
import shutil
import string
from typing import Optional

from typing_extensions import override

from src.entities.File import File
from src.exceptions import AccessDeniedError, FileRepositoryError, ResourceBusyError
from src.ports.files.file_repository_port import (
    DirectoryListing,
    DriveUsage,
    FileRepositoryPort,
)

# ERROR_SHARING_VIOLATION and ERROR_LOCK_VIOLATION
_BUSY_WINERRORS = {32, 33}
_BUSY_ERRNOS = {errno.EBUSY, errno.ETXTBSY, errno.EAGAIN}


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _translate_error(self, error: OSError, action: str, path: str) -> FileRepositoryError:
        """
        Map an OS error to the repository error the callers know how to handle.

        Args:
            error: Error raised by the operating system
            action: What was being done, for the message
            path: Path the action was applied to

        Returns:
            ResourceBusyError for locked or vanished entries, AccessDeniedError for
            permission problems, FileRepositoryError otherwise
        """
        message = f"Failed to {action} {path}: {error.strerror or error}"
        if (
            getattr(error, "winerror", None) in _BUSY_WINERRORS
            or error.errno in _BUSY_ERRNOS
            or isinstance(error, FileNotFoundError)
        ):
            return ResourceBusyError(message)
        if isinstance(error, PermissionError):
            return AccessDeniedError(message)
        return FileRepositoryError(message)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_link(self, path: str) -> bool:
        return os.path.islink(path)

    @override
    def list_directory(self, directory: str) -> DirectoryListing:
        try:
            with os.scandir(directory) as entries:
                children = sorted(entries, key=lambda entry: entry.name.lower())
                files: list[str] = []
                directories: list[str] = []
                for entry in children:
                    # links to directories are listed as files so that trees are never followed
                    if entry.is_dir(follow_symlinks=False):
                        directories.append(entry.path)
                    else:
                        files.append(entry.path)
        except NotADirectoryError:
            raise FileRepositoryError(f"Path is not a directory: {directory}")
        except OSError as e:
            raise self._translate_error(e, "list", directory)

        return DirectoryListing(path=directory, files=files, directories=directories)

    @override
    def copy_file(self, source: str, destination: str) -> None:
        if os.path.isdir(destination) and not os.path.islink(destination):
            raise FileRepositoryError(
                f"Failed to copy {source}: {destination} is a directory"
            )
        try:
            # links are copied as links, a link to a directory is never descended into
            if os.path.lexists(destination) and (
                os.path.islink(source) or os.path.islink(destination)
            ):
                os.remove(destination)
            shutil.copy2(source, destination, follow_symlinks=False)
        except OSError as e:
            raise self._translate_error(e, "copy", source)
        self._logger.info(f"Copied {source} to {destination}")

    @override
    def delete_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise self._translate_error(e, "delete", path)
        self._logger.info(f"Deleted file {path}")

    @override
    def make_directory(self, path: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise self._translate_error(e, "create directory", path)

    @override
    def remove_directory(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            raise self._translate_error(e, "remove directory", path)
        self._logger.info(f"Removed directory {path}")

    @override
    def get_file(self, path: str) -> File:
        return File(path)

    @override
    def directory_size(self, directory: str) -> Optional[int]:
        self._validate_directory(directory)
        total = 0
        try:
            for root, _, files in os.walk(directory, onerror=self._raise_walk_error):
                for name in files:
                    file_path = os.path.join(root, name)
                    if not os.path.islink(file_path):
                        total += os.path.getsize(file_path)
        except OSError as e:
            # an unreadable subtree makes the size unknown, not the command failed
            self._logger.warning(f"Could not compute size of {directory}: {e}")
            return None
        return total

    def _raise_walk_error(self, error: OSError) -> None:
        raise error

    @override
    def drive_usage(self, root: str) -> DriveUsage:
        try:
            usage = shutil.disk_usage(root)
        except OSError as e:
            raise self._translate_error(e, "read drive usage of", root)
        return DriveUsage(root=root, total=usage.total, used=usage.used, free=usage.free)

    @override
    def available_roots(self) -> list[str]:
        if os.name != "nt":
            return [os.sep] if os.path.isdir(os.sep) else []
        roots = [f"{letter}:\\" for letter in string.ascii_uppercase]
        return [root for root in roots if os.path.isdir(root)]
