"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from src.entities.File import File


@dataclass(frozen=True)
class DirectoryListing:
    """Immediate children of a directory, as full paths sorted by name."""

    path: str
    files: list[str] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.files and not self.directories


@dataclass(frozen=True)
class DriveUsage:
    """Space figures of a drive or mount root, in bytes."""

    root: str
    total: int
    used: int
    free: int


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_link(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_directory(self, directory: str) -> DirectoryListing:
        """
        List the files and subdirectories of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            DirectoryListing of the directory

        Raises:
            AccessDeniedError: If the directory can not be read
            ResourceBusyError: If the directory disappeared
            FileRepositoryError: If listing fails for another reason
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Copy a file, replacing the destination if it exists.

        A symbolic link is copied as a link, never as the entry it points to.

        Args:
            source: Path of the file to copy
            destination: Full path of the copy

        Raises:
            ResourceBusyError: If a file is locked by another process
            FileRepositoryError: If the copy fails for another reason or the
                destination is a directory
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a file.

        Raises:
            ResourceBusyError: If the file is locked by another process
            AccessDeniedError: If deletion is not permitted
            FileRepositoryError: If deletion fails for another reason
        """
        pass

    @abstractmethod
    def make_directory(self, path: str) -> None:
        pass

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """
        Remove an empty directory.

        Raises:
            ResourceBusyError: If the directory is in use
            AccessDeniedError: If removal is not permitted
            FileRepositoryError: If removal fails for another reason
        """
        pass

    @abstractmethod
    def get_file(self, path: str) -> File:
        pass

    @abstractmethod
    def directory_size(self, directory: str) -> Optional[int]:
        """
        Total size of all files below a directory.

        Returns:
            Size in bytes, or None if some part of the tree could not be read
        """
        pass

    @abstractmethod
    def drive_usage(self, root: str) -> DriveUsage:
        pass

    @abstractmethod
    def available_roots(self) -> list[str]:
        """
        Roots of the drives (or the filesystem root) that can be listed.

        Returns:
            Root paths, most preferred first
        """
        pass
