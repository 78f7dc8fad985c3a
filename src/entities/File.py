"""
File domain entity.
"""

import os
import stat
from datetime import datetime
from typing import Optional

from src.exceptions import FileRepositoryError

# Windows FILE_ATTRIBUTE_* flags, only present in st_file_attributes on Windows
_WINDOWS_ATTRIBUTES = (
    (getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2), "hidden"),
    (getattr(stat, "FILE_ATTRIBUTE_SYSTEM", 0x4), "system"),
    (getattr(stat, "FILE_ATTRIBUTE_ARCHIVE", 0x20), "ready for archiving"),
    (getattr(stat, "FILE_ATTRIBUTE_TEMPORARY", 0x100), "temporary"),
    (getattr(stat, "FILE_ATTRIBUTE_COMPRESSED", 0x800), "compressed"),
    (getattr(stat, "FILE_ATTRIBUTE_ENCRYPTED", 0x4000), "encrypted"),
)
_NOT_CONTENT_INDEXED = getattr(stat, "FILE_ATTRIBUTE_NOT_CONTENT_INDEXED", 0x2000)


class File:
    """
    File system entry entity (file or directory) that encapsulates information.
    """

    def __init__(self, path: str):
        """
        Initialize the File entity.

        Args:
            path: Absolute path to the file or directory

        Raises:
            FileRepositoryError: If path is invalid or file doesn't exist
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        if not os.path.exists(path):
            raise FileRepositoryError(f"File does not exist: {path}")

        if not (os.path.isfile(path) or os.path.isdir(path)):
            raise FileRepositoryError(
                f"Path is neither a regular file nor a directory: {path}"
            )

        self.path = os.path.abspath(path)
        self.is_dir = os.path.isdir(self.path)
        self.name = self._find_file_name()
        self.extension = self._find_extension()
        self.location = os.path.dirname(self.path)

        try:
            st = os.stat(self.path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot read file metadata: {e}")

        # a directory size needs a traversal, the repository computes it on demand
        self.size: Optional[int] = None if self.is_dir else st.st_size
        self.created = datetime.fromtimestamp(getattr(st, "st_birthtime", st.st_ctime))
        self.modified = datetime.fromtimestamp(st.st_mtime)
        self.accessed = datetime.fromtimestamp(st.st_atime)
        self.attributes = self._find_attributes(st)

    def _find_file_name(self) -> str:
        """Extract the name without the extension."""
        base = os.path.basename(self.path)
        if self.is_dir:
            return base
        name, _ = os.path.splitext(base)
        return name

    def _find_extension(self) -> str:
        """Extract the file extension, dot included."""
        if self.is_dir:
            return ""
        _, ext = os.path.splitext(self.path)
        return ext

    def _find_attributes(self, st: os.stat_result) -> list[str]:
        """Describe the attributes of the entry in plain words."""
        attributes: list[str] = []
        if not st.st_mode & stat.S_IWUSR:
            attributes.append("read-only")
        if self.is_dir:
            attributes.append("directory")
        if os.path.islink(self.path):
            attributes.append("symbolic link")

        win_attributes = getattr(st, "st_file_attributes", None)
        if win_attributes is None:
            if os.path.basename(self.path).startswith("."):
                attributes.append("hidden")
            return attributes

        for flag, label in _WINDOWS_ATTRIBUTES:
            if win_attributes & flag:
                attributes.append(label)
        if not win_attributes & _NOT_CONTENT_INDEXED:
            attributes.append("content indexed")
        return attributes

    @property
    def full_name(self) -> str:
        return self.name + self.extension

    def __str__(self) -> str:
        """String representation of the File."""
        kind = "directory" if self.is_dir else "file"
        return f"File(name='{self.full_name}', size={self.size}, type='{kind}')"

    def __repr__(self) -> str:
        """Detailed string representation of the File."""
        return f"File(path='{self.path}')"
