"""
Use case for describing a file, a directory or a drive.
"""

import logging
from typing import Optional

from src.entities.File import File
from src.exceptions import FileRepositoryError
from src.ports.files.file_repository_port import DriveUsage, FileRepositoryPort
from src.utils.formatting import format_size, format_time
from src.utils.paths import PathStyle, host_style, is_root

_LABEL_WIDTH = 14


def _line(label: str, value: str) -> str:
    return f"{label + ':':<{_LABEL_WIDTH}}{value}"


class FileInfoUseCase:
    """Use case building the text shown by the 'info' command."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        style: Optional[PathStyle] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            style: Path style used to recognise drive roots
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._style = style or host_style()
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Describe the entry at a path.

        Args:
            path: Canonical path of an existing entry

        Returns:
            Multi-line description of the entry

        Raises:
            FileRepositoryError: If the entry can not be inspected
        """
        try:
            self._logger.info(f"Inspecting {path}")
            if is_root(path, self._style):
                return self._describe_drive(self._file_repository.drive_usage(path))

            entry = self._file_repository.get_file(path)
            if entry.is_dir:
                size = self._file_repository.directory_size(path)
                return self._describe_directory(entry, size)
            return self._describe_file(entry)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error inspecting {path}: {e}")
            raise FileRepositoryError(f"Failed to get information about {path}: {str(e)}")

    def _describe_file(self, entry: File) -> str:
        lines = [
            _line("Name", entry.name),
            _line("Type", f"File ({entry.extension or 'no extension'})"),
            _line("Location", entry.location),
            _line("Size", format_size(entry.size)),
            _line("Created", format_time(entry.created)),
            _line("Modified", format_time(entry.modified)),
            _line("Opened", format_time(entry.accessed)),
        ]
        return self._with_attributes(lines, entry.attributes)

    def _describe_directory(self, entry: File, size: Optional[int]) -> str:
        lines = [
            _line("Name", entry.name),
            _line("Type", "Folder"),
            _line("Location", entry.location),
            _line("Size", format_size(size)),
            _line("Created", format_time(entry.created)),
        ]
        return self._with_attributes(lines, entry.attributes)

    def _describe_drive(self, usage: DriveUsage) -> str:
        lines = [
            _line("Name", usage.root),
            _line("Used", format_size(usage.used)),
            _line("Free", format_size(usage.free)),
            _line("Capacity", format_size(usage.total)),
        ]
        return "\n".join(lines)

    @staticmethod
    def _with_attributes(lines: list[str], attributes: list[str]) -> str:
        lines.append("")
        lines.append("Attributes:")
        if attributes:
            lines.extend(f"{'':<{_LABEL_WIDTH}}{attribute}" for attribute in attributes)
        else:
            lines.append(f"{'':<{_LABEL_WIDTH}}none")
        return "\n".join(lines)
