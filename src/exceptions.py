"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class ResourceBusyError(FileRepositoryError):
    """Exception raised when a file is locked by another process or vanished mid-operation."""

    pass


class AccessDeniedError(FileRepositoryError):
    """Exception raised when the operating system denies access to a path."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class SessionStoreError(BaseAppError):
    """Exception raised when the saved session cannot be read or written."""

    pass


class CommandError(BaseAppError):
    """Exception raised for invalid command definitions."""

    pass
