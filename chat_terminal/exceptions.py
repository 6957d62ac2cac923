"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileSystemError(BaseAppError):
    """Exception raised for virtual filesystem errors."""

    pass


class NotFoundError(FileSystemError):
    """Raised when no node exists at the resolved path."""

    pass


class NotDirectoryError(FileSystemError):
    """Raised when a directory was expected but a file was found."""

    pass


class NotFileError(FileSystemError):
    """Raised when a file was expected but a directory was found."""

    pass


class AlreadyExistsError(FileSystemError):
    """Raised when creating a node whose name is already taken."""

    pass


class DirectoryNotEmptyError(FileSystemError):
    """Raised when removing a non-empty directory without the recursive flag."""

    pass


class InvalidNameError(FileSystemError):
    """Raised when the final path segment is empty."""

    pass


class ForbiddenError(FileSystemError):
    """Raised when attempting to remove the root directory."""

    pass


class StorageError(BaseAppError):
    """Exception raised for persisted storage errors."""

    pass


class HistoryImportError(BaseAppError):
    """Exception raised when the conversation history source fails."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
