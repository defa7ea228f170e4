"""
Custom exceptions for the console emulator.
"""


class BaseConsoleError(Exception):
    """Base exception class for console errors."""

    pass


class InvalidArgumentsError(BaseConsoleError):
    """Exception raised when a built-in receives the wrong arguments."""

    def __init__(self, usage: str):
        super().__init__(usage)
        self.usage = usage


class InvalidPathError(BaseConsoleError):
    """Exception raised when a location cannot be canonicalized."""

    pass


class FileInspectionError(BaseConsoleError):
    """Exception raised for file existence and permission failures."""

    pass


class PathNotFoundError(FileInspectionError):
    """Exception raised when a path does not exist."""

    pass


class PathNotReadableError(FileInspectionError):
    """Exception raised when a path exists but cannot be read."""

    pass


class PathNotADirectoryError(FileInspectionError):
    """Exception raised when a path is expected to be a directory."""

    pass


class ExternalExecutionError(BaseConsoleError):
    """Exception raised when an external command cannot be spawned or read."""

    pass


class ConsoleInitializationError(BaseConsoleError):
    """Exception raised when a console cannot be created."""

    pass


class ConfigurationError(BaseConsoleError):
    """Exception raised for configuration errors."""

    pass
