"""
Exceptions raised while resolving or creating Parity directories.
"""


class HomeDirectoryError(RuntimeError):
    """Raised when the OS cannot report a home directory for the current user."""


class DirectoryCreationError(OSError):
    """Raised when one of the local data directories could not be created."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
