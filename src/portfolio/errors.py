"""Exceptions shared by the service layer and the API."""


class StorageError(Exception):
    """Raised when the database rejects or fails an operation."""
