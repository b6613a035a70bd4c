"""Persistence layer errors."""


class StorageError(Exception):
    """Base persistence error."""

    pass


class DataLoadingError(StorageError):
    """Stored data exists but cannot be turned back into an address book."""

    pass
