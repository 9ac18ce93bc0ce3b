"""Exceptions raised by the data layer."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a definition or snapshot file is missing or not valid JSON."""


class DataValidationError(DataError):
    """Raised when definition content fails structural validation."""


class DataReferenceError(DataError):
    """Raised when a definition points at another definition that does not exist."""


class SessionStoreError(DataError):
    """Raised when a session snapshot cannot be read or written."""
