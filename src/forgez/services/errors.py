"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when a persisted snapshot cannot be decoded."""


class ProgressionError(ValueError):
    """Raised when a mutation is rejected; state is left untouched."""


class QuestLockedError(ProgressionError):
    """Raised when completing a quest whose predecessor is not completed."""


class InvalidXPAmountError(ProgressionError):
    """Raised when an XP award is not a positive integer."""
