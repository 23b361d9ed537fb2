"""
Hanvitt exception hierarchy.

Every library-level error derives from HanvittError so consumers can catch
them in one place while still telling the failure modes apart.
"""


class HanvittError(Exception):
    """Base exception class for all hanvitt errors."""


class ConfigurationError(HanvittError):
    """Raised for configuration errors (missing keys, invalid values)."""


class ValidationError(HanvittError):
    """Raised when user-submitted data fails validation.

    Attributes:
        field: Dot-joined path of the offending field, or "" when unknown.
    """

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {"message": self.message, "field": self.field}


class StorageError(HanvittError):
    """Raised when persisted data cannot be read or written."""


class NotificationError(HanvittError):
    """Raised when an outbound notification cannot be delivered."""
