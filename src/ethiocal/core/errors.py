from __future__ import annotations

class EthiocalError(Exception):
    """Base error."""

class InvalidEraError(EthiocalError, ValueError):
    """Raised when an era offset is not permitted for the requested operation."""

    def __init__(self, era, message: str | None = None):
        self.era = era
        super().__init__(message or f"Unknown era: {era} must be either Amete Alem or Amete Mihret.")

class UnsetDateError(EthiocalError, LookupError):
    """Raised when a session conversion needs a date that was never set."""

class MalformedDateError(EthiocalError, ValueError):
    """Raised when a date string is not three '/'-separated integers."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f"Invalid date supplied: {text!r} (expected day/month/year)")

class UnknownCalendarError(EthiocalError, KeyError):
    """Raised when a calendar name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class UnknownAttributeError(EthiocalError, KeyError):
    """Raised when a requested display attribute is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
