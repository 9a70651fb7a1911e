class CaldateError(Exception):
    """Base error."""

class InvalidDateError(CaldateError, ValueError):
    """Raised when a (month, day) pair cannot occur in any year."""

class IncompatibleZoneError(CaldateError, ValueError):
    """Raised when two date-bearing values carry different time zones."""
