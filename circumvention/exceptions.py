"""Exceptions raised by the circumvention monitor."""


class CircumventionError(Exception):
    """Base class for all circumvention monitor errors."""


class InvalidPattern(CircumventionError, ValueError):
    """Pattern source is empty or cannot be compiled."""


class InvalidReason(CircumventionError, ValueError):
    """Negative outcome reason is not one of the known reasons."""


class InvalidInput(CircumventionError, TypeError):
    """A value of the wrong shape was passed to a matching function."""


class PageUnavailable(CircumventionError):
    """A monitored page could not be loaded."""

    def __init__(self, page_url: str, reason: str = "unavailable"):
        super().__init__(f"{page_url}: {reason}")
        self.page_url = page_url
        self.reason = reason
