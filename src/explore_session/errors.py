"""Exceptions raised by the Explore session package."""


class ExploreError(Exception):
    """Base class for all package errors."""


class UrlStateError(ExploreError, ValueError):
    """A non-empty URL parameter could not be decoded into a UrlState.

    Attributes:
        param_value: The offending (percent-decoded) parameter text.
    """

    def __init__(self, message: str, param_value: str | None = None) -> None:
        super().__init__(message)
        self.param_value = param_value


class StoreError(ExploreError):
    """A value could not be written to the key-value store."""
