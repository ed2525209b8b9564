"""
Application-layer exceptions.

These exceptions are used across the application and infrastructure
layers. The suggestion use case catches them and turns them into
user-facing result messages.
"""


class SuggestionError(Exception):
    """Base class for errors raised while building a suggestion."""

    pass


class RepositoryError(SuggestionError):
    """A data-store query failed.

    Raised by repository adapters instead of returning partial data, so
    the use case can decide whether the failure is soft (substitute a
    default) or fatal.
    """

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message
