"""Custom exceptions for tuimenu."""


class TuimenuError(Exception):
    """Base exception for all tuimenu errors.

    All tuimenu-specific exceptions inherit from this class, allowing
    callers to catch all tuimenu errors with a single except clause.
    """

    pass


class TerminalIOError(TuimenuError):
    """Reading a key or flushing a frame to the terminal failed."""

    def __init__(self, message: str, operation: str = None):
        super().__init__(message)
        self.operation = operation


class EmptyMenuError(TuimenuError, ValueError):
    """A menu was built without any items."""

    pass


class InvalidSelectionError(TuimenuError, ValueError):
    """Selected index does not point at a menu item."""

    pass


class ConfigurationError(TuimenuError):
    """Menu configuration is present but malformed."""

    pass
