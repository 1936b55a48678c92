"""Error types raised by the contact book."""


class ContactBookError(Exception):
    """Base class for contact book failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RemoteError(ContactBookError):
    """The remote store reported a failure for a query."""


class ValidationError(ContactBookError):
    """A contact draft failed a field rule; nothing was sent to the store."""
