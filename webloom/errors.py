"""
errors.py
---------
Error types raised by the service and storage layers.
"""


class WebloomError(Exception):
    """Base class for all application errors."""


class ValidationError(WebloomError):
    """Client sent an incomplete or malformed submission (HTTP 400).

    ``fields`` names the offending fields, when known.
    """

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.fields = fields or []


class StorageError(WebloomError):
    """Connectivity or query failure in the store. The cause is chained."""


class SchemaInitError(StorageError):
    """The submissions table could not be verified or created at startup."""


class PersistenceError(WebloomError):
    """Storage failure as presented to the HTTP layer (HTTP 500)."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details
