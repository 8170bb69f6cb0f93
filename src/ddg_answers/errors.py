"""Exceptions raised by the Instant Answer client.

Every failure reaches the caller as one of these; nothing is retried or
logged inside the library.
"""


class DdgError(Exception):
    """Base class for all client errors."""
    pass


class TransportError(DdgError):
    """The HTTP request failed (connection, timeout, or non-2xx status)."""
    pass


class UrlConstructionError(DdgError):
    """The assembled request URL is not a valid absolute http(s) URL."""
    pass


class JsonSyntaxError(DdgError):
    """The response body is not well-formed JSON."""
    pass


class SchemaDecodeError(DdgError):
    """Valid JSON that does not match the Instant Answer schema.

    ``path`` points at the offending value, e.g.
    ``RelatedTopics[2].Topics[0].Icon.Height``.
    """

    def __init__(self, message: str, path: str = "$"):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
