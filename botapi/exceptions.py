"""Exception hierarchy for the botapi Telegram client.

Every failure a call can produce maps to exactly one class below so callers
can tell a local construction bug from a network fault or a remote refusal.
"""

from typing import Any, Dict, Optional


class BotAPIError(Exception):
    """Base class for every error raised by :mod:`botapi`."""


class InvalidValueError(BotAPIError):
    """A parameter value was malformed before anything was sent.

    Attributes:
        field: Name of the offending parameter (or nested path).
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for {field!r}: {reason}")


class AttachmentIOError(BotAPIError, OSError):
    """A local attachment could not be read while building a multipart body."""

    def __init__(self, path: str, error: Optional[BaseException] = None) -> None:
        self.path = path
        detail = f": {error}" if error is not None else ""
        super().__init__(f"Cannot read attachment {path!r}{detail}")


class TransportError(BotAPIError):
    """The HTTP exchange itself failed (connection, TLS, timeout, ...)."""


class DecodeError(BotAPIError):
    """The response body is not a well-formed envelope, or ``result`` has the wrong shape.

    Attributes:
        status_code: HTTP status that accompanied the body, when known.
        body: Raw response body.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: bytes = b"") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class RemoteError(BotAPIError):
    """Telegram answered with ``ok: false``.

    Attributes:
        error_code: Error code from the envelope.
        description: Human-readable description from the envelope.
        retry_after: Seconds to wait before retrying (flood control), if given.
        migrate_to_chat_id: New supergroup id when a group was migrated, if given.
        status_code: HTTP status that accompanied the envelope, when known.
        response_body: The decoded envelope as a dict.
    """

    RATE_LIMIT_CODE: int = 429

    def __init__(
        self,
        error_code: int,
        description: str,
        retry_after: Optional[int] = None,
        migrate_to_chat_id: Optional[int] = None,
        status_code: Optional[int] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.error_code = error_code
        self.description = description
        self.retry_after = retry_after
        self.migrate_to_chat_id = migrate_to_chat_id
        self.status_code = status_code
        self.response_body = response_body or {}
        super().__init__(f"API error {error_code}: {description}")

    @property
    def is_rate_limited(self) -> bool:
        return self.error_code == self.RATE_LIMIT_CODE or self.retry_after is not None
