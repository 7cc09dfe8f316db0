"""HTTP transport for the dispatcher.

The core only needs "POST these bytes to this method and give me the status
and body back".  :class:`RequestsTransport` does that with :mod:`requests`,
offloading the blocking call via :func:`asyncio.to_thread` so the event loop
is never blocked.  Connection pooling, TLS and timeouts stay here.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Optional, Protocol

import requests

from botapi.exceptions import TransportError

logger = logging.getLogger("botapi.transport")

DEFAULT_API_URL = "https://api.telegram.org/bot"
DEFAULT_FILE_URL = "https://api.telegram.org/file/bot"


@dataclasses.dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """What the dispatcher needs from an HTTP client."""

    async def post(self, method: str, content_type: str, body: bytes) -> TransportResponse:
        """POST *body* to the Bot API *method*; raise :class:`TransportError` on network failure."""
        ...

    async def download(self, file_path: str) -> bytes:
        """Fetch a file from the file CDN; raise :class:`TransportError` on failure."""
        ...

    def close(self) -> None:
        ...


async def make_request(session: requests.Session, method: str, url: str, **kwargs: object) -> requests.Response:
    """Run a :mod:`requests` session call inside a thread to keep the event loop free.

    *method* is the HTTP verb (``"get"``, ``"post"``, …).
    """
    func = getattr(session, method.lower())
    return await asyncio.to_thread(func, url, **kwargs)


class RequestsTransport:
    """:class:`Transport` backed by a :class:`requests.Session`.

    URLs are built as ``<api_url><token>/<method>``, which also works with a
    self-hosted Bot API server (e.g. ``http://127.0.0.1:8081/bot``).
    """

    _DEFAULT_TIMEOUT: int = 10

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        file_url: str = DEFAULT_FILE_URL,
        timeout: float = _DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._token = token
        self._api_url = api_url
        self._file_url = file_url
        self._timeout = timeout
        self._session = session or requests.Session()

    def method_url(self, method: str) -> str:
        return f"{self._api_url}{self._token}/{method.lstrip('/')}"

    def file_url(self, file_path: str) -> str:
        return f"{self._file_url}{self._token}/{file_path.lstrip('/')}"

    async def post(self, method: str, content_type: str, body: bytes) -> TransportResponse:
        try:
            response = await make_request(
                self._session,
                "post",
                self.method_url(method),
                data=body,
                headers={"Content-Type": content_type},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            # The URL embeds the token; log the method name only.
            logger.error("Bot API request error", extra={"api_endpoint": method, "error": type(exc).__name__})
            raise TransportError(f"{method}: {type(exc).__name__}") from exc
        logger.debug("Bot API response", extra={"api_endpoint": method, "status_code": response.status_code})
        return TransportResponse(response.status_code, response.content)

    async def download(self, file_path: str) -> bytes:
        try:
            response = await make_request(self._session, "get", self.file_url(file_path), timeout=self._timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("File download HTTP error", extra={"file_path": file_path, "status_code": status})
            raise TransportError(f"download {file_path}: HTTP {status}") from exc
        except requests.RequestException as exc:
            logger.error("File download error", extra={"file_path": file_path, "error": type(exc).__name__})
            raise TransportError(f"download {file_path}: {type(exc).__name__}") from exc
        return response.content

    def close(self) -> None:
        self._session.close()
