"""Response decoder: raw body → typed result, :class:`RemoteError` or :class:`DecodeError`.

The envelope, not the HTTP status, decides success.  Telegram answers
errors with 4xx/5xx statuses *and* an ``ok: false`` envelope; both are
reported as :class:`RemoteError`.  Anything that is not a well-formed
envelope is a :class:`DecodeError`.
"""

from __future__ import annotations

import functools
import json
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, TypeAdapter, ValidationError

from botapi.exceptions import DecodeError, RemoteError
from botapi.models import ResponseParameters

logger = logging.getLogger("botapi.decoder")

_FALLBACK_ERROR_CODE = 400
_FALLBACK_DESCRIPTION = "Unknown error"


class ResponseEnvelope(BaseModel):
    """Top-level wrapper of every Bot API response."""

    model_config = ConfigDict(extra="allow")

    ok: StrictBool
    result: Any = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional[ResponseParameters] = None

    @property
    def has_result(self) -> bool:
        return "result" in self.model_fields_set


@functools.lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class ResponseDecoder:
    """Parses response bodies for the dispatcher."""

    def parse_envelope(self, body: bytes, status_code: Optional[int] = None) -> ResponseEnvelope:
        try:
            raw = json.loads(body)
        except (ValueError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Response body is not JSON: {exc}", status_code, body) from exc
        if not isinstance(raw, dict):
            raise DecodeError("Response body is not a JSON object", status_code, body)
        try:
            return ResponseEnvelope.model_validate(raw)
        except ValidationError as exc:
            raise DecodeError(f"Malformed response envelope: {exc}", status_code, body) from exc

    def decode(self, body: bytes, result_type: Any, status_code: Optional[int] = None) -> Any:
        """Return the ``result`` of *body* validated as *result_type*.

        Raises:
            DecodeError: Malformed envelope, missing ``result``, or wrong result shape.
            RemoteError: The envelope reports ``ok: false``.
        """
        envelope = self.parse_envelope(body, status_code)
        if not envelope.ok:
            raise self._remote_error(envelope, status_code)
        if not envelope.has_result:
            raise DecodeError("Successful response carries no result", status_code, body)
        try:
            return _adapter(result_type).validate_python(envelope.result, strict=True)
        except ValidationError as exc:
            logger.debug("Result shape mismatch", extra={"expected": repr(result_type), "error": str(exc)})
            raise DecodeError(f"Result does not match {result_type!r}: {exc}", status_code, body) from exc

    @staticmethod
    def _remote_error(envelope: ResponseEnvelope, status_code: Optional[int]) -> RemoteError:
        params = envelope.parameters or ResponseParameters()
        error_code = envelope.error_code
        if error_code is None:
            error_code = status_code if status_code is not None and status_code >= 400 else _FALLBACK_ERROR_CODE
        return RemoteError(
            error_code=error_code,
            description=envelope.description or _FALLBACK_DESCRIPTION,
            retry_after=params.retry_after,
            migrate_to_chat_id=params.migrate_to_chat_id,
            status_code=status_code,
            response_body=envelope.model_dump(exclude_none=True),
        )
