"""Dispatcher: encode → send → decode for a single call.

Each call walks ``BUILT → ENCODED → SENT → DECODED → COMPLETED`` or stops in
``FAILED``.  There is no retry loop: the first error is raised to the caller
unchanged, so retry policy (e.g. honouring ``retry_after``) stays with them.
The only suspension point is the transport exchange.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Optional

from botapi.decoder import ResponseDecoder
from botapi.descriptors import MethodCall
from botapi.encoder import RequestEncoder
from botapi.exceptions import BotAPIError
from botapi.transport import Transport

logger = logging.getLogger("botapi.dispatcher")


class CallState(str, enum.Enum):
    BUILT = "built"
    ENCODED = "encoded"
    SENT = "sent"
    DECODED = "decoded"
    COMPLETED = "completed"
    FAILED = "failed"


class Dispatcher:
    """Runs :class:`MethodCall` objects through encoder, transport and decoder.

    Holds no per-call state, so one instance can serve any number of
    concurrent calls.
    """

    def __init__(
        self,
        transport: Transport,
        encoder: Optional[RequestEncoder] = None,
        decoder: Optional[ResponseDecoder] = None,
    ) -> None:
        self._transport = transport
        self._encoder = encoder or RequestEncoder()
        self._decoder = decoder or ResponseDecoder()

    @property
    def transport(self) -> Transport:
        return self._transport

    async def dispatch(self, call: MethodCall) -> Any:
        """Perform *call* and return its typed result.

        Raises:
            InvalidValueError, AttachmentIOError: While encoding.
            TransportError: From the transport.
            DecodeError, RemoteError: While decoding the response.
        """
        state = CallState.BUILT
        endpoint = call.method
        try:
            request = self._encoder.encode(call)
            state = CallState.ENCODED
            logger.debug("Call encoded", extra={"api_endpoint": endpoint, "state": state.value, "encoding": request.mode.value})

            response = await self._transport.post(endpoint, request.content_type, request.body)
            state = CallState.SENT
            logger.debug("Call sent", extra={"api_endpoint": endpoint, "state": state.value, "status_code": response.status_code})

            result = self._decoder.decode(response.body, call.descriptor.result_type, status_code=response.status_code)
            state = CallState.DECODED
        except BotAPIError as exc:
            logger.warning(
                "Call failed",
                extra={
                    "api_endpoint": endpoint,
                    "state": CallState.FAILED.value,
                    "failed_after": state.value,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            raise
        logger.debug("Call completed", extra={"api_endpoint": endpoint, "state": CallState.COMPLETED.value})
        return result
