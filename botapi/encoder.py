"""Request encoder: turns a :class:`~botapi.descriptors.MethodCall` into an HTTP body.

JSON is used unless some parameter must be uploaded.  In multipart mode:

* a top-level file parameter is sent as a file part under its own name;
* files inside :class:`~botapi.values.InputMedia` entries are sent as parts
  named ``file-<index>`` (``file-<index>-thumb`` for thumbnails) and the
  entry's JSON carries ``attach://<part name>`` in their place;
* every other parameter becomes a text field.  Structured values are sent
  as JSON text, strings verbatim.

Field names are handed out by an :class:`AttachmentRegistry` that lives for
one ``encode`` call only, so concurrent encodes never see each other's names.
"""

from __future__ import annotations

import dataclasses
import enum
import json
import logging
import mimetypes
from typing import Any, Dict, List, Set, Tuple

from urllib3.filepost import encode_multipart_formdata

from botapi.descriptors import MethodCall, ParamSpec
from botapi.exceptions import InvalidValueError
from botapi.values import InputFile, InputMedia, needs_multipart, to_wire

logger = logging.getLogger("botapi.encoder")

JSON_CONTENT_TYPE = "application/json"
_DEFAULT_PART_TYPE = "application/octet-stream"


class EncodingMode(str, enum.Enum):
    JSON = "json"
    MULTIPART = "multipart"


@dataclasses.dataclass(frozen=True)
class EncodedRequest:
    """A transport-ready request body plus the pieces it was built from.

    Attributes:
        method: Bot API method name (the endpoint path fragment).
        mode: JSON or multipart.
        content_type: Value for the ``Content-Type`` header.
        body: Encoded body bytes.
        payload: Wire values of all non-file parameters.
        form_fields: Text form of each non-file parameter (multipart only).
        attachments: ``part name -> (filename, content)`` (multipart only).
    """

    method: str
    mode: EncodingMode
    content_type: str
    body: bytes
    payload: Dict[str, Any]
    form_fields: Dict[str, str] = dataclasses.field(default_factory=dict)
    attachments: Dict[str, Tuple[str, bytes]] = dataclasses.field(default_factory=dict)


class AttachmentRegistry:
    """Collects file parts for one multipart request and keeps their names unique."""

    def __init__(self) -> None:
        self._taken: Set[str] = set()
        self._parts: Dict[str, Tuple[str, bytes, str]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._taken

    def reserve(self, name: str) -> None:
        """Mark a text field name as taken so no file part reuses it."""
        self._taken.add(name)

    def add(self, preferred_name: str, file: InputFile, field: str) -> str:
        """Read *file* and register it; returns the part name actually used."""
        file.validate(field)
        name = preferred_name
        suffix = 1
        while name in self._taken:
            name = f"{preferred_name}-{suffix}"
            suffix += 1
        content = file.read()  # type: ignore[attr-defined]
        filename = file.filename  # type: ignore[attr-defined]
        mime_type = mimetypes.guess_type(filename)[0] or _DEFAULT_PART_TYPE
        self._taken.add(name)
        self._parts[name] = (filename, content, mime_type)
        return name

    def parts(self) -> List[Tuple[str, Tuple[str, bytes, str]]]:
        return list(self._parts.items())

    def as_dict(self) -> Dict[str, Tuple[str, bytes]]:
        return {name: (filename, content) for name, (filename, content, _) in self.parts()}


def form_text(value: Any) -> str:
    """Text form of a wire value inside a multipart field."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def media_part_name(index: int, field: str) -> str:
    if field == "media":
        return f"file-{index}"
    return f"file-{index}-{field}"


class RequestEncoder:
    """Chooses the encoding mode for a call and builds its body."""

    def encode(self, call: MethodCall) -> EncodedRequest:
        params = self._collect(call)
        if any(needs_multipart(value) for _, value in params):
            return self._encode_multipart(call, params)
        return self._encode_json(call, params)

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _collect(call: MethodCall) -> List[Tuple[ParamSpec, Any]]:
        """Populated parameters in descriptor order; missing required ones are an error."""
        collected: List[Tuple[ParamSpec, Any]] = []
        for spec in call.descriptor.params:
            value = call.params.get(spec.name)
            if value is None:
                if spec.required:
                    raise InvalidValueError(spec.name, f"required by {call.method}")
                continue
            collected.append((spec, value))
        return collected

    def _encode_json(self, call: MethodCall, params: List[Tuple[ParamSpec, Any]]) -> EncodedRequest:
        payload = {spec.name: to_wire(value, spec.name) for spec, value in params}
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        logger.debug("Encoded JSON request", extra={"api_endpoint": call.method, "params": list(payload)})
        return EncodedRequest(
            method=call.method,
            mode=EncodingMode.JSON,
            content_type=JSON_CONTENT_TYPE,
            body=body,
            payload=payload,
        )

    def _encode_multipart(self, call: MethodCall, params: List[Tuple[ParamSpec, Any]]) -> EncodedRequest:
        registry = AttachmentRegistry()
        uploads = [(spec, value) for spec, value in params if isinstance(value, InputFile) and value.needs_upload]
        others = [(spec, value) for spec, value in params if not (isinstance(value, InputFile) and value.needs_upload)]
        for spec, _ in others:
            registry.reserve(spec.name)
        # A top-level upload is sent under the parameter's own name.
        for spec, file in uploads:
            registry.add(spec.name, file, spec.name)

        payload: Dict[str, Any] = {}
        for spec, value in others:
            payload[spec.name] = self._to_wire_with_attachments(value, spec.name, registry)

        form_fields = {name: form_text(value) for name, value in payload.items()}
        fields: List[Tuple[str, Any]] = list(form_fields.items())
        fields.extend(registry.parts())
        body, content_type = encode_multipart_formdata(fields)
        attachments = registry.as_dict()
        logger.debug(
            "Encoded multipart request",
            extra={"api_endpoint": call.method, "params": list(payload), "attachments": list(attachments)},
        )
        return EncodedRequest(
            method=call.method,
            mode=EncodingMode.MULTIPART,
            content_type=content_type,
            body=body,
            payload=payload,
            form_fields=form_fields,
            attachments=attachments,
        )

    def _to_wire_with_attachments(self, value: Any, field: str, registry: AttachmentRegistry) -> Any:
        if isinstance(value, InputMedia):
            return self._media_to_wire(value, 0, field, registry)
        if isinstance(value, (list, tuple)) and any(isinstance(item, InputMedia) for item in value):
            return [
                self._media_to_wire(item, i, f"{field}[{i}]", registry)
                if isinstance(item, InputMedia)
                else to_wire(item, f"{field}[{i}]")
                for i, item in enumerate(value)
            ]
        return to_wire(value, field)

    @staticmethod
    def _media_to_wire(media: InputMedia, index: int, field: str, registry: AttachmentRegistry) -> Dict[str, Any]:
        placeholders: Dict[str, str] = {}
        for file_field, file in media.input_files():
            if file.needs_upload:
                placeholders[file_field] = registry.add(
                    media_part_name(index, file_field), file, f"{field}.{file_field}"
                )
        return media.to_wire(field, placeholders)
