"""
Envelope serialization for the customSend endpoint.

Every request body is one of:
  {"accessKey": ..., "name": <stream>, "value": <widget payload>}
  {"accessKey": ..., "name": <stream>, "command": <text>}

Encoding is finished in full before any network I/O so that a bad value is
always reported as EncodingError, never as a transport failure.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict

from leftronic.api.schemas import COMMAND_SCHEMA, point_schema, schema_errors
from leftronic.errors import EncodingError
from leftronic.models.points import TYPED_VALUES, widget_kind


@dataclass(frozen=True)
class PointEnvelope:
    access_key: str
    stream_name: str
    value: Any

    def to_document(self) -> Dict[str, Any]:
        value = self.value
        if isinstance(value, TYPED_VALUES):
            value = value.to_payload()
        return {
            "accessKey": self.access_key,
            "name": self.stream_name,
            "value": value,
        }

    def schema(self) -> Dict[str, Any]:
        return point_schema(widget_kind(self.value))


@dataclass(frozen=True)
class CommandEnvelope:
    access_key: str
    stream_name: str
    command: str

    def to_document(self) -> Dict[str, Any]:
        return {
            "accessKey": self.access_key,
            "name": self.stream_name,
            "command": self.command,
        }

    def schema(self) -> Dict[str, Any]:
        return COMMAND_SCHEMA


def encode(envelope, *, validate: bool = False) -> bytes:
    """Serialize an envelope to UTF-8 JSON bytes."""
    try:
        document = envelope.to_document()
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Could not build payload for '{envelope.stream_name}': {e}") from e

    if validate:
        problems = schema_errors(document, envelope.schema())
        if problems:
            raise EncodingError(
                f"Payload for '{envelope.stream_name}' failed validation: "
                + "; ".join(problems)
            )

    try:
        # allow_nan=False: NaN/Infinity are not valid JSON
        text = json.dumps(document, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Could not encode payload for '{envelope.stream_name}': {e}") from e

    return text.encode("utf-8")


def encode_point(access_key: str, stream_name: str, value: Any, *, validate: bool = False) -> bytes:
    return encode(PointEnvelope(access_key, stream_name, value), validate=validate)


def encode_command(access_key: str, stream_name: str, command: str, *, validate: bool = False) -> bytes:
    return encode(CommandEnvelope(access_key, stream_name, command), validate=validate)
