"""
Draft-7 JSON schemas for outgoing envelopes.

Used only when payload validation is switched on in the client configuration.
The shapes mirror what the customSend endpoint accepts for each widget kind;
raw (untyped) points are checked at the envelope level only.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

_ENTRY_NAME = {"type": "string"}

VALUE_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "number": {"type": "integer"},
    "graph_point": {
        "type": "object",
        "properties": {
            "number": {"type": "number"},
            "timestamp": {"type": "integer"},
        },
        "required": ["number"],
        "additionalProperties": False,
    },
    "geo_point": {
        "type": "object",
        "properties": {
            "lat": {"type": "number"},
            "long": {"type": "number"},
        },
        "required": ["lat", "long"],
        "additionalProperties": False,
    },
    "text": {
        "type": "object",
        "properties": {
            "title": {"type": "string"},
            "message": {"type": "string"},
            "imgUrl": {"type": "string"},
        },
        "required": ["title", "message"],
        "additionalProperties": False,
    },
    "leaderboard": {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "name": _ENTRY_NAME,
                "value": {"type": "integer"},
            },
            "required": ["name", "value"],
            "additionalProperties": False,
        },
    },
    "list": {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {"name": _ENTRY_NAME},
            "required": ["name"],
            "additionalProperties": False,
        },
    },
}


def _envelope_schema(extra_key: str, extra_schema: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": {
            "accessKey": {"type": "string", "minLength": 1},
            "name": {"type": "string", "minLength": 1},
            extra_key: extra_schema,
        },
        "required": ["accessKey", "name", extra_key],
        "additionalProperties": False,
    }


COMMAND_SCHEMA = _envelope_schema("command", {"type": "string"})


def point_schema(kind: Optional[str]) -> Dict[str, Any]:
    return _envelope_schema("value", VALUE_SCHEMAS.get(kind, {}))


def schema_errors(document: Dict[str, Any], schema: Dict[str, Any]) -> List[str]:
    """Return one "path: message" line per violation, ordered by path."""
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(map(str, e.path)))
    messages = []
    for err in errors:
        loc = "/".join(str(p) for p in err.path) or "<root>"
        messages.append(f"{loc}: {err.message}")
    return messages
