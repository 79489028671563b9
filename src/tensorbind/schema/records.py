"""JSON schema describing a single declaration record."""
from __future__ import annotations

_BOOL_LIKE = {"anyOf": [{"type": "boolean"}, {"enum": ["true", "false"]}]}

# Only ``name`` is required up front. Every other key, including the keys of
# argument and return entries, is required when the filter consults it, so
# records rejected early never need them.
RECORD_SCHEMA = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "deprecated": _BOOL_LIKE,
        "method_of": {"type": "array", "items": {"type": "string"}},
        "arguments": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "dynamic_type": {"type": "string"},
                    "is_nullable": _BOOL_LIKE,
                    "default": {"type": ["string", "number", "boolean", "null"]},
                },
            },
        },
        "returns": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"dynamic_type": {"type": "string"}},
            },
        },
    },
}
