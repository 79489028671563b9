"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

REPORT_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "tensorbind report",
    "type": "object",
    "required": ["schema_version", "generated_at", "schema", "summary", "artifacts", "functions"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "schema": {"type": "string"},
        "summary": {
            "type": "object",
            "required": ["records", "accepted", "rejected", "up_to_date"],
            "properties": {
                "records": {"type": "integer", "minimum": 0},
                "accepted": {"type": "integer", "minimum": 0},
                "rejected": {
                    "type": "object",
                    "additionalProperties": {"type": "integer", "minimum": 1},
                },
                "up_to_date": {"type": "boolean"},
            },
        },
        "artifacts": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["path", "stale"],
                "properties": {
                    "path": {"type": "string"},
                    "stale": {"type": "boolean"},
                },
            },
        },
        "functions": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["exported_name", "name", "kind", "arguments"],
                "properties": {
                    "exported_name": {"type": "string"},
                    "name": {"type": "string"},
                    "kind": {"enum": ["function", "method"]},
                    "arguments": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name", "kind"],
                            "properties": {
                                "name": {"type": "string"},
                                "kind": {"type": "string"},
                                "default": {"type": ["string", "null"]},
                            },
                        },
                    },
                },
            },
        },
    },
}
