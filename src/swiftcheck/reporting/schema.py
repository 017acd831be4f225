"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "swiftcheck report",
    "type": "object",
    "required": ["schema_version", "generated_at", "base_url", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "base_url": {"type": "string"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "errors", "passed_pct", "failed_pct", "failed_ids", "duration_s"],
            "properties": {
                "total": {"type": "integer"},
                "passed": {"type": "integer"},
                "failed": {"type": "integer"},
                "errors": {"type": "integer"},
                "passed_pct": {"type": "number"},
                "failed_pct": {"type": "number"},
                "failed_ids": {"type": "array", "items": {"type": "string"}},
                "duration_s": {"type": "number"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "mode", "realtime", "status", "duration_ms", "input", "expected"],
                "properties": {
                    "id": {"type": "string"},
                    "title": {"type": "string"},
                    "mode": {"enum": ["positive", "negative"]},
                    "realtime": {"type": "boolean"},
                    "status": {"enum": ["passed", "failed", "error"]},
                    "duration_ms": {"type": "number"},
                    "input": {"type": "string"},
                    "expected": {"type": "string"},
                    "actual": {"type": "string"},
                    "matched": {"type": "boolean"},
                    "update_count": {"type": "integer"},
                    "extraction_tier": {"type": "string"},
                    "screenshot": {"type": "string"},
                    "error": {"type": "string"},
                },
            },
        },
    },
}
