"""JSON schema (Draft 7) for the packaging config after defaults are merged in."""

from __future__ import annotations

from typing import Any, Dict


PACKAGING_CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": False,
    "required": ["excluded_dirs", "archiver", "digest", "normalize_mtime", "logging"],
    "properties": {
        "excluded_dirs": {
            "type": "array",
            "items": {"type": "string", "minLength": 1, "pattern": "^[^/\\\\]+$"},
            "uniqueItems": True,
        },
        "archiver": {
            "type": "object",
            "additionalProperties": False,
            "required": ["strategy"],
            "properties": {
                "strategy": {"enum": ["7z", "zip", "powershell", "zipfile"]},
                "executable": {"type": ["string", "null"]},
            },
        },
        "digest": {
            "type": "object",
            "additionalProperties": False,
            "required": ["algorithm", "filename"],
            "properties": {
                "algorithm": {"enum": ["sha256", "sha1"]},
                "filename": {"type": "string", "minLength": 1, "pattern": "^[^/\\\\]+$"},
            },
        },
        "normalize_mtime": {"type": "boolean"},
        "logging": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "level": {"type": ["string", "integer"]},
                "file": {"type": ["string", "null"]},
            },
        },
    },
}
