from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from jsonschema import Draft7Validator

from packager.validator import error_codes


@dataclass(frozen=True)
class SchemaIssue:
    path: str
    message: str
    code: str = error_codes.CONFIG_SCHEMA_VIOLATION

    def format(self) -> str:
        return f"{self.path}: {self.message}"


def _json_path(parts) -> str:
    path = "$"
    for part in parts:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def validate_schema(payload: Dict[str, Any], schema: Dict[str, Any]) -> List[SchemaIssue]:
    """Collect every violation (not just the first) so a bad config is fixed in one pass."""
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.absolute_path])
    return [SchemaIssue(path=_json_path(e.absolute_path), message=e.message) for e in errors]
