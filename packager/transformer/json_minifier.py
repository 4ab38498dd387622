from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NoReturn, Optional

from packager.errors import InvalidJsonError

MINIFIED_SEPARATORS = (",", ":")


@dataclass(frozen=True)
class MinifyResult:
    source_bytes: int
    output_bytes: int


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_float(literal: str) -> Optional[float]:
    # numbers beyond double range (1e400) serialize as null, as JSON.stringify does
    value = float(literal)
    return value if math.isfinite(value) else None


def parse_strict(text: str) -> Any:
    """Parse JSON text, rejecting the NaN/Infinity extensions the json module accepts by default."""
    return json.loads(text, parse_float=_parse_float, parse_constant=_reject_constant)


def serialize_minified(value: Any) -> str:
    return json.dumps(
        value,
        separators=MINIFIED_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    )


def minify_text(text: str) -> str:
    return serialize_minified(parse_strict(text))


def minify_json_file(src: Path, dst: Path) -> MinifyResult:
    """Write the minified form of ``src`` to ``dst``.

    Raises InvalidJsonError when ``src`` is not valid UTF-8 JSON; in that case ``dst``
    is left untouched. Other OSErrors propagate unchanged.
    """
    raw = src.read_bytes()
    try:
        value = parse_strict(raw.decode("utf-8"))
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise InvalidJsonError(str(src), str(exc)) from exc

    payload = serialize_minified(value).encode("utf-8")
    dst.parent.mkdir(parents=True, exist_ok=True)
    dst.write_bytes(payload)
    return MinifyResult(source_bytes=len(raw), output_bytes=len(payload))
