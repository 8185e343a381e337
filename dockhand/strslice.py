"""JSON values that may be either a single string or a list of strings."""

from __future__ import annotations

import json


def _go_style_json(value: object) -> str:
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return (
        text.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def decode_str_slice(
    raw: str | bytes | bytearray, default: list[str] | None = None
) -> list[str] | None:
    """Decode a JSON string or array of strings into a list.

    Empty input leaves the value as it was, so ``default`` is returned.
    A JSON ``null`` decodes to ``None``. Raises ``ValueError`` for anything else.
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if len(raw) == 0:
        return default

    value = json.loads(raw)
    if value is None:
        return None
    if isinstance(value, list):
        if not all(item is None or isinstance(item, str) for item in value):
            raise ValueError(f"cannot decode {raw!r} as a list of strings")
        return ["" if item is None else item for item in value]
    if isinstance(value, str):
        return [value]
    raise ValueError(f"cannot decode {raw!r} as a string or a list of strings")


def encode_str_slice(values: list[str] | None) -> str:
    """Encode a list of strings as JSON; ``None`` becomes ``null``."""
    if values is None:
        return "null"
    return _go_style_json(list(values))