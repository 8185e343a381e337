"""Filters: a mapping of keys to sets of values, with JSON encoding."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from dockhand import versions


class BadFormatError(ValueError):
    """A filter was not written as ``key=value``."""

    def __init__(self) -> None:
        super().__init__("bad format of filter (expected name=value)")


class InvalidFilterError(ValueError):
    """A filter key is not among the accepted keys."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid filter '{name}'")
        self.name = name


@dataclass(frozen=True)
class KeyValuePair:
    """A key and a value used to seed an :class:`Args`."""

    key: str
    value: str


def arg(key: str, value: str) -> KeyValuePair:
    """Build a :class:`KeyValuePair`."""
    return KeyValuePair(key, value)


def _go_style_json(value: object, *, sort_keys: bool = True) -> str:
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=sort_keys)
    return (
        text.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


class Args:
    """A mapping of keys to sets of values."""

    def __init__(self, *args: KeyValuePair) -> None:
        self._fields: dict[str, dict[str, bool]] = {}
        for pair in args:
            self.add(pair.key, pair.value)

    def __repr__(self) -> str:
        return f"Args({self._fields!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Args):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, field: object) -> bool:
        return field in self._fields

    def get(self, key: str) -> list[str]:
        """Return the values stored under ``key``."""
        return list(self._fields.get(key, {}))

    def add(self, key: str, value: str) -> None:
        """Add ``value`` to the set under ``key``."""
        self._fields.setdefault(key, {})[value] = True

    def delete(self, key: str, value: str) -> None:
        """Remove ``value`` from the set under ``key``; drop the key once empty."""
        values = self._fields.get(key)
        if values is None:
            return
        values.pop(value, None)
        if not values:
            del self._fields[key]

    def match_kv_list(self, key: str, sources: Mapping[str, str] | None) -> bool:
        """True if every ``k`` or ``k=v`` under ``key`` is found in ``sources``.

        Also true when there are no values under ``key``.
        """
        field_values = self._fields.get(key)
        if not field_values:
            return True
        if not sources:
            return False
        for value in field_values:
            name, sep, expected = value.partition("=")
            if name not in sources:
                return False
            if sep and sources[name] != expected:
                return False
        return True

    def match(self, field: str, source: str) -> bool:
        """True if any value under ``field`` equals or, as a regex, matches ``source``."""
        if self.exact_match(field, source):
            return True
        for pattern in self._fields.get(field, {}):
            try:
                if re.search(pattern, source):
                    return True
            except re.error:
                continue
        return False

    def exact_match(self, key: str, source: str) -> bool:
        """True if ``source`` is one of the values, or there are none."""
        field_values = self._fields.get(key)
        if not field_values:
            return True
        return field_values.get(source, False)

    def unique_exact_match(self, key: str, source: str) -> bool:
        """True if the only value under ``key`` is ``source``, or there are none."""
        field_values = self._fields.get(key)
        if not field_values:
            return True
        if len(field_values) != 1:
            return False
        return field_values.get(source, False)

    def fuzzy_match(self, key: str, source: str) -> bool:
        """True if ``source`` equals a value or starts with one."""
        if self.exact_match(key, source):
            return True
        return any(source.startswith(prefix) for prefix in self._fields.get(key, {}))

    def include(self, field: str) -> bool:
        """Whether ``field`` is a key of the mapping."""
        return field in self._fields

    def contains(self, field: str) -> bool:
        """Whether ``field`` is a key of the mapping."""
        return field in self._fields

    def validate(self, accepted: Mapping[str, bool] | Iterable[str]) -> None:
        """Raise :class:`InvalidFilterError` for the first key not accepted."""
        if isinstance(accepted, Mapping):
            allowed = {name for name, ok in accepted.items() if ok}
        else:
            allowed = set(accepted)
        for name in self._fields:
            if name not in allowed:
                raise InvalidFilterError(name)

    def walk_values(self, field: str, op: Callable[[str], object]) -> None:
        """Call ``op`` on each value under ``field``; an exception stops the walk."""
        for value in list(self._fields.get(field, {})):
            op(value)


def parse_flag(arg: str, prev: Args) -> Args:
    """Parse ``key=value`` and add it to ``prev``, which is returned."""
    if not arg:
        return prev
    if "=" not in arg:
        raise BadFormatError()
    name, _, value = arg.partition("=")
    prev.add(name.strip().lower(), value.strip())
    return prev


def to_json(args: Args) -> str:
    """Encode ``args`` as JSON; empty filters give an empty string."""
    if len(args) == 0:
        return ""
    return _go_style_json(args._fields)


def to_param(args: Args) -> str:
    """Encode ``args`` as JSON."""
    return to_json(args)


def to_param_with_version(version: str, args: Args) -> str:
    """Encode ``args``, using the list format for API versions below 1.22."""
    if len(args) == 0:
        return ""
    if version and versions.less_than(version, "1.22"):
        legacy = {
            key: sorted(value for value, on in values.items() if on)
            for key, values in args._fields.items()
        }
        return _go_style_json(legacy)
    return to_json(args)


class _Mismatch(Exception):
    pass


def _strict_fields(obj: object) -> dict[str, dict[str, bool]]:
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise _Mismatch("filters must be a JSON object")
    fields: dict[str, dict[str, bool]] = {}
    for key, values in obj.items():
        if values is None:
            fields[key] = {}
            continue
        if not isinstance(values, dict):
            raise _Mismatch(f"values of {key!r} must be a JSON object")
        inner: dict[str, bool] = {}
        for value, flag in values.items():
            if flag is not None and not isinstance(flag, bool):
                raise _Mismatch(f"value {value!r} of {key!r} must map to a boolean")
            inner[value] = bool(flag)
        fields[key] = inner
    return fields


def _legacy_fields(obj: object) -> dict[str, dict[str, bool]]:
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise _Mismatch("filters must be a JSON object")
    fields: dict[str, dict[str, bool]] = {}
    for key, values in obj.items():
        if values is None:
            fields[key] = {}
            continue
        if not isinstance(values, list):
            raise _Mismatch(f"values of {key!r} must be a JSON array")
        if not all(v is None or isinstance(v, str) for v in values):
            raise _Mismatch(f"values of {key!r} must be strings")
        fields[key] = {("" if v is None else v): True for v in values}
    return fields


def from_json(p: str) -> Args:
    """Decode filters from JSON, accepting the set or the older list format."""
    args = Args()
    if p == "":
        return args
    obj = json.loads(p)
    try:
        args._fields = _strict_fields(obj)
        return args
    except _Mismatch as strict_error:
        try:
            args._fields = _legacy_fields(obj)
        except _Mismatch:
            raise ValueError(str(strict_error)) from None
    return args


def from_param(p: str) -> Args:
    """Decode filters from JSON."""
    return from_json(p)