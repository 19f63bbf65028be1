"""Helpers for reading untyped TOML tables.

Values that are present but of the wrong type raise ``TypeError`` so the
config loader can report them; missing values come back as None.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripping whitespace.

    Returns None if missing or empty after stripping. Numbers are accepted
    and converted, so ``rollout = 50`` reads the same as ``rollout = "50"``.
    """
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError(f"'{key}' must be a string")
    if isinstance(value, int | float):
        value = str(value)
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    s = value.strip()
    return s or None


def get_float(table: Mapping[str, object], key: str) -> float | None:
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"'{key}' must be a number")
    return float(value)


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    value = table.get(key)
    if value is None:
        return None
    out = as_str_dict(value)
    if out is None:
        raise TypeError(f"'{key}' must be a table")
    return out


def get_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list of strings")
    items = cast(list[object], value)
    if not all(isinstance(item, str) for item in items):
        raise TypeError(f"'{key}' must be a list of strings")
    return tuple(cast(list[str], items))


def get_table_list(table: Mapping[str, object], key: str) -> tuple[StrDict, ...]:
    """Get an array of tables (``[[key]]`` in TOML); missing means empty."""
    value = table.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be an array of tables")
    out: list[StrDict] = []
    for item in cast(list[object], value):
        d = as_str_dict(item)
        if d is None:
            raise TypeError(f"'{key}' entries must be tables")
        out.append(d)
    return tuple(out)
