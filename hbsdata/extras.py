"""Comparison, logic and lookup helpers over JSON values."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from typing import Any

from hbsdata.errors import RenderError, RenderErrorKind
from hbsdata.jsonvalue import is_truthy

_MIN_INT = -(2**63)
_MAX_INT = 2**64 - 1
_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_ABSENT = object()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _normalize_number(value: int | float) -> int | float:
    """Integers beyond the 64-bit range are held as floats."""
    if isinstance(value, int) and not _MIN_INT <= value <= _MAX_INT:
        return float(value)
    return value


def _parse_number(text: str) -> int | float | None:
    match = _NUMBER_RE.fullmatch(text)
    if match is None:
        return None
    if match.group(1) is None and match.group(2) is None:
        return _normalize_number(int(text))
    number = float(text)
    return number if math.isfinite(number) else None


def _compare_numbers(a: int | float, b: int | float) -> int | None:
    a = _normalize_number(a)
    b = _normalize_number(b)
    if (isinstance(a, float) and math.isnan(a)) or (isinstance(b, float) and math.isnan(b)):
        return None
    return (a > b) - (a < b)


def _compare_number_with_text(number: int | float, text: str) -> int | None:
    parsed = _parse_number(text)
    if parsed is None:
        return None
    return _compare_numbers(number, parsed)


def compare_json(x: Any, y: Any) -> int | None:
    """Order two JSON values: -1, 0 or 1, or None when they cannot be ordered.

    Numbers compare exactly, strings by code point, booleans with false first;
    a number and a string compare when the string is a JSON number.
    """
    if isinstance(x, bool) and isinstance(y, bool):
        return (x > y) - (x < y)
    if _is_number(x) and _is_number(y):
        return _compare_numbers(x, y)
    if isinstance(x, str) and isinstance(y, str):
        return (x > y) - (x < y)
    if _is_number(x) and isinstance(y, str):
        return _compare_number_with_text(x, y)
    if isinstance(x, str) and _is_number(y):
        ordering = _compare_number_with_text(y, x)
        return None if ordering is None else -ordering
    return None


def _json_equal(x: Any, y: Any) -> bool:
    if x is None or y is None:
        return x is None and y is None
    if isinstance(x, bool) or isinstance(y, bool):
        return isinstance(x, bool) and isinstance(y, bool) and x == y
    if _is_number(x) and _is_number(y):
        a = _normalize_number(x)
        b = _normalize_number(y)
        if isinstance(a, float) != isinstance(b, float):
            return False
        return a == b
    if isinstance(x, str) and isinstance(y, str):
        return x == y
    if isinstance(x, list) and isinstance(y, list):
        return len(x) == len(y) and all(_json_equal(a, b) for a, b in zip(x, y))
    if isinstance(x, dict) and isinstance(y, dict):
        return x.keys() == y.keys() and all(_json_equal(x[k], y[k]) for k in x)
    return False


def eq(x: Any, y: Any) -> bool:
    """Whether two JSON values are equal; integers and floats never are."""
    return _json_equal(x, y)


def ne(x: Any, y: Any) -> bool:
    return not _json_equal(x, y)


def gt(x: Any, y: Any) -> bool:
    return compare_json(x, y) == 1


def gte(x: Any, y: Any) -> bool:
    ordering = compare_json(x, y)
    return ordering is not None and ordering != -1


def lt(x: Any, y: Any) -> bool:
    return compare_json(x, y) == -1


def lte(x: Any, y: Any) -> bool:
    ordering = compare_json(x, y)
    return ordering is not None and ordering != 1


def logical_not(x: Any) -> bool:
    return not is_truthy(x, False)


def length(x: Any) -> int:
    """Items in an array or object, bytes in a string, 0 for anything else."""
    if isinstance(x, (list, dict)):
        return len(x)
    if isinstance(x, str):
        return len(x.encode("utf-8"))
    return 0


def all_truthy(values: Iterable[Any]) -> bool:
    return all(is_truthy(v, False) for v in values)


def any_truthy(values: Iterable[Any]) -> bool:
    return any(is_truthy(v, False) for v in values)


def lookup(collection: Any = _ABSENT, index: Any = _ABSENT, strict: bool = False) -> Any:
    """Take an array item by position or an object entry by key.

    Gives null when nothing is found, or raises in strict mode.
    """
    if collection is _ABSENT:
        raise RenderError(RenderErrorKind.PARAM_NOT_FOUND_FOR_INDEX, "lookup", 0)
    if index is _ABSENT:
        raise RenderError(RenderErrorKind.PARAM_NOT_FOUND_FOR_INDEX, "lookup", 1)

    found = _ABSENT
    if isinstance(collection, list):
        if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(collection):
            found = collection[index]
    elif isinstance(collection, dict):
        if isinstance(index, str):
            found = collection.get(index, _ABSENT)

    if found is _ABSENT:
        if strict:
            raise RenderError.strict_error(None)
        return None
    return found