"""JSON values as seen by templates: rendering, truthiness and scoping."""

from __future__ import annotations

import copy
import dataclasses
import math
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


def _format_float(number: float) -> str:
    if number == 0:
        return "-0.0" if math.copysign(1.0, number) < 0 else "0.0"
    sign = "-" if number < 0 else ""
    parts = Decimal(repr(abs(number))).as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    exponent = parts.exponent
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    length = len(digits)
    kk = length + exponent
    if 0 <= exponent and kk <= 16:
        body = digits + "0" * exponent + ".0"
    elif 0 < kk <= 16:
        body = digits[:kk] + "." + digits[kk:]
    elif -5 < kk <= 0:
        body = "0." + "0" * (-kk) + digits
    elif length == 1:
        body = f"{digits}e{kk - 1}"
    else:
        body = f"{digits[0]}.{digits[1:]}e{kk - 1}"
    return sign + body


def render_json(value: Any) -> str:
    """Render a JSON value as template output text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        return _format_float(value)
    if isinstance(value, list):
        return "[" + ", ".join(render_json(item) for item in value) + "]"
    if isinstance(value, dict):
        return "[object]"
    return str(value)


def is_truthy(value: Any, include_zero: bool = False) -> bool:
    """Whether a JSON value counts as true in a condition."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return not include_zero or True
        if include_zero:
            return not math.isnan(number)
        return math.isfinite(number) and abs(number) >= sys.float_info.min
    if isinstance(value, (str, list, dict)):
        return len(value) > 0
    return bool(value)


def _convert(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Enum):
        return _convert(value.value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _convert(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if isinstance(key, str):
                name = key
            elif isinstance(key, int) and not isinstance(key, bool):
                name = str(key)
            else:
                raise TypeError(f"key must be a string, got {type(key).__name__}")
            result[name] = _convert(item)
        return result
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    raise TypeError(f"cannot convert {type(value).__name__} to JSON")


def to_json(value: Any) -> Any:
    """Convert Python data into a plain JSON value; null when it cannot be converted."""
    try:
        return _convert(value)
    except TypeError:
        return None


def as_string(value: Any) -> str | None:
    """The value if it is a JSON string, otherwise None."""
    return value if isinstance(value, str) else None


class ScopeKind(Enum):
    """Where a value used in a template comes from."""

    CONSTANT = "constant"
    DERIVED = "derived"
    CONTEXT = "context"
    MISSING = "missing"


@dataclass(frozen=True)
class ScopedJson:
    """A JSON value together with where it came from."""

    kind: ScopeKind
    value: Any = None
    path: tuple[str, ...] | None = None

    @classmethod
    def constant(cls, value: Any) -> ScopedJson:
        return cls(ScopeKind.CONSTANT, value)

    @classmethod
    def derived(cls, value: Any) -> ScopedJson:
        return cls(ScopeKind.DERIVED, value)

    @classmethod
    def from_context(cls, value: Any, path) -> ScopedJson:
        return cls(ScopeKind.CONTEXT, value, tuple(path))

    @classmethod
    def missing(cls) -> ScopedJson:
        return cls(ScopeKind.MISSING)

    def as_json(self) -> Any:
        """The held value; null when missing."""
        return None if self.kind is ScopeKind.MISSING else self.value

    def render(self) -> str:
        return render_json(self.as_json())

    def is_missing(self) -> bool:
        return self.kind is ScopeKind.MISSING

    def into_derived(self) -> ScopedJson:
        """A derived copy of the held value."""
        return ScopedJson.derived(copy.deepcopy(self.as_json()))

    def context_path(self) -> tuple[str, ...] | None:
        """The full path into the context data, for context values."""
        return self.path if self.kind is ScopeKind.CONTEXT else None


@dataclass(frozen=True)
class PathAndJson:
    """A scoped value with the path it was referenced by, if any."""

    relative_path: str | None
    scoped: ScopedJson

    def context_path(self) -> tuple[str, ...] | None:
        return self.scoped.context_path()

    def value(self) -> Any:
        return self.scoped.as_json()

    def try_get_constant_value(self) -> Any:
        """The value when it is a template constant, otherwise None."""
        if self.scoped.kind is ScopeKind.CONSTANT:
            return self.scoped.value
        return None

    def is_value_missing(self) -> bool:
        return self.scoped.is_missing()

    def render(self) -> str:
        return self.scoped.render()