"""Paths into the data a template renders: parsing and resolution helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from hbsdata.errors import RenderError, RenderErrorKind

_SEPARATORS = "./"


class Rule(Enum):
    """The grammar rules a path segment can come from."""

    PATH_ROOT = "path_root"
    PATH_LOCAL = "path_local"
    PATH_UP = "path_up"
    PATH_ID = "path_id"
    PATH_RAW_ID = "path_raw_id"


@dataclass(frozen=True)
class PathSeg:
    """One segment of a path: either a name or a marker such as `..` or `@root`."""

    name: str | None = None
    rule: Rule | None = None

    @classmethod
    def named(cls, name: str) -> PathSeg:
        return cls(name=name)

    @classmethod
    def ruled(cls, rule: Rule) -> PathSeg:
        return cls(rule=rule)


class _InvalidPath(ValueError):
    pass


def _is_symbol_char(ch: str) -> bool:
    if ch.isascii():
        return ch.isalnum() or ch in "-_$"
    return True


def _scan_item(raw: str, pos: int, tokens: list[tuple[Rule, str]]) -> int:
    if pos >= len(raw):
        raise _InvalidPath(raw)
    if raw[pos] == "[":
        end = raw.find("]", pos + 1)
        if end < 0:
            raise _InvalidPath(raw)
        tokens.append((Rule.PATH_RAW_ID, raw[pos + 1 : end]))
        return end + 1
    start = pos
    while pos < len(raw) and _is_symbol_char(raw[pos]):
        pos += 1
    if pos == start:
        raise _InvalidPath(raw)
    tokens.append((Rule.PATH_ID, raw[start:pos]))
    return pos


def _scan(raw: str) -> list[tuple[Rule, str]]:
    if raw == "this":
        return [(Rule.PATH_ID, raw)]
    tokens: list[tuple[Rule, str]] = []
    pos = 0
    if raw.startswith("./"):
        pos = 2
    elif raw.startswith("this") and len(raw) > 4 and raw[4] in _SEPARATORS:
        pos = 5

    if raw.startswith("@root/", pos) or raw.startswith("@root.", pos):
        tokens.append((Rule.PATH_ROOT, "@root"))
        pos += 6
    if raw.startswith("@", pos):
        tokens.append((Rule.PATH_LOCAL, "@"))
        pos += 1
    while raw.startswith("..", pos):
        tokens.append((Rule.PATH_UP, ".."))
        pos += 2
        if pos >= len(raw) or raw[pos] not in _SEPARATORS:
            raise _InvalidPath(raw)
        pos += 1

    pos = _scan_item(raw, pos, tokens)
    while pos < len(raw):
        if raw[pos] not in _SEPARATORS:
            raise _InvalidPath(raw)
        pos = _scan_item(raw, pos + 1, tokens)
    return tokens


def parse_path_segments(raw: str) -> list[PathSeg]:
    """Split a path such as `../a.[0]/b` into its segments; `this` is dropped."""
    try:
        tokens = _scan(raw)
    except _InvalidPath:
        raise RenderError(RenderErrorKind.INVALID_JSON_PATH, raw) from None
    segments = []
    for rule, text in tokens:
        if rule in (Rule.PATH_ID, Rule.PATH_RAW_ID):
            if text != "this":
                segments.append(PathSeg.named(text))
        else:
            segments.append(PathSeg.ruled(rule))
    return segments


@dataclass(frozen=True)
class Path:
    """A path in a template: a local variable like `@index` or a relative path."""

    raw: str
    segments: tuple[PathSeg, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> Path:
        return cls(raw, tuple(parse_path_segments(raw)))

    @classmethod
    def current(cls) -> Path:
        """The path of the current value."""
        return cls("")

    @classmethod
    def with_named_paths(cls, names: Sequence[str]) -> Path:
        return cls("/".join(names), tuple(PathSeg.named(n) for n in names))

    @property
    def local(self) -> tuple[int, str] | None:
        """The (levels up, name) of a local variable path, else None."""
        segments = self.segments
        if not segments or segments[0] != PathSeg.ruled(Rule.PATH_LOCAL):
            return None
        level = 0
        while level + 1 < len(segments) and segments[level + 1] == PathSeg.ruled(Rule.PATH_UP):
            level += 1
        if level + 1 >= len(segments):
            return None
        last = segments[level + 1]
        if last.name is None:
            return None
        return level, last.name

    def segs(self) -> tuple[PathSeg, ...] | None:
        """The segments of a relative path; None for a local variable path."""
        return None if self.local is not None else self.segments


def merge_json_path(path_stack: Iterable[str], relative_path: Iterable[PathSeg]) -> list[str]:
    """Extend a path with the named segments of a relative path."""
    return [*path_stack, *(seg.name for seg in relative_path if seg.name is not None)]