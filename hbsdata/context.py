"""The data a template renders, and navigation through it by path."""

from __future__ import annotations

import copy
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from hbsdata.block import BlockContext, BlockParamHolder
from hbsdata.errors import RenderError, RenderErrorKind
from hbsdata.jsonvalue import PathAndJson, ScopedJson, to_json
from hbsdata.path import PathSeg, Rule, merge_json_path

_MISSING = object()
_MAX_INDEX = 2**64 - 1


@dataclass(frozen=True)
class _Resolved:
    """Where a path points: into the context data, or into a value of its own."""

    path: list[str]
    base: Any = _MISSING

    @property
    def is_absolute(self) -> bool:
        return self.base is _MISSING


def _find_block_param(
    block_contexts: Sequence[BlockContext], name: str
) -> tuple[BlockParamHolder, list[str]] | None:
    for block in block_contexts:
        holder = block.get_block_param(name)
        if holder is not None:
            return holder, block.base_path
    return None


def _resolve_against(block: BlockContext | None, relative_path: Sequence[PathSeg]) -> _Resolved:
    if block is not None and block.has_base_value:
        return _Resolved(merge_json_path([], relative_path), block.base_value)
    base_path = block.base_path if block is not None else []
    return _Resolved(merge_json_path(base_path, relative_path))


def _resolve(
    relative_path: Sequence[PathSeg], block_contexts: Sequence[BlockContext]
) -> _Resolved:
    depth = 0
    block_param = None
    from_root = False

    for seg in relative_path:
        if seg.name is not None:
            block_param = _find_block_param(block_contexts, seg.name)
            break
        if seg.rule is Rule.PATH_ROOT:
            from_root = True
            break
        if seg.rule is Rule.PATH_UP:
            depth += 1
        else:
            break

    if block_param is not None:
        holder, base_path = block_param
        rest = relative_path[depth + 1 :]
        if holder.is_path:
            return _Resolved(merge_json_path([*base_path, *holder.path], rest))
        return _Resolved(merge_json_path([], rest), holder.value)

    front = block_contexts[0] if block_contexts else None
    if depth > 0:
        block = block_contexts[depth] if depth < len(block_contexts) else front
        return _resolve_against(block, relative_path)
    if from_root:
        return _Resolved(merge_json_path([], relative_path))
    return _resolve_against(front, relative_path)


def _parse_index(segment: str) -> int:
    digits = segment[1:] if segment.startswith("+") else segment
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise RenderError(RenderErrorKind.INVALID_JSON_INDEX, segment)
    index = int(digits)
    if index > _MAX_INDEX:
        raise RenderError(RenderErrorKind.INVALID_JSON_INDEX, segment)
    return index


def _step(data: Any, segment: str) -> Any:
    if data is _MISSING:
        return _MISSING
    if isinstance(data, list):
        index = _parse_index(segment)
        return data[index] if index < len(data) else _MISSING
    if isinstance(data, dict):
        return data.get(segment, _MISSING)
    return _MISSING


def _walk(data: Any, path: Sequence[str]) -> Any:
    for segment in path:
        data = _step(data, segment)
    return data


def merge_json(base: Any, addition: Mapping[str, Any]) -> dict[str, Any]:
    """An object holding the entries of `base` (if an object) overlaid with `addition`."""
    merged = copy.deepcopy(base) if isinstance(base, dict) else {}
    merged.update({key: copy.deepcopy(value) for key, value in addition.items()})
    return merged


@dataclass
class Context:
    """The data rendered on a template."""

    data: Any = None

    @classmethod
    def null(cls) -> Context:
        return cls(None)

    @classmethod
    def wraps(cls, data: Any) -> Context:
        """Wrap Python data, converted to plain JSON values."""
        value = to_json(data)
        if value is None and data is not None:
            if not (isinstance(data, float) and not math.isfinite(data)):
                raise RenderError(
                    RenderErrorKind.SERDE_ERROR,
                    f"cannot convert {type(data).__name__} to JSON",
                )
        return cls(value)

    def navigate(
        self,
        relative_path: Sequence[PathSeg],
        block_contexts: Sequence[BlockContext] = (),
    ) -> ScopedJson:
        """Look up a path, relative to the innermost block first in `block_contexts`."""
        resolved = _resolve(list(relative_path), list(block_contexts))
        if resolved.is_absolute:
            found = _walk(self.data, resolved.path)
            if found is _MISSING:
                return ScopedJson.missing()
            return ScopedJson.from_context(found, resolved.path)
        found = _walk(resolved.base, resolved.path)
        if found is _MISSING:
            return ScopedJson.missing()
        return ScopedJson.derived(copy.deepcopy(found))


def create_block(param: PathAndJson) -> BlockContext:
    """A block scope based on a parameter's context path, or on its value."""
    block = BlockContext()
    context_path = param.context_path()
    if context_path is not None:
        block.base_path = list(context_path)
    else:
        block.set_base_value(copy.deepcopy(param.value()))
    return block