"""Block scopes: base paths, base values, block parameters and local variables."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

_UNSET = object()


@dataclass(frozen=True)
class BlockParamHolder:
    """A block parameter: a path into the context, or a value of its own."""

    path: tuple[str, ...] | None = None
    value: Any = None

    @classmethod
    def of_value(cls, value: Any) -> BlockParamHolder:
        return cls(value=value)

    @classmethod
    def of_path(cls, path: Iterable[str]) -> BlockParamHolder:
        return cls(path=tuple(path))

    @property
    def is_path(self) -> bool:
        return self.path is not None


class BlockParams:
    """Block parameters by name."""

    def __init__(self) -> None:
        self._data: dict[str, BlockParamHolder] = {}

    def add_path(self, key: str, path: Iterable[str]) -> None:
        """Add a parameter referring to a path relative to the block's base path."""
        self._data[key] = BlockParamHolder.of_path(path)

    def add_value(self, key: str, value: Any) -> None:
        self._data[key] = BlockParamHolder.of_value(value)

    def get(self, key: str) -> BlockParamHolder | None:
        return self._data.get(key)

    def __setitem__(self, key: str, holder: BlockParamHolder) -> None:
        self._data[key] = holder

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


@dataclass
class BlockContext:
    """The data of one block scope."""

    base_path: list[str] = field(default_factory=list)
    block_params: BlockParams = field(default_factory=BlockParams)
    local_variables: dict[str, Any] = field(default_factory=dict)
    _base_value: Any = field(default=_UNSET, repr=False)

    def set_local_var(self, name: str, value: Any) -> None:
        self.local_variables[name] = value

    def get_local_var(self, name: str) -> Any:
        return self.local_variables.get(name)

    @property
    def has_base_value(self) -> bool:
        """Whether the block is based on a derived value rather than a path."""
        return self._base_value is not _UNSET

    @property
    def base_value(self) -> Any:
        return None if self._base_value is _UNSET else self._base_value

    def set_base_value(self, value: Any) -> None:
        self._base_value = value

    def get_block_param(self, name: str) -> BlockParamHolder | None:
        return self.block_params.get(name)

    def set_block_params(self, block_params: BlockParams) -> None:
        self.block_params = block_params

    def set_block_param(self, key: str, value: BlockParamHolder) -> None:
        self.block_params[key] = value