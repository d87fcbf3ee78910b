"""Case conversions of strings, such as snake_case and UpperCamelCase."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from hbsdata.errors import RenderError, RenderErrorKind


def _split_word(word: str) -> Iterator[str]:
    start = 0
    mode = None
    for i, ch in enumerate(word):
        if i + 1 == len(word):
            yield word[start:]
            return
        nxt = word[i + 1]
        if ch.islower():
            next_mode = "lower"
        elif ch.isupper():
            next_mode = "upper"
        else:
            next_mode = mode
        if next_mode == "lower" and nxt.isupper():
            yield word[start : i + 1]
            start = i + 1
            mode = None
        elif mode == "upper" and ch.isupper() and nxt.islower():
            yield word[start:i]
            start = i
            mode = None
        else:
            mode = next_mode


def _words(text: str) -> Iterator[str]:
    """Split on non-alphanumeric characters and on case boundaries."""
    current: list[str] = []
    for ch in text + " ":
        if ch.isalnum():
            current.append(ch)
        elif current:
            yield from (w for w in _split_word("".join(current)) if w)
            current = []


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def lower_camel_case(text: str) -> str:
    return "".join(
        word.lower() if i == 0 else _capitalize(word) for i, word in enumerate(_words(text))
    )


def upper_camel_case(text: str) -> str:
    return "".join(_capitalize(word) for word in _words(text))


def snake_case(text: str) -> str:
    return "_".join(word.lower() for word in _words(text))


def kebab_case(text: str) -> str:
    return "-".join(word.lower() for word in _words(text))


def shouty_snake_case(text: str) -> str:
    return "_".join(word.upper() for word in _words(text))


def shouty_kebab_case(text: str) -> str:
    return "-".join(word.upper() for word in _words(text))


def title_case(text: str) -> str:
    return " ".join(_capitalize(word) for word in _words(text))


def train_case(text: str) -> str:
    return "-".join(_capitalize(word) for word in _words(text))


_CASE_HELPERS: dict[str, Callable[[str], str]] = {
    "lowerCamelCase": lower_camel_case,
    "upperCamelCase": upper_camel_case,
    "snakeCase": snake_case,
    "kebabCase": kebab_case,
    "shoutySnakeCase": shouty_snake_case,
    "shoutyKebabCase": shouty_kebab_case,
    "titleCase": title_case,
    "trainCase": train_case,
}


def apply_case(helper_name: str, value: Any) -> str:
    """Apply the case helper registered under a template name to a JSON value."""
    convert = _CASE_HELPERS.get(helper_name)
    if convert is None:
        raise RenderError(RenderErrorKind.HELPER_NOT_FOUND, helper_name)
    if not isinstance(value, str):
        raise RenderError(
            RenderErrorKind.PARAM_TYPE_MISMATCH_FOR_NAME, convert.__name__, "0", "string"
        )
    return convert(value)