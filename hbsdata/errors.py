"""Errors raised while parsing and rendering templates."""

from __future__ import annotations

import json
from enum import Enum


def _debug_str(text: str) -> str:
    """Quote a string the way debug output shows it: in double quotes, escaped."""
    return json.dumps(text, ensure_ascii=False)


class RenderErrorKind(Enum):
    """The reason a render failed, with the message shown for it."""

    TEMPLATE_NOT_FOUND = "Template not found {0}"
    TEMPLATE_ERROR = "Failed to parse template {0}"
    MISSING_VARIABLE = "Failed to access variable in strict mode {0}"
    PARTIAL_NOT_FOUND = "Partial not found {0}"
    HELPER_NOT_FOUND = "Helper not found {0}"
    PARAM_NOT_FOUND_FOR_INDEX = "Helper/Decorator {0} param at index {1} required but not found"
    PARAM_NOT_FOUND_FOR_NAME = "Helper/Decorator {0} param with name {1} required but not found"
    PARAM_TYPE_MISMATCH_FOR_NAME = "Helper/Decorator {0} param with name {1} type mismatch for {2}"
    HASH_TYPE_MISMATCH_FOR_NAME = "Helper/Decorator {0} hash with name {1} type mismatch for {2}"
    DECORATOR_NOT_FOUND = "Decorator not found {0}"
    CANNOT_INCLUDE_SELF = "Can not include current template in partial"
    INVALID_LOGGING_LEVEL = "Invalid logging level: {0}"
    INVALID_PARAM_TYPE = "Invalid param type, {0} expected"
    BLOCK_CONTENT_REQUIRED = "Block content required"
    INVALID_JSON_PATH = "Invalid json path {0}"
    INVALID_JSON_INDEX = "Cannot access array/vector with string index, {0}"
    SERDE_ERROR = "Failed to access JSON data: {0}"
    IO_ERROR = "IO Error: {0}"
    UTF8_ERROR = "FromUtf8Error: {0}"
    NESTED_ERROR = "Nested error: {0}"
    UNIMPLEMENTED = "Unimplemented"
    OTHER = "{0}"

    def describe(self, *details: object) -> str:
        """Format the message of this kind with its details."""
        if self is RenderErrorKind.MISSING_VARIABLE:
            path = details[0] if details else None
            shown = "None" if path is None else f"Some({_debug_str(str(path))})"
            return self.value.format(shown)
        return self.value.format(*details)


class RenderError(Exception):
    """Raised when data cannot be rendered on a template."""

    def __init__(
        self,
        kind: RenderErrorKind,
        *details: object,
        template_name: str | None = None,
        line_no: int | None = None,
        column_no: int | None = None,
    ) -> None:
        super().__init__(kind.describe(*details))
        self.kind = kind
        self.details = details
        self.template_name = template_name
        self.line_no = line_no
        self.column_no = column_no
        cause = next((d for d in details if isinstance(d, BaseException)), None)
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def strict_error(cls, path: str | None) -> RenderError:
        """The error raised when a variable is missing in strict mode."""
        return cls(RenderErrorKind.MISSING_VARIABLE, path)

    def is_unimplemented(self) -> bool:
        """Whether this error only marks a helper without a value form."""
        return self.kind is RenderErrorKind.UNIMPLEMENTED

    @property
    def description(self) -> str:
        return self.kind.describe(*self.details)

    def __str__(self) -> str:
        if self.line_no is not None and self.column_no is not None:
            name = self.template_name if self.template_name is not None else "Unnamed template"
            return (
                f'Error rendering "{name}" line {self.line_no}, '
                f"col {self.column_no}: {self.description}"
            )
        return self.description


class TemplateErrorKind(Enum):
    """The reason a template failed to parse, with the message shown for it."""

    MISMATCHING_CLOSED_HELPER = "helper {0} was opened, but {1} is closing"
    MISMATCHING_CLOSED_DECORATOR = "decorator {0} was opened, but {1} is closing"
    INVALID_SYNTAX = "invalid handlebars syntax: {0}"
    INVALID_PARAM = "invalid parameter {0}"
    NESTED_SUBEXPRESSION = "nested subexpression is not supported"
    IO_ERROR = 'Template "{1}": {0}'

    def describe(self, *details: object) -> str:
        """Format the message of this kind with its details."""
        if self in _QUOTED_TEMPLATE_KINDS:
            return self.value.format(*(_debug_str(str(d)) for d in details))
        return self.value.format(*details)


_QUOTED_TEMPLATE_KINDS = frozenset(
    {
        TemplateErrorKind.MISMATCHING_CLOSED_HELPER,
        TemplateErrorKind.MISMATCHING_CLOSED_DECORATOR,
        TemplateErrorKind.INVALID_PARAM,
    }
)


def _text_lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def template_segment(template_str: str, line: int, col: int) -> str:
    """Show the lines around a position in a template, with a marker under it."""
    reach = 3
    line_start = max(line - reach, 0)
    line_end = line + reach
    pieces = []
    for line_count, content in enumerate(_text_lines(template_str)):
        if line_start <= line_count <= line_end:
            pieces.append(f"{line_count:4} | {content}\n")
            if line_count == line - 1:
                width = len(content.encode("utf-8"))
                marker = "".join("^" if c == col else "-" for c in range(width))
                pieces.append(f"     |{marker}\n")
    return "".join(pieces)


class TemplateError(Exception):
    """Raised when a template cannot be parsed."""

    def __init__(self, kind: TemplateErrorKind, *details: object) -> None:
        super().__init__(kind.describe(*details))
        self.kind = kind
        self.details = details
        self.template_name: str | None = None
        self.line_no: int | None = None
        self.column_no: int | None = None
        self.segment: str | None = None
        cause = next((d for d in details if isinstance(d, BaseException)), None)
        if cause is not None:
            self.__cause__ = cause

    @property
    def reason(self) -> str:
        return self.kind.describe(*self.details)

    def at(self, template_str: str, line_no: int, column_no: int) -> TemplateError:
        """Attach a position in the template and return this error."""
        self.line_no = line_no
        self.column_no = column_no
        self.segment = template_segment(template_str, line_no, column_no)
        return self

    def in_template(self, name: str) -> TemplateError:
        """Attach the template name and return this error."""
        self.template_name = name
        return self

    def pos(self) -> tuple[int, int] | None:
        """The (line, column) of the error, if known."""
        if self.line_no is not None and self.column_no is not None:
            return self.line_no, self.column_no
        return None

    def __str__(self) -> str:
        if self.line_no is not None and self.column_no is not None and self.segment is not None:
            name = self.template_name if self.template_name is not None else "Unnamed template"
            return (
                f"Template error: {self.reason}\n"
                f'    --> Template error in "{name}":{self.line_no}:{self.column_no}\n'
                f"     |\n"
                f"{self.segment}"
                f"     |\n"
                f"     = reason: {self.reason}\n"
            )
        return self.reason