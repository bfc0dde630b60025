"""Success-or-error outcome shared by every parser.

Parsers never raise for bad input. They return ``Ok(value)`` or
``Err(error)``; callers that prefer exceptions use ``unwrap()``::

    result = parse_hunk_header(line)
    if result.ok:
        header = result.value
    else:
        print(result.error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


class ParseError(ValueError):
    """Raised (via ``Err.unwrap``) when text does not match its format."""


class HunkHeaderError(ParseError):
    """An ``@@`` header line lacked its markers or its two range tokens."""

    def __init__(self, message: str, header: str) -> None:
        super().__init__(message)
        self.header = header


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ParseError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


ParseResult = Union[Ok[T], Err]
