"""What the result panel shows, as one value.

Exactly one of Idle, Loading, Showing or Error is current at any time; the
orchestrator replaces the whole value on every transition.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Operation(str, Enum):
    REVIEW = "review"
    FIX = "fix"
    COMPLEXITY = "complexity"
    DOCUMENT = "document"
    CONVERT = "convert"

    @property
    def result_field(self) -> str:
        """Key the server uses for this operation's result."""
        return _RESULT_FIELDS[self]

    @property
    def returns_code(self) -> bool:
        return self in (Operation.FIX, Operation.CONVERT)


_RESULT_FIELDS = {
    Operation.REVIEW: "review",
    Operation.FIX: "fixedCode",
    Operation.COMPLEXITY: "analysis",
    Operation.DOCUMENT: "documentation",
    Operation.CONVERT: "convertedCode",
}


@dataclass(frozen=True)
class OperationResult:
    operation: Operation
    text: str
    language: Optional[str] = None  # syntax hint, code results only


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    operation: Operation


@dataclass(frozen=True)
class Showing:
    result: OperationResult


@dataclass(frozen=True)
class Error:
    message: str


ViewState = Union[Idle, Loading, Showing, Error]
