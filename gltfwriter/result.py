"""Result values carrying a state, a message and an optional value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ResultState(Enum):
    """Outcome of an operation."""

    OK = 0
    ERROR = 1


@dataclass(frozen=True)
class Result(Generic[T]):
    """An operation outcome with a message and an optional value."""

    state: ResultState = ResultState.ERROR
    message: str = ""
    value: Optional[T] = None

    @classmethod
    def ok(cls, message: str = "", value: Any = None) -> "Result":
        """Create a successful result."""
        return cls(ResultState.OK, message, value)

    @classmethod
    def error(cls, message: str = "") -> "Result":
        """Create a failed result."""
        return cls(ResultState.ERROR, message)

    def is_ok(self) -> bool:
        return self.state is ResultState.OK

    def is_error(self) -> bool:
        return self.state is ResultState.ERROR