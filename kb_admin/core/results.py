"""Outcome of a manager operation: ``Success`` or ``Failure``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .errors import ErrorKind, UserMessage

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed; ``value`` holds what the API returned."""
    value: T = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Operation failed; ``error`` is ready to show to the user."""
    error: UserMessage
    kind: ErrorKind = ErrorKind.UNEXPECTED_ERROR

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


OperationResult = Union[Success[Any], Failure]
