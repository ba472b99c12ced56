"""Explicit success / failure values for verification steps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful outcome carrying *value*."""

    value: T


@dataclass(frozen=True)
class Err:
    """A failed outcome.

    *reason* is meant for logs only and must not be echoed to callers.
    """

    reason: str


Result = Union[Ok[T], Err]
