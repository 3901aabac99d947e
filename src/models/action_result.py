# src/models/action_result.py

"""Tagged success/failure outcome returned by the action layer."""

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A completed action carrying its payload."""

    data: T
    ok: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    """A failed action carrying a user-facing message."""

    error: str
    ok: Literal[False] = field(default=False, init=False)


ActionResult = Union[Success[T], Failure]
