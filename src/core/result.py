"""Result types for railway-oriented programming.

Operations that can fail for expected reasons return a Result instead of
raising, which keeps every failure path visible at the call site.

Usage:
    result = await handler.handle(LoginAccount(email=email, password=password))
    match result:
        case Success(value=tokens):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
