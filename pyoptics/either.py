"""
Implementation of Either, used to report law checks as data
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TypeVar, Callable

from .functor import Functor, map # pylint:disable=redefined-builtin

L = TypeVar("L")
R = TypeVar("R")
S = TypeVar("S")

type Either[L,R] = Left[L] | Right[R]

@dataclass(frozen=True)
class Left[L](Functor):
    """
    Represents a left value in an Either type.
    """
    l: L

    def map(self, f: Callable[[R], S]) -> Left[L]:
        return self

    def __rshift__(self, m: Callable[[R], Either[L, S]]) -> Left[L]:
        return self

    def __rand__(self, other: Callable[[R], S]) -> Left[L]:
        return map(other, self)

    def __repr__(self):
        """String representation of the Left."""
        return f"Left({self.l!r})"

    def __eq__(self, other) -> bool:
        """Equality check for Left."""
        return isinstance(other, Left) and self.l == other.l

@dataclass(frozen=True)
class Right[R](Functor[R]):
    """
    Represents a right value in an Either type.
    """
    r: R

    @classmethod
    def make(cls, value) -> Right[R]:
        """Creates a new instance of Right."""
        return cls(value)

    def map(self, f: Callable[[R], S]) -> Right[S]:
        return self.make(f(self.r))

    def __rshift__(self, m: Callable[[R], Either[L, S]]) -> Either[L, S]:
        """
        Chains computations by passing the value inside Right to function m.
        """
        return m(self.r)

    def __rand__(self, other: Callable[[R], S]) -> Right[S]:
        return map(other, self)

    def __repr__(self):
        """String representation of the Right."""
        return f"Right({self.r!r})"

    def __eq__(self, other) -> bool:
        """Equality check for Right."""
        return isinstance(other, Right) and self.r == other.r
