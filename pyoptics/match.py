"""
Match: the result of trying a prism on a value.

`Matched` carries the focused payload of the targeted alternative;
`Unmatched` carries the original aggregate, passed through untouched so it
can be handed back without loss. This is deliberately not an error type:
a value built from some other alternative is a normal outcome.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TypeVar, Callable

from .functor import Functor, map # pylint:disable=redefined-builtin
from .maybe import Maybe, Just, Nothing

A = TypeVar("A")
B = TypeVar("B")
S = TypeVar("S")

type Match[A, S] = Matched[A] | Unmatched[S]

@dataclass(frozen=True)
class Unmatched[S](Functor):
    """
    The aggregate was not built from the targeted alternative.
    """
    s: S

    def map(self, f: Callable[[A], B]) -> Unmatched[S]:
        return self

    def __rand__(self, other: Callable[[A], B]) -> Unmatched[S]:
        return map(other, self)

    def __repr__(self):
        """String representation of the Unmatched."""
        return f"Unmatched({self.s!r})"

    def __eq__(self, other) -> bool:
        """Equality check for Unmatched."""
        return isinstance(other, Unmatched) and self.s == other.s

@dataclass(frozen=True)
class Matched[A](Functor[A]):
    """
    The aggregate was built from the targeted alternative.
    """
    a: A

    @classmethod
    def make(cls, value) -> Matched[A]:
        """Creates a new instance of Matched."""
        return cls(value)

    def map(self, f: Callable[[A], B]) -> Matched[B]:
        return self.make(f(self.a))

    def __rand__(self, other: Callable[[A], B]) -> Matched[B]:
        return map(other, self)

    def __repr__(self):
        """String representation of the Matched."""
        return f"Matched({self.a!r})"

    def __eq__(self, other) -> bool:
        """Equality check for Matched."""
        return isinstance(other, Matched) and self.a == other.a


def match_to_maybe(r: Match[A, S]) -> Maybe[A]:
    """Forgets the passed-through value of an Unmatched."""
    match r:
        case Matched(a):
            return Just(a)
        case _:
            return Nothing

def is_matched(r: Match[A, S]) -> bool:
    """True when the prism matched."""
    return isinstance(r, Matched)
