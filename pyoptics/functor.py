""" Mapping over what an accessor hands back: a Maybe from `get`, a Match from `into`. """
from abc import ABC, abstractmethod
from typing import Callable, Self, TypeVar

# pylint:disable=C0105
A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)

class Functor[A](ABC):
    """Result of reading through an accessor.

    An Optional or a Prism `get` returns a Maybe; a Prism `into` returns a
    Match. Each holds at most one focus. `map` rewrites that focus and
    hands an absent or unmatched result back unchanged, which is how
    `over` skips a missing focus.
    """

    @abstractmethod
    def __rand__(self, other):
        """`f & result` maps `f` over the focus."""
        return map(other, self)


    @abstractmethod
    def map(self: Self, f: Callable[[A], B]) -> "Functor[B]":
        """Rewrite the focus, if the result holds one."""

def map(fn, f):  # pylint:disable=W0622
    """`f.map(fn)` as a plain function."""
    return f.map(fn)
