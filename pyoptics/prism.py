"""
Alternative accessors (prisms) over sum types.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TypeVar

from .match import Match, Matched, Unmatched, match_to_maybe
from .maybe import Maybe, Just, Nothing

S = TypeVar("S")  # the sum type
A = TypeVar("A")  # payload of the targeted alternative

@dataclass(frozen=True)
class Prism[S, A]:
    """
    Partial accessor: an S may or may not be built from the targeted
    alternative.

    `into` yields `Matched(a)` for the targeted alternative and
    `Unmatched(s)` (the original value, untouched) otherwise. `out_of` is
    the converse: it builds the alternative from `Matched(a)` and hands an
    `Unmatched(s)` back as `s`.

    Laws:
        into(out_of(Matched(a))) == Matched(a)
        into(s) == Unmatched(s)  implies  out_of(Unmatched(s)) == s
    """
    into: Callable[[S], Match[A, S]]
    out_of: Callable[[Match[A, S]], S]

    @classmethod
    def of(cls, matcher: Callable[[S], Maybe[A]],
           build: Callable[[A], S]) -> Prism[S, A]:
        """
        Build a prism from a pattern match returning a Maybe and a
        constructor for the targeted alternative.
        """
        def into(s: S) -> Match[A, S]:
            match matcher(s):
                case Just(a):
                    return Matched(a)
                case _:
                    return Unmatched(s)

        def out_of(r: Match[A, S]) -> S:
            match r:
                case Matched(a):
                    return build(a)
                case Unmatched(s):
                    return s
            raise TypeError(f"expected Matched or Unmatched, got {r!r}")

        return cls(into=into, out_of=out_of)

    def get(self, s: S) -> Maybe[A]:
        """`Just` the payload when `s` is the targeted alternative."""
        return match_to_maybe(self.into(s))

    def set(self, a: A) -> S:
        """Build the targeted alternative from its payload."""
        return self.out_of(Matched(a))

    def over(self, s: S, f: Callable[[A], A]) -> S:
        """Apply `f` to the payload if matched; otherwise `s` unchanged."""
        return self.out_of(f & self.into(s))

    def __rshift__(self, other):
        """`outer >> inner` composes left to right."""
        from .compose import compose_pair, is_accessor # pylint: disable=import-outside-toplevel
        if not is_accessor(other):
            return NotImplemented
        return compose_pair(self, other)


# --- Leaf prisms ---

def prism(cls: type[A]) -> Prism[S, A]:
    """
    The alternative of a sum type represented by the class `cls`
    (e.g. one member of a `Point2D | Point3D` union). The value itself is
    the focus.
    """
    return Prism.of(matcher=lambda s: Just(s) if isinstance(s, cls) else Nothing,
                    build=lambda a: a)

def just() -> Prism[Maybe[A], A]:
    """The `Just` alternative of a Maybe."""
    return Prism.of(matcher=lambda m: m, build=Just)

def matched() -> Prism[Match[A, S], A]:
    """The `Matched` alternative of a Match."""
    return Prism.of(matcher=match_to_maybe, build=Matched)
