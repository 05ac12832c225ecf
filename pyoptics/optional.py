"""
Optional accessors: a focus that may or may not be present.

An Optional is shaped like a lens onto a `Maybe[A]`. Lenses (always
`Just`) and prisms (`Just` only for the targeted alternative) both lift
into it, which is what lets the two kinds be mixed in one chain.
"""
from __future__ import annotations
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .lens import Lens, _replace_field
from .match import Matched, Unmatched, match_to_maybe
from .maybe import Maybe, Just, Nothing, to_maybe
from .prism import Prism

S = TypeVar("S")
A = TypeVar("A")
K = TypeVar("K")

@dataclass(frozen=True)
class Optional[S, A]:
    """
    Accessor whose focus may be absent.

    `view` returns the focus as a Maybe together with the aggregate;
    `rebuild` takes a Maybe. Rebuilding with `Just(a)` makes the focus
    present, which for a prism-backed focus can mean switching the
    aggregate to the targeted alternative.

    `build` is set only when the focus alone determines the whole value
    (prism-backed optionals). A composite uses it to fill in an absent
    outer focus when a value is set.

    `store`, when given, returns the focus with a continuation that
    rebuilds the aggregate from a new Maybe focus, as on `Lens`.
    """
    view: Callable[[S], tuple[Maybe[A], S]]
    rebuild: Callable[[Maybe[A], S], S]
    build: Callable[[A], S] | None = None
    store: Callable[[S], tuple[Maybe[A], Callable[[Maybe[A]], S]]] | None = None

    def focus(self, s: S) -> tuple[Maybe[A], Callable[[Maybe[A]], S]]:
        """The focus as a Maybe, and a function rebuilding `s` from a new one."""
        if self.store is not None:
            return self.store(s)
        ma, whole = self.view(s)
        return ma, lambda mb: self.rebuild(mb, whole)

    def get(self, s: S) -> Maybe[A]:
        """The focus, or Nothing."""
        ma, _ = self.view(s)
        return ma

    def set(self, s: S, a: A) -> S:
        """Make the focus present with value `a`."""
        return self.rebuild(Just(a), s)

    def over(self, s: S, f: Callable[[A], A]) -> S:
        """Apply `f` to a present focus; an absent focus leaves `s` as is."""
        ma, put = self.focus(s)
        match ma:
            case Just(a):
                return put(Just(f(a)))
            case _:
                return s

    def __rshift__(self, other):
        """`outer >> inner` composes left to right."""
        from .compose import compose_pair, is_accessor # pylint: disable=import-outside-toplevel
        if not is_accessor(other):
            return NotImplemented
        return compose_pair(self, other)


# --- Lifts ---

def from_lens(l: Lens[S, A]) -> Optional[S, A]:
    """
    A lens as an Optional whose focus is always present.
    Rebuilding with Nothing leaves the aggregate unchanged.
    """
    def view(s: S) -> tuple[Maybe[A], S]:
        a, whole = l.view(s)
        return Just(a), whole

    def rebuild(ma: Maybe[A], s: S) -> S:
        match ma:
            case Just(a):
                return l.rebuild(a, s)
            case _:
                return s

    def store(s: S) -> tuple[Maybe[A], Callable[[Maybe[A]], S]]:
        a, put = l.focus(s)
        return Just(a), lambda ma: put(ma.a) if isinstance(ma, Just) else s

    return Optional(view=view, rebuild=rebuild, store=store)

def from_prism(p: Prism[S, A]) -> Optional[S, A]:
    """
    A prism as an Optional: present exactly when the prism matches.
    Rebuilding with `Just(a)` builds the alternative from scratch.
    """
    def view(s: S) -> tuple[Maybe[A], S]:
        return match_to_maybe(p.into(s)), s

    def rebuild(ma: Maybe[A], s: S) -> S:
        match ma:
            case Just(a):
                return p.out_of(Matched(a))
            case _:
                return p.out_of(Unmatched(s))

    return Optional(view=view, rebuild=rebuild, build=p.set)


# --- Leaf optionals ---

def nullable(field_name: str) -> Optional[Any, Any]:
    """
    A field typed `X | None` of a dataclass, NamedTuple or pydantic model.
    `None` is the absent focus; rebuilding with Nothing stores `None`.
    """
    return Optional(
        view=lambda s: (to_maybe(getattr(s, field_name)), s),
        rebuild=lambda ma, s: _replace_field(
            s, field_name, ma.a if isinstance(ma, Just) else None)
    )

def at(k: K) -> Optional[Mapping[K, A], A]:
    """
    The entry under `k` of a mapping, absent when the key is missing.
    Rebuilding with Nothing removes the key; the result is a new dict.
    """
    def view(s: Mapping[K, A]) -> tuple[Maybe[A], Mapping[K, A]]:
        return (Just(s[k]) if k in s else Nothing), s

    def rebuild(ma: Maybe[A], s: Mapping[K, A]) -> Mapping[K, A]:
        match ma:
            case Just(a):
                return {**s, k: a}
            case _:
                return {key: v for key, v in s.items() if key != k}

    return Optional(view=view, rebuild=rebuild)

def index(n: int) -> Optional[Sequence[A], A]:
    """
    Element `n` of a tuple or list, absent when out of range. Setting an
    out-of-range element leaves the sequence unchanged.
    """
    def in_range(s: Sequence[A]) -> bool:
        return -len(s) <= n < len(s)

    def view(s: Sequence[A]) -> tuple[Maybe[A], Sequence[A]]:
        return (Just(s[n]) if in_range(s) else Nothing), s

    def rebuild(ma: Maybe[A], s: Sequence[A]) -> Sequence[A]:
        match ma:
            case Just(a) if in_range(s):
                items = list(s)
                items[n] = a
                return tuple(items) if isinstance(s, tuple) else items
            case _:
                return s

    return Optional(view=view, rebuild=rebuild)
