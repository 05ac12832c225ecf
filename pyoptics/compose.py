"""
Composition of accessors.

Every pairing of {Lens, Prism, Optional} composes to the most specific
kind that is still sound:

    left \\ right | Lens      Prism     Optional
    -------------+-------------------------------
    Lens         | Lens      Optional  Optional
    Prism        | Optional  Prism     Optional
    Optional     | Optional  Optional  Optional

Each cell has a named function; `compose` picks the cell from the kinds
of its operands, and `>>` on any accessor calls it. Composites evaluate
outer first: an absent or unmatched outer focus never reaches the inner
accessor.
"""
from __future__ import annotations
from functools import reduce
from typing import Any, Callable, TypeVar

from .lens import Lens
from .log import logger
from .match import Match, Matched, Unmatched
from .maybe import Maybe, Just, Nothing
from .optional import Optional, from_lens, from_prism
from .prism import Prism

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")

type Accessor = Lens | Prism | Optional

def is_accessor(x: Any) -> bool:
    """True for a Lens, a Prism or an Optional."""
    return isinstance(x, (Lens, Prism, Optional))

def _kind(x: Accessor) -> str:
    return type(x).__name__

def _logged(left: Accessor, right: Accessor, result: Accessor) -> Accessor:
    logger.debug("composed %s >> %s -> %s",
                 _kind(left), _kind(right), _kind(result))
    return result


# --- Closed compositions ---

def compose_lens(l1: Lens[S, A], l2: Lens[A, B]) -> Lens[S, B]:
    """
    Lens . Lens -> Lens. The inner lens is viewed on the outer focus;
    rebuilding puts the new inner focus back into the outer focus, then
    the outer focus back into the aggregate. Both foci are taken once, on
    the way in, so a chain of n lenses costs n views.
    """
    def view(s: S) -> tuple[B, S]:
        a, whole = l1.view(s)
        b, _ = l2.view(a)
        return b, whole

    def store(s: S) -> tuple[B, Callable[[B], S]]:
        a, put_outer = l1.focus(s)
        b, put_inner = l2.focus(a)
        return b, lambda b2: put_outer(put_inner(b2))

    def rebuild(b: B, s: S) -> S:
        _, put = store(s)
        return put(b)

    return _logged(l1, l2, Lens(view=view, rebuild=rebuild, store=store))

def compose_prism(p1: Prism[S, A], p2: Prism[A, B]) -> Prism[S, B]:
    """
    Prism . Prism -> Prism. When the outer prism matches but the inner one
    does not, the inner leftover is rebuilt into the outer alternative so
    the composite hands back the original aggregate.
    """
    def into(s: S) -> Match[B, S]:
        match p1.into(s):
            case Matched(a):
                match p2.into(a):
                    case Matched(b):
                        return Matched(b)
                    case Unmatched(rest):
                        return Unmatched(p1.out_of(Matched(rest)))
            case Unmatched(rest):
                return Unmatched(rest)
        raise TypeError("prism 'into' must return Matched or Unmatched")

    def out_of(r: Match[B, S]) -> S:
        match r:
            case Matched(b):
                return p1.out_of(Matched(p2.out_of(Matched(b))))
            case Unmatched(s):
                return p1.out_of(Unmatched(s))
        raise TypeError(f"expected Matched or Unmatched, got {r!r}")

    return _logged(p1, p2, Prism(into=into, out_of=out_of))

def _chain(o1: Optional[S, A], o2: Optional[A, B]) -> Optional[S, B]:
    # An absent outer focus makes the composite absent without consulting
    # o2. Setting through it fills it in only when o2 can build its whole
    # value from the new focus; otherwise s comes back unchanged.
    def view(s: S) -> tuple[Maybe[B], S]:
        ma, whole = o1.view(s)
        match ma:
            case Just(a):
                mb, _ = o2.view(a)
                return mb, whole
            case _:
                return Nothing, whole

    def store(s: S) -> tuple[Maybe[B], Callable[[Maybe[B]], S]]:
        ma, put_outer = o1.focus(s)
        match ma:
            case Just(a):
                mb, put_inner = o2.focus(a)
                return mb, lambda mb2: put_outer(Just(put_inner(mb2)))

        def fill(mb: Maybe[B]) -> S:
            match mb:
                case Just(b) if o2.build is not None:
                    return put_outer(Just(o2.build(b)))
                case _:
                    return s

        return Nothing, fill

    def rebuild(mb: Maybe[B], s: S) -> S:
        _, put = store(s)
        return put(mb)

    build = None
    if o1.build is not None and o2.build is not None:
        outer, inner = o1.build, o2.build
        build = lambda b: outer(inner(b))  # pylint: disable=unnecessary-lambda-assignment

    return Optional(view=view, rebuild=rebuild, build=build, store=store)

def compose_optional(o1: Optional[S, A], o2: Optional[A, B]) \
    -> Optional[S, B]:
    """Optional . Optional -> Optional."""
    return _logged(o1, o2, _chain(o1, o2))


# --- Mixed compositions: lift, then compose as Optionals ---

def optional_then_lens(o: Optional[S, A], l: Lens[A, B]) -> Optional[S, B]:
    """Optional . Lens -> Optional."""
    return _logged(o, l, _chain(o, from_lens(l)))

def optional_then_prism(o: Optional[S, A], p: Prism[A, B]) \
    -> Optional[S, B]:
    """Optional . Prism -> Optional."""
    return _logged(o, p, _chain(o, from_prism(p)))

def lens_then_prism(l: Lens[S, A], p: Prism[A, B]) -> Optional[S, B]:
    """Lens . Prism -> Optional: the field always exists, the
    alternative may not."""
    return _logged(l, p, _chain(from_lens(l), from_prism(p)))

def prism_then_lens(p: Prism[S, A], l: Lens[A, B]) -> Optional[S, B]:
    """Prism . Lens -> Optional: the field exists only when the
    alternative matches."""
    return _logged(p, l, _chain(from_prism(p), from_lens(l)))

def lens_then_optional(l: Lens[S, A], o: Optional[A, B]) -> Optional[S, B]:
    """Lens . Optional -> Optional."""
    return _logged(l, o, _chain(from_lens(l), o))

def prism_then_optional(p: Prism[S, A], o: Optional[A, B]) \
    -> Optional[S, B]:
    """Prism . Optional -> Optional."""
    return _logged(p, o, _chain(from_prism(p), o))


_TABLE = {
    (Lens, Lens): compose_lens,
    (Lens, Prism): lens_then_prism,
    (Lens, Optional): lens_then_optional,
    (Prism, Lens): prism_then_lens,
    (Prism, Prism): compose_prism,
    (Prism, Optional): prism_then_optional,
    (Optional, Lens): optional_then_lens,
    (Optional, Prism): optional_then_prism,
    (Optional, Optional): compose_optional,
}

def _kind_of(x: Any) -> type:
    for kind in (Lens, Prism, Optional):
        if isinstance(x, kind):
            return kind
    raise TypeError(
        f"cannot compose {type(x).__name__}: expected a Lens, "
        "a Prism or an Optional")

def compose_pair(left: Accessor, right: Accessor) -> Accessor:
    """Compose two accessors according to the closure table."""
    return _TABLE[(_kind_of(left), _kind_of(right))](left, right)

def compose(first: Accessor, *rest: Accessor) -> Accessor:
    """
    Compose one or more accessors, outermost first:
    `compose(a, b, c)` is `(a >> b) >> c`.
    """
    _kind_of(first)
    return reduce(compose_pair, rest, first)
