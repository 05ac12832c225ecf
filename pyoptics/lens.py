"""
Field accessors (lenses) over immutable product types.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, is_dataclass, replace
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

S = TypeVar("S")  # whole aggregate (a frozen dataclass, NamedTuple, ...)
A = TypeVar("A")  # focused field type
K = TypeVar("K")

@dataclass(frozen=True)
class Lens[S, A]:
    """
    Allows for focused access and modification of a specific field
    within a larger immutable value.

    Total: every S has exactly one A in focus. `view` hands back the focus
    together with the aggregate it was taken from, so that `rebuild` can
    put a new focus back while keeping the sibling fields it does not own.

    Laws (for every s, a, b):
        set(s, get(s)) == s
        get(set(s, a)) == a
        set(set(s, a), b) == set(s, b)

    `store`, when given, returns the focus with a continuation that puts a
    new focus back. Composites supply it so one pass over the chain serves
    both the read and the write.
    """
    view: Callable[[S], tuple[A, S]]
    rebuild: Callable[[A, S], S]
    store: Callable[[S], tuple[A, Callable[[A], S]]] | None = None

    @classmethod
    def of(cls, getter: Callable[[S], A],
           setter: Callable[[S, A], S]) -> "Lens[S, A]":
        """
        Build a lens from a plain getter and a setter returning a new S.
        """
        return cls(view=lambda s: (getter(s), s),
                   rebuild=lambda a, s: setter(s, a))

    def focus(self, s: S) -> tuple[A, Callable[[A], S]]:
        """The focus, and a function putting a new focus back into `s`."""
        if self.store is not None:
            return self.store(s)
        a, whole = self.view(s)
        return a, lambda b: self.rebuild(b, whole)

    def get(self, s: S) -> A:
        """Project the focused field."""
        a, _ = self.view(s)
        return a

    def set(self, s: S, a: A) -> S:
        """Return a new aggregate with the focused field replaced."""
        return self.rebuild(a, s)

    def over(self, s: S, f: Callable[[A], A]) -> S:
        """Return a new aggregate with `f` applied to the focused field."""
        a, put = self.focus(s)
        return put(f(a))

    def __rshift__(self, other):
        """`outer >> inner` composes left to right."""
        from .compose import compose_pair, is_accessor # pylint: disable=import-outside-toplevel
        if not is_accessor(other):
            return NotImplemented
        return compose_pair(self, other)


# --- Accessor-agnostic helpers ---

def view(accessor, s):
    """
    Read the focus of `s`: a plain value for a Lens, a Maybe for a
    Prism or an Optional.
    """
    return accessor.get(s)

def set_(accessor, *args):
    """
    Set the focus. Lenses and optionals take `(s, a)`; a prism only
    takes `(a,)` since the alternative determines the whole value.
    """
    return accessor.set(*args)

def over(accessor, s, f: Callable):
    """
    Modify the focus of `s` using a function.
    """
    return accessor.over(s, f)


# --- Leaf lenses ---

def _replace_field(s: Any, field_name: str, v: Any) -> Any:
    if isinstance(s, BaseModel):
        return s.model_copy(update={field_name: v})
    if is_dataclass(s) and not isinstance(s, type):
        return replace(s, **{field_name: v})
    if isinstance(s, tuple) and hasattr(s, "_replace"):
        return s._replace(**{field_name: v})
    raise TypeError(
        f"cannot rebuild field '{field_name}' of {type(s).__name__}: "
        "expected a dataclass, a NamedTuple or a pydantic model")

def lens(field_name: str) -> Lens:
    """
    Create a lens for a named field of a dataclass, NamedTuple or
    pydantic model.
    """
    return Lens.of(
        getter=lambda s: getattr(s, field_name),
        setter=lambda s, v: _replace_field(s, field_name, v)
    )

def nth(n: int) -> Lens[Sequence[A], A]:
    """
    Element `n` of a tuple or list. The aggregate must be long enough;
    an out-of-range index raises IndexError.
    """
    def setter(s: Sequence[A], a: A) -> Sequence[A]:
        items = list(s)
        items[n] = a
        return tuple(items) if isinstance(s, tuple) else items
    return Lens.of(getter=lambda s: s[n], setter=setter)

def key(k: K) -> Lens[Mapping[K, A], A]:
    """
    Value stored under `k` in a mapping that must contain it.
    Rebuilding returns a new dict.
    """
    return Lens.of(getter=lambda s: s[k],
                   setter=lambda s, a: {**s, k: a})

def identity() -> Lens[S, S]:
    """Focus on the whole value."""
    return Lens(view=lambda s: (s, s), rebuild=lambda a, _: a)
