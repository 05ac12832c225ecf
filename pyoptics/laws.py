"""
Law checks for accessors a caller supplies by hand.

Nothing at construction time can tell whether a `view`/`rebuild` or
`into`/`out_of` pair is lawful. These checkers exercise an accessor on sample
values and report every broken law as data, so a test suite can register
its reference accessors and assert they come back `Right`.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .either import Either, Left, Right
from .lens import Lens
from .log import logger
from .match import Unmatched
from .maybe import Just, Nothing
from .optional import Optional
from .prism import Prism

T = TypeVar("T")

class Law(str, Enum):
    """
    The laws an accessor must keep, with a readable statement of each.
    """
    LENS_GET_SET = "setting the value just read must not change the aggregate"
    LENS_SET_GET = "reading after a set must return the value set"
    LENS_SET_SET = "setting twice must equal setting the last value once"
    PRISM_MATCH_BUILD = "a built alternative must match with its payload"
    PRISM_NO_MATCH_IDENTITY = "an unmatched value must be handed back unchanged"
    PRISM_ROUND_TRIP = "rebuilding the result of a match must give the value back"
    OPTIONAL_GET_SET = "rebuilding with the focus just read must not change the aggregate"
    OPTIONAL_SET_GET = "reading after a set must return the value set"
    OPTIONAL_SET_SET = "setting twice must equal setting the last value once"

@dataclass(frozen=True)
class LawViolation:
    """
    One broken law, with the values that broke it.
    """
    law: Law
    detail: str

    def __str__(self) -> str:
        return f"{self.law.name}: {self.law.value} ({self.detail})"

type LawCheck[T] = Either[tuple[LawViolation, ...], T]


def _verdict(accessor: T, violations: list[LawViolation]) -> LawCheck[T]:
    if not violations:
        return Right(accessor)
    for violation in violations:
        logger.warning("law violated: %s", violation)
    return Left(tuple(violations))

def check_lens(l: Lens, s: Any, a: Any, b: Any) -> LawCheck[Lens]:
    """
    Check get-set on `s`, and set-get and set-set with the focus values
    `a` and `b`.
    """
    violations: list[LawViolation] = []
    if (got := l.set(s, l.get(s))) != s:
        violations.append(LawViolation(
            Law.LENS_GET_SET, f"set(s, get(s)) = {got!r}, s = {s!r}"))
    if (got := l.get(l.set(s, a))) != a:
        violations.append(LawViolation(
            Law.LENS_SET_GET, f"get(set(s, a)) = {got!r}, a = {a!r}"))
    if (twice := l.set(l.set(s, a), b)) != (once := l.set(s, b)):
        violations.append(LawViolation(
            Law.LENS_SET_SET,
            f"set(set(s, a), b) = {twice!r}, set(s, b) = {once!r}"))
    return _verdict(l, violations)

def check_prism(p: Prism, s: Any, a: Any) -> LawCheck[Prism]:
    """
    Check match-build with the payload `a`, and the no-match identity
    and round trip on the aggregate `s`.
    """
    violations: list[LawViolation] = []
    if (got := p.get(p.set(a))) != Just(a):
        violations.append(LawViolation(
            Law.PRISM_MATCH_BUILD, f"get(set(a)) = {got!r}, a = {a!r}"))
    r = p.into(s)
    if isinstance(r, Unmatched) and \
        (r.s != s or p.out_of(Unmatched(r.s)) != s):
        violations.append(LawViolation(
            Law.PRISM_NO_MATCH_IDENTITY, f"into(s) = {r!r}, s = {s!r}"))
    if (got := p.out_of(r)) != s:
        violations.append(LawViolation(
            Law.PRISM_ROUND_TRIP, f"out_of(into(s)) = {got!r}, s = {s!r}"))
    return _verdict(p, violations)

def check_optional(o: Optional, s: Any, a: Any, b: Any) \
    -> LawCheck[Optional]:
    """
    Check get-set on `s`, and set-get and set-set with the focus values
    `a` and `b`. Setting an absent focus may leave it absent (e.g. an
    out-of-range index); it must never make it present with another value.
    """
    violations: list[LawViolation] = []
    before = o.get(s)
    if (got := o.rebuild(before, s)) != s:
        violations.append(LawViolation(
            Law.OPTIONAL_GET_SET, f"rebuild(get(s), s) = {got!r}, s = {s!r}"))
    after = o.get(o.set(s, a))
    if after != Just(a) and not (before == Nothing and after == Nothing):
        violations.append(LawViolation(
            Law.OPTIONAL_SET_GET, f"get(set(s, a)) = {after!r}, a = {a!r}"))
    if (twice := o.set(o.set(s, a), b)) != (once := o.set(s, b)):
        violations.append(LawViolation(
            Law.OPTIONAL_SET_SET,
            f"set(set(s, a), b) = {twice!r}, set(s, b) = {once!r}"))
    return _verdict(o, violations)

def is_lawful(check: LawCheck[Any]) -> bool:
    """True when a check found no violation."""
    return isinstance(check, Right)
