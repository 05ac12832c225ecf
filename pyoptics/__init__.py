""" imports for pyoptics """
from .compose import compose, compose_pair, compose_lens, compose_prism, \
    compose_optional, optional_then_lens, optional_then_prism, \
    lens_then_prism, prism_then_lens, lens_then_optional, \
    prism_then_optional, is_accessor, Accessor
from .either import Either, Left, Right
from .functor import Functor, map #pylint: disable=redefined-builtin
from .laws import Law, LawViolation, LawCheck, check_lens, check_prism, \
    check_optional, is_lawful
from .lens import Lens, lens, nth, key, identity, view, set_, over
from .log import configure_logging
from .match import Match, Matched, Unmatched, match_to_maybe, is_matched
from .maybe import Maybe, Just, Nothing, from_maybe, to_maybe, is_just
from .optional import Optional, from_lens, from_prism, nullable, at, index
from .prism import Prism, prism, just, matched
