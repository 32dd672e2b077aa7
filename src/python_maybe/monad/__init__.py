from .algebra import (
    Alt,
    Alternative,
    Applicative,
    Apply,
    Chain,
    Functor,
    Monad,
    Monoid,
    Plus,
    Semigroup,
    Setoid,
)
from .errors import InvalidConstruction, MaybeError, NotAFunction
from .maybe import Just, Maybe, Nothing
from .unsettled import Unsettled

__all__ = (
    "Alt",
    "Alternative",
    "Applicative",
    "Apply",
    "Chain",
    "Functor",
    "Monad",
    "Monoid",
    "Plus",
    "Semigroup",
    "Setoid",
    "InvalidConstruction",
    "MaybeError",
    "NotAFunction",
    "Maybe",
    "Just",
    "Nothing",
    "Unsettled",
)
