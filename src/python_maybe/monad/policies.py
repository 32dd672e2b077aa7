"""Runtime kinds, and the named exclusion policies built on top of them.

Some combinators treat a few kinds of held value differently: map() sends
scalars and functions down the ap() path, and concat() refuses to combine
numbers, plain objects, booleans and functions.  Each such rule is an
Exclusion, and Maybe.test() is the single place an Exclusion is evaluated.
"""

__all__ = [
    "ARRAY_KINDS",
    "CONCATENABLE_KINDS",
    "TEMPORAL_KINDS",
    "Exclusion",
    "MAP_AS_AP",
    "NON_CONCATENABLE",
    "implements_all",
    "is_kind",
    "is_nil",
    "is_pending_source",
    "is_plain_object",
]

import asyncio
import concurrent.futures
import datetime
import numbers
from collections.abc import Callable
from dataclasses import dataclass
from typing import Iterable

ARRAY_KINDS = (list, tuple)

# kinds that know how to concatenate themselves with +
CONCATENABLE_KINDS = ARRAY_KINDS + (str, bytes)

TEMPORAL_KINDS = (datetime.date, datetime.time, datetime.timedelta)

_NOT_PLAIN = ARRAY_KINDS + TEMPORAL_KINDS + (numbers.Number, str, bytes)


def is_nil(value) -> bool:
    return value is None


def is_pending_source(source) -> bool:
    return asyncio.isfuture(source) or isinstance(source, concurrent.futures.Future)


def is_plain_object(value) -> bool:
    """Whether value is an "object" in the everyday sense.

    Arrays, callables and dates are objects in Python's own type system,
    but not here, and neither are the scalars.
    """
    return not (is_nil(value) or callable(value) or isinstance(value, _NOT_PLAIN))


def is_kind(value, kind: type) -> bool:
    if kind is object:
        return is_plain_object(value)
    return isinstance(value, kind)


def implements_all(value, capabilities: Iterable[str]) -> bool:
    """True if value exposes every capability as a callable member.

    An empty set of capabilities is never implemented.
    """
    capabilities = tuple(capabilities)
    return bool(capabilities) and all(
        callable(getattr(value, name, None)) for name in capabilities
    )


@dataclass(frozen=True)
class Exclusion:
    """Kinds of held value that divert a combinator from its usual path.

    A nil value is always excluded.  A value matching one of `kinds` is
    excluded too, unless it exposes every capability named in `unless`.
    """

    kinds: tuple[type, ...] = ()
    unless: tuple[str, ...] = ()

    def excludes(self, value) -> bool:
        excluded = is_nil(value) or any(is_kind(value, kind) for kind in self.kinds)
        return excluded and not implements_all(value, self.unless)


MAP_AS_AP = Exclusion((numbers.Number, str, bool, Callable), unless=("map",))

NON_CONCATENABLE = Exclusion(
    (numbers.Number, object, bool, Callable), unless=("concat",)
)
