import inspect
import json
from typing import ClassVar

from .. import log
from .algebra import Alternative, Monad, Monoid, Setoid
from .errors import InvalidConstruction, require_callable
from .policies import (
    CONCATENABLE_KINDS,
    MAP_AS_AP,
    NON_CONCATENABLE,
    Exclusion,
    is_kind,
    is_nil,
    is_pending_source,
)
from .types import ArgType, WrappedType

logger = log.get_logger(__name__)

LIB_TYPE = "python-maybe/Maybe"

IMPLEMENTS = frozenset(("alt", "ap", "chain", "concat", "equals", "map", "of", "zero"))

FANTASY_LAND = {
    name: f"fantasy-land/{name}"
    for name in ("alt", "ap", "chain", "concat", "empty", "equals", "map", "of", "zero")
}


def _pretty(value) -> str:
    if callable(value):
        return repr(value)
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError):
        return repr(value)


def _is_nan(value) -> bool:
    return isinstance(value, float) and value != value


def _deep_equals(first, second) -> bool:
    """Structural equality, strict about types and reflexive for NaN."""
    if first is second:
        return True
    if type(first) is not type(second):
        return False
    if isinstance(first, (list, tuple)):
        return len(first) == len(second) and all(map(_deep_equals, first, second))
    if isinstance(first, dict):
        return first.keys() == second.keys() and all(
            _deep_equals(item, second[key]) for key, item in first.items()
        )
    if _is_nan(first):
        return _is_nan(second)
    return first == second


class Maybe(Monad[WrappedType], Alternative[WrappedType], Monoid, Setoid):
    """A value that may be absent, with a combinator algebra that never raises.

    Instances are immutable once built.  The two variants are told apart by
    an explicit tag, never by the held value: Just(None) is present.

    Combinators taking another Maybe check its type first and answer with
    Nothing (or False, for equals) when handed anything else.
    """

    _UNSET: ClassVar[object] = object()

    def __new__(cls, value=_UNSET, nothing=False, source=None):
        if value is cls._UNSET:
            if not nothing and source is None:
                raise InvalidConstruction()
            value = None
        if source is not None:
            return cls.async_of(source)
        instance = super().__new__(cls)
        object.__setattr__(instance, "_nothing", bool(nothing))
        object.__setattr__(instance, "_value", None if nothing else value)
        return instance

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value, self._nothing))

    # constructors

    @classmethod
    def Just(cls, value):
        return cls(value, False)

    @classmethod
    def Nothing(cls):
        return cls(None, True)

    @classmethod
    def of(cls, value):
        return cls.Just(value)

    @classmethod
    def zero(cls):
        return cls.Nothing()

    @classmethod
    def empty(cls):
        return cls.Nothing()

    @classmethod
    def safe_of(cls, value):
        return cls.Nothing() if is_nil(value) else cls.Just(value)

    @classmethod
    def async_of(cls, source):
        """Maybe of a pending future, settling in place once it completes.

        Anything that is not an asyncio or concurrent.futures future gives
        a plain Nothing.
        """
        if not is_pending_source(source):
            logger.debug(f"not a pending source, taking it as Nothing: {source!r}")
            return cls.Nothing()

        from .unsettled import Unsettled

        return Unsettled(source)

    # introspection

    @classmethod
    def type(cls) -> str:
        return LIB_TYPE

    @classmethod
    def implements(cls, name: str) -> bool:
        return name in IMPLEMENTS

    @staticmethod
    def check(left, right):
        """Type-marker test: right() for a genuine Maybe, left for anything else."""

        def checker(item):
            return right() if isinstance(item, Maybe) else left

        return checker

    def test(self, left, right, excluded=(), required=()):
        """Return left if the held value is nil or of an excluded kind, else right().

        A value exposing every capability in `required` as a callable member
        is never excluded for its kind.
        """
        if Exclusion(tuple(excluded), tuple(required)).excludes(self._value):
            return left
        return right()

    def _test_policy(self, left, right, policy: Exclusion):
        return self.test(left, right, policy.kinds, policy.unless)

    # predicates and extraction

    @property
    def value(self):
        return self._value

    @property
    def is_frozen(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return self._nothing

    def is_just(self) -> bool:
        return not self._nothing

    def value_or(self, default):
        return default if self._nothing else self._value

    def to_just(self, value):
        return Just(value)

    def either(self, left, right):
        require_callable(left, "left")
        require_callable(right, "right")
        return left() if self._nothing else right(self._value)

    def is_a(self, expected) -> bool:
        return False if self._nothing else is_kind(self._value, expected)

    # Functor

    @classmethod
    def _map_cls(cls, func, instance):
        return instance._test_policy(
            instance._map_as_ap, lambda: instance._map_structurally, MAP_AS_AP
        )(func)

    def _map_as_ap(self, func):
        if is_nil(self._value):
            return Nothing()
        return Just(func).ap(self)

    def _map_structurally(self, func):
        value = self._value
        if isinstance(value, list):
            return Just([func(item) for item in value])
        if isinstance(value, tuple):
            return Just(tuple(func(item) for item in value))
        return Just(func(value))

    # Apply

    def ap(self, other):
        return Maybe.check(Nothing(), lambda: self._ap(other))(other)

    def _ap(self, other):
        # the function may sit on either side
        for holder, arg in ((self, other), (other, self)):
            if holder.is_just() and callable(holder.value):
                return Just(holder.value(arg.value)) if arg.is_just() else Nothing()
        return Nothing()

    # Chain

    @classmethod
    def _chain_cls(cls, func, instance):
        if instance.is_nothing():
            return Nothing()
        result = func(instance.value)
        if isinstance(result, Maybe):
            return result
        logger.debug(f"chained function returned a non-Maybe, got {result!r}")
        return Nothing()

    # Alt

    def alt(self, other):
        return Maybe.check(Nothing(), lambda: self._alt(other))(other)

    def _alt(self, other):
        if self._nothing and other.is_just():
            return self.to_just(other.value)
        return self

    # Semigroup

    def concat(self, other):
        return Maybe.check(Nothing(), lambda: self._concat(other))(other)

    def _concat(self, other):
        if is_nil(self._value):
            return other
        if is_nil(other.value):
            return self
        return self._test_policy(
            Nothing(),
            lambda: other.test(
                Nothing(),
                lambda: self._concat_same_kind(other),
                NON_CONCATENABLE.kinds,
                NON_CONCATENABLE.unless,
            ),
            NON_CONCATENABLE,
        )

    def _concat_same_kind(self, other):
        first, second = self._value, other.value
        if type(first) is not type(second):
            return Nothing()
        own_concat = getattr(first, "concat", None)
        if callable(own_concat):
            return Just(own_concat(second))
        if isinstance(first, CONCATENABLE_KINDS):
            return Just(first + second)
        return Nothing()

    # Setoid

    def equals(self, other) -> bool:
        return Maybe.check(False, lambda: self._equals(other))(other)

    def _equals(self, other) -> bool:
        if self._nothing:
            return other.is_nothing()
        return other.is_just() and _deep_equals(self._value, other.value)

    def __hash__(self):
        value = self._value
        # every NaN is equal to every other here, so they must hash alike
        return hash((self._nothing, type(value), "nan" if _is_nan(value) else value))

    def __str__(self) -> str:
        if self._nothing:
            return "Nothing"
        return f"Just {_pretty(self._value)}"

    def __repr__(self) -> str:
        if self._nothing:
            return "Nothing()"
        return f"Just({self._value!r})"


for _name, _alias in FANTASY_LAND.items():
    setattr(Maybe, _alias, inspect.getattr_static(Maybe, _name))

setattr(Maybe, "@@type", LIB_TYPE)
setattr(Maybe, "@@implements", inspect.getattr_static(Maybe, "implements"))


def Just(val: ArgType) -> Maybe[ArgType]:
    return Maybe(val, False)


def Nothing() -> Maybe:
    return Maybe(None, True)
