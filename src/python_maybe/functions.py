"""Standalone forms of the Maybe combinators.

Each combinator comes curried, taking its own arguments and returning a
function of the Maybe, and uncurried (suffixed `_u`), taking the Maybe last:

    >>> tripled = map(lambda x: x * 3)
    >>> tripled(Just([1, 2]))
    Just([3, 6])
    >>> map_u(lambda x: x * 3, Just([1, 2]))
    Just([3, 6])

Curried forms check callable arguments up front, so a bad callback fails
where the pipeline is built rather than where it runs.
"""

from operator import methodcaller

from .monad.errors import require_callable

__all__ = (
    "alt",
    "alt_u",
    "ap",
    "ap_u",
    "chain",
    "chain_u",
    "concat",
    "concat_u",
    "either",
    "either_u",
    "equals",
    "equals_u",
    "is_a",
    "is_a_u",
    "is_just",
    "is_nothing",
    "map",
    "map_u",
    "test",
    "test_u",
    "to_string",
    "value_or",
    "value_or_u",
)


def map(f):
    return methodcaller("map", require_callable(f, "f"))


def map_u(f, m):
    return m.map(f)


def chain(f):
    return methodcaller("chain", require_callable(f, "f"))


def chain_u(f, m):
    return m.chain(f)


def ap(other):
    return methodcaller("ap", other)


def ap_u(other, m):
    return m.ap(other)


def concat(other):
    return methodcaller("concat", other)


def concat_u(other, m):
    return m.concat(other)


def equals(other):
    return methodcaller("equals", other)


def equals_u(other, m):
    return m.equals(other)


def alt(other):
    return methodcaller("alt", other)


def alt_u(other, m):
    return m.alt(other)


def either(left, right):
    return methodcaller(
        "either", require_callable(left, "left"), require_callable(right, "right")
    )


def either_u(left, right, m):
    return m.either(left, right)


def value_or(default):
    return methodcaller("value_or", default)


def value_or_u(default, m):
    return m.value_or(default)


def is_a(expected):
    return methodcaller("is_a", expected)


def is_a_u(expected, m):
    return m.is_a(expected)


def test(left, right, excluded=(), required=()):
    return methodcaller("test", left, right, excluded, required)


def test_u(left, right, excluded, required, m):
    return m.test(left, right, excluded, required)


def is_just(m) -> bool:
    return m.is_just()


def is_nothing(m) -> bool:
    return m.is_nothing()


def to_string(m) -> str:
    return str(m)
