"""A lawful Maybe type plus a few function-composition helpers. """

from functools import reduce
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def compose_unary(*funcs: Iterable[Callable[[T], T]]) -> Callable[[T], T]:
    """Compose unary functions from right to left."""

    def composed(arg: T) -> T:
        return reduce(lambda res, fn: fn(res), reversed(funcs), arg)

    return composed


def precompose_unary(*funcs: Iterable[Callable[[T], T]]) -> Callable[[T], T]:
    """Compose unary functions from left to right."""

    def composed(arg: T) -> T:
        return reduce(lambda res, fn: fn(res), funcs, arg)

    return composed


def const(c: T) -> Callable[..., T]:
    """Function that returns c on any set of parameters."""

    def wrapper(*args, **kwargs) -> T:
        return c

    return wrapper


def identity(x: T) -> T:
    return x


# the helpers above must exist before the monad package imports them
from . import functions  # noqa: E402
from .monad import Just, Maybe, Nothing, Unsettled  # noqa: E402

__all__ = (
    "Maybe",
    "Just",
    "Nothing",
    "Unsettled",
    "functions",
    "compose_unary",
    "precompose_unary",
    "const",
    "identity",
)
