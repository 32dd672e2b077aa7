"""Abstract bases for the Fantasy-Land algebras implemented by Maybe.

Each algebra is an ABC naming the operations it requires.  Where an algebra
gives an operation for free (an operator overload, an alias, a decorator),
the base class provides it.  Laws are not checked here; that is the job of
the test-suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import wraps
from typing import Callable, Generic, Self, TypeVar

from .. import compose_unary, identity
from .errors import require_callable
from .types import ArgType, Params, ReturnType, WrappedType


class Setoid(ABC):
    """A type with a notion of structural equality.

    equals() must be reflexive, symmetric and transitive.
    """

    @abstractmethod
    def equals(self, other: object) -> bool: ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Setoid):
            return NotImplemented
        return self.equals(other)


class Semigroup(ABC):
    """A type with an associative binary operation, spelled concat()."""

    @abstractmethod
    def concat(self, other: Self) -> Self: ...

    def __add__(self, other: Self) -> Self:
        return self.concat(other)


class Monoid(Semigroup):
    """A Semigroup with an identity.

    Note that inverses need not exist in a monoid (so it is not necessary to
    implement __sub__() or __neg__()).
    """

    @classmethod
    @abstractmethod
    def empty(cls) -> Self:
        """Identity of this monoid.

        The caller is responsible for ensuring that the algebraic properties
        of empty() are obeyed.
        """
        ...


class Functor(ABC, Generic[WrappedType]):
    """Base class for the Functor-Apply-Applicative-Chain-Monad hierarchy.

    A Functor can be thought of as a container associated with a generic type
    (the type of whatever data is inserted into the container), such that
    functions of variables of that type can be "lifted" to act on the
    container rather than directly on its contents.
    """

    @classmethod
    @abstractmethod
    def _map_cls(
        cls,
        func,
        instance,
    ):
        """Class implementation of map, the defining feature of a Functor.

        This function is defined as a classmethod for two reasons:
            1. to emphasize that the implementation of map is a property of
               the Functor class itself, not any particular instance;
            2. to keep the argument check in Functor.map() in one place for
               every subclass.
        """
        ...

    def map(self, func: Callable[[WrappedType], ReturnType]):
        """Wrapper around Functor._map_cls().

        Subclasses should override Functor._map_cls() instead of this
        function.
        """
        require_callable(func, "f")
        return self._map_cls(func, self)


class Apply(Functor[WrappedType]):
    """A Functor that can apply injected functions to injected values."""

    @abstractmethod
    def ap(self, other):
        """Python equivalent of Haskell's Applicative.apply operator <*>."""
        ...


class Applicative(Apply[WrappedType]):
    @classmethod
    @abstractmethod
    def of(cls, value: WrappedType):
        """Inject a value into a functorial container.

        This should be thought of as the default constructor of Applicative
        instances.  In Haskell, this function is called pure().
        """
        ...


class Alt(Functor[WrappedType]):
    """A Functor offering a choice between two alternatives."""

    @abstractmethod
    def alt(self, other): ...

    def __or__(self, other):
        return self.alt(other)


class Plus(Alt[WrappedType]):
    @classmethod
    @abstractmethod
    def zero(cls):
        """Identity of alt(), which also annihilates map()."""
        ...


class Alternative(Applicative[WrappedType], Plus[WrappedType]):
    """An Applicative with a Plus.

    ap() must distribute over alt(), and ap() against zero() is zero().
    """


class Chain(Apply[WrappedType]):
    @classmethod
    @abstractmethod
    def _chain_cls(cls, func, instance): ...

    def chain(self, func):
        """Bind the result of a monadic computation into another computation.

        A **monadic computation** is simply a function that returns a
        context, i.e., has type Callable[[T], Chain[R]].  chain() passes the
        contents of this context into such a function, allowing the
        construction of "chains" of computations that maintain a single
        coherent context.
        """
        require_callable(func, "f")
        return self._chain_cls(func, self)


class Monad(Applicative[WrappedType], Chain[WrappedType]):
    """Base class for Monads.

    A Monad is an Applicative that is also a Chain.  Nothing more needs to
    be implemented; the Monad laws (left and right identity of of() with
    respect to chain()) are a consequence of implementing both consistently.
    """

    def bind(self, func):
        return self.chain(func)

    @classmethod
    def wrap(
        cls,
        process_results: None | Callable[[ReturnType], ArgType] = None,
        lift_with: None | Callable[[ArgType], MonadType] = None,
    ) -> Callable[[Callable[Params, ReturnType]], Callable[Params, MonadType]]:
        """Decorator factory to create monadic functions.

        Args:
            process_results (optional): function to apply before injecting the
                decorated function's return value into the monad
            lift_with (optional): wrapper function to inject the return value
                of the decorated function into the monad (defaults to cls.of)
        """

        lift = compose_unary(
            lift_with if lift_with is not None else cls.of,
            process_results if process_results is not None else identity,
        )

        def decorator(
            func: Callable[Params, ReturnType]
        ) -> Callable[Params, MonadType]:
            @wraps(func)
            def wrapper(*args, **kwargs):
                return lift(func(*args, **kwargs))

            return wrapper

        return decorator


MonadType = TypeVar("MonadType", bound=Monad)
