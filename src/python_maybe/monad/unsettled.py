"""
A Maybe still waiting on a pending future

"""
__all__ = ["Unsettled"]

import asyncio

from .. import log
from .maybe import Just, Maybe, Nothing

logger = log.get_logger(__name__)


class Unsettled:
    """
    Reads as Nothing until its source future completes, then settles in
    place exactly once and is frozen from there on.

    A truthy result settles to Just(result).  A falsy result, a rejection
    (the future raised) or a cancellation settles to Nothing.

    Every Maybe operation is answered by the current state, so code holding
    an Unsettled needs not care whether it has settled yet.  Awaiting it
    gives the final, immutable Maybe.

    """

    __slots__ = ("_state", "_source", "_frozen")

    def __init__(self, source):
        object.__setattr__(self, "_state", Nothing())
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_frozen", False)
        source.add_done_callback(self._settle)

    def _settle(self, source) -> None:
        if source.cancelled():
            logger.debug(f"pending source cancelled, settling to Nothing: {source!r}")
            state = Nothing()
        elif (exc := source.exception()) is not None:
            logger.debug(
                "pending source rejected, settling to Nothing",
                exc_info=(type(exc), exc, exc.__traceback__),
            )
            state = Nothing()
        else:
            result = source.result()
            state = Just(result) if result else Nothing()
            logger.debug(f"pending source settled to {state!s}")

        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_source", None)
        object.__setattr__(self, "_frozen", True)

    @property
    def current(self) -> Maybe:
        return self._state

    @property
    def source(self):
        return self._source

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    async def settled(self) -> Maybe:
        """
        Wait for the source to complete, and return the settled Maybe.

        Never raises on a rejected source, that is reported as Nothing just
        the same as it would be without awaiting.

        """
        source = self._source
        if source is not None:
            # the settle callback was registered first, so it has run by now
            await asyncio.wait({asyncio.wrap_future(source)})
        return self._state

    def __await__(self):
        return self.settled().__await__()

    def __getattr__(self, name):
        if name in Unsettled.__slots__:
            raise AttributeError(name)
        return getattr(self._state, name)

    def __setattr__(self, name, value):
        raise AttributeError("Unsettled only changes by settling")

    def __delattr__(self, name):
        raise AttributeError("Unsettled only changes by settling")

    def __reduce__(self):
        # a copy is a snapshot, it does not follow the source
        return self._state.__reduce__()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._state.equals(other)

    __hash__ = None

    def __add__(self, other):
        return self._state.concat(other)

    def __or__(self, other):
        return self._state.alt(other)

    def __str__(self) -> str:
        return str(self._state)

    def __repr__(self) -> str:
        if not self._frozen:
            return "Unsettled(<pending>)"
        return f"Unsettled({self._state!r})"


Maybe.register(Unsettled)
