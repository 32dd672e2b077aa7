"""Errors raised by Maybe.

Only misuse is an error: a constructor called with nothing to construct, or
a combinator handed a callback that cannot be called.  Every other mismatch
is reported as a Nothing result instead of an exception.
"""

__all__ = ["MaybeError", "InvalidConstruction", "NotAFunction", "require_callable"]


class MaybeError(TypeError):
    pass


class InvalidConstruction(MaybeError):
    def __init__(self):
        super().__init__("Invalid Maybe constructor")


class NotAFunction(MaybeError):
    __slots__ = ("param", "value")

    def __init__(self, param: str, value: object):
        self.param = param
        self.value = value
        super().__init__(str(self))

    def __repr__(self):
        return f"NotAFunction({self.param!r}, {self.value!r})"

    def __str__(self):
        return f"{self.param} must be a function, got {type(self.value).__name__}"


def require_callable(value, param: str):
    if not callable(value):
        raise NotAFunction(param, value)
    return value
