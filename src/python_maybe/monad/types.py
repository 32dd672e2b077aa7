from typing import ParamSpec, TypeVar

WrappedType = TypeVar("WrappedType")
ReturnType = TypeVar("ReturnType")
ArgType = TypeVar("ArgType")
Params = ParamSpec("Params")
