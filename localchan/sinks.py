# localchan/sinks.py
from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

R = TypeVar("R", contravariant=True)


@runtime_checkable
class RootSink(Protocol[R]):
    """
    The host-owned endpoint every channel eventually reaches.
    - send() must accept any well-typed value and may be called concurrently
    - the returned effect is opaque; delivery/ordering belong to the host
    """

    def send(self, value: R) -> Any: ...


class CallableSink:
    """Adapt a plain dispatch function into a RootSink."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Any], Any]) -> None:
        if not callable(func):
            raise TypeError(f"CallableSink expects a callable, got {type(func).__name__}")
        self._func = func

    def send(self, value: Any) -> Any:
        return self._func(value)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", type(self._func).__name__)
        return f"CallableSink({name})"
