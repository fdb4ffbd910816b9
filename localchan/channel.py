# localchan/channel.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from localchan.errors import MappingError
from localchan.settings import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")
L = TypeVar("L")

Mapping = Callable[[Any], Any]
Relay = Callable[[Any], Any]

# Exceptions a partial mapping raises when it has no case for its input.
_MISSING_CASE_ERRORS = (LookupError, TypeError, ValueError, NotImplementedError)


@dataclass(frozen=True, slots=True, eq=False)
class LocalChannel(Generic[T]):
    """
    A way to emit a T that eventually reaches a root sink.
    - immutable; holds only the composed relay closure and its scope path
    - no state of its own: everything stateful lives in the root sink
    """

    relay: Relay = field(repr=False)
    path: Tuple[str, ...] = ()
    trace: bool = False

    def send(self, value: T) -> Any:
        return send(self, value)

    def localize(
        self,
        generalize: Callable[[L], T],
        *,
        label: Optional[str] = None,
        trace: Optional[bool] = None,
    ) -> "LocalChannel[L]":
        return localize(generalize, self, label=label, trace=trace)

    def __call__(self, value: T) -> Any:
        return send(self, value)


def identity(value: Any) -> Any:
    return value


def compose(*mappings: Mapping) -> Mapping:
    """
    Right-to-left composition: compose(f, g)(x) == f(g(x)).
    compose() is identity.
    """
    if not mappings:
        return identity
    if len(mappings) == 1:
        return mappings[0]

    chain = tuple(reversed(mappings))

    def composed(value: Any) -> Any:
        for m in chain:
            value = m(value)
        return value

    composed.__qualname__ = "*".join(_label_of(m) for m in mappings)
    return composed


def create(
    generalize: Callable[[L], Any],
    sink: Any,
    *,
    label: Optional[str] = None,
    trace: Optional[bool] = None,
) -> LocalChannel[L]:
    """
    Wrap a root sink into a channel accepting the local type.
    Nothing is sent here; sink.send is only called by send().
    """
    sink_send = getattr(sink, "send", None)
    if not callable(sink_send):
        raise TypeError(f"root sink must expose a callable send(), got {type(sink).__name__}")

    settings = get_settings()
    path = (label or _label_of(generalize),)
    if trace is None:
        trace = settings.TRACE_CHANNELS

    logger.debug("create channel %s -> %r", "/".join(path), sink)
    relay = _relay(generalize, sink_send, path, trace, settings.WRAP_MAPPING_ERRORS)
    return LocalChannel(relay=relay, path=path, trace=trace)


def localize(
    generalize: Callable[[L], T],
    parent: LocalChannel[T],
    *,
    label: Optional[str] = None,
    trace: Optional[bool] = None,
) -> LocalChannel[L]:
    """
    Narrow an existing channel to a more local type.
    The new relay applies generalize, then hands off to the parent's relay,
    so chains compose without re-deriving from the root.
    generalize must be pure and must not send on any channel itself.
    """
    if not isinstance(parent, LocalChannel):
        raise TypeError(f"localize expects a LocalChannel parent, got {type(parent).__name__}")

    settings = get_settings()
    path = parent.path + (label or _label_of(generalize),)
    if trace is None:
        trace = parent.trace

    logger.debug("localize channel %s", "/".join(path))
    relay = _relay(generalize, parent.relay, path, trace, settings.WRAP_MAPPING_ERRORS)
    return LocalChannel(relay=relay, path=path, trace=trace)


def send(channel: LocalChannel[T], value: T) -> Any:
    """
    Relay value through the channel's mapping chain.
    Exactly one root sink send() per call; its effect is returned unchanged.
    """
    if not isinstance(channel, LocalChannel):
        raise TypeError(f"send expects a LocalChannel, got {type(channel).__name__}")
    return channel.relay(value)


def _relay(
    generalize: Mapping,
    forward: Relay,
    path: Tuple[str, ...],
    trace: bool,
    wrap_errors: bool,
) -> Relay:
    where = "/".join(path)

    def relay(value: Any) -> Any:
        if wrap_errors:
            try:
                mapped = generalize(value)
            except _MISSING_CASE_ERRORS as e:
                raise MappingError(path, value, str(e)) from e
        else:
            mapped = generalize(value)

        if trace:
            logger.debug("relay %s: %r -> %r", where, value, mapped)
        # forward() is outside the try: upstream mapping and sink errors pass through as-is
        return forward(mapped)

    return relay


def _label_of(generalize: Any) -> str:
    # Results.of inherited from Envelope should read "Results.of", not "Envelope.of"
    owner = getattr(generalize, "__self__", None)
    if isinstance(owner, type):
        return f"{owner.__name__}.{generalize.__name__}"
    name = getattr(generalize, "__qualname__", None) or getattr(generalize, "__name__", None)
    return name or type(generalize).__name__
