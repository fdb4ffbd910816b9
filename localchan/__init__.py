"""Typed local channels that relay component events to a single root sink."""

from localchan.channel import LocalChannel, compose, create, identity, localize, send
from localchan.errors import LocalChannelError, MappingError
from localchan.events import Envelope, EventBase, variant_of
from localchan.log import configure_logging
from localchan.settings import Settings, get_settings
from localchan.sinks import CallableSink, RootSink

__version__ = "0.1.0"

__all__ = [
    "CallableSink",
    "Envelope",
    "EventBase",
    "LocalChannel",
    "LocalChannelError",
    "MappingError",
    "RootSink",
    "Settings",
    "compose",
    "configure_logging",
    "create",
    "get_settings",
    "identity",
    "localize",
    "send",
    "variant_of",
    "__version__",
]
