"""Exception hierarchy for localchan."""

from __future__ import annotations

from typing import Any, Tuple

__all__ = ["LocalChannelError", "MappingError"]


class LocalChannelError(Exception):
    """Base class for localchan exceptions."""


class MappingError(LocalChannelError):
    """Raised when a generalize mapping has no case for the value it was given."""

    def __init__(self, path: Tuple[str, ...], value: Any, reason: str = "") -> None:
        where = "/".join(path) or "<root>"
        msg = f"MappingError(path={where}): cannot map {value!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.path = path
        self.value = value
