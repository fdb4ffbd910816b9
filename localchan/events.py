# localchan/events.py
from __future__ import annotations

"""
Pydantic building blocks for typed event hierarchies.
A root event type is usually a Union of EventBase subclasses, with one
Envelope subclass per nested component:

    class Search(Envelope):
        type: Literal["search"] = "search"
        event: SearchEvent

Search.of is then a generalize mapping for create()/localize(). Like every
mapping handed to those, it must be pure.
"""

from typing import Any, Callable, Type

from pydantic import BaseModel, ConfigDict


class EventBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str


class Envelope(EventBase):
    """An event that carries exactly one child event."""

    event: Any

    @classmethod
    def of(cls, event: Any) -> "Envelope":
        return cls(event=event)


def variant_of(cls: Type[BaseModel], field: str = "event") -> Callable[[Any], BaseModel]:
    """
    Build a mapping value -> cls(<field>=value) for wrapper models that do
    not subclass Envelope. Validation errors surface through the channel as
    MappingError.
    """

    def wrap(value: Any) -> BaseModel:
        return cls(**{field: value})

    wrap.__qualname__ = cls.__name__
    return wrap
