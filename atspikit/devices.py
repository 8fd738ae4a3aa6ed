"""Device events, keystroke listener settings and key definitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "EventType",
    "KeySynthType",
    "DeviceEvent",
    "EventListenerMode",
    "KeyDefinition",
]


class EventType(enum.IntEnum):
    """The kind of a device event."""

    KEY_PRESSED = 0
    KEY_RELEASED = 1
    BUTTON_PRESSED = 2
    BUTTON_RELEASED = 3


class KeySynthType(enum.IntEnum):
    """How a synthesized keyboard event is to be generated."""

    PRESS = 0
    RELEASE = 1
    PRESSRELEASE = 2
    SYM = 3
    STRING = 4
    LOCKMODIFIERS = 5
    UNLOCKMODIFIERS = 6


@dataclass(frozen=True)
class DeviceEvent:
    """A keyboard or mouse event as passed to listeners."""

    event_type: EventType
    id: int
    hw_code: int
    modifiers: int
    timestamp: int
    event_string: str
    is_text: bool


@dataclass(frozen=True)
class EventListenerMode:
    """How events are delivered to a registered listener.

    ``synchronous``: events arrive before the focused application sees them.
    ``preemptive``: events may be consumed; requires ``synchronous``.
    ``global_``: events come from the device or windowing layer, not the toolkit.
    """

    synchronous: bool
    preemptive: bool
    global_: bool

    def __post_init__(self) -> None:
        if self.preemptive and not self.synchronous:
            raise ValueError("a preemptive listener must also be synchronous")


@dataclass(frozen=True)
class KeyDefinition:
    """A key a keystroke listener is interested in."""

    keycode: int
    keysym: int
    keystring: str
    unused: int