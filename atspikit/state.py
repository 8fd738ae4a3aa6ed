"""States an accessible object may be in, each one bit of a 64-bit set."""

from __future__ import annotations

import enum

__all__ = ["State"]


class State(enum.Enum):
    """A single accessibility state; the value is its bit position."""

    INVALID = 0
    ACTIVE = 1
    ARMED = 2
    BUSY = 3
    CHECKED = 4
    COLLAPSED = 5
    DEFUNCT = 6
    EDITABLE = 7
    ENABLED = 8
    EXPANDABLE = 9
    EXPANDED = 10
    FOCUSABLE = 11
    FOCUSED = 12
    HAS_TOOLTIP = 13
    HORIZONTAL = 14
    ICONIFIED = 15
    MODAL = 16
    MULTI_LINE = 17
    MULTISELECTABLE = 18
    OPAQUE = 19
    PRESSED = 20
    RESIZABLE = 21
    SELECTABLE = 22
    SELECTED = 23
    SENSITIVE = 24
    SHOWING = 25
    SINGLE_LINE = 26
    STALE = 27
    TRANSIENT = 28
    VERTICAL = 29
    VISIBLE = 30
    MANAGES_DESCENDANTS = 31
    INDETERMINATE = 32
    REQUIRED = 33
    TRUNCATED = 34
    ANIMATED = 35
    INVALID_ENTRY = 36
    SUPPORTS_AUTOCOMPLETION = 37
    SELECTABLE_TEXT = 38
    IS_DEFAULT = 39
    VISITED = 40
    CHECKABLE = 41
    HAS_POPUP = 42
    READ_ONLY = 43

    @classmethod
    def from_str(cls, text: str) -> State:
        """Parse a kebab-case state name; unknown names give ``INVALID``."""
        return _BY_NAME.get(text, cls.INVALID)

    def to_str(self) -> str:
        """The kebab-case name of the state, e.g. ``"manages-descendants"``."""
        return self.name.lower().replace("_", "-")

    def bit(self) -> int:
        """The single bit this state occupies in a 64-bit state set."""
        return 1 << self.value

    def __str__(self) -> str:
        return self.to_str()

    def __format__(self, spec: str) -> str:
        return format(self.to_str(), spec)


_BY_NAME: dict[str, State] = {state.to_str(): state for state in State}