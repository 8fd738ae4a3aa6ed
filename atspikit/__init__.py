"""Accessibility roles, states, state sets, device event types and tree rendering for AT-SPI."""

__version__ = "0.1.0"
__all__ = ["devices", "role", "role_wire", "state", "stateset", "tree"]