"""Wire encoding of roles: a little-endian unsigned 32-bit integer."""

from __future__ import annotations

import struct

from atspikit.role import Role, UnknownRoleError

__all__ = ["RoleDecodeError", "encode_role", "decode_role"]

_ROLE_FORMAT = struct.Struct("<I")


class RoleDecodeError(ValueError):
    """Raised when bytes cannot be decoded into a role."""


def encode_role(role: Role | int) -> bytes:
    """Encode ``role`` as its 4-byte little-endian wire form."""
    if not isinstance(role, Role):
        role = Role.from_int(role)
    return _ROLE_FORMAT.pack(int(role))


def decode_role(data: bytes | bytearray | memoryview) -> Role:
    """Decode a 4-byte little-endian role number into a Role."""
    raw = bytes(data)
    if len(raw) != _ROLE_FORMAT.size:
        raise RoleDecodeError(
            f"a role is encoded in {_ROLE_FORMAT.size} bytes, got {len(raw)}"
        )
    (number,) = _ROLE_FORMAT.unpack(raw)
    try:
        return Role.from_int(number)
    except UnknownRoleError as exc:
        raise RoleDecodeError(str(exc)) from exc