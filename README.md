# atspikit

Building blocks for working with the AT-SPI accessibility protocol in plain Python,
with no dependencies outside the standard library.

## Modules

- `atspikit.role`: the `Role` enumeration of accessible object roles. It is an
  `IntEnum` numbered as on the wire, and its members are upper case (`Role.BUTTON`,
  `Role.PUSH_BUTTON_MENU`). `Role.from_int(n)` returns the role numbered `n` and raises
  `UnknownRoleError` (a `ValueError`) for numbers with no role. `readable_name()` and
  `str()` give a readable English name: `str(Role.PUSH_BUTTON_MENU)` is
  `"push button menu"`.
- `atspikit.role_wire`: `encode_role` and `decode_role` convert a role to and from its
  4-byte little-endian unsigned form. `decode_role` raises `RoleDecodeError` when the
  input is not 4 bytes long or holds an unknown role number.
- `atspikit.state`: the `State` enumeration. Each member's value is its bit position, and
  `bit()` returns the bit itself. `to_str()` and `str()` give the kebab-case name
  (`State.HAS_TOOLTIP.to_str()` is `"has-tooltip"`), and `State.from_str` parses one back;
  unknown names give `State.INVALID`.
- `atspikit.stateset`: `StateSet`, a set of states backed by a 64-bit mask. It is built
  from any mix of states, state sets and iterables of states, and supports `in`,
  iteration in bit order, `len`, `|`, `&`, `^`, `contains`, `intersects`, `insert`,
  `remove`, `toggle` and `is_empty`. `StateSet.from_bits` raises `ValueError` for bits that
  name no state. `encode()` writes the wire form, an array of two little-endian `u32`
  words preceded by its byte length, and `StateSet.decode` reads it back, raising
  `StateSetDecodeError` on a bad length or undefined bits.
- `atspikit.tree`: `A11yNode` holds a role (or `None` if it could not be read) and a list
  of children. `render(style)` and `str()` draw the tree the way the `tree` command does,
  using a `CharSet`; `SINGLE_LINE` is the default. `A11yNode.fold` builds a tree from
  nodes listed in depth-first order, where each node's `children` only gives the number of
  children it has. It raises `ValueError` when given no nodes.
- `atspikit.devices`: frozen records and enumerations for device events: `EventType`,
  `KeySynthType`, `DeviceEvent`, `KeyDefinition` and `EventListenerMode`. Its fields are
  `synchronous`, `preemptive` and `global_`, and it raises `ValueError` when a listener is
  preemptive but not synchronous.

## Example

```python
from atspikit.role import Role
from atspikit.role_wire import decode_role, encode_role
from atspikit.state import State
from atspikit.stateset import StateSet
from atspikit.tree import A11yNode

states = StateSet(State.FOCUSABLE, State.FOCUSED)
assert State.FOCUSED in states
assert StateSet.decode(states.encode()) == states

assert encode_role(Role.BUTTON) == b"\x2b\x00\x00\x00"
assert decode_role(b"\x2b\x00\x00\x00") is Role.BUTTON

tree = A11yNode(Role.FRAME, [A11yNode(Role.BUTTON), A11yNode()])
print(tree, end="")
# ── frame
# ├── button
# └── error
```

## What it does not do

atspikit does not connect to any bus. It has no accessibility-bus connection, no event
stream and no proxies for remote accessible objects. It provides only the data types,
their encodings and the tree rendering. Reading roles and states from running
applications is left to whatever D-Bus client you pair it with.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```