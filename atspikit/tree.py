"""A tree of accessible objects and its text rendering in the style of ``tree``."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from atspikit.role import Role

__all__ = ["CharSet", "SINGLE_LINE", "A11yNode"]


@dataclass(frozen=True)
class CharSet:
    """The characters used to draw the branches of a tree."""

    horizontal: str
    vertical: str
    connector: str
    end_connector: str


SINGLE_LINE = CharSet(horizontal="─", vertical="│", connector="├", end_connector="└")


@dataclass
class A11yNode:
    """An accessible object with its role (``None`` if it could not be read)."""

    role: Role | None = None
    children: list[A11yNode] = field(default_factory=list)

    def render(self, style: CharSet = SINGLE_LINE) -> str:
        """Draw the tree rooted at this node, one line per node."""
        return "".join(self._lines(style, ()))

    def _lines(self, style: CharSet, prefix: tuple[bool, ...]) -> Iterator[str]:
        indent = "".join(
            "    " if was_last else f"{style.vertical}   " for was_last in prefix[:-1]
        )
        if prefix:
            indent += style.end_connector if prefix[-1] else style.connector
        role = "error" if self.role is None else str(self.role)
        yield f"{indent}{style.horizontal * 2} {role}\n"
        count = len(self.children)
        for position, child in enumerate(self.children, start=1):
            yield from child._lines(style, (*prefix, position == count))

    def __str__(self) -> str:
        return self.render(SINGLE_LINE)

    @classmethod
    def fold(cls, nodes: Iterable[A11yNode]) -> A11yNode:
        """Build a tree from nodes listed in depth-first visiting order.

        Each node's ``children`` only says how many children it has; they are
        replaced by the nodes that follow it. The first node becomes the root.
        Raises ValueError if no node is given.
        """
        pending = list(nodes)
        folded: list[A11yNode] = []
        while pending:
            node = pending.pop()
            if node.children:
                begin = max(0, len(folded) - len(node.children))
                node = cls(node.role, folded[begin:])
                del folded[begin:]
            folded.append(node)
        if not folded:
            raise ValueError("no root node built")
        return folded.pop()