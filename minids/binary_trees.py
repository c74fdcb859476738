"""Binary tree nodes with parent links and depth lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node that knows its children and its parent."""

    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


def depth(root: Optional[Node], node: Optional[Node]) -> int:
    """Return how many parent links lead from ``node`` up to ``root``.

    Returns -1 when ``node`` is None or ``root`` is not among its ancestors.
    """
    if node is None:
        return -1
    steps = 0
    current = node
    while current is not root:
        current = current.parent
        steps += 1
        if current is None:
            return -1
    return steps