"""Merge sort for singly or doubly linked, straight or circular lists."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Sequence

DEFAULT_CASES = (
    "abcdefghijklm",
    "gcielbmhdjfak",
    "mlkjihgfedcba",
)


@dataclass(eq=False)
class Element:
    """A list node holding ``value`` with forward and backward links."""

    value: Any
    next: Optional[Element] = field(default=None, repr=False)
    prev: Optional[Element] = field(default=None, repr=False)


def _follow(node: Element, oldhead: Element, is_circular: bool) -> Optional[Element]:
    """Return the node after ``node``, or None at the end of a pass."""
    following = node.next
    if is_circular and following is oldhead:
        return None
    return following


def listsort(
    head: Optional[Element], is_circular: bool = False, is_double: bool = False
) -> Optional[Element]:
    """Sort the list starting at ``head`` by value and return its new head.

    The sort is stable. Circular lists stay circular and doubly linked
    lists get their backward links rebuilt.
    """
    if head is None:
        return None

    insize = 1
    while True:
        p: Optional[Element] = head
        oldhead = head
        new_head: Optional[Element] = None
        tail: Optional[Element] = None
        nmerges = 0

        while p is not None:
            nmerges += 1
            q: Optional[Element] = p
            psize = 0
            for _ in range(insize):
                psize += 1
                q = _follow(q, oldhead, is_circular)
                if q is None:
                    break

            qsize = insize
            while psize > 0 or (qsize > 0 and q is not None):
                if psize == 0:
                    chosen, q = q, _follow(q, oldhead, is_circular)
                    qsize -= 1
                elif qsize == 0 or q is None:
                    chosen, p = p, _follow(p, oldhead, is_circular)
                    psize -= 1
                elif p.value <= q.value:
                    chosen, p = p, _follow(p, oldhead, is_circular)
                    psize -= 1
                else:
                    chosen, q = q, _follow(q, oldhead, is_circular)
                    qsize -= 1

                if tail is not None:
                    tail.next = chosen
                else:
                    new_head = chosen
                if is_double:
                    chosen.prev = tail
                tail = chosen

            p = q

        assert tail is not None and new_head is not None
        if is_circular:
            tail.next = new_head
            if is_double:
                new_head.prev = tail
        else:
            tail.next = None

        head = new_head
        if nmerges <= 1:
            return head
        insize *= 2


def build_list(
    values: Iterable[Any], is_circular: bool = False, is_double: bool = False
) -> Optional[Element]:
    """Link ``values`` into a list and return its head, or None if empty."""
    nodes = [Element(value) for value in values]
    if not nodes:
        return None
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
        if is_double:
            following.prev = current
    if is_circular:
        nodes[-1].next = nodes[0]
        if is_double:
            nodes[0].prev = nodes[-1]
    return nodes[0]


def _walk(head: Optional[Element]) -> Iterator[Element]:
    node = head
    while node is not None:
        yield node
        node = node.next
        if node is head:
            break


def to_values(head: Optional[Element]) -> list[Any]:
    """Return the values of the list starting at ``head``, in order."""
    return [node.value for node in _walk(head)]


def check_list(
    head: Optional[Element],
    expected_len: int,
    is_circular: bool = False,
    is_double: bool = False,
    check_ordering: bool = False,
) -> str:
    """Verify the list's links, and optionally its ordering.

    Returns the values rendered as ``[...]``; raises ValueError naming
    the first inconsistency found.
    """
    if head is None:
        if expected_len == 0:
            return "[]"
        raise ValueError("!! Empty list !!")

    seen: set[int] = set()
    nodes: list[Element] = []
    node: Optional[Element] = head
    while True:
        if len(nodes) >= expected_len:
            raise ValueError("!! Out-of-range pointer !!")
        if id(node) in seen:
            raise ValueError("!! Duplicate element !!")
        seen.add(id(node))
        nodes.append(node)
        node = node.next
        if node is None or node is head:
            break

    tail = nodes[-1]
    if tail.next is not (head if is_circular else None):
        raise ValueError("!! Bad next link from list tail !!")
    if is_double and head.prev is not (tail if is_circular else None):
        raise ValueError("!! Bad prev link from list head !!")

    pairs = list(zip(nodes, nodes[1:]))
    if is_double:
        for position, (current, following) in enumerate(pairs, start=1):
            if following.prev is not current:
                raise ValueError(
                    f"!! Bad prev link from node {position} '{following.value}' !!"
                )

    if check_ordering:
        for position, (current, following) in enumerate(pairs):
            if not following.value > current.value:
                raise ValueError(
                    f"!! Bad ordering between nodes {position} '{current.value}' "
                    f"and {position + 1} '{following.value}' !!"
                )

    return "[" + "".join(str(n.value) for n in nodes) + "]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort each test string in every list shape and report the results."""
    parser = argparse.ArgumentParser(
        description="Sort strings held in linked lists of every shape."
    )
    parser.add_argument("cases", nargs="*", default=list(DEFAULT_CASES))
    args = parser.parse_args(argv)

    passes = fails = 0
    for is_circular in (False, True):
        for is_double in (False, True):
            print(
                f"testing {'circular' if is_circular else 'straight'} "
                f"{'doubly' if is_double else 'singly'} linked list"
            )
            for case in args.cases:
                head = build_list(case, is_circular, is_double)
                line = "    "
                try:
                    line += check_list(head, len(case), is_circular, is_double)
                    head = listsort(head, is_circular, is_double)
                    line += " -> "
                    line += check_list(head, len(case), is_circular, is_double, True)
                except ValueError as error:
                    print(line + str(error))
                    fails += 1
                    continue
                print(line + " ok")
                passes += 1
    print(f"passed {passes} failed {fails} total {passes + fails}")
    return int(fails != 0)