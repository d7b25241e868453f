"""Singly linked list nodes and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = None


def _nodes(head: Node | None) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a list holding the values in order; None when there are none."""
    dummy = Node(None)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_list(head: Node | None) -> list[Any]:
    """The values of the list, front to back."""
    return [node.data for node in _nodes(head)]


def display(head: Node | None) -> str:
    """The list written as ``a --> b --> NULL``."""
    return "".join(f"{node.data} --> " for node in _nodes(head)) + "NULL"


def delete_last(head: Node | None, x: Any) -> Node | None:
    """Unlink the last node holding ``x``; returns the (possibly new) head."""
    previous: Node | None = None
    target_previous: Node | None = None
    target: Node | None = None
    for node in _nodes(head):
        if node.data == x:
            target, target_previous = node, previous
        previous = node
    if target is None:
        return head
    if target_previous is None:
        return target.next
    target_previous.next = target.next
    return head


def has_cycle(head: Node | None) -> bool:
    """Whether following ``next`` from the head ever revisits a node."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False


def is_palindrome(head: Node | None) -> bool:
    """Whether the values read the same forwards and backwards."""
    values = to_list(head)
    return values == values[::-1]


def front_back_split(head: Node | None) -> tuple[Node | None, Node | None]:
    """Cut the list into two halves; the front one takes the extra node."""
    if head is None:
        return None, None
    slow = head
    fast = head.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            slow = slow.next
            fast = fast.next
    back = slow.next
    slow.next = None
    return head, back


def sorted_merge(a: Node | None, b: Node | None) -> Node | None:
    """Splice two sorted lists into one sorted list; ties take from ``a`` first."""
    dummy = Node(None)
    tail = dummy
    while a is not None and b is not None:
        if a.data <= b.data:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def merge_sort(head: Node | None) -> Node | None:
    """Sort the list by relinking its nodes; returns the new head."""
    if head is None or head.next is None:
        return head
    front, back = front_back_split(head)
    return sorted_merge(merge_sort(front), merge_sort(back))


def middle(head: Node | None) -> Node | None:
    """The node at index ``length // 2``, or None for an empty list."""
    nodes = list(_nodes(head))
    if not nodes:
        return None
    return nodes[len(nodes) // 2]


def pairwise_swap(head: Node | None) -> Node | None:
    """Swap the values of each neighbouring pair in place; returns the head."""
    node = head
    while node is not None and node.next is not None:
        node.data, node.next.data = node.next.data, node.data
        node = node.next.next
    return head