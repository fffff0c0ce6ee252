"""Singly linked lists and the classic problems built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; equality is identity."""

    val: int = 0
    next: ListNode | None = None


@dataclass(eq=False)
class RandomNode:
    """A list node that also points at an arbitrary node of its list."""

    val: int = 0
    next: RandomNode | None = None
    random: RandomNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list in order."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as little-endian digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end (1 is the last node)."""
    nodes = list(_nodes(head))
    size = len(nodes)
    if not 1 <= n <= size:
        raise ValueError(f"n must be between 1 and {size}, got {n}")
    if n == size:
        return nodes[0].next
    nodes[size - n - 1].next = nodes[size - n].next
    return head


def _merge(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    """Merge two sorted lists; on equal values the node of ``b`` goes first."""
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val < b.val:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list."""
    return _merge(list1, list2)


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a list whose nodes carry ``random`` pointers."""
    copies: dict[int, RandomNode] = {}
    dummy = RandomNode()
    tail = dummy
    node = head
    while node is not None:
        tail.next = RandomNode(node.val)
        tail = tail.next
        copies[id(node)] = tail
        node = node.next
    node = head
    while node is not None:
        if node.random is not None:
            copies[id(node)].random = copies[id(node.random)]
        node = node.next
    return dummy.next


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether the list loops, using a slow and a fast pointer."""
    if head is None or head.next is None:
        return False
    slow: ListNode | None = head
    fast: ListNode | None = head.next
    while slow is not fast and fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return fast is not None and fast.next is not None


def has_cycle_hashed(head: ListNode | None) -> bool:
    """Tell whether the list loops, remembering every node seen."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None (Floyd's method)."""
    fast = slow = head
    while fast is not None and slow is not None:
        if fast.next is None:
            return None
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            current = head
            while current is not slow:
                slow = slow.next
                current = current.next
            return slow
    return None


def detect_cycle_hashed(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None, using a set."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return node
        seen.add(id(node))
        node = node.next
    return None


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    slow = fast = prev = head
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next
    prev.next = None
    return _merge(sort_list(head), sort_list(slow))


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    in_a = {id(node) for node in _nodes(head_a)}
    return next((node for node in _nodes(head_b) if id(node) in in_a), None)


def get_intersection_node_naive(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node of ``head_a`` also in ``head_b``, comparing pairwise."""
    for node_a in _nodes(head_a):
        if any(node_b is node_a for node_b in _nodes(head_b)):
            return node_a
    return None


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the values read the same both ways.

    The second half of the list is reversed in place and left that way.
    """
    if head is None or head.next is None:
        return True
    fast: ListNode | None = head
    slow: ListNode | None = head
    prev = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        prev = fast
        fast = fast.next.next
    if fast is None:
        fast = prev.next
    else:
        slow = slow.next
    reverse_list(slow)
    current: ListNode | None = head
    while fast is not None and current is not None:
        if fast.val != current.val:
            return False
        fast = fast.next
        current = current.next
    return True


def is_palindrome_stack(head: ListNode | None) -> bool:
    """Tell whether the values read the same both ways, without modifying the list."""
    values = list_values(head)
    half = len(values) // 2
    return values[(len(values) + 1) // 2:] == values[:half][::-1]