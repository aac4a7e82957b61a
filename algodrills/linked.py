"""Operations on singly linked lists of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = field(default=None)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order; empty input gives ``None``."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def _length(head: ListNode | None) -> int:
    return sum(1 for _ in head) if head is not None else 0


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reorder_list(head: ListNode | None) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None:
        return
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None

    first: ListNode | None = head
    while second is not None:
        first_next = first.next
        second_next = second.next
        first.next = second
        second.next = first_next
        first = first_next
        second = second_next


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node of list A that also belongs to list B."""
    nodes_b = set()
    node = head_b
    while node is not None:
        nodes_b.add(node)
        node = node.next
    node = head_a
    while node is not None:
        if node in nodes_b:
            return node
        node = node.next
    return None


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the head."""
    length = _length(head)
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    if n == length:
        return head.next
    node = head
    for _ in range(length - n - 1):
        node = node.next
    node.next = node.next.next
    return head


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink every node holding ``val`` and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None:
        if prev.next.val == val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = prev
        prev = node
        node = following
    return prev


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one sorted list; ties favour ``list1``."""
    dummy = ListNode(0)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val > list2.val:
            tail.next = list2
            list2 = list2.next
        else:
            tail.next = list1
            list1 = list1.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def is_palindrome_list(head: ListNode | None) -> bool:
    """Tell whether the decimal text of the joined values reads the same backwards."""
    text = "".join(str(value) for value in to_values(head))
    return text == text[::-1]


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while head is not None and head.next is not None:
        first, second = head, head.next
        prev.next = second
        first.next = second.next
        second.next = first
        prev = first
        head = first.next
    return dummy.next


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of ``k`` nodes; a short tail stays as it is."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    if head is None or k == 1:
        return head
    dummy = ListNode(0, head)
    prev = dummy
    count = _length(head)
    while count >= k:
        curr = prev.next
        following = curr.next
        for _ in range(k - 1):
            curr.next = following.next
            following.next = prev.next
            prev.next = following
            following = curr.next
        prev = curr
        count -= k
    return dummy.next


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Group nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def delete_all_duplicates(head: ListNode | None) -> ListNode | None:
    """From a sorted list, drop every value that occurs more than once."""
    dummy = ListNode(0, head)
    prev = dummy
    while head is not None:
        if head.next is not None and head.val == head.next.val:
            while head.next is not None and head.val == head.next.val:
                head = head.next
            prev.next = head.next
        else:
            prev = prev.next
        head = head.next
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """From a sorted list, keep one node of each value."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def partition(head: ListNode | None, x: int) -> ListNode | None:
    """Put nodes below ``x`` before the rest, keeping relative order."""
    before_dummy = ListNode(0)
    after_dummy = ListNode(0)
    before, after = before_dummy, after_dummy
    while head is not None:
        if head.val < x:
            before.next = head
            before = head
        else:
            after.next = head
            after = head
        head = head.next
    after.next = None
    before.next = after_dummy.next
    return before_dummy.next


def reverse_between(
    head: ListNode | None, left: int, right: int
) -> ListNode | None:
    """Reverse the nodes at 1-based positions ``left`` through ``right``."""
    if left < 1 or right < left:
        raise ValueError(f"invalid range {left}..{right}")
    if head is None or left == right:
        return head
    length = _length(head)
    if right > length:
        raise ValueError(f"range {left}..{right} exceeds list length {length}")
    dummy = ListNode(0, head)
    prev = dummy
    for _ in range(left - 1):
        prev = prev.next
    current = prev.next
    for _ in range(right - left):
        following = current.next
        current.next = following.next
        following.next = prev.next
        prev.next = following
    return dummy.next