"""Singly-linked stack list.

The list is reached only through its head: ``cons`` prepends, ``pop``
detaches, ``peek``/``peek_mut`` look at the head element. Everything else
(length, reversal, equality, serialization) is built on top of the
iteration views in ``conslist.iterators``.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest
from typing import Generic, TypeVar

from conslist.errors import BorrowError
from conslist.iterators import IntoIter, Iter, IterMut
from conslist.node import Node, ValueRef

T = TypeVar("T")

# Borrow counter states
_FREE = 0
_EXCLUSIVE = -1

_END = object()


class LinkedList(Generic[T]):
    """Singly-linked list with stack discipline.

    ``pop``, ``peek`` and ``peek_mut`` return None on an empty list. When
    None itself is stored as an element, use ``is_empty()`` to tell the
    two apart.

    Example:
        >>> lst = LinkedList()
        >>> lst.cons(1); lst.cons(2); lst.cons(3)
        >>> lst
        LinkedList([3, 2, 1])
        >>> lst.pop()
        3
    """

    __slots__ = ("_borrows", "_head", "__weakref__")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._head: Node[T] | None = None
        self._borrows = _FREE

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> LinkedList[T]:
        """Build a list whose head-to-tail order matches ``items``."""
        acc: LinkedList[T] = cls()
        for item in items:
            acc.cons(item)
        return acc.reverse()

    # Borrow tracking

    def _borrow_shared(self) -> None:
        if self._borrows == _EXCLUSIVE:
            msg = "list is already borrowed mutably"
            raise BorrowError(msg)
        self._borrows += 1

    def _release_shared(self) -> None:
        self._borrows -= 1

    def _borrow_exclusive(self) -> None:
        if self._borrows != _FREE:
            msg = "list is already borrowed"
            raise BorrowError(msg)
        self._borrows = _EXCLUSIVE

    def _release_exclusive(self) -> None:
        self._borrows = _FREE

    def _check_free(self, operation: str) -> None:
        if self._borrows != _FREE:
            msg = f"cannot {operation}: list is borrowed by a live iterator"
            raise BorrowError(msg)

    def _check_readable(self, operation: str) -> None:
        if self._borrows == _EXCLUSIVE:
            msg = f"cannot {operation}: list is borrowed mutably"
            raise BorrowError(msg)

    # Head operations

    def cons(self, item: T) -> None:
        """Prepend ``item`` as the new head."""
        self._check_free("cons")
        rest = self._head
        self._head = None
        self._head = Node(item, rest)

    def pop(self) -> T | None:
        """Remove the head and return its element, or None if empty."""
        self._check_free("pop")
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        return node.value

    def peek(self) -> T | None:
        self._check_readable("peek")
        if self._head is None:
            return None
        return self._head.value

    def peek_mut(self) -> ValueRef[T] | None:
        """Return a writable handle on the head element, or None if empty."""
        self._check_free("peek_mut")
        if self._head is None:
            return None
        return ValueRef(self._head)

    def is_empty(self) -> bool:
        return self._head is None

    # Iteration views

    def into_iter(self) -> IntoIter[T]:
        """Move every element into a draining iterator.

        The receiver is left empty.
        """
        self._check_free("into_iter")
        owned: LinkedList[T] = LinkedList()
        owned._head = self._head
        self._head = None
        return IntoIter(owned)

    def iter(self) -> Iter[T]:
        return Iter(self)

    def iter_mut(self) -> IterMut[T]:
        return IterMut(self)

    def __iter__(self) -> Iter[T]:
        return Iter(self)

    # Derived operations

    def length(self) -> int:
        """Count the elements by walking the whole chain."""
        count = 0
        for _ in self.iter():
            count += 1
        return count

    def reverse(self) -> LinkedList[T]:
        """Consume this list and return its elements in reverse order.

        The receiver is left empty.
        """
        self._check_free("reverse")
        result: LinkedList[T] = type(self)()
        while self._head is not None:
            result.cons(self.pop())  # type: ignore[arg-type]
        return result

    def clear(self) -> None:
        """Release every node, head to tail."""
        self._check_free("clear")
        self._release_chain()

    def _release_chain(self) -> None:
        # Unlink each node before dropping it so that freeing a long
        # chain never recurses through node.next.
        link = self._head
        self._head = None
        while link is not None:
            node = link
            link = node.next
            node.next = None

    def __del__(self) -> None:
        if getattr(self, "_head", None) is not None:
            self._release_chain()

    # Dunder protocol

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return self._head is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        with self.iter() as mine, other.iter() as theirs:
            for a, b in zip_longest(mine, theirs, fillvalue=_END):
                if a is _END or b is _END or a != b:
                    return False
        return True

    def __repr__(self) -> str:
        with self.iter() as items:
            return f"{type(self).__name__}({list(items)!r})"
