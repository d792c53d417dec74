"""Iteration views over a LinkedList.

Three flavours, picked by the access mode a caller needs:

- ``IntoIter`` owns the chain and pops one element per step.
- ``Iter`` walks the chain read-only and holds a shared borrow.
- ``IterMut`` walks the chain yielding writable ``ValueRef`` handles and
  holds the exclusive borrow.

Views are single-pass and are not restartable. Borrowing views release
their borrow when exhausted, when closed, or when collected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from conslist.node import ValueRef

if TYPE_CHECKING:
    from types import TracebackType

    from conslist.linked_list import LinkedList
    from conslist.node import Node

T = TypeVar("T")


class IntoIter(Generic[T]):
    """Draining view: each step pops the head of an owned list."""

    __slots__ = ("_list",)

    def __init__(self, owned: LinkedList[T]) -> None:
        self._list = owned

    def __iter__(self) -> IntoIter[T]:
        return self

    def __next__(self) -> T:
        # Test emptiness first: a stored None is a real element.
        if self._list.is_empty():
            raise StopIteration
        return self._list.pop()  # type: ignore[return-value]


class _BorrowingIter(Generic[T]):
    """Shared plumbing for the two borrowing views."""

    __slots__ = ("_node", "_owner")

    _owner: LinkedList[T] | None
    _node: Node[T] | None

    def __init__(self, owner: LinkedList[T]) -> None:
        self._acquire(owner)
        self._owner = owner
        self._node = owner._head

    def _acquire(self, owner: LinkedList[T]) -> None:
        raise NotImplementedError

    def _release(self, owner: LinkedList[T]) -> None:
        raise NotImplementedError

    def _advance(self) -> Node[T]:
        node = self._node
        if node is None:
            self.close()
            raise StopIteration
        self._node = node.next
        return node

    def close(self) -> None:
        """End the traversal early and release the borrow."""
        owner = self._owner
        if owner is None:
            return
        self._owner = None
        self._node = None
        self._release(owner)

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        # __init__ may have failed before the slots were set.
        if getattr(self, "_owner", None) is not None:
            self.close()


class Iter(_BorrowingIter[T]):
    """Read-only view yielding element values head to tail."""

    __slots__ = ()

    def _acquire(self, owner: LinkedList[T]) -> None:
        owner._borrow_shared()

    def _release(self, owner: LinkedList[T]) -> None:
        owner._release_shared()

    def __iter__(self) -> Iter[T]:
        return self

    def __next__(self) -> T:
        return self._advance().value


class IterMut(_BorrowingIter[T]):
    """Exclusive view yielding a ``ValueRef`` for each element."""

    __slots__ = ()

    def _acquire(self, owner: LinkedList[T]) -> None:
        owner._borrow_exclusive()

    def _release(self, owner: LinkedList[T]) -> None:
        owner._release_exclusive()

    def __iter__(self) -> IterMut[T]:
        return self

    def __next__(self) -> ValueRef[T]:
        return ValueRef(self._advance())
