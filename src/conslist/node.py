"""Chain nodes and the writable element handle."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """One element plus the link to its successor (None at the end)."""

    __slots__ = ("next", "value")

    def __init__(self, value: T, next: Node[T] | None = None) -> None:
        self.value = value
        self.next = next


class ValueRef(Generic[T]):
    """Writable handle on a single element stored in a list.

    Returned by ``LinkedList.peek_mut()`` and yielded by ``IterMut``.
    Writes go straight into the node, so they are visible to every
    later read of the list.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Node[T]) -> None:
        self._node = node

    def get(self) -> T:
        return self._node.value

    def set(self, value: T) -> None:
        self._node.value = value

    def replace(self, value: T) -> T:
        """Store ``value`` and return the element it replaced."""
        old = self._node.value
        self._node.value = value
        return old

    @property
    def value(self) -> T:
        return self._node.value

    @value.setter
    def value(self, value: T) -> None:
        self._node.value = value

    def __repr__(self) -> str:
        return f"ValueRef({self._node.value!r})"
