"""Unit tests for conslist.iterators."""

from __future__ import annotations

import pytest

from conslist import BorrowError, LinkedList


def make(*items: int) -> LinkedList[int]:
    lst: LinkedList[int] = LinkedList()
    for item in items:
        lst.cons(item)
    return lst


class TestIntoIter:
    """Tests for the draining view."""

    def test_yields_head_to_tail(self) -> None:
        it = make(1, 2, 3).into_iter()
        assert next(it) == 3
        assert next(it) == 2
        assert next(it) == 1
        with pytest.raises(StopIteration):
            next(it)

    def test_source_is_emptied(self) -> None:
        lst = make(1, 2, 3)
        it = lst.into_iter()
        assert lst.is_empty()
        lst.cons(9)
        assert list(it) == [3, 2, 1]
        assert list(lst) == [9]

    def test_not_restartable(self) -> None:
        it = make(1, 2).into_iter()
        assert list(it) == [2, 1]
        assert list(it) == []

    def test_yields_stored_none(self) -> None:
        lst: LinkedList[int | None] = LinkedList.from_iterable([1, None, 2])
        assert list(lst.into_iter()) == [1, None, 2]


class TestIter:
    """Tests for the read-only view."""

    def test_yields_without_consuming(self) -> None:
        lst = make(1, 2, 3)
        assert list(lst.iter()) == [3, 2, 1]
        assert list(lst) == [3, 2, 1]
        assert lst.length() == 3

    def test_not_restartable(self) -> None:
        it = make(1, 2).iter()
        assert list(it) == [2, 1]
        assert list(it) == []

    def test_shared_borrows_coexist(self) -> None:
        lst = make(1, 2)
        first = lst.iter()
        second = lst.iter()
        assert next(first) == 2
        assert next(second) == 2
        assert lst.peek() == 2
        assert lst.length() == 2

    def test_blocks_mutation_while_live(self) -> None:
        lst = make(1, 2)
        it = lst.iter()
        next(it)
        with pytest.raises(BorrowError):
            lst.cons(3)
        with pytest.raises(BorrowError):
            lst.pop()
        with pytest.raises(BorrowError):
            lst.peek_mut()
        with pytest.raises(BorrowError):
            lst.iter_mut()

    def test_exhaustion_releases_borrow(self) -> None:
        lst = make(1, 2)
        for _ in lst.iter():
            pass
        lst.cons(3)
        assert lst.peek() == 3

    def test_context_manager_releases_borrow(self) -> None:
        lst = make(1, 2)
        with lst.iter() as it:
            assert next(it) == 2
        lst.cons(3)
        assert list(lst) == [3, 2, 1]

    def test_abandoned_view_releases_borrow(self) -> None:
        lst = make(1, 2)
        it = lst.iter()
        next(it)
        del it
        lst.cons(3)
        assert lst.length() == 3


class TestIterMut:
    """Tests for the mutable view."""

    def test_mutation_visible_afterwards(self) -> None:
        lst = make(1, 2, 3)
        for ref in lst.iter_mut():
            ref.value *= 10
        assert list(lst) == [30, 20, 10]

    def test_yields_refs_head_to_tail(self) -> None:
        lst = make(1, 2, 3)
        assert [ref.get() for ref in lst.iter_mut()] == [3, 2, 1]

    def test_exclusive_access(self) -> None:
        lst = make(1, 2)
        it = lst.iter_mut()
        with pytest.raises(BorrowError):
            lst.iter_mut()
        with pytest.raises(BorrowError):
            lst.iter()
        with pytest.raises(BorrowError):
            lst.peek()
        with pytest.raises(BorrowError):
            lst.cons(3)
        with pytest.raises(BorrowError):
            lst.length()
        it.close()
        lst.cons(3)
        assert lst.length() == 3

    def test_not_restartable(self) -> None:
        it = make(1).iter_mut()
        assert len(list(it)) == 1
        assert list(it) == []

    def test_empty_list(self) -> None:
        lst: LinkedList[int] = LinkedList()
        assert list(lst.iter_mut()) == []
        lst.cons(1)
        assert lst.pop() == 1
