"""JSON array codec for LinkedList.

A list is represented externally as an ordered array of its elements,
head to tail, with no node structure and no length prefix. Each element
is converted by an ``ElementCodec`` so that the list logic stays generic
over the element type.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from conslist.errors import DecodeError
from conslist.linked_list import LinkedList

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ElementCodec(Protocol[T]):
    """Converts one element to and from its JSON-compatible form.

    ``decode`` signals bad input by raising ``DecodeError``, ``TypeError``
    or ``ValueError``.
    """

    def encode(self, value: T) -> Any: ...

    def decode(self, raw: Any) -> T: ...


class JsonValueCodec:
    """Passthrough codec for elements that are already JSON values."""

    def encode(self, value: Any) -> Any:
        return value

    def decode(self, raw: Any) -> Any:
        return raw


JSON_VALUE = JsonValueCodec()


@dataclass(frozen=True)
class ScalarCodec:
    """Strictly typed codec for int, float, str or bool elements.

    Attributes:
        kind: The Python type every element must have.
    """

    kind: type

    def encode(self, value: Any) -> Any:
        self._check(value)
        return value

    def decode(self, raw: Any) -> Any:
        if self.kind is float and isinstance(raw, int) and not isinstance(raw, bool):
            try:
                return float(raw)
            except OverflowError as e:
                msg = f"integer too large for float: {e}"
                raise ValueError(msg) from e
        self._check(raw)
        return raw

    def _check(self, value: Any) -> None:
        # bool is a subclass of int, but JSON keeps them apart
        if isinstance(value, bool) and self.kind is not bool:
            msg = f"expected {self.kind.__name__}, got bool"
            raise TypeError(msg)
        if not isinstance(value, self.kind):
            msg = f"expected {self.kind.__name__}, got {type(value).__name__}"
            raise TypeError(msg)


@dataclass(frozen=True)
class FunctionCodec(Generic[T]):
    """Codec assembled from a pair of plain functions."""

    encoder: Callable[[T], Any]
    decoder: Callable[[Any], T]

    def encode(self, value: T) -> Any:
        return self.encoder(value)

    def decode(self, raw: Any) -> T:
        return self.decoder(raw)


@dataclass(frozen=True)
class NestedListCodec(Generic[T]):
    """Codec for elements that are themselves LinkedLists."""

    inner: ElementCodec[T] = JSON_VALUE

    def encode(self, value: LinkedList[T]) -> list[Any]:
        return encode(value, self.inner)

    def decode(self, raw: Any) -> LinkedList[T]:
        return decode(raw, self.inner)


_NAMED_CODECS: dict[str, ElementCodec[Any]] = {
    "json": JSON_VALUE,
    "int": ScalarCodec(int),
    "float": ScalarCodec(float),
    "str": ScalarCodec(str),
    "bool": ScalarCodec(bool),
}

CODEC_NAMES = tuple(_NAMED_CODECS)


def codec_for(name: str) -> ElementCodec[Any]:
    """Look up a stock element codec by name.

    Raises:
        KeyError: If ``name`` is not one of ``CODEC_NAMES``.
    """
    try:
        return _NAMED_CODECS[name]
    except KeyError:
        msg = f"unknown element type {name!r} (expected one of {', '.join(CODEC_NAMES)})"
        raise KeyError(msg) from None


def encode(lst: LinkedList[T], codec: ElementCodec[T] = JSON_VALUE) -> list[Any]:
    """Return the list's elements, head to tail, in external form."""
    return [codec.encode(value) for value in lst.iter()]


def decode(items: Any, codec: ElementCodec[T] = JSON_VALUE) -> LinkedList[T]:
    """Rebuild a list from an ordered sequence of encoded elements.

    Elements are consed in encounter order and the result is reversed
    once, so the head-to-tail order matches ``items``.

    Raises:
        DecodeError: If ``items`` is not an array or any element fails
            to decode. No partial list is returned.
    """
    if not isinstance(items, (list, tuple)):
        msg = f"expected an array, got {type(items).__name__}"
        raise DecodeError(msg)

    acc: LinkedList[T] = LinkedList()
    for index, raw in enumerate(items):
        try:
            value = codec.decode(raw)
        except (TypeError, ValueError, ArithmeticError) as e:
            logger.debug("Element %d failed to decode: %s", index, e)
            raise DecodeError(str(e), index=index) from e
        acc.cons(value)
    return acc.reverse()


def dumps(
    lst: LinkedList[T],
    codec: ElementCodec[T] = JSON_VALUE,
    *,
    indent: int | None = None,
    sort_keys: bool = False,
) -> str:
    """Serialize a list as JSON array text.

    The compact form has no whitespace: ``[3,2,1]``.
    """
    return _to_json(encode(lst, codec), indent, sort_keys)


def dumps_element(
    value: T,
    codec: ElementCodec[T] = JSON_VALUE,
    *,
    indent: int | None = None,
    sort_keys: bool = False,
) -> str:
    """Serialize a single element the same way ``dumps`` writes it."""
    return _to_json(codec.encode(value), indent, sort_keys)


def _to_json(data: Any, indent: int | None, sort_keys: bool) -> str:
    separators = (",", ":") if indent is None else None
    return json.dumps(data, indent=indent, separators=separators, sort_keys=sort_keys)


def loads(text: str | bytes, codec: ElementCodec[T] = JSON_VALUE) -> LinkedList[T]:
    """Parse JSON array text into a list.

    Raises:
        DecodeError: On malformed JSON, a non-array document, or an
            element the codec rejects.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug("Malformed document: %s", e)
        msg = f"malformed JSON: {e}"
        raise DecodeError(msg) from e
    return decode(data, codec)
