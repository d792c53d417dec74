"""conslist: singly-linked stack list with a JSON array codec."""

from __future__ import annotations

from conslist.codec import (
    JSON_VALUE,
    ElementCodec,
    FunctionCodec,
    JsonValueCodec,
    NestedListCodec,
    ScalarCodec,
    codec_for,
    decode,
    dumps,
    dumps_element,
    encode,
    loads,
)
from conslist.errors import BorrowError, ConfigError, ConsListError, DecodeError
from conslist.iterators import IntoIter, Iter, IterMut
from conslist.linked_list import LinkedList
from conslist.node import ValueRef

__all__ = [
    "JSON_VALUE",
    "BorrowError",
    "ConfigError",
    "ConsListError",
    "DecodeError",
    "ElementCodec",
    "FunctionCodec",
    "IntoIter",
    "Iter",
    "IterMut",
    "JsonValueCodec",
    "LinkedList",
    "NestedListCodec",
    "ScalarCodec",
    "ValueRef",
    "codec_for",
    "decode",
    "dumps",
    "dumps_element",
    "encode",
    "loads",
]
