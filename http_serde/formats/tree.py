# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Plain Python data as a format.

A tree is what `json.loads` or `yaml.safe_load` would give: None, bool, int, str, lists and mappings. It is the
self-describing format every text format in this package is built on, the text formats only convert a tree from and
to its textual form.

>>> from http_serde.codecs import ListCodec, StrCodec
>>> to_value(ListCodec(StrCodec()), ['a', 'b'])
['a', 'b']
>>> from_value(ListCodec(StrCodec()), ('a', 'b'))
['a', 'b']
"""

from __future__ import annotations

import json
from collections.abc import Collection, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Iterable, Optional, TypeVar, Union

from typing_extensions import override

from http_serde.formats.sink import Encoder, FieldWriter, FormatSink
from http_serde.formats.source import Decoder, FormatSource, Many, One, OneOrMany
from http_serde.serialization.exceptions import (
    DecodeError,
    DuplicateFieldError,
    MissingFieldError,
    UnexpectedShapeError,
    UnknownVariantError,
)

if TYPE_CHECKING:
    from http_serde.codecs.codec import Codec

T = TypeVar('T')

_UNSET: Any = object()


class Entries(list[tuple[Any, Any]]):
    """Mapping node that keeps every pair in input order, repeated keys included.

    Text parsers build these instead of dicts so that a repeated key is still visible to the decoder.
    """

    def keys(self) -> list[Any]:
        return [key for key, _ in self]


def describe(node: Any) -> str:
    """Describe a tree node for error messages, e.g. `string "foo"` or `map`."""
    match node:
        case None:
            return 'null'
        case bool():
            return f'boolean `{str(node).lower()}`'
        case int():
            return f'integer `{node}`'
        case float():
            return f'floating point `{node}`'
        case str():
            return f'string {json.dumps(node)}'
        case bytes() | bytearray():
            return 'byte array'
        case Entries() | Mapping():
            return 'map'
        case list() | tuple():
            return 'sequence'
        case _:
            return type(node).__name__


def _map_pairs(node: Any) -> Optional[Iterable[tuple[Any, Any]]]:
    if isinstance(node, Entries):
        return node
    if isinstance(node, Mapping):
        return node.items()
    return None


def _is_sequence(node: Any) -> bool:
    # Entries is a list only as an implementation detail, it is a mapping node
    return isinstance(node, (list, tuple)) and not isinstance(node, Entries)


def _is_byte_list(node: Any) -> bool:
    return _is_sequence(node) and all(
        isinstance(i, int) and not isinstance(i, bool) and 0 <= i <= 0xff for i in node
    )


class TreeSink(FormatSink):
    """Builds a plain Python value, use `finalize()` to get it."""

    __slots__ = ('_value',)

    def __init__(self) -> None:
        self._value = _UNSET

    def _put(self, value: Any) -> None:
        if self._value is not _UNSET:
            raise RuntimeError('a value was already written to this sink')
        self._value = value

    def finalize(self) -> Any:
        if self._value is _UNSET:
            raise RuntimeError('no value was written to this sink')
        return self._value

    @staticmethod
    def _child(encoder: Encoder[T], value: T) -> Any:
        sink = TreeSink()
        encoder(sink, value)
        return sink.finalize()

    @override
    def is_self_describing(self) -> bool:
        return True

    @override
    def write_none(self) -> None:
        self._put(None)

    @override
    def write_bool(self, value: bool) -> None:
        self._put(value)

    @override
    def write_int(self, value: int) -> None:
        self._put(value)

    @override
    def write_str(self, value: str) -> None:
        self._put(value)

    @override
    def write_bytes(self, value: bytes) -> None:
        self._put(list(value))

    @override
    def write_option(self, value: Optional[T], encoder: Encoder[T]) -> None:
        self._put(None if value is None else self._child(encoder, value))

    @override
    def write_seq(self, values: Collection[T], encoder: Encoder[T]) -> None:
        self._put([self._child(encoder, value) for value in values])

    @override
    def write_map(self, items: Collection[tuple[Any, Any]], key_encoder: Encoder[Any],
                  value_encoder: Encoder[Any]) -> None:
        result: dict[Any, Any] = {}
        for key, value in items:
            key_node = self._child(key_encoder, key)
            if not isinstance(key_node, (str, int)):
                raise TypeError(f'map keys must be strings or integers, got {describe(key_node)}')
            result[key_node] = self._child(value_encoder, value)
        self._put(result)

    @override
    def write_variant(self, index: int, name: str, value: T, encoder: Encoder[T]) -> None:
        self._put({name: self._child(encoder, value)})

    @override
    def write_struct(self, fields: Sequence[tuple[str, FieldWriter]]) -> None:
        result: dict[str, Any] = {}
        for name, writer in fields:
            sink = TreeSink()
            writer(sink)
            result[name] = sink.finalize()
        self._put(result)


class TreeSource(FormatSource):
    """Reads a plain Python value.

    Mapping nodes can be any `Mapping` or `Entries`. When `is_key` is set the node is a map key, which text formats
    may only store as a string, so `read_int` also accepts decimal strings. YAML turns a bare `123` key into an int,
    so `read_str` accepts int keys as their decimal string.
    """

    __slots__ = ('_node', '_is_key')

    def __init__(self, node: Any, *, is_key: bool = False) -> None:
        self._node = node
        self._is_key = is_key

    def _unexpected(self, expected: str) -> UnexpectedShapeError:
        return UnexpectedShapeError(expected, describe(self._node))

    @override
    def is_self_describing(self) -> bool:
        return True

    @override
    def read_none(self) -> None:
        if self._node is not None:
            raise self._unexpected('null')

    @override
    def read_bool(self) -> bool:
        if not isinstance(self._node, bool):
            raise self._unexpected('a boolean')
        return self._node

    @override
    def read_int(self) -> int:
        node = self._node
        if isinstance(node, int) and not isinstance(node, bool):
            return node
        if self._is_key and isinstance(node, str) and node.removeprefix('-').isdecimal():
            return int(node)
        raise self._unexpected('an integer')

    @override
    def read_str(self) -> str:
        node = self._node
        if isinstance(node, str):
            return node
        if self._is_key and isinstance(node, int) and not isinstance(node, bool):
            return str(node)
        raise self._unexpected('a string')

    @override
    def read_bytes(self) -> bytes:
        node = self._node
        if isinstance(node, (bytes, bytearray)) or _is_byte_list(node):
            return bytes(node)
        raise self._unexpected('a byte array')

    @override
    def read_str_or_bytes(self) -> Union[str, bytes]:
        node = self._node
        if isinstance(node, str):
            return node
        if isinstance(node, (bytes, bytearray)) or _is_byte_list(node):
            return bytes(node)
        raise self._unexpected('a string or a byte array')

    @override
    def read_option(self, decoder: Decoder[T]) -> Optional[T]:
        if self._node is None:
            return None
        return decoder(self)

    @override
    def read_seq(self, decoder: Decoder[T]) -> list[T]:
        if not _is_sequence(self._node):
            raise self._unexpected('a sequence')
        return [decoder(TreeSource(item)) for item in self._node]

    @override
    def read_map(self, key_decoder: Decoder[Any], value_decoder: Decoder[Any], *,
                 expecting: str = 'a map') -> list[tuple[Any, Any]]:
        pairs = _map_pairs(self._node)
        if pairs is None:
            raise self._unexpected(expecting)
        result = []
        for key, value in pairs:
            # the key is decoded first, an invalid key is reported even if its value is also invalid
            decoded_key = key_decoder(TreeSource(key, is_key=True))
            result.append((decoded_key, value_decoder(TreeSource(value))))
        return result

    @override
    def read_one_or_many(self, decoder: Decoder[T]) -> OneOrMany[T]:
        if not _is_sequence(self._node):
            return One(decoder(self))
        # a value may itself be written as a list (bytes are), so a list is a single value when it decodes as one
        try:
            return One(decoder(self))
        except DecodeError:
            pass
        return Many(self.read_seq(decoder))

    @override
    def read_variant(self, variants: Sequence[tuple[str, Decoder[Any]]]) -> tuple[int, Any]:
        pairs = _map_pairs(self._node)
        items = list(pairs) if pairs is not None else []
        if len(items) != 1:
            raise self._unexpected('a map with a single key naming the variant')
        name, value = items[0]
        names = tuple(variant_name for variant_name, _ in variants)
        if name not in names:
            raise UnknownVariantError(name, names)
        index = names.index(name)
        _, decoder = variants[index]
        return index, decoder(TreeSource(value))

    @override
    def read_struct(self, fields: Sequence[tuple[str, Decoder[Any]]]) -> list[Any]:
        node = self._node
        if _is_sequence(node):
            if len(node) > len(fields):
                raise UnexpectedShapeError(f'a struct with {len(fields)} fields', f'sequence of length {len(node)}')
            values = [decoder(TreeSource(item)) for (_, decoder), item in zip(fields, node)]
            if len(values) < len(fields):
                raise MissingFieldError(fields[len(values)][0])
            return values

        pairs = _map_pairs(node)
        if pairs is None:
            raise self._unexpected('a struct')
        decoders = dict(fields)
        decoded: dict[str, Any] = {}
        for name, value in pairs:
            if not isinstance(name, str) or name not in decoders:
                continue
            if name in decoded:
                raise DuplicateFieldError(name)
            decoded[name] = decoders[name](TreeSource(value))
        for name, _ in fields:
            if name not in decoded:
                raise MissingFieldError(name)
        return [decoded[name] for name, _ in fields]


def to_value(codec: Codec[T], value: T) -> Any:
    """Encode `value` into a plain Python tree."""
    sink = TreeSink()
    codec.encode(sink, value)
    return sink.finalize()


def from_value(codec: Codec[T], node: Any) -> T:
    """Decode a plain Python tree, mappings may be dicts or `Entries`."""
    return codec.decode(TreeSource(node))
