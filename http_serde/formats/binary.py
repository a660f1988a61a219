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

r"""
Compact binary format, built on the byte layer in `http_serde.serialization`.

The binary format is not self-describing: nothing on the wire says whether a value is a scalar or a sequence, so the
decoder always has to know the shape in advance. Layouts:

- none: nothing at all
- bool: one byte, 0 or 1
- int: signed LEB128
- str: UTF-8 bytes with an unsigned LEB128 length prefix
- bytes: unsigned LEB128 length prefix followed by the bytes
- option: bool flag followed by the value when set
- sequence: unsigned LEB128 count followed by the items
- map: unsigned LEB128 count followed by key/value pairs
- variant: unsigned LEB128 index followed by the value
- struct: fields concatenated in declaration order

>>> from http_serde.codecs import HeaderMapCodec
>>> from http_serde.http import HeaderMap, HeaderValue
>>> headers = HeaderMap()
>>> headers.insert('foo', HeaderValue('bar'))
>>> dumps(HeaderMapCodec(), headers).hex()
'0103666f6f0103626172'

Breakdown of the result:

    01: one key
    03666f6f: 'foo'
    01: one value, a single value is still written as a sequence
    03626172: b'bar'
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from structlog import get_logger
from typing_extensions import override

from http_serde.conf.get_settings import get_global_settings
from http_serde.formats.sink import Encoder, FieldWriter, FormatSink
from http_serde.formats.source import Decoder, FormatSource
from http_serde.serialization import Deserializer, Serializer
from http_serde.serialization.adapters import MaxBytesExceededError
from http_serde.serialization.compound_encoding import Decoder as ByteDecoder, Encoder as ByteEncoder
from http_serde.serialization.compound_encoding.collection import decode_collection, encode_collection
from http_serde.serialization.compound_encoding.mapping import decode_mapping, encode_mapping
from http_serde.serialization.compound_encoding.optional import decode_optional, encode_optional
from http_serde.serialization.encoding.bool import decode_bool, encode_bool
from http_serde.serialization.encoding.bytes import decode_bytes, encode_bytes
from http_serde.serialization.encoding.leb128 import decode_leb128, encode_leb128
from http_serde.serialization.encoding.utf8 import decode_utf8, encode_utf8
from http_serde.serialization.exceptions import UnknownVariantError
from http_serde.serialization.types import Buffer

if TYPE_CHECKING:
    from http_serde.codecs.codec import Codec

logger = get_logger()

T = TypeVar('T')


class BinarySink(FormatSink):
    __slots__ = ('_serializer',)

    def __init__(self, serializer: Serializer) -> None:
        self._serializer = serializer

    def _bytes_encoder(self, encoder: Encoder[T]) -> ByteEncoder[T]:
        # the byte-level encodings hand over the serializer, which is the one this sink already wraps
        return lambda _serializer, value: encoder(self, value)

    @override
    def is_self_describing(self) -> bool:
        return False

    @override
    def write_none(self) -> None:
        pass

    @override
    def write_bool(self, value: bool) -> None:
        encode_bool(self._serializer, value)

    @override
    def write_int(self, value: int) -> None:
        encode_leb128(self._serializer, value, signed=True)

    @override
    def write_str(self, value: str) -> None:
        encode_utf8(self._serializer, value)

    @override
    def write_bytes(self, value: bytes) -> None:
        encode_bytes(self._serializer, value)

    @override
    def write_option(self, value: Optional[T], encoder: Encoder[T]) -> None:
        encode_optional(self._serializer, value, self._bytes_encoder(encoder))

    @override
    def write_seq(self, values: Collection[T], encoder: Encoder[T]) -> None:
        encode_collection(self._serializer, values, self._bytes_encoder(encoder))

    @override
    def write_map(self, items: Collection[tuple[Any, Any]], key_encoder: Encoder[Any],
                  value_encoder: Encoder[Any]) -> None:
        encode_mapping(self._serializer, items, self._bytes_encoder(key_encoder), self._bytes_encoder(value_encoder))

    @override
    def write_variant(self, index: int, name: str, value: T, encoder: Encoder[T]) -> None:
        encode_leb128(self._serializer, index, signed=False)
        encoder(self, value)

    @override
    def write_struct(self, fields: Sequence[tuple[str, FieldWriter]]) -> None:
        for _, writer in fields:
            writer(self)


class BinarySource(FormatSource):
    """Reads the binary format, sequences and maps longer than `max_collection_length` raise `TooLongError`."""

    __slots__ = ('_deserializer', '_max_collection_length')

    def __init__(self, deserializer: Deserializer, *, max_collection_length: Optional[int] = None) -> None:
        self._deserializer = deserializer
        self._max_collection_length = max_collection_length

    def _bytes_decoder(self, decoder: Decoder[T]) -> ByteDecoder[T]:
        return lambda _deserializer: decoder(self)

    @override
    def is_self_describing(self) -> bool:
        return False

    @override
    def read_none(self) -> None:
        return None

    @override
    def read_bool(self) -> bool:
        return decode_bool(self._deserializer)

    @override
    def read_int(self) -> int:
        return decode_leb128(self._deserializer, signed=True)

    @override
    def read_str(self) -> str:
        return decode_utf8(self._deserializer)

    @override
    def read_bytes(self) -> bytes:
        return decode_bytes(self._deserializer)

    @override
    def read_str_or_bytes(self) -> bytes:
        return decode_bytes(self._deserializer)

    @override
    def read_option(self, decoder: Decoder[T]) -> Optional[T]:
        return decode_optional(self._deserializer, self._bytes_decoder(decoder))

    @override
    def read_seq(self, decoder: Decoder[T]) -> list[T]:
        return decode_collection(
            self._deserializer,
            self._bytes_decoder(decoder),
            list,
            max_length=self._max_collection_length,
        )

    @override
    def read_map(self, key_decoder: Decoder[Any], value_decoder: Decoder[Any], *,
                 expecting: str = 'a map') -> list[tuple[Any, Any]]:
        return decode_mapping(
            self._deserializer,
            self._bytes_decoder(key_decoder),
            self._bytes_decoder(value_decoder),
            max_length=self._max_collection_length,
        )

    @override
    def read_variant(self, variants: Sequence[tuple[str, Decoder[Any]]]) -> tuple[int, Any]:
        index = decode_leb128(self._deserializer, signed=False)
        if index >= len(variants):
            raise UnknownVariantError(index, tuple(name for name, _ in variants))
        _, decoder = variants[index]
        return index, decoder(self)

    @override
    def read_struct(self, fields: Sequence[tuple[str, Decoder[Any]]]) -> list[Any]:
        return [decoder(self) for _, decoder in fields]


def dumps(codec: Codec[T], value: T) -> bytes:
    serializer = Serializer.build_bytes_serializer()
    codec.encode(BinarySink(serializer), value)
    return bytes(serializer.finalize())


def loads(codec: Codec[T], data: Buffer, *, max_bytes: Optional[int] = None) -> T:
    """Decode a complete binary value, trailing bytes raise `BadDataError`.

    Reading more than `max_bytes` raises `MaxBytesExceededError`, when not given the `MAX_DECODE_BYTES` setting is
    used (no limit by default).
    """
    settings = get_global_settings()
    if max_bytes is None:
        max_bytes = settings.MAX_DECODE_BYTES
    deserializer = Deserializer.build_bytes_deserializer(data).with_optional_max_bytes(max_bytes)
    source = BinarySource(deserializer, max_collection_length=settings.MAX_COLLECTION_LENGTH)
    try:
        value = codec.decode(source)
    except MaxBytesExceededError:
        logger.debug('binary decode exceeded the byte budget', max_bytes=max_bytes)
        raise
    deserializer.finalize()
    return value
