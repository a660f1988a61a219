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
The shared algorithm of the header map codecs.

A header map is written as a map from header name to its values, in the map's key order. How the values of one name
(its value group) are written depends on the format:

- a group of one value is written as that bare value on self-describing formats, and as a one-element sequence on
  formats that are not self-describing, since their readers must know in advance whether a sequence follows;
- a group of two or more values is always written as a sequence, in the order the values were added.

A name with no values can't be represented and fails the encode with `EmptyValueGroupError`.

When decoding, self-describing formats accept both a bare value and a sequence for every group. If the input has
the same name more than once the first occurrence wins, later ones are decoded (so they must still be valid) and then
dropped.
"""

from __future__ import annotations

from abc import ABC
from typing import Callable, TypeVar

from structlog import get_logger
from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.codecs.header_name import HeaderNameCodec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource, Many, One
from http_serde.http.header_map import HeaderMap
from http_serde.http.header_name import HeaderName
from http_serde.serialization.exceptions import EmptyValueGroupError

logger = get_logger()

V = TypeVar('V')

EXPECTING = 'a header map'


class _MultiMapCodec(Codec[HeaderMap[V]], ABC):
    """ Base class of the header map codecs, subclasses only choose the value codec.
    """

    __slots__ = ('_key', '_value')

    _is_hashable = False
    _key: HeaderNameCodec
    _value: Codec[V]

    def __init__(self, value: Codec[V]) -> None:
        self._key = HeaderNameCodec()
        self._value = value

    @property
    def value_codec(self) -> Codec[V]:
        return self._value

    @override
    def _check_value(self, value: HeaderMap[V], /, *, deep: bool) -> None:
        if not isinstance(value, HeaderMap):
            raise TypeError('expected HeaderMap instance')
        if deep:
            for name, item in value.items():
                self._key._check_value(name, deep=True)
                self._value._check_value(item, deep=True)

    @override
    def _encode(self, sink: FormatSink, value: HeaderMap[V], /) -> None:
        groups = list(value.groups())
        # every group is checked before anything is written, so a failed encode leaves no partial map behind
        for name, values in groups:
            if not values:
                raise EmptyValueGroupError(name)
        sink.write_map(groups, self._key.encode, self._group_encoder(sink.is_self_describing()))

    def _group_encoder(self, is_self_describing: bool) -> Callable[[FormatSink, list[V]], None]:
        def encode_group(sink: FormatSink, values: list[V]) -> None:
            if is_self_describing and len(values) == 1:
                self._value.encode(sink, values[0])
            else:
                sink.write_seq(values, self._value.encode)
        return encode_group

    @override
    def _decode(self, source: FormatSource, /) -> HeaderMap[V]:
        group_decoder = self._decode_one_or_many if source.is_self_describing() else self._decode_many
        pairs: list[tuple[HeaderName, list[V]]] = source.read_map(self._key.decode, group_decoder, expecting=EXPECTING)
        result: HeaderMap[V] = HeaderMap()
        for name, values in pairs:
            if result.insert_all_if_vacant(name, values):
                continue
            if name in result:
                logger.new().debug('discarding repeated header', header=str(name), discarded_values=len(values))
        return result

    def _decode_one_or_many(self, source: FormatSource) -> list[V]:
        match source.read_one_or_many(self._value.decode):
            case One(value):
                return [value]
            case Many(values):
                return values
            case other:
                raise AssertionError(f'unexpected value group {other!r}')

    def _decode_many(self, source: FormatSource) -> list[V]:
        return source.read_seq(self._value.decode)
