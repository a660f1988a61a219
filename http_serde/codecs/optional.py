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

from typing import Optional, TypeVar

from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource

V = TypeVar('V')


class OptionalCodec(Codec[Optional[V]]):
    """ Represents a value that is either `V` or `None`.

    Self-describing formats write `None` as null and anything else as the bare value, so a `None` nested directly
    inside another optional can't be told apart from the outer `None`.
    """

    __slots__ = ('_is_hashable', '_value')

    _value: Codec[V]

    def __init__(self, codec: Codec[V]) -> None:
        self._value = codec
        self._is_hashable = codec.is_hashable()

    @override
    def _check_value(self, value: Optional[V], /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _encode(self, sink: FormatSink, value: Optional[V], /) -> None:
        sink.write_option(value, self._value.encode)

    @override
    def _decode(self, source: FormatSource, /) -> Optional[V]:
        return source.read_option(self._value.decode)
