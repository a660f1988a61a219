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

from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource


class NoneCodec(Codec[None]):
    """ Represents the unit value `None`, e.g. the body of a request that has none.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    def _check_value(self, value: None, /, *, deep: bool) -> None:
        if value is not None:
            raise TypeError('expected None')

    @override
    def _encode(self, sink: FormatSink, value: None, /) -> None:
        sink.write_none()

    @override
    def _decode(self, source: FormatSource, /) -> None:
        source.read_none()


class BoolCodec(Codec[bool]):
    __slots__ = ()

    _is_hashable = True

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError('expected boolean')

    @override
    def _encode(self, sink: FormatSink, value: bool, /) -> None:
        sink.write_bool(value)

    @override
    def _decode(self, source: FormatSource, /) -> bool:
        return source.read_bool()


class IntCodec(Codec[int]):
    """ Represents arbitrary `int` values, `bool` is not accepted even though it is an `int` subclass.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError('expected integer')

    @override
    def _encode(self, sink: FormatSink, value: int, /) -> None:
        sink.write_int(value)

    @override
    def _decode(self, source: FormatSource, /) -> int:
        return source.read_int()


class StrCodec(Codec[str]):
    __slots__ = ()

    _is_hashable = True

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str instance')

    @override
    def _encode(self, sink: FormatSink, value: str, /) -> None:
        sink.write_str(value)

    @override
    def _decode(self, source: FormatSource, /) -> str:
        return source.read_str()


class BytesCodec(Codec[bytes]):
    __slots__ = ()

    _is_hashable = True

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, bytes):
            raise TypeError('expected bytes type')

    @override
    def _encode(self, sink: FormatSink, value: bytes, /) -> None:
        sink.write_bytes(value)

    @override
    def _decode(self, source: FormatSource, /) -> bytes:
        return source.read_bytes()
