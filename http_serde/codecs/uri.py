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

"""Codecs for URIs and their components, all of them are written as their normalized string."""

from typing import TypeVar

from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource
from http_serde.http.exceptions import InvalidUri
from http_serde.http.uri import Authority, PathAndQuery, Scheme, Uri
from http_serde.serialization.exceptions import InvalidValueError

U = TypeVar('U', Uri, Authority, Scheme, PathAndQuery)


class _UriPartCodec(Codec[U]):
    __slots__ = ()

    _is_hashable = True

    # XXX: subclasses must set this, the type parses its own string form and raises InvalidUri on invalid input
    _type: type[U]

    @override
    def _check_value(self, value: U, /, *, deep: bool) -> None:
        if not isinstance(value, self._type):
            raise TypeError(f'expected {self._type.__name__} instance')

    @override
    def _encode(self, sink: FormatSink, value: U, /) -> None:
        sink.write_str(str(value))

    @override
    def _decode(self, source: FormatSource, /) -> U:
        text = source.read_str()
        try:
            return self._type(text)
        except InvalidUri as e:
            raise InvalidValueError(str(e), text) from e


class UriCodec(_UriPartCodec[Uri]):
    _type = Uri


class AuthorityCodec(_UriPartCodec[Authority]):
    _type = Authority


class SchemeCodec(_UriPartCodec[Scheme]):
    _type = Scheme


class PathAndQueryCodec(_UriPartCodec[PathAndQuery]):
    _type = PathAndQuery
