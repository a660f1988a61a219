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
Request and response codecs.

Both are written as a struct with a `head` and a `body`, the head being a struct of the message's metadata:

>>> from http_serde.codecs import NoneCodec
>>> from http_serde.formats import json
>>> from http_serde.http import Response
>>> json.dumps(ResponseCodec(NoneCodec()), Response())
'{"head": {"status": 200, "headers": {}, "version": "HTTP/1.1"}, "body": null}'
"""

from typing import Any, TypeVar

from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.codecs.header_map import HeaderMapCodec
from http_serde.codecs.method import MethodCodec
from http_serde.codecs.status_code import StatusCodeCodec
from http_serde.codecs.uri import UriCodec
from http_serde.codecs.version import VersionCodec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource
from http_serde.http.message import Request, Response
from http_serde.serialization.exceptions import ExtensionsNotEmptyError

T = TypeVar('T')


def _check_extensions(extensions: dict[Any, Any]) -> None:
    # extensions only live in the process that built the message
    if extensions:
        raise ExtensionsNotEmptyError()


class RequestCodec(Codec[Request[T]]):
    """ Represents a `Request`, the body is written with the given codec.

    A request with extensions can't be encoded and raises `ExtensionsNotEmptyError`.
    """

    __slots__ = ('_body',)

    _is_hashable = False
    _body: Codec[T]

    _method = MethodCodec()
    _uri = UriCodec()
    _headers = HeaderMapCodec()
    _version = VersionCodec()

    def __init__(self, body: Codec[T]) -> None:
        self._body = body

    @override
    def _check_value(self, value: Request[T], /, *, deep: bool) -> None:
        if not isinstance(value, Request):
            raise TypeError('expected Request instance')
        if deep:
            self._method.check_value(value.method)
            self._uri.check_value(value.uri)
            self._headers.check_value(value.headers)
            self._version.check_value(value.version)
            self._body.check_value(value.body)

    @override
    def _encode(self, sink: FormatSink, value: Request[T], /) -> None:
        _check_extensions(value.extensions)

        def write_head(head_sink: FormatSink) -> None:
            head_sink.write_struct([
                ('method', lambda s: self._method.encode(s, value.method)),
                ('uri', lambda s: self._uri.encode(s, value.uri)),
                ('headers', lambda s: self._headers.encode(s, value.headers)),
                ('version', lambda s: self._version.encode(s, value.version)),
            ])

        sink.write_struct([
            ('head', write_head),
            ('body', lambda s: self._body.encode(s, value.body)),
        ])

    def _decode_head(self, source: FormatSource) -> list[Any]:
        return source.read_struct([
            ('method', self._method.decode),
            ('uri', self._uri.decode),
            ('headers', self._headers.decode),
            ('version', self._version.decode),
        ])

    @override
    def _decode(self, source: FormatSource, /) -> Request[T]:
        head, body = source.read_struct([
            ('head', self._decode_head),
            ('body', self._body.decode),
        ])
        method, uri, headers, version = head
        return Request(method=method, uri=uri, headers=headers, version=version, body=body)


class ResponseCodec(Codec[Response[T]]):
    """ Represents a `Response`, the body is written with the given codec.

    A response with extensions can't be encoded and raises `ExtensionsNotEmptyError`.
    """

    __slots__ = ('_body',)

    _is_hashable = False
    _body: Codec[T]

    _status = StatusCodeCodec()
    _headers = HeaderMapCodec()
    _version = VersionCodec()

    def __init__(self, body: Codec[T]) -> None:
        self._body = body

    @override
    def _check_value(self, value: Response[T], /, *, deep: bool) -> None:
        if not isinstance(value, Response):
            raise TypeError('expected Response instance')
        if deep:
            self._status.check_value(value.status)
            self._headers.check_value(value.headers)
            self._version.check_value(value.version)
            self._body.check_value(value.body)

    @override
    def _encode(self, sink: FormatSink, value: Response[T], /) -> None:
        _check_extensions(value.extensions)

        def write_head(head_sink: FormatSink) -> None:
            head_sink.write_struct([
                ('status', lambda s: self._status.encode(s, value.status)),
                ('headers', lambda s: self._headers.encode(s, value.headers)),
                ('version', lambda s: self._version.encode(s, value.version)),
            ])

        sink.write_struct([
            ('head', write_head),
            ('body', lambda s: self._body.encode(s, value.body)),
        ])

    def _decode_head(self, source: FormatSource) -> list[Any]:
        return source.read_struct([
            ('status', self._status.decode),
            ('headers', self._headers.decode),
            ('version', self._version.decode),
        ])

    @override
    def _decode(self, source: FormatSource, /) -> Response[T]:
        head, body = source.read_struct([
            ('head', self._decode_head),
            ('body', self._body.decode),
        ])
        status, headers, version = head
        return Response(status=status, headers=headers, version=version, body=body)
