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
from http_serde.http.exceptions import HeaderValueToStrError, InvalidHeaderValue
from http_serde.http.header_value import HeaderValue
from http_serde.serialization.exceptions import InvalidValueError


class HeaderValueCodec(Codec[HeaderValue]):
    """ Represents header values, as text when the format can tell text from bytes and as bytes otherwise.

    With `prefers_text=True` (the default) self-describing formats get a string, unless the value has bytes that are
    not visible ASCII and thus no text form, then they get the bytes. With `prefers_text=False` they always get the
    bytes. Non-self-describing formats always get the bytes.

    Decoding accepts either a string or bytes on self-describing formats, input that is not a valid header value
    raises `InvalidValueError`.
    """

    __slots__ = ('_prefers_text',)

    _is_hashable = True

    def __init__(self, *, prefers_text: bool = True) -> None:
        self._prefers_text = prefers_text

    @property
    def prefers_text(self) -> bool:
        return self._prefers_text

    @override
    def _check_value(self, value: HeaderValue, /, *, deep: bool) -> None:
        if not isinstance(value, HeaderValue):
            raise TypeError('expected HeaderValue instance')

    @override
    def _encode(self, sink: FormatSink, value: HeaderValue, /) -> None:
        if self._prefers_text and sink.is_self_describing():
            try:
                text = value.to_str()
            except HeaderValueToStrError:
                pass
            else:
                sink.write_str(text)
                return
        sink.write_bytes(value.as_bytes())

    @override
    def _decode(self, source: FormatSource, /) -> HeaderValue:
        raw = source.read_str_or_bytes() if source.is_self_describing() else source.read_bytes()
        try:
            return HeaderValue(raw)
        except InvalidHeaderValue as e:
            raise InvalidValueError(str(e), raw) from e
