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
from http_serde.http.exceptions import InvalidHeaderName
from http_serde.http.header_name import HeaderName
from http_serde.serialization.exceptions import InvalidKeyError


class HeaderNameCodec(Codec[HeaderName]):
    """ Represents header names as their lowercase string, on every format.

    This is the key codec of header maps, a string that is not a valid header name raises `InvalidKeyError`.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    def _check_value(self, value: HeaderName, /, *, deep: bool) -> None:
        if not isinstance(value, HeaderName):
            raise TypeError('expected HeaderName instance')

    @override
    def _encode(self, sink: FormatSink, value: HeaderName, /) -> None:
        sink.write_str(str(value))

    @override
    def _decode(self, source: FormatSource, /) -> HeaderName:
        name = source.read_str()
        try:
            return HeaderName(name)
        except InvalidHeaderName as e:
            raise InvalidKeyError(str(e), name) from e
