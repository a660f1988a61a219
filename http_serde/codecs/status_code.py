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
from http_serde.http.exceptions import InvalidStatusCode
from http_serde.http.status_code import StatusCode
from http_serde.serialization.exceptions import InvalidValueError


class StatusCodeCodec(Codec[StatusCode]):
    """ Represents status codes as integers, a number out of the 100..999 range raises `InvalidValueError`.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    def _check_value(self, value: StatusCode, /, *, deep: bool) -> None:
        if not isinstance(value, StatusCode):
            raise TypeError('expected StatusCode instance')

    @override
    def _encode(self, sink: FormatSink, value: StatusCode, /) -> None:
        sink.write_int(int(value))

    @override
    def _decode(self, source: FormatSource, /) -> StatusCode:
        code = source.read_int()
        try:
            return StatusCode(code)
        except InvalidStatusCode as e:
            raise InvalidValueError(str(e), code) from e
