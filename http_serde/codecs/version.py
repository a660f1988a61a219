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

import json

from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource
from http_serde.http.version import Version
from http_serde.serialization.exceptions import InvalidValueError


class VersionCodec(Codec[Version]):
    """ Represents protocol versions as their name, e.g. `HTTP/1.1`.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    def _check_value(self, value: Version, /, *, deep: bool) -> None:
        if not isinstance(value, Version):
            raise TypeError('expected Version instance')

    @override
    def _encode(self, sink: FormatSink, value: Version, /) -> None:
        sink.write_str(value.value)

    @override
    def _decode(self, source: FormatSource, /) -> Version:
        name = source.read_str()
        try:
            return Version(name)
        except ValueError as e:
            raise InvalidValueError(f'invalid value: string {json.dumps(name)}, expected a version string', name) from e
