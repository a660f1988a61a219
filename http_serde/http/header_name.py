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
Header names are case-insensitive tokens, they are stored in lowercase so that equal names are equal strings.

>>> HeaderName('Content-Type')
HeaderName('content-type')
>>> HeaderName('Content-Type') == HeaderName('content-type') == 'content-type'
True
>>> HeaderName('bad name')
Traceback (most recent call last):
...
http_serde.http.exceptions.InvalidHeaderName: invalid HTTP header name
"""

from typing import Union

from http_serde.http.exceptions import InvalidHeaderName
from http_serde.http.token import is_token

MAX_HEADER_NAME_LEN = 65535


class HeaderName(str):
    __slots__ = ()

    def __new__(cls, name: Union[str, bytes]) -> 'HeaderName':
        if isinstance(name, HeaderName):
            return name
        if isinstance(name, (bytes, bytearray)):
            try:
                name = bytes(name).decode('ascii')
            except UnicodeDecodeError as e:
                raise InvalidHeaderName() from e
        if not isinstance(name, str):
            raise TypeError(f'expected str or bytes, got {type(name).__name__}')
        if len(name) > MAX_HEADER_NAME_LEN or not is_token(name):
            raise InvalidHeaderName()
        return super().__new__(cls, name.lower())

    def __repr__(self) -> str:
        return f'HeaderName({str(self)!r})'

    def as_bytes(self) -> bytes:
        return self.encode('ascii')


ACCEPT = HeaderName('accept')
AUTHORIZATION = HeaderName('authorization')
CONTENT_LENGTH = HeaderName('content-length')
CONTENT_TYPE = HeaderName('content-type')
COOKIE = HeaderName('cookie')
HOST = HeaderName('host')
LOCATION = HeaderName('location')
SET_COOKIE = HeaderName('set-cookie')
USER_AGENT = HeaderName('user-agent')
