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

r"""
Header values are bytes, most of the time they are ASCII text but nothing guarantees that.

Any byte is accepted except control characters, horizontal tab being the one control character allowed. Building a
value from a `str` is stricter and only accepts visible ASCII, since that is the only text every peer agrees on.

>>> HeaderValue('text/html').to_str()
'text/html'
>>> HeaderValue(b'caf\xc3\xa9').to_str()
Traceback (most recent call last):
...
http_serde.http.exceptions.HeaderValueToStrError: failed to convert header to a str
>>> HeaderValue('\x7f')
Traceback (most recent call last):
...
http_serde.http.exceptions.InvalidHeaderValue: failed to parse header value
"""

from functools import total_ordering
from typing import Any, Union

from http_serde.http.exceptions import HeaderValueToStrError, InvalidHeaderValue

_HTAB = 0x09
_DEL = 0x7f


def _is_valid_byte(byte: int) -> bool:
    return byte == _HTAB or (byte >= 0x20 and byte != _DEL)


def _is_visible_ascii(byte: int) -> bool:
    return byte == _HTAB or 0x20 <= byte < _DEL


@total_ordering
class HeaderValue:
    __slots__ = ('_value',)

    _value: bytes

    def __init__(self, value: Union[str, bytes, bytearray, memoryview]) -> None:
        if isinstance(value, str):
            data = value.encode('utf-8')
            if not all(_is_visible_ascii(byte) for byte in data):
                raise InvalidHeaderValue()
        elif isinstance(value, (bytes, bytearray, memoryview)):
            data = bytes(value)
            if not all(_is_valid_byte(byte) for byte in data):
                raise InvalidHeaderValue()
        else:
            raise TypeError(f'expected str or bytes, got {type(value).__name__}')
        self._value = data

    @classmethod
    def from_str(cls, value: str) -> 'HeaderValue':
        if not isinstance(value, str):
            raise TypeError(f'expected str, got {type(value).__name__}')
        return cls(value)

    @classmethod
    def from_bytes(cls, value: bytes) -> 'HeaderValue':
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f'expected bytes, got {type(value).__name__}')
        return cls(value)

    def to_str(self) -> str:
        """Return the value as text, it fails when there are bytes other than visible ASCII."""
        if not all(_is_visible_ascii(byte) for byte in self._value):
            raise HeaderValueToStrError()
        return self._value.decode('ascii')

    def as_bytes(self) -> bytes:
        return self._value

    def __bytes__(self) -> bytes:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return f'HeaderValue({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HeaderValue):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, HeaderValue):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)
