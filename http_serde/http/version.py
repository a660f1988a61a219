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

from enum import Enum


class Version(str, Enum):
    """The HTTP protocol version, compared in release order.

    >>> Version('HTTP/2.0')
    <Version.HTTP_2: 'HTTP/2.0'>
    >>> Version.HTTP_10 < Version.HTTP_11 < Version.HTTP_3
    True
    """

    HTTP_09 = 'HTTP/0.9'
    HTTP_10 = 'HTTP/1.0'
    HTTP_11 = 'HTTP/1.1'
    HTTP_2 = 'HTTP/2.0'
    HTTP_3 = 'HTTP/3.0'

    @classmethod
    def default(cls) -> 'Version':
        return cls.HTTP_11

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _ORDER.index(self) < _ORDER.index(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _ORDER.index(self) <= _ORDER.index(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _ORDER.index(self) > _ORDER.index(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return _ORDER.index(self) >= _ORDER.index(other)


_ORDER: list[Version] = list(Version)
