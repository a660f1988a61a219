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

from typing import ClassVar

from http_serde.http.exceptions import InvalidMethod
from http_serde.http.token import is_token


class Method(str):
    """An HTTP request method.

    Methods are case-sensitive tokens, `GET` and `get` are different methods. Extension methods are allowed.

    >>> Method('PURGE')
    Method('PURGE')
    >>> Method('GET') == Method.GET
    True
    """

    __slots__ = ()

    GET: ClassVar['Method']
    HEAD: ClassVar['Method']
    POST: ClassVar['Method']
    PUT: ClassVar['Method']
    DELETE: ClassVar['Method']
    CONNECT: ClassVar['Method']
    OPTIONS: ClassVar['Method']
    TRACE: ClassVar['Method']
    PATCH: ClassVar['Method']

    def __new__(cls, method: str) -> 'Method':
        if isinstance(method, Method):
            return method
        if not isinstance(method, str):
            raise TypeError(f'expected str, got {type(method).__name__}')
        if not is_token(method):
            raise InvalidMethod()
        return super().__new__(cls, method)

    def __repr__(self) -> str:
        return f'Method({str(self)!r})'

    def is_safe(self) -> bool:
        return self in _SAFE_METHODS

    def is_idempotent(self) -> bool:
        return self in _SAFE_METHODS or self in ('PUT', 'DELETE')


Method.GET = Method('GET')
Method.HEAD = Method('HEAD')
Method.POST = Method('POST')
Method.PUT = Method('PUT')
Method.DELETE = Method('DELETE')
Method.CONNECT = Method('CONNECT')
Method.OPTIONS = Method('OPTIONS')
Method.TRACE = Method('TRACE')
Method.PATCH = Method('PATCH')

_SAFE_METHODS = frozenset(['GET', 'HEAD', 'OPTIONS', 'TRACE'])
