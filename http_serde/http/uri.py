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
Request targets and their components.

A `Uri` is one of the request-target forms of RFC 9112 section 3.2:

- origin-form: `/path?query`
- absolute-form: `scheme://authority/path?query`, an empty path is normalized to `/`
- authority-form: `host:port`
- asterisk-form: `*`

>>> uri = Uri('https://example.com')
>>> uri
Uri('https://example.com/')
>>> uri.scheme, uri.authority, uri.path_and_query
(Scheme('https'), Authority('example.com'), PathAndQuery('/'))
>>> Uri('/search?q=1').query
'q=1'
>>> Uri('')
Traceback (most recent call last):
...
http_serde.http.exceptions.InvalidUri: empty string
"""

import string
from typing import Any, Optional

from http_serde.http.exceptions import InvalidUri

MAX_URI_LEN = 65534
MAX_SCHEME_LEN = 64
MAX_PORT = 65535

_SCHEME_CHARS = frozenset(string.ascii_letters + string.digits + '+-.')

# RFC 3986: unreserved, sub-delims and the separators that may appear in an authority
_AUTHORITY_CHARS = frozenset(string.ascii_letters + string.digits + "-._~!$&'()*+,;=:@[]%")

# visible ASCII, the fragment delimiter is handled before this check
_PATH_CHARS = frozenset(chr(c) for c in range(0x21, 0x7f))


def _check_not_empty(value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f'expected str, got {type(value).__name__}')
    if not value:
        raise InvalidUri('empty string')


class Scheme(str):
    """A URI scheme such as `https`, schemes are case-insensitive and stored in lowercase."""

    __slots__ = ()

    def __new__(cls, scheme: str) -> 'Scheme':
        if isinstance(scheme, Scheme):
            return scheme
        _check_not_empty(scheme)
        if len(scheme) > MAX_SCHEME_LEN:
            raise InvalidUri('scheme too long')
        if not scheme[0].isascii() or not scheme[0].isalpha() or any(c not in _SCHEME_CHARS for c in scheme):
            raise InvalidUri('invalid scheme')
        return super().__new__(cls, scheme.lower())

    def __repr__(self) -> str:
        return f'Scheme({str(self)!r})'


class Authority(str):
    """The `[userinfo@]host[:port]` part of a URI.

    >>> Authority('example.com:8080').port
    8080
    >>> Authority('[::1]:80').host
    '[::1]'
    """

    __slots__ = ()

    def __new__(cls, authority: str) -> 'Authority':
        if isinstance(authority, Authority):
            return authority
        _check_not_empty(authority)
        if len(authority) > MAX_URI_LEN:
            raise InvalidUri('uri too long')
        if any(c not in _AUTHORITY_CHARS for c in authority):
            raise InvalidUri('invalid uri character')
        if authority.count('@') > 1:
            raise InvalidUri('invalid authority')
        host_port = authority.rpartition('@')[2]
        host, port = _split_host_port(host_port)
        if not host:
            raise InvalidUri('invalid authority')
        if port is not None and (not port.isdigit() or int(port) > MAX_PORT):
            raise InvalidUri('invalid port')
        return super().__new__(cls, authority)

    def __repr__(self) -> str:
        return f'Authority({str(self)!r})'

    @property
    def host(self) -> str:
        return _split_host_port(self.rpartition('@')[2])[0]

    @property
    def port(self) -> Optional[int]:
        port = _split_host_port(self.rpartition('@')[2])[1]
        return int(port) if port else None


def _split_host_port(host_port: str) -> tuple[str, Optional[str]]:
    """Split `host:port`, an IPv6 literal host is enclosed in brackets."""
    if host_port.startswith('['):
        end = host_port.find(']')
        if end < 0:
            raise InvalidUri('invalid authority')
        host, rest = host_port[:end + 1], host_port[end + 1:]
        if not rest:
            return host, None
        if not rest.startswith(':'):
            raise InvalidUri('invalid authority')
        return host, rest[1:]
    if '[' in host_port or ']' in host_port:
        raise InvalidUri('invalid authority')
    host, sep, port = host_port.rpartition(':')
    if not sep:
        return host_port, None
    return host, port


class PathAndQuery(str):
    """The path and query of a URI, any fragment is dropped.

    >>> PathAndQuery('/a/b?x=1#top')
    PathAndQuery('/a/b?x=1')
    """

    __slots__ = ()

    def __new__(cls, path_and_query: str) -> 'PathAndQuery':
        if isinstance(path_and_query, PathAndQuery):
            return path_and_query
        if not isinstance(path_and_query, str):
            raise TypeError(f'expected str, got {type(path_and_query).__name__}')
        if len(path_and_query) > MAX_URI_LEN:
            raise InvalidUri('uri too long')
        value = path_and_query.partition('#')[0]
        if any(c not in _PATH_CHARS for c in value):
            raise InvalidUri('invalid uri character')
        if not value or value.startswith('?'):
            value = '/' + value
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f'PathAndQuery({str(self)!r})'

    @property
    def path(self) -> str:
        return self.partition('?')[0]

    @property
    def query(self) -> Optional[str]:
        _, sep, query = self.partition('?')
        return query if sep else None


class Uri:
    """A request target, immutable and compared by its normalized text."""

    __slots__ = ('_scheme', '_authority', '_path_and_query')

    _scheme: Optional[Scheme]
    _authority: Optional[Authority]
    _path_and_query: Optional[PathAndQuery]

    def __init__(self, uri: str = '/') -> None:
        _check_not_empty(uri)
        if len(uri) > MAX_URI_LEN:
            raise InvalidUri('uri too long')
        self._scheme = None
        self._authority = None
        self._path_and_query = None

        if uri.startswith('/') or uri == '*':
            self._path_and_query = PathAndQuery(uri)
            return

        scheme, sep, rest = uri.partition('://')
        if sep:
            self._scheme = Scheme(scheme)
            end = len(rest)
            for delimiter in '/?#':
                index = rest.find(delimiter)
                if 0 <= index < end:
                    end = index
            if end == 0:
                raise InvalidUri('invalid authority')
            self._authority = Authority(rest[:end])
            self._path_and_query = PathAndQuery(rest[end:])
            return

        self._authority = Authority(uri)

    @classmethod
    def from_parts(cls, *, scheme: Optional[str] = None, authority: Optional[str] = None,
                   path_and_query: Optional[str] = None) -> 'Uri':
        """Build a Uri from its components, a scheme requires an authority."""
        if scheme is not None and authority is None:
            raise InvalidUri('scheme requires an authority')
        if scheme is None and path_and_query is None and authority is None:
            raise InvalidUri('empty string')
        uri = cls.__new__(cls)
        uri._scheme = Scheme(scheme) if scheme is not None else None
        uri._authority = Authority(authority) if authority is not None else None
        if path_and_query is None and scheme is not None:
            path_and_query = '/'
        uri._path_and_query = PathAndQuery(path_and_query) if path_and_query is not None else None
        return uri

    @property
    def scheme(self) -> Optional[Scheme]:
        return self._scheme

    @property
    def authority(self) -> Optional[Authority]:
        return self._authority

    @property
    def path_and_query(self) -> Optional[PathAndQuery]:
        return self._path_and_query

    @property
    def host(self) -> Optional[str]:
        return self._authority.host if self._authority is not None else None

    @property
    def port(self) -> Optional[int]:
        return self._authority.port if self._authority is not None else None

    @property
    def path(self) -> str:
        if self._path_and_query is None:
            return ''
        return self._path_and_query.path

    @property
    def query(self) -> Optional[str]:
        if self._path_and_query is None:
            return None
        return self._path_and_query.query

    def __str__(self) -> str:
        parts = []
        if self._scheme is not None:
            parts.append(f'{self._scheme}://')
        if self._authority is not None:
            parts.append(self._authority)
        if self._path_and_query is not None:
            parts.append(self._path_and_query)
        return ''.join(parts)

    def __repr__(self) -> str:
        return f'Uri({str(self)!r})'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
