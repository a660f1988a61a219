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
An ordered multi-map keyed by header names.

A name may have several values. Values under one name keep the order they were added in, and names keep the order
they were first added in. Names are normalized (see `HeaderName`), so `Accept` and `accept` are the same key.

>>> headers = HeaderMap()
>>> headers.append('Set-Cookie', 'a=1')
>>> headers.append('set-cookie', 'b=2')
>>> headers.insert('Host', 'example.com')
>>> list(headers)
[HeaderName('set-cookie'), HeaderName('host')]
>>> headers.get_all('SET-COOKIE')
['a=1', 'b=2']
>>> len(headers), headers.value_count()
(2, 3)
"""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Optional, TypeVar, Union

from http_serde.http.exceptions import InvalidHeaderName
from http_serde.http.header_name import HeaderName
from http_serde.http.header_value import HeaderValue

T = TypeVar('T')
D = TypeVar('D')

KeyLike = Union[HeaderName, str, bytes]


def _lookup_key(key: Any) -> Optional[HeaderName]:
    """Normalize a key for a lookup, a key that can't be a header name is just absent."""
    if not isinstance(key, (str, bytes, bytearray)):
        return None
    try:
        return HeaderName(key)
    except InvalidHeaderName:
        return None


class HeaderMap(Generic[T]):
    """Ordered multi-map from `HeaderName` to values of any type, `HeaderValue` by default.

    Keys given as `str` or `bytes` are converted to `HeaderName` when inserting, raising `InvalidHeaderName` if that
    fails. Lookups with such a key find nothing instead.
    """

    __slots__ = ('_groups',)

    # a value of None disables hashing, this is a mutable container
    __hash__ = None  # type: ignore[assignment]

    _groups: dict[HeaderName, list[T]]

    def __init__(self, pairs: Iterable[tuple[KeyLike, T]] = ()) -> None:
        self._groups = {}
        for key, value in pairs:
            self.append(key, value)

    def insert(self, key: KeyLike, value: T) -> list[T]:
        """Set `value` as the only value of `key`, returns the values it replaced.

        An existing key keeps its position.
        """
        name = HeaderName(key)
        previous = self._groups.get(name, [])
        self._groups[name] = [value]
        return previous

    def append(self, key: KeyLike, value: T) -> None:
        """Add `value` after the values `key` already has, or as its first value."""
        self._groups.setdefault(HeaderName(key), []).append(value)

    def insert_all_if_vacant(self, key: KeyLike, values: Iterable[T]) -> bool:
        """Add all `values` to `key` in order, but only if `key` is not in the map yet.

        Returns whether the values were added. Nothing is added when `values` is empty, a key never ends up without
        values through this method.
        """
        name = HeaderName(key)
        if name in self._groups:
            return False
        group = list(values)
        if not group:
            return False
        self._groups[name] = group
        return True

    def entry(self, key: KeyLike) -> list[T]:
        """The live list of values of `key`, created empty when `key` is absent.

        Changes to the list are changes to the map. A key whose list is left empty has no values, which is an invalid
        state that fails when the map is encoded.
        """
        return self._groups.setdefault(HeaderName(key), [])

    def get(self, key: Any, default: Optional[D] = None) -> Union[T, D, None]:
        """The first value of `key`, or `default`."""
        name = _lookup_key(key)
        group = self._groups.get(name) if name is not None else None
        if not group:
            return default
        return group[0]

    def get_all(self, key: Any) -> list[T]:
        """All values of `key` in order, an empty list when the key is absent."""
        name = _lookup_key(key)
        if name is None:
            return []
        return list(self._groups.get(name, ()))

    def __getitem__(self, key: Any) -> T:
        name = _lookup_key(key)
        group = self._groups.get(name) if name is not None else None
        if not group:
            raise KeyError(key)
        return group[0]

    def __contains__(self, key: Any) -> bool:
        name = _lookup_key(key)
        return name is not None and name in self._groups

    def __iter__(self) -> Iterator[HeaderName]:
        return iter(self._groups)

    def keys(self) -> list[HeaderName]:
        return list(self._groups)

    def __len__(self) -> int:
        """Number of distinct keys."""
        return len(self._groups)

    def value_count(self) -> int:
        """Number of values across all keys."""
        return sum(len(group) for group in self._groups.values())

    def items(self) -> Iterator[tuple[HeaderName, T]]:
        """Every (key, value) pair, a key with several values appears once per value."""
        for name, group in self._groups.items():
            for value in group:
                yield name, value

    def groups(self) -> Iterator[tuple[HeaderName, list[T]]]:
        """Every key with a copy of its values, in key order."""
        for name, group in self._groups.items():
            yield name, list(group)

    def remove(self, key: KeyLike) -> list[T]:
        """Remove `key` and return its values, raises `KeyError` if it is absent."""
        name = _lookup_key(key)
        if name is None or name not in self._groups:
            raise KeyError(key)
        return self._groups.pop(name)

    def extend(self, other: Union['HeaderMap[T]', Iterable[tuple[KeyLike, T]]]) -> None:
        """Add entries from another map or from (key, value) pairs.

        Keys of another `HeaderMap` replace the values of the same keys in this map, pairs are appended.
        """
        if isinstance(other, HeaderMap):
            for name, group in other._groups.items():
                self._groups[name] = list(group)
        else:
            for key, value in other:
                self.append(key, value)

    def copy(self) -> 'HeaderMap[T]':
        new: HeaderMap[T] = HeaderMap()
        new._groups = {name: list(group) for name, group in self._groups.items()}
        return new

    def clear(self) -> None:
        self._groups.clear()

    def __eq__(self, other: Any) -> bool:
        # like a dict, the order of keys doesn't matter but the order of values within a key does
        if not isinstance(other, HeaderMap):
            return NotImplemented
        return self._groups == other._groups

    def __repr__(self) -> str:
        groups = ', '.join(f'{str(name)!r}: {group!r}' for name, group in self._groups.items())
        return f'HeaderMap({{{groups}}})'


def header_map(pairs: Iterable[tuple[KeyLike, Union[str, bytes]]] = ()) -> HeaderMap[HeaderValue]:
    """Build a `HeaderMap` of `HeaderValue`s from plain strings or bytes.

    >>> header_map([('accept', 'text/html'), ('accept', 'text/plain')]).get_all('accept')
    [HeaderValue(b'text/html'), HeaderValue(b'text/plain')]
    """
    return HeaderMap((key, HeaderValue(value)) for key, value in pairs)
