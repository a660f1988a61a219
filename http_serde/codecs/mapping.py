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

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection, Hashable, Iterable, Mapping
from typing import Any, TypeVar

from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class _MapCodec(Codec[Mapping[H, T]], ABC):
    """ Base class to help implement codecs for mappings, the key codec must be hashable.

    When the input repeats a key the last value is kept, like a `dict` built from the pairs would.
    """

    __slots__ = ('_key', '_value')

    _key: Codec[H]
    _value: Codec[T]
    _is_hashable = False

    def __init__(self, key: Codec[H], value: Codec[T]) -> None:
        if not key.is_hashable():
            raise TypeError(f'{type(key).__name__} is not hashable')
        self._key = key
        self._value = value

    @abstractmethod
    def _build(self, items: Iterable[tuple[H, T]]) -> Mapping[H, T]:
        """ How to build the concrete map from an iterable of (key, value).
        """
        raise NotImplementedError

    def _items(self, value: Mapping[H, T]) -> Collection[tuple[H, T]]:
        """ The items to write, in the order they are written.
        """
        return list(value.items())

    @override
    def _check_value(self, value: Mapping[H, T], /, *, deep: bool) -> None:
        if not isinstance(value, Mapping):
            raise TypeError('expected Mapping type')
        if deep:
            for k, v in value.items():
                self._key._check_value(k, deep=True)
                self._value._check_value(v, deep=True)

    @override
    def _encode(self, sink: FormatSink, value: Mapping[H, T], /) -> None:
        sink.write_map(self._items(value), self._key.encode, self._value.encode)

    @override
    def _decode(self, source: FormatSource, /) -> Mapping[H, T]:
        return self._build(source.read_map(self._key.decode, self._value.decode))


class DictCodec(_MapCodec[H, T]):
    """ Represents builtin `dict` values.
    """

    @override
    def _build(self, items: Iterable[tuple[H, T]]) -> dict[H, T]:
        return dict(items)


class SortedDictCodec(_MapCodec[H, T]):
    """ Represents `dict` values whose keys are ordered, they are written and rebuilt in key order.

    The keys must support `<` among themselves.
    """

    @staticmethod
    def _sort_key(item: tuple[Any, Any]) -> Any:
        return item[0]

    @override
    def _items(self, value: Mapping[H, T]) -> Collection[tuple[H, T]]:
        return sorted(value.items(), key=self._sort_key)

    @override
    def _build(self, items: Iterable[tuple[H, T]]) -> dict[H, T]:
        return dict(sorted(dict(items).items(), key=self._sort_key))
