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
from collections import deque
from collections.abc import Collection, Hashable, Iterable, Set
from typing import TypeVar

from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class _CollectionCodec(Codec[Collection[T]], ABC):
    """ Used as base for codecs of collections, all of them are written as a sequence.
    """
    __slots__ = ('_item',)

    _is_hashable = False
    _item: Codec[T]

    def __init__(self, item_codec: Codec[T], /) -> None:
        self._item = item_codec

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from an iterable of items.
        """
        raise NotImplementedError

    def _check_item(self, item: T) -> None:
        self._item._check_value(item, deep=True)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, Collection) or isinstance(value, (str, bytes)):
            raise TypeError('expected Collection type')
        if deep:
            for i in value:
                self._check_item(i)

    @override
    def _encode(self, sink: FormatSink, value: Collection[T], /) -> None:
        sink.write_seq(value, self._item.encode)

    @override
    def _decode(self, source: FormatSource, /) -> Collection[T]:
        return self._build(source.read_seq(self._item.decode))


class ListCodec(_CollectionCodec[T]):
    """ Represents builtin `list` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)


class DequeCodec(_CollectionCodec[T]):
    """ Represents builtin `collections.deque` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> deque[T]:
        return deque(items)


class SetCodec(_CollectionCodec[H]):
    """ Represents builtin `set` values, the item codec must be hashable.

    Items are written in iteration order, which for a set is not meaningful.
    """

    def __init__(self, item_codec: Codec[H], /) -> None:
        if not item_codec.is_hashable():
            raise TypeError(f'{type(item_codec).__name__} is not hashable')
        super().__init__(item_codec)

    @override
    def _build(self, items: Iterable[H]) -> Set[H]:
        return set(items)

    @override
    def _check_item(self, item: H) -> None:
        if not isinstance(item, Hashable):
            raise TypeError('expected Hashable type')
        super()._check_item(item)


class FrozenSetCodec(SetCodec[H]):
    """ Represents builtin `frozenset` values.
    """

    # XXX: SetCodec already enforces H to be hashable, but is not itself hashable, a frozenset, however, is hashable
    _is_hashable = True

    @override
    def _build(self, items: Iterable[H]) -> frozenset[H]:
        return frozenset(items)
