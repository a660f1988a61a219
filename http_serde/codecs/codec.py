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
from typing import Generic, TypeVar, final

from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource

T = TypeVar('T')


class Codec(ABC, Generic[T]):
    """ Models how values of one type are written to a `FormatSink` and read from a `FormatSource`.

    A codec doesn't know which format it is talking to, the only thing it may ask is whether the format is
    self-describing. Compound codecs (options, collections, maps, header maps) are built from the codecs of their
    parts, e.g. `ListCodec(StrCodec())`.

    Codecs hold no state besides their configuration and can be shared freely, including between threads.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _is_hashable: bool

    @final
    def is_hashable(self) -> bool:
        """ Indicates whether the values handled by this codec are expected to be hashable.

        Codecs for sets and for map keys require their item codec to be hashable.
        """
        return self._is_hashable

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError if the value's type is not compatible, recursing into compound values.
        """
        # XXX: subclasses must implement Codec._check_value, not Codec.check_value
        self._check_value(value, deep=True)

    @final
    def encode(self, sink: FormatSink, value: T, /) -> None:
        """ Write a value to the sink.

        The value's type is checked while encoding, calling check_value before calling encode is not needed.
        """
        # XXX: subclasses must implement Codec._encode, not Codec.encode
        self._check_value(value, deep=False)
        self._encode(sink, value)

    @final
    def decode(self, source: FormatSource, /) -> T:
        """ Read a value from the source, invalid input raises a `DecodeError`.
        """
        # XXX: subclasses must implement Codec._decode, not Codec.decode
        return self._decode(source)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Codec.check_value`, should raise a TypeError if the type is not compatible.

        With `deep=False` compound codecs only check the outer type, the items are checked as they are encoded.
        """
        raise NotImplementedError

    @abstractmethod
    def _encode(self, sink: FormatSink, value: T, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def _decode(self, source: FormatSource, /) -> T:
        raise NotImplementedError
