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
from collections.abc import Collection, Sequence
from typing import Any, Callable, Optional, Protocol, TypeVar

T_contra = TypeVar('T_contra', contravariant=True)


class Encoder(Protocol[T_contra]):
    def __call__(self, sink: FormatSink, value: T_contra, /) -> None:
        ...


FieldWriter = Callable[['FormatSink'], None]


class FormatSink(ABC):
    """Destination of an encode, one sink receives exactly one value.

    Nested values are written by handing an encoder to the compound methods (`write_seq`, `write_map`, ...), the sink
    decides how the nesting is represented.
    """

    @abstractmethod
    def is_self_describing(self) -> bool:
        """Whether a reader can tell a scalar from a sequence without knowing what was written."""
        raise NotImplementedError

    @abstractmethod
    def write_none(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_bool(self, value: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_int(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_str(self, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, value: bytes) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_option(self, value: Optional[T_contra], encoder: Encoder[T_contra]) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_seq(self, values: Collection[T_contra], encoder: Encoder[T_contra]) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_map(self, items: Collection[tuple[Any, Any]], key_encoder: Encoder[Any],
                  value_encoder: Encoder[Any]) -> None:
        """Write an associative structure, `items` are written in the given order."""
        raise NotImplementedError

    @abstractmethod
    def write_variant(self, index: int, name: str, value: T_contra, encoder: Encoder[T_contra]) -> None:
        """Write one alternative of a closed set, identified both by position and by name."""
        raise NotImplementedError

    @abstractmethod
    def write_struct(self, fields: Sequence[tuple[str, FieldWriter]]) -> None:
        """Write a record, `fields` holds each field name with a function that writes its value."""
        raise NotImplementedError
