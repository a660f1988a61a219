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
from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, Sequence, TypeVar, Union

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, source: FormatSource, /) -> T_co:
        ...


@dataclass(slots=True, frozen=True)
class One(Generic[T]):
    """A value group that was written as a bare scalar."""
    value: T


@dataclass(slots=True, frozen=True)
class Many(Generic[T]):
    """A value group that was written as a sequence."""
    values: list[T]


OneOrMany = Union[One[T], Many[T]]


class FormatSource(ABC):
    """Origin of a decode, one source holds exactly one value.

    Every read method checks the shape of the input and raises `UnexpectedShapeError` when it doesn't match, malformed
    input never escapes as anything other than a `DecodeError`.
    """

    @abstractmethod
    def is_self_describing(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_none(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def read_bool(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_int(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def read_str(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def read_str_or_bytes(self) -> Union[str, bytes]:
        """Read text or raw bytes, whichever the input holds."""
        raise NotImplementedError

    @abstractmethod
    def read_option(self, decoder: Decoder[T]) -> Optional[T]:
        raise NotImplementedError

    @abstractmethod
    def read_seq(self, decoder: Decoder[T]) -> list[T]:
        raise NotImplementedError

    @abstractmethod
    def read_map(self, key_decoder: Decoder[Any], value_decoder: Decoder[Any], *,
                 expecting: str = 'a map') -> list[tuple[Any, Any]]:
        """Read every (key, value) pair in input order.

        Repeated keys are all returned, the caller decides what they mean. `expecting` names the value being decoded
        in the error raised when the input is not a map.
        """
        raise NotImplementedError

    def read_one_or_many(self, decoder: Decoder[T]) -> OneOrMany[T]:
        """Read either a single value or a sequence of values, whichever the input holds.

        Only self-describing sources can do this.
        """
        raise TypeError(f'{type(self).__name__} cannot tell a value from a sequence')

    @abstractmethod
    def read_variant(self, variants: Sequence[tuple[str, Decoder[Any]]]) -> tuple[int, Any]:
        """Read one alternative of a closed set, returns its index and its decoded value."""
        raise NotImplementedError

    @abstractmethod
    def read_struct(self, fields: Sequence[tuple[str, Decoder[Any]]]) -> list[Any]:
        """Read a record, returns the decoded fields in the order they are given."""
        raise NotImplementedError
