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
A collection is any sized iterable: a count followed by every item.

Layout: [N: unsigned leb128][item_0]...[item_N-1]

This is also the layout of a header value group on the binary format, even when the group has a single value.

>>> from http_serde.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, ['one', 'two'], encode_utf8)
>>> bytes(se.finalize()).hex()
'02036f6e650374776f'

Breakdown of the result:

    02: 2 in leb128, the number of items
    036f6e65: 'one' with length prefix
    0374776f: 'two' with length prefix

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02036f6e650374776f'))
>>> decode_collection(de, decode_utf8, tuple)
('one', 'two')
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02036f6e650374776f'))
>>> try:
...     decode_collection(de, decode_utf8, list, max_length=1)
... except TooLongError as e:
...     print(*e.args)
collection of length 2 exceeds 1
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from http_serde.serialization import Deserializer, Serializer, TooLongError
from http_serde.serialization.encoding.leb128 import decode_leb128, encode_leb128

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_leb128(serializer, len(values), signed=False)
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: int | None = None,
) -> R:
    length = decode_leb128(deserializer, signed=False)
    if max_length is not None and length > max_length:
        raise TooLongError(f'collection of length {length} exceeds {max_length}')
    return builder(decoder(deserializer) for _ in range(length))
