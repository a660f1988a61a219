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
A mapping is encoded as a collection of (key, value) pairs.

Layout: [N: unsigned leb128][key_0][value_0]...[key_N-1][value_N-1]

Pairs are written in the order they are given and decoded in wire order. Decoding does not merge repeated keys,
deciding what a repeated key means is up to the caller.

>>> from http_serde.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_mapping(se, [('foo', 'bar')], encode_utf8, encode_utf8)
>>> bytes(se.finalize()).hex()
'0103666f6f03626172'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0103666f6f03626172'))
>>> decode_mapping(de, decode_utf8, decode_utf8)
[('foo', 'bar')]
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> encode_mapping(se, [('foo', 'a'), ('foo', 'b')], encode_utf8, encode_utf8)
>>> de = Deserializer.build_bytes_deserializer(se.finalize())
>>> decode_mapping(de, decode_utf8, decode_utf8)
[('foo', 'a'), ('foo', 'b')]
"""

from collections.abc import Collection
from typing import TypeVar

from http_serde.serialization import Deserializer, Serializer, TooLongError
from http_serde.serialization.encoding.leb128 import decode_leb128, encode_leb128

from . import Decoder, Encoder

KT = TypeVar('KT')
VT = TypeVar('VT')


def encode_mapping(
    serializer: Serializer,
    items: Collection[tuple[KT, VT]],
    key_encoder: Encoder[KT],
    value_encoder: Encoder[VT],
) -> None:
    encode_leb128(serializer, len(items), signed=False)
    for key, value in items:
        key_encoder(serializer, key)
        value_encoder(serializer, value)


def decode_mapping(
    deserializer: Deserializer,
    key_decoder: Decoder[KT],
    value_decoder: Decoder[VT],
    *,
    max_length: int | None = None,
) -> list[tuple[KT, VT]]:
    size = decode_leb128(deserializer, signed=False)
    if max_length is not None and size > max_length:
        raise TooLongError(f'mapping of length {size} exceeds {max_length}')
    items = []
    for _ in range(size):
        # keys are decoded before their values, so an invalid key is reported before anything after it
        key = key_decoder(deserializer)
        items.append((key, value_decoder(deserializer)))
    return items
