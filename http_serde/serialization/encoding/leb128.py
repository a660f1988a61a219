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
LEB128 (Little Endian Base 128) variable-length integers.

Every byte carries 7 bits of data and a continuation bit (the MSB). The binary format uses the unsigned variant for
every length prefix (strings, byte sequences, collections and maps) and the signed variant for integers.

References:
- https://en.wikipedia.org/wiki/LEB128
- https://dwarfstd.org/doc/DWARF5.pdf

>>> se = Serializer.build_bytes_serializer()
>>> encode_leb128(se, 300, signed=False)  # writes ac02
>>> encode_leb128(se, 64, signed=True)  # writes c000
>>> encode_leb128(se, -2, signed=True)  # writes 7e
>>> bytes(se.finalize()).hex()
'ac02c0007e'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ac02c0007e'))
>>> decode_leb128(de, signed=False)
300
>>> decode_leb128(de, signed=True)
64
>>> decode_leb128(de, signed=True)
-2
>>> de.finalize()

A runaway continuation can be cut short with `max_bytes`:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffff7f'))
>>> try:
...     decode_leb128(de, signed=False, max_bytes=2)
... except TooLongError as e:
...     print(*e.args)
leb128 value exceeds 2 bytes
"""

from http_serde.serialization import Deserializer, Serializer, TooLongError


def encode_leb128(serializer: Serializer, value: int, *, signed: bool) -> None:
    """ Encodes an integer using LEB128.

    Caller must explicitly choose `signed=True` or `signed=False`.
    """
    if not signed and value < 0:
        raise ValueError('cannot encode value <0 as unsigned')
    while True:
        byte = value & 0b0111_1111
        value >>= 7
        if signed:
            done = (value == 0 and (byte & 0b0100_0000) == 0) or (value == -1 and (byte & 0b0100_0000) != 0)
        else:
            done = value == 0
        if done:
            serializer.write_byte(byte)
            break
        serializer.write_byte(byte | 0b1000_0000)


def decode_leb128(deserializer: Deserializer, *, signed: bool, max_bytes: int | None = None) -> int:
    """ Decodes a LEB128-encoded integer.

    Caller must explicitly choose `signed=True` or `signed=False`. When `max_bytes` is given, a value that uses more
    bytes than that raises `TooLongError`.
    """
    result = 0
    shift = 0
    read = 0
    while True:
        if max_bytes is not None and read >= max_bytes:
            raise TooLongError(f'leb128 value exceeds {max_bytes} bytes')
        byte = deserializer.read_byte()
        read += 1
        result |= (byte & 0b0111_1111) << shift
        shift += 7
        if (byte & 0b1000_0000) == 0:
            if signed and (byte & 0b0100_0000) != 0:
                return result | -(1 << shift)
            return result
