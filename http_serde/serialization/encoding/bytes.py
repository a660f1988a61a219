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
Byte sequences prefixed by their length encoded as an unsigned LEB128.

This is how header values travel on the binary format, header values are bytes and not necessarily valid text.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'text/html')  # prepends b'\x09'
>>> bytes(se.finalize()).hex()
'09746578742f68746d6c'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('09746578742f68746d6c'))
>>> decode_bytes(de)
b'text/html'
>>> de.finalize()

>>> from http_serde.serialization.exceptions import OutOfDataError
>>> de = Deserializer.build_bytes_deserializer(b'\x09text')
>>> try:
...     decode_bytes(de)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read
"""

from http_serde.serialization import Deserializer, Serializer
from http_serde.serialization.exceptions import TooLongError

from .leb128 import decode_leb128, encode_leb128


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte sequence adding a length prefix.
    """
    assert isinstance(data, bytes)
    encode_leb128(serializer, len(data), signed=False)
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer, *, max_length: int | None = None) -> bytes:
    """ Decodes a byte sequence with a length prefix.

    A prefix larger than `max_length` raises `TooLongError` before anything else is read.
    """
    size = decode_leb128(deserializer, signed=False)
    if max_length is not None and size > max_length:
        raise TooLongError(f'byte sequence of length {size} exceeds {max_length}')
    return bytes(deserializer.read_bytes(size))
