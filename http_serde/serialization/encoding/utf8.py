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
UTF-8 strings with a length prefix, the layout is exactly that of `encoding.bytes`.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'content-type')
>>> bytes(se.finalize()).hex()
'0c636f6e74656e742d74797065'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0c636f6e74656e742d74797065'))
>>> decode_utf8(de)
'content-type'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x01\xff')
>>> try:
...     decode_utf8(de)
... except BadDataError as e:
...     print(*e.args)
invalid utf-8 string
"""

from http_serde.serialization import Deserializer, Serializer
from http_serde.serialization.exceptions import BadDataError

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    assert isinstance(value, str)
    encode_bytes(serializer, value.encode('utf-8'))


def decode_utf8(deserializer: Deserializer, *, max_length: int | None = None) -> str:
    data = decode_bytes(deserializer, max_length=max_length)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise BadDataError('invalid utf-8 string') from e
