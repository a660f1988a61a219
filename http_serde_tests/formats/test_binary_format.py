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

import pytest

from http_serde.codecs import (
    BoolCodec,
    BytesCodec,
    HeaderMapCodec,
    IntCodec,
    ListCodec,
    NoneCodec,
    OptionalCodec,
    ResultCodec,
    StrCodec,
)
from http_serde.formats import binary
from http_serde.formats.binary import BinarySink, BinarySource
from http_serde.http import header_map
from http_serde.serialization import Deserializer, Serializer
from http_serde.serialization.adapters import MaxBytesExceededError
from http_serde.serialization.exceptions import BadDataError, OutOfDataError, TooLongError, UnknownVariantError
from http_serde.utils.result import Err, Ok


def test_is_not_self_describing():
    assert not BinarySink(Serializer.build_bytes_serializer()).is_self_describing()
    assert not BinarySource(Deserializer.build_bytes_deserializer(b'')).is_self_describing()


@pytest.mark.parametrize('codec, value, encoded', [
    (NoneCodec(), None, ''),
    (BoolCodec(), True, '01'),
    (IntCodec(), -2, '7e'),
    (IntCodec(), 200, 'c801'),
    (StrCodec(), 'abc', '03616263'),
    (BytesCodec(), b'\x00', '0100'),
    (OptionalCodec(IntCodec()), None, '00'),
    (OptionalCodec(IntCodec()), 1, '0101'),
    (ListCodec(StrCodec()), ['a', 'b'], '0201610162'),
    (ResultCodec(IntCodec(), StrCodec()), Ok(1), '0001'),
    (ResultCodec(IntCodec(), StrCodec()), Err('e'), '010165'),
])
def test_layouts(codec, value, encoded):
    assert binary.dumps(codec, value).hex() == encoded
    assert binary.loads(codec, bytes.fromhex(encoded)) == value


def test_unknown_variant_index():
    with pytest.raises(UnknownVariantError):
        binary.loads(ResultCodec(IntCodec(), StrCodec()), b'\x02\x01')


def test_trailing_data():
    data = binary.dumps(HeaderMapCodec(), header_map([('foo', 'bar')]))
    with pytest.raises(BadDataError):
        binary.loads(HeaderMapCodec(), data + b'\x00')


def test_truncated_data():
    data = binary.dumps(HeaderMapCodec(), header_map([('foo', 'bar')]))
    with pytest.raises(OutOfDataError):
        binary.loads(HeaderMapCodec(), data[:-1])


def test_max_bytes():
    data = binary.dumps(StrCodec(), 'x' * 100)
    assert binary.loads(StrCodec(), data, max_bytes=len(data)) == 'x' * 100
    with pytest.raises(MaxBytesExceededError):
        binary.loads(StrCodec(), data, max_bytes=len(data) - 1)


def test_max_bytes_from_settings():
    # the test settings limit a decode to 1 MiB, a length prefix can't ask for more than that
    data = bytes.fromhex('8080c001')
    with pytest.raises(MaxBytesExceededError):
        binary.loads(BytesCodec(), data)


def test_collection_limit_from_settings():
    # the test settings allow at most 1024 items
    assert len(binary.loads(ListCodec(BoolCodec()), binary.dumps(ListCodec(BoolCodec()), [True] * 1024))) == 1024
    with pytest.raises(TooLongError):
        binary.loads(ListCodec(BoolCodec()), binary.dumps(ListCodec(BoolCodec()), [True] * 1025))


def test_header_map_collection_limit():
    headers = header_map((f'x-{i}', 'v') for i in range(1025))
    with pytest.raises(TooLongError):
        binary.loads(HeaderMapCodec(), binary.dumps(HeaderMapCodec(), headers))
