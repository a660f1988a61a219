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

from http_serde.codecs import HeaderMapCodec
from http_serde.formats import binary, json, yaml
from http_serde.formats.binary import BinarySink
from http_serde.formats.tree import TreeSink, from_value, to_value
from http_serde.http import HeaderMap, HeaderName, HeaderValue, header_map
from http_serde.serialization import Serializer
from http_serde.serialization.exceptions import (
    EmptyValueGroupError,
    InvalidKeyError,
    InvalidValueError,
    UnexpectedShapeError,
)

SELF_DESCRIBING_FORMATS = [
    pytest.param((to_value, from_value), id='tree'),
    pytest.param((json.dumps, json.loads), id='json'),
    pytest.param((yaml.dumps, yaml.loads), id='yaml'),
]

ALL_FORMATS = SELF_DESCRIBING_FORMATS + [
    pytest.param((binary.dumps, binary.loads), id='binary'),
]

MAPS = [
    pytest.param(header_map([]), id='empty'),
    pytest.param(header_map([('foo', 'bar')]), id='single'),
    pytest.param(header_map([('baz', 'qux'), ('foo', 'bar'), ('two', 'one'), ('two', 'two')]), id='mixed'),
    pytest.param(header_map([('x', 'c'), ('x', 'a'), ('x', 'b'), ('a', 'z')]), id='unsorted'),
    pytest.param(header_map([('x', ''), ('y', b'caf\xc3\xa9'), ('y', 'tab\there')]), id='odd-values'),
]


def _group_nodes(value):
    return dict(to_value(HeaderMapCodec(), value))


@pytest.mark.parametrize('fmt', ALL_FORMATS)
@pytest.mark.parametrize('headers', MAPS)
def test_round_trip(fmt, headers):
    dumps, loads = fmt
    codec = HeaderMapCodec()
    decoded = loads(codec, dumps(codec, headers))
    assert decoded == headers
    assert list(decoded.groups()) == list(headers.groups())


@pytest.mark.parametrize('fmt', ALL_FORMATS)
@pytest.mark.parametrize('headers', MAPS)
def test_round_trip_preferring_bytes(fmt, headers):
    dumps, loads = fmt
    codec = HeaderMapCodec(prefers_text=False)
    assert loads(codec, dumps(codec, headers)) == headers


def test_single_value_is_a_scalar_on_self_describing_formats():
    assert to_value(HeaderMapCodec(), header_map([('foo', 'bar')])) == {'foo': 'bar'}


def test_single_value_is_a_sequence_on_binary():
    data = binary.dumps(HeaderMapCodec(), header_map([('foo', 'bar')]))
    # one key, 'foo', a sequence of one value, b'bar'
    assert data == bytes.fromhex('01' '03666f6f' '01' '03626172')


@pytest.mark.parametrize('count', [2, 3, 10])
def test_many_values_are_a_sequence(count):
    values = [f'v{i}' for i in range(count)]
    headers = header_map(('k', value) for value in values)
    assert to_value(HeaderMapCodec(), headers) == {'k': values}

    data = binary.dumps(HeaderMapCodec(), headers)
    single = binary.dumps(HeaderMapCodec(), header_map([('k', 'v0')]))
    # same key, only the count and the extra values differ
    assert data[:3] == single[:3]
    assert data[3] == count


def test_empty_map():
    assert json.dumps(HeaderMapCodec(), HeaderMap()) == '{}'
    assert binary.dumps(HeaderMapCodec(), HeaderMap()) == b'\x00'
    assert json.loads(HeaderMapCodec(), '{}') == HeaderMap()


def test_json_encoding():
    headers = header_map([('baz', 'qux'), ('foo', 'bar'), ('two', 'one'), ('two', 'two')])
    assert json.dumps(HeaderMapCodec(), headers) == '{"baz": "qux", "foo": "bar", "two": ["one", "two"]}'


def test_key_order_is_kept():
    headers = header_map([('zzz', '1'), ('aaa', '2'), ('mmm', '3')])
    assert list(to_value(HeaderMapCodec(), headers)) == ['zzz', 'aaa', 'mmm']
    assert binary.loads(HeaderMapCodec(), binary.dumps(HeaderMapCodec(), headers)).keys() == ['zzz', 'aaa', 'mmm']


def test_decode_sequence():
    headers = json.loads(HeaderMapCodec(), '{"two": ["one", "two"]}')
    assert headers.keys() == [HeaderName('two')]
    assert headers.get_all('two') == [HeaderValue('one'), HeaderValue('two')]


@pytest.mark.parametrize('data', [
    '{"foo": "bar"}',
    '{"foo": ["bar"]}',
    '{"Foo": "bar"}',
])
def test_decode_scalar_or_one_element_sequence(data):
    assert json.loads(HeaderMapCodec(), data) == header_map([('foo', 'bar')])


def test_decode_empty_sequence_adds_nothing():
    assert json.loads(HeaderMapCodec(), '{"foo": []}') == HeaderMap()


def test_decode_bytes_on_self_describing_formats():
    assert from_value(HeaderMapCodec(), {'foo': [98, 97, 114]}) == header_map([('foo', 'bar')])
    assert from_value(HeaderMapCodec(), {'foo': [[98], [97]]}) == header_map([('foo', 'b'), ('foo', 'a')])
    assert from_value(HeaderMapCodec(), {'foo': b'bar'}) == header_map([('foo', 'bar')])


def test_value_without_text_form_falls_back_to_bytes():
    headers = header_map([('x', b'caf\xc3\xa9')])
    assert to_value(HeaderMapCodec(), headers) == {'x': [99, 97, 102, 195, 169]}


def test_prefers_bytes():
    headers = header_map([('foo', 'bar')])
    assert to_value(HeaderMapCodec(prefers_text=False), headers) == {'foo': [98, 97, 114]}
    assert HeaderMapCodec(prefers_text=False).value_codec.prefers_text is False


@pytest.mark.parametrize('data', [
    '{"foo": "a", "foo": ["b", "c"]}',
    '{"foo": ["a"], "FOO": "b"}',
    '{"foo": "a", "bar": "x", "Foo": "c"}',
])
def test_first_occurrence_wins(data):
    headers = json.loads(HeaderMapCodec(), data)
    assert headers.get_all('foo') == [HeaderValue('a')]


def test_first_occurrence_wins_on_binary():
    from http_serde.serialization.compound_encoding.mapping import encode_mapping
    from http_serde.serialization.encoding.utf8 import encode_utf8

    def encode_group(serializer, values):
        sink = BinarySink(serializer)
        sink.write_seq([HeaderValue(v) for v in values], lambda s, v: s.write_bytes(v.as_bytes()))

    serializer = Serializer.build_bytes_serializer()
    encode_mapping(serializer, [('foo', ['a']), ('bar', ['x']), ('foo', ['b', 'c'])], encode_utf8, encode_group)
    headers = binary.loads(HeaderMapCodec(), bytes(serializer.finalize()))
    assert list(headers.groups()) == [('foo', [HeaderValue('a')]), ('bar', [HeaderValue('x')])]


def test_discarded_duplicates_must_still_be_valid():
    with pytest.raises(InvalidValueError):
        json.loads(HeaderMapCodec(), '{"foo": "a", "foo": "\\u007f"}')


@pytest.mark.parametrize('key', ['\\u007f', '', 'bad name', 'caf\\u00e9'])
def test_invalid_key(key):
    with pytest.raises(InvalidKeyError) as e:
        json.loads(HeaderMapCodec(), f'{{"{key}": "hello"}}')
    assert str(e.value) == 'invalid HTTP header name'


def test_invalid_key_on_binary():
    data = binary.dumps(HeaderMapCodec(), header_map([('foo', 'bar')])).replace(b'foo', b'f o')
    with pytest.raises(InvalidKeyError) as e:
        binary.loads(HeaderMapCodec(), data)
    assert e.value.value == 'f o'


@pytest.mark.parametrize('data', [
    '{"foo": "\\u007f"}',
    '{"foo": ["ok", "\\u0000"]}',
    '{"foo": "caf\\u00e9"}',
])
def test_invalid_value(data):
    with pytest.raises(InvalidValueError) as e:
        json.loads(HeaderMapCodec(), data)
    assert str(e.value) == 'failed to parse header value'


def test_invalid_value_on_binary():
    data = binary.dumps(HeaderMapCodec(), header_map([('foo', 'bar')])).replace(b'bar', b'b\x7fr')
    with pytest.raises(InvalidValueError):
        binary.loads(HeaderMapCodec(), data)


@pytest.mark.parametrize('data, found', [
    ('""', 'string ""'),
    ('[]', 'sequence'),
    ('1', 'integer `1`'),
    ('null', 'null'),
])
def test_not_a_map(data, found):
    with pytest.raises(UnexpectedShapeError) as e:
        json.loads(HeaderMapCodec(), data)
    assert str(e.value) == f'invalid type: {found}, expected a header map'


@pytest.mark.parametrize('data', ['{"foo": 1}', '{"foo": {"a": "b"}}', '{"foo": null}', '{"foo": ["a", 1]}'])
def test_unexpected_value_shape(data):
    with pytest.raises(UnexpectedShapeError):
        json.loads(HeaderMapCodec(), data)


def test_empty_group_fails_encode():
    headers = header_map([('foo', 'bar')])
    headers.entry('empty')
    for sink in [TreeSink(), BinarySink(Serializer.build_bytes_serializer())]:
        with pytest.raises(EmptyValueGroupError) as e:
            HeaderMapCodec().encode(sink, headers)
        assert e.value.key == 'empty'
        assert str(e.value) == 'header has no values: empty'


def test_empty_group_fails_before_writing():
    headers = HeaderMap()
    headers.entry('empty')
    sink = TreeSink()
    with pytest.raises(EmptyValueGroupError):
        HeaderMapCodec().encode(sink, headers)
    with pytest.raises(RuntimeError):
        sink.finalize()


def test_wrong_types():
    with pytest.raises(TypeError):
        to_value(HeaderMapCodec(), {'foo': 'bar'})
    with pytest.raises(TypeError):
        to_value(HeaderMapCodec(), HeaderMap([('foo', 'bar')]))


def test_check_value():
    codec = HeaderMapCodec()
    codec.check_value(header_map([('foo', 'bar')]))
    with pytest.raises(TypeError):
        codec.check_value(HeaderMap([('foo', 'bar')]))
    assert not codec.is_hashable()


def test_encode_does_not_change_the_map():
    headers = header_map([('a', '1'), ('a', '2'), ('b', '3')])
    copy = headers.copy()
    json.dumps(HeaderMapCodec(), headers)
    binary.dumps(HeaderMapCodec(), headers)
    assert headers == copy
    assert _group_nodes(headers) == {'a': ['1', '2'], 'b': '3'}
