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

from http_serde.codecs import HeaderMapCodec, NoneCodec, ResponseCodec
from http_serde.formats import yaml
from http_serde.formats.tree import Entries
from http_serde.http import Response, header_map
from http_serde.serialization.exceptions import BadDataError, DecodeError


def test_parse_keeps_repeated_keys():
    node = yaml.parse('a: 1\nb:\n  c: 2\na: 3\n')
    assert isinstance(node, Entries)
    assert node == [('a', 1), ('b', [('c', 2)]), ('a', 3)]


def test_parse_merge_keys():
    node = yaml.parse('base: &base\n  a: 1\nchild:\n  <<: *base\n  b: 2\n')
    assert node.keys() == ['base', 'child']
    assert dict(node[1][1]) == {'a': 1, 'b': 2}


def test_parse_invalid():
    with pytest.raises(BadDataError):
        yaml.parse('a: [1, 2')


def test_parse_deep_nesting():
    with pytest.raises(BadDataError, match='nesting too deep'):
        yaml.parse('foo: ' + '[' * 10_000 + ']' * 10_000)


def test_parse_is_safe():
    with pytest.raises(BadDataError):
        yaml.parse('!!python/object/apply:os.system ["true"]')


def test_dumps_header_map():
    headers = header_map([('baz', 'qux'), ('foo', 'bar'), ('two', 'one'), ('two', 'two')])
    assert yaml.dumps(HeaderMapCodec(), headers) == 'baz: qux\nfoo: bar\ntwo:\n- one\n- two\n'


def test_dumps_keeps_insertion_order():
    headers = header_map([('zeta', 'z'), ('alpha', 'a')])
    assert yaml.dumps(HeaderMapCodec(), headers) == 'zeta: z\nalpha: a\n'


def test_dumps_response():
    expected = (
        'head:\n'
        '  status: 200\n'
        '  headers: {}\n'
        '  version: HTTP/1.1\n'
        'body: null\n'
    )
    assert yaml.dumps(ResponseCodec(NoneCodec()), Response()) == expected


def test_loads_header_map():
    headers = yaml.loads(HeaderMapCodec(), 'Accept:\n- text/html\n- text/plain\nhost: example.com\n')
    assert headers == header_map([
        ('accept', 'text/html'),
        ('accept', 'text/plain'),
        ('host', 'example.com'),
    ])


def test_loads_repeated_header():
    headers = yaml.loads(HeaderMapCodec(), 'foo: a\nfoo: [b, c]\n')
    assert headers == header_map([('foo', 'a')])


def test_loads_numeric_header_name():
    headers = yaml.loads(HeaderMapCodec(), '123: x\n')
    assert headers == header_map([('123', 'x')])
    assert yaml.dumps(HeaderMapCodec(), headers) == "'123': x\n"


def test_boolean_key_is_not_a_header_name():
    with pytest.raises(DecodeError):
        yaml.loads(HeaderMapCodec(), 'true: x\n')
