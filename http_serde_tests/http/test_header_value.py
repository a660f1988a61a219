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

from http_serde.http import HeaderValue, HeaderValueToStrError, InvalidHeaderValue


@pytest.mark.parametrize('value', ['text/html', '', ' spaced ', 'tab\there', '~!@#'])
def test_from_str(value):
    header_value = HeaderValue.from_str(value)
    assert header_value.to_str() == value
    assert header_value.as_bytes() == value.encode('ascii')


@pytest.mark.parametrize('value', ['\x7f', '\x00', 'line\nbreak', 'café'])
def test_invalid_str(value):
    with pytest.raises(InvalidHeaderValue) as e:
        HeaderValue(value)
    assert str(e.value) == 'failed to parse header value'


def test_bytes_beyond_ascii():
    header_value = HeaderValue.from_bytes(b'caf\xc3\xa9')
    assert bytes(header_value) == b'caf\xc3\xa9'
    assert len(header_value) == 5
    with pytest.raises(HeaderValueToStrError) as e:
        header_value.to_str()
    assert str(e.value) == 'failed to convert header to a str'


@pytest.mark.parametrize('value', [b'\x7f', b'\x00', b'a\rb', b'\x1f'])
def test_invalid_bytes(value):
    with pytest.raises(InvalidHeaderValue):
        HeaderValue(value)


def test_wrong_types():
    with pytest.raises(TypeError):
        HeaderValue(1)
    with pytest.raises(TypeError):
        HeaderValue.from_str(b'a')
    with pytest.raises(TypeError):
        HeaderValue.from_bytes('a')


def test_equality_ordering_and_hash():
    assert HeaderValue('a') == HeaderValue(b'a')
    assert HeaderValue('a') != 'a'
    assert HeaderValue('a') < HeaderValue('b') <= HeaderValue('b')
    assert len({HeaderValue('a'), HeaderValue(b'a'), HeaderValue('b')}) == 2
    assert sorted([HeaderValue('b'), HeaderValue('a')]) == [HeaderValue('a'), HeaderValue('b')]


def test_repr():
    assert repr(HeaderValue('gzip')) == "HeaderValue(b'gzip')"
