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

from http_serde.http import HeaderName, InvalidHeaderName
from http_serde.http.header_name import CONTENT_TYPE, MAX_HEADER_NAME_LEN


@pytest.mark.parametrize('name, normalized', [
    ('Content-Type', 'content-type'),
    ('X-CUSTOM', 'x-custom'),
    ('a', 'a'),
    ("!#$%&'*+-.^_`|~0", "!#$%&'*+-.^_`|~0"),
    (b'Host', 'host'),
])
def test_valid_names(name, normalized):
    header_name = HeaderName(name)
    assert header_name == normalized
    assert isinstance(header_name, str)


@pytest.mark.parametrize('name', ['', 'bad name', 'bad:name', '\x7f', 'ñ', 'a\r\n', b'\xff'])
def test_invalid_names(name):
    with pytest.raises(InvalidHeaderName) as e:
        HeaderName(name)
    assert str(e.value) == 'invalid HTTP header name'


def test_invalid_name_is_a_value_error():
    with pytest.raises(ValueError):
        HeaderName('(')


def test_length_limit():
    assert len(HeaderName('a' * MAX_HEADER_NAME_LEN)) == MAX_HEADER_NAME_LEN
    with pytest.raises(InvalidHeaderName):
        HeaderName('a' * (MAX_HEADER_NAME_LEN + 1))


def test_wrong_type():
    with pytest.raises(TypeError):
        HeaderName(1)


def test_equality_and_hash():
    assert HeaderName('Content-Type') == CONTENT_TYPE
    assert hash(HeaderName('CONTENT-TYPE')) == hash('content-type')
    assert HeaderName(CONTENT_TYPE) is CONTENT_TYPE


def test_repr_and_bytes():
    assert repr(HeaderName('Accept')) == "HeaderName('accept')"
    assert HeaderName('Accept').as_bytes() == b'accept'
