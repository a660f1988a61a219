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

from http_serde.utils.result import Err, Ok, UnwrapError, is_err, is_ok


def test_ok():
    result = Ok(1)
    assert result.is_ok() and not result.is_err()
    assert result.ok() == 1
    assert result.err() is None
    assert result.unwrap() == 1
    assert result.unwrap_or(2) == 1
    assert result.map(str) == Ok('1')
    assert result.map_err(str) is result
    assert is_ok(result) and not is_err(result)
    with pytest.raises(UnwrapError) as e:
        result.unwrap_err()
    assert e.value.result is result


def test_err():
    result = Err('boom')
    assert result.is_err() and not result.is_ok()
    assert result.ok() is None
    assert result.err() == 'boom'
    assert result.unwrap_err() == 'boom'
    assert result.unwrap_or(2) == 2
    assert result.map(str) is result
    assert result.map_err(len) == Err(4)
    assert is_err(result)
    with pytest.raises(UnwrapError) as e:
        result.unwrap()
    assert e.value.result is result


def test_unwrap_chains_exceptions():
    error = ValueError('bad')
    with pytest.raises(UnwrapError) as e:
        Err(error).unwrap()
    assert e.value.__cause__ is error


def test_equality_and_hash():
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert Err(1) != Ok(1)
    assert hash(Ok(1)) != hash(Err(1))
    assert len({Ok(1), Ok(1), Err(1)}) == 2


def test_pattern_matching():
    def describe(result):
        match result:
            case Ok(value):
                return f'ok {value}'
            case Err(error):
                return f'err {error}'

    assert describe(Ok(1)) == 'ok 1'
    assert describe(Err('x')) == 'err x'
