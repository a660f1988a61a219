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

from http_serde.http import InvalidMethod, InvalidStatusCode, Method, StatusCode, Version


@pytest.mark.parametrize('method', ['GET', 'get', 'PURGE', 'M-SEARCH'])
def test_valid_methods(method):
    assert Method(method) == method


def test_methods_are_case_sensitive():
    assert Method('get') != Method.GET


@pytest.mark.parametrize('method', ['', 'GET ', 'GE(T', 'ÑAME'])
def test_invalid_methods(method):
    with pytest.raises(InvalidMethod) as e:
        Method(method)
    assert str(e.value) == 'invalid HTTP method'


def test_method_properties():
    assert Method.GET.is_safe()
    assert not Method.POST.is_safe()
    assert Method.PUT.is_idempotent()
    assert Method.HEAD.is_idempotent()
    assert not Method.PATCH.is_idempotent()
    assert repr(Method.DELETE) == "Method('DELETE')"


@pytest.mark.parametrize('code', [100, 200, 418, 599, 999])
def test_valid_status_codes(code):
    assert StatusCode(code) == code


@pytest.mark.parametrize('code', [0, 99, 1000, -200])
def test_invalid_status_codes(code):
    with pytest.raises(InvalidStatusCode) as e:
        StatusCode(code)
    assert str(e.value) == 'invalid status code'


@pytest.mark.parametrize('code', [True, '200', 200.0])
def test_status_code_wrong_type(code):
    with pytest.raises(TypeError):
        StatusCode(code)


def test_status_code_classes():
    assert StatusCode.CONTINUE.is_informational()
    assert StatusCode.NO_CONTENT.is_success()
    assert StatusCode.FOUND.is_redirection()
    assert StatusCode.NOT_FOUND.is_client_error()
    assert StatusCode.BAD_GATEWAY.is_server_error()
    assert not StatusCode(999).is_server_error()


def test_canonical_reason():
    assert StatusCode.OK.canonical_reason() == 'OK'
    assert StatusCode(599).canonical_reason() is None
    assert repr(StatusCode.OK) == 'StatusCode(200)'


def test_versions():
    assert Version.default() is Version.HTTP_11
    assert Version('HTTP/1.0') is Version.HTTP_10
    assert sorted([Version.HTTP_3, Version.HTTP_09, Version.HTTP_2]) == [
        Version.HTTP_09,
        Version.HTTP_2,
        Version.HTTP_3,
    ]
    assert Version.HTTP_2 >= Version.HTTP_11


def test_unknown_version():
    with pytest.raises(ValueError):
        Version('HTTP/0.0')
