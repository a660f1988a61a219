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

"""HTTP value types: the things the codecs in `http_serde.codecs` know how to encode."""

from http_serde.http.exceptions import (
    HeaderValueToStrError,
    InvalidHeaderName,
    InvalidHeaderValue,
    InvalidMethod,
    InvalidStatusCode,
    InvalidUri,
)
from http_serde.http.header_map import HeaderMap, header_map
from http_serde.http.header_name import HeaderName
from http_serde.http.header_value import HeaderValue
from http_serde.http.message import Request, Response
from http_serde.http.method import Method
from http_serde.http.status_code import StatusCode
from http_serde.http.uri import Authority, PathAndQuery, Scheme, Uri
from http_serde.http.version import Version

__all__ = [
    'Authority',
    'HeaderMap',
    'HeaderName',
    'HeaderValue',
    'HeaderValueToStrError',
    'InvalidHeaderName',
    'InvalidHeaderValue',
    'InvalidMethod',
    'InvalidStatusCode',
    'InvalidUri',
    'Method',
    'PathAndQuery',
    'Request',
    'Response',
    'Scheme',
    'StatusCode',
    'Uri',
    'Version',
    'header_map',
]
