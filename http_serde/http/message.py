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

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from http_serde.http.header_map import HeaderMap
from http_serde.http.header_value import HeaderValue
from http_serde.http.method import Method
from http_serde.http.status_code import StatusCode
from http_serde.http.uri import Uri
from http_serde.http.version import Version

T = TypeVar('T')


@dataclass(slots=True, kw_only=True)
class Request(Generic[T]):
    """An HTTP request with a body of any type.

    `extensions` holds in-process data attached to the request, it has no wire form and a request that carries any
    cannot be encoded.
    """
    method: Method = Method.GET
    uri: Uri = field(default_factory=Uri)
    version: Version = Version.HTTP_11
    headers: HeaderMap[HeaderValue] = field(default_factory=HeaderMap)
    body: T = None  # type: ignore[assignment]
    extensions: dict[Any, Any] = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class Response(Generic[T]):
    """An HTTP response with a body of any type, `extensions` works like in `Request`."""
    status: StatusCode = StatusCode.OK
    version: Version = Version.HTTP_11
    headers: HeaderMap[HeaderValue] = field(default_factory=HeaderMap)
    body: T = None  # type: ignore[assignment]
    extensions: dict[Any, Any] = field(default_factory=dict)
