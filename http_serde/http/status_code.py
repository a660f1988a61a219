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

from http import HTTPStatus
from typing import ClassVar, Optional

from http_serde.http.exceptions import InvalidStatusCode

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 999


class StatusCode(int):
    """An HTTP status code, any three digit number from 100 to 999.

    >>> StatusCode(304) == StatusCode.NOT_MODIFIED
    True
    >>> StatusCode(404).canonical_reason()
    'Not Found'
    >>> StatusCode(1000)
    Traceback (most recent call last):
    ...
    http_serde.http.exceptions.InvalidStatusCode: invalid status code
    """

    __slots__ = ()

    CONTINUE: ClassVar['StatusCode']
    SWITCHING_PROTOCOLS: ClassVar['StatusCode']
    OK: ClassVar['StatusCode']
    CREATED: ClassVar['StatusCode']
    ACCEPTED: ClassVar['StatusCode']
    NO_CONTENT: ClassVar['StatusCode']
    MOVED_PERMANENTLY: ClassVar['StatusCode']
    FOUND: ClassVar['StatusCode']
    NOT_MODIFIED: ClassVar['StatusCode']
    TEMPORARY_REDIRECT: ClassVar['StatusCode']
    PERMANENT_REDIRECT: ClassVar['StatusCode']
    BAD_REQUEST: ClassVar['StatusCode']
    UNAUTHORIZED: ClassVar['StatusCode']
    FORBIDDEN: ClassVar['StatusCode']
    NOT_FOUND: ClassVar['StatusCode']
    METHOD_NOT_ALLOWED: ClassVar['StatusCode']
    CONFLICT: ClassVar['StatusCode']
    TOO_MANY_REQUESTS: ClassVar['StatusCode']
    INTERNAL_SERVER_ERROR: ClassVar['StatusCode']
    NOT_IMPLEMENTED: ClassVar['StatusCode']
    BAD_GATEWAY: ClassVar['StatusCode']
    SERVICE_UNAVAILABLE: ClassVar['StatusCode']
    GATEWAY_TIMEOUT: ClassVar['StatusCode']

    def __new__(cls, code: int) -> 'StatusCode':
        if isinstance(code, StatusCode):
            return code
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(f'expected int, got {type(code).__name__}')
        if not MIN_STATUS_CODE <= code <= MAX_STATUS_CODE:
            raise InvalidStatusCode()
        return super().__new__(cls, code)

    def __repr__(self) -> str:
        return f'StatusCode({int(self)})'

    def canonical_reason(self) -> Optional[str]:
        """The standard reason phrase, None for codes without one."""
        try:
            return HTTPStatus(self).phrase
        except ValueError:
            return None

    def is_informational(self) -> bool:
        return 100 <= self < 200

    def is_success(self) -> bool:
        return 200 <= self < 300

    def is_redirection(self) -> bool:
        return 300 <= self < 400

    def is_client_error(self) -> bool:
        return 400 <= self < 500

    def is_server_error(self) -> bool:
        return 500 <= self < 600


StatusCode.CONTINUE = StatusCode(100)
StatusCode.SWITCHING_PROTOCOLS = StatusCode(101)
StatusCode.OK = StatusCode(200)
StatusCode.CREATED = StatusCode(201)
StatusCode.ACCEPTED = StatusCode(202)
StatusCode.NO_CONTENT = StatusCode(204)
StatusCode.MOVED_PERMANENTLY = StatusCode(301)
StatusCode.FOUND = StatusCode(302)
StatusCode.NOT_MODIFIED = StatusCode(304)
StatusCode.TEMPORARY_REDIRECT = StatusCode(307)
StatusCode.PERMANENT_REDIRECT = StatusCode(308)
StatusCode.BAD_REQUEST = StatusCode(400)
StatusCode.UNAUTHORIZED = StatusCode(401)
StatusCode.FORBIDDEN = StatusCode(403)
StatusCode.NOT_FOUND = StatusCode(404)
StatusCode.METHOD_NOT_ALLOWED = StatusCode(405)
StatusCode.CONFLICT = StatusCode(409)
StatusCode.TOO_MANY_REQUESTS = StatusCode(429)
StatusCode.INTERNAL_SERVER_ERROR = StatusCode(500)
StatusCode.NOT_IMPLEMENTED = StatusCode(501)
StatusCode.BAD_GATEWAY = StatusCode(502)
StatusCode.SERVICE_UNAVAILABLE = StatusCode(503)
StatusCode.GATEWAY_TIMEOUT = StatusCode(504)
