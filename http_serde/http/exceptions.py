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

"""Errors raised when an HTTP value cannot be built from its parts.

They are `ValueError`s, codecs translate them into `InvalidKeyError` or `InvalidValueError` when the bad input comes
from a decode.
"""


class InvalidHeaderName(ValueError):
    def __init__(self, message: str = 'invalid HTTP header name') -> None:
        super().__init__(message)


class InvalidHeaderValue(ValueError):
    def __init__(self, message: str = 'failed to parse header value') -> None:
        super().__init__(message)


class HeaderValueToStrError(ValueError):
    """The header value has bytes that are not visible ASCII, so it has no text form."""

    def __init__(self, message: str = 'failed to convert header to a str') -> None:
        super().__init__(message)


class InvalidMethod(ValueError):
    def __init__(self, message: str = 'invalid HTTP method') -> None:
        super().__init__(message)


class InvalidStatusCode(ValueError):
    def __init__(self, message: str = 'invalid status code') -> None:
        super().__init__(message)


class InvalidUri(ValueError):
    """A URI or one of its components failed to parse, the message says which rule was broken."""
