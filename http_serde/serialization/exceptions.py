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

from typing import Any


class SerializationError(Exception):
    """Base class for every error raised while encoding or decoding."""


class EncodeError(SerializationError):
    """A value could not be written to a sink."""


class DecodeError(SerializationError):
    """The input could not be turned into a value, the whole decode is aborted."""


class TooLongError(SerializationError):
    """A length-prefixed value or a collection exceeds the allowed size."""


class OutOfDataError(DecodeError):
    """The input ended before the value was complete."""


class BadDataError(DecodeError):
    """The input bytes do not form a valid encoding."""


class EmptyValueGroupError(EncodeError):
    """A header map key has no values.

    This means the map was put in an invalid state by its owner, the key is not silently dropped.
    """

    def __init__(self, key: Any) -> None:
        super().__init__(f'header has no values: {key!s}')
        self.key = key


class ExtensionsNotEmptyError(EncodeError):
    """Request/response extensions are an in-process side-channel and cannot be encoded."""

    def __init__(self) -> None:
        super().__init__('extensions is not empty')


class InvalidKeyError(DecodeError):
    """A map key failed to parse, `value` holds the offending input."""

    def __init__(self, message: str, value: Any) -> None:
        super().__init__(message)
        self.value = value


class InvalidValueError(DecodeError):
    """A value failed to parse, `value` holds the offending input."""

    def __init__(self, message: str, value: Any) -> None:
        super().__init__(message)
        self.value = value


class UnexpectedShapeError(DecodeError):
    """The input has a different structure than the one required, e.g. a string where a map was expected."""

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(f'invalid type: {found}, expected {expected}')
        self.expected = expected
        self.found = found


class MissingFieldError(DecodeError):
    def __init__(self, field: str) -> None:
        super().__init__(f'missing field `{field}`')
        self.field = field


class DuplicateFieldError(DecodeError):
    def __init__(self, field: str) -> None:
        super().__init__(f'duplicate field `{field}`')
        self.field = field


class UnknownVariantError(DecodeError):
    def __init__(self, variant: Any, expected: tuple[str, ...]) -> None:
        names = ', '.join(f'`{name}`' for name in expected)
        super().__init__(f'unknown variant `{variant}`, expected one of {names}')
        self.variant = variant
