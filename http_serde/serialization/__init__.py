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

"""
Byte level (de)serialization.

This is the wire layer of the compact binary format: `Serializer` and `Deserializer` only know about bytes, the
modules in `encoding` and `compound_encoding` build length-prefixed strings, varints, optionals, collections and
mappings on top of them.
"""

from .deserializer import Deserializer
from .exceptions import (
    BadDataError,
    DecodeError,
    EncodeError,
    OutOfDataError,
    SerializationError,
    TooLongError,
)
from .serializer import Serializer

__all__ = [
    'BadDataError',
    'DecodeError',
    'Deserializer',
    'EncodeError',
    'OutOfDataError',
    'SerializationError',
    'Serializer',
    'TooLongError',
]
