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
Codecs describe how values of a type are written to and read from any format.

The header map codecs are the core of the package, everything else either builds them (header names and values) or
builds on them (requests, responses and the generic containers a header map may sit in).
"""

from http_serde.codecs.codec import Codec
from http_serde.codecs.collection import DequeCodec, FrozenSetCodec, ListCodec, SetCodec
from http_serde.codecs.header_map import GenericHeaderMapCodec, HeaderMapCodec
from http_serde.codecs.header_name import HeaderNameCodec
from http_serde.codecs.header_value import HeaderValueCodec
from http_serde.codecs.mapping import DictCodec, SortedDictCodec
from http_serde.codecs.message import RequestCodec, ResponseCodec
from http_serde.codecs.method import MethodCodec
from http_serde.codecs.optional import OptionalCodec
from http_serde.codecs.primitives import BoolCodec, BytesCodec, IntCodec, NoneCodec, StrCodec
from http_serde.codecs.result import ResultCodec
from http_serde.codecs.status_code import StatusCodeCodec
from http_serde.codecs.uri import AuthorityCodec, PathAndQueryCodec, SchemeCodec, UriCodec
from http_serde.codecs.version import VersionCodec

__all__ = [
    'AuthorityCodec',
    'BoolCodec',
    'BytesCodec',
    'Codec',
    'DequeCodec',
    'DictCodec',
    'FrozenSetCodec',
    'GenericHeaderMapCodec',
    'HeaderMapCodec',
    'HeaderNameCodec',
    'HeaderValueCodec',
    'IntCodec',
    'ListCodec',
    'MethodCodec',
    'NoneCodec',
    'OptionalCodec',
    'PathAndQueryCodec',
    'RequestCodec',
    'ResponseCodec',
    'ResultCodec',
    'SchemeCodec',
    'SetCodec',
    'SortedDictCodec',
    'StatusCodeCodec',
    'StrCodec',
    'UriCodec',
    'VersionCodec',
]
