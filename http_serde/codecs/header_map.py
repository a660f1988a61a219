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
Header map codecs.

>>> from http_serde.formats import json
>>> from http_serde.http import header_map
>>> headers = header_map([('baz', 'qux'), ('foo', 'bar'), ('two', 'one'), ('two', 'two')])
>>> json.dumps(HeaderMapCodec(), headers)
'{"baz": "qux", "foo": "bar", "two": ["one", "two"]}'

>>> from http_serde.codecs import StrCodec
>>> json.loads(GenericHeaderMapCodec(StrCodec()), '{"two": ["one", "two"], "Two": "three"}').get_all('two')
['one', 'two']
"""

from typing import TypeVar

from http_serde.codecs.codec import Codec
from http_serde.codecs.header_value import HeaderValueCodec
from http_serde.codecs.multimap import _MultiMapCodec
from http_serde.http.header_value import HeaderValue

V = TypeVar('V')


class HeaderMapCodec(_MultiMapCodec[HeaderValue]):
    """ Represents a `HeaderMap` of `HeaderValue`s.

    `prefers_text` is forwarded to the `HeaderValueCodec` used for the values.
    """

    __slots__ = ()

    def __init__(self, *, prefers_text: bool = True) -> None:
        super().__init__(HeaderValueCodec(prefers_text=prefers_text))


class GenericHeaderMapCodec(_MultiMapCodec[V]):
    """ Represents a `HeaderMap` with values of any type, written with the given codec.

    On self-describing formats a group is first read as a single value and only then as a sequence of values. When
    the value codec itself accepts sequences, a group whose list also parses as one value comes back as that one value:

    >>> from http_serde.codecs import IntCodec, ListCodec
    >>> from http_serde.formats import json
    >>> from http_serde.http import HeaderMap
    >>> codec = GenericHeaderMapCodec(ListCodec(ListCodec(IntCodec())))
    >>> json.dumps(codec, HeaderMap([('k', []), ('k', [])]))
    '{"k": [[], []]}'
    >>> json.loads(codec, '{"k": [[], []]}').get_all('k')
    [[[], []]]

    The binary format always writes the sequence of values and is not affected.
    """

    __slots__ = ()

    def __init__(self, value: Codec[V]) -> None:
        super().__init__(value)
