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
JSON on top of the tree format.

Objects are parsed into `Entries`, so a header repeated in a JSON object reaches the decoder instead of being
collapsed by the parser.

>>> from http_serde.codecs import HeaderMapCodec
>>> from http_serde.http import HeaderMap
>>> headers = loads(HeaderMapCodec(), '{"accept": ["text/html", "text/plain"]}')
>>> headers.get_all('accept')
[HeaderValue(b'text/html'), HeaderValue(b'text/plain')]
>>> dumps(HeaderMapCodec(), headers)
'{"accept": ["text/html", "text/plain"]}'
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Optional, TypeVar, Union

from http_serde.conf.get_settings import get_global_settings
from http_serde.formats.tree import Entries, from_value, to_value
from http_serde.serialization.exceptions import BadDataError

if TYPE_CHECKING:
    from http_serde.codecs.codec import Codec

T = TypeVar('T')

__all__ = ['dumps', 'from_value', 'loads', 'parse', 'to_value']


def parse(data: Union[str, bytes]) -> Any:
    """Parse JSON text into a tree, invalid JSON raises `BadDataError`."""
    try:
        return json.loads(data, object_pairs_hook=Entries)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        raise BadDataError(f'invalid json: {e}') from e
    except RecursionError as e:
        raise BadDataError('invalid json: nesting too deep') from e


def dumps(codec: Codec[T], value: T, *, indent: Optional[int] = None) -> str:
    """Encode `value` as JSON text.

    When `indent` is not given the `JSON_INDENT` setting is used.
    """
    if indent is None:
        indent = get_global_settings().JSON_INDENT
    return json.dumps(to_value(codec, value), indent=indent)


def loads(codec: Codec[T], data: Union[str, bytes]) -> T:
    """Decode JSON text, the whole text must be a single value."""
    return from_value(codec, parse(data))
