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
Format-agnostic (de)serialization of HTTP types.

Values are encoded with a codec (`http_serde.codecs`) into one of the formats in `http_serde.formats`:

>>> from http_serde.codecs import HeaderMapCodec
>>> from http_serde.formats import binary, json
>>> from http_serde.http import header_map
>>> headers = header_map([('accept', 'text/html')])
>>> json.dumps(HeaderMapCodec(), headers)
'{"accept": "text/html"}'
>>> binary.loads(HeaderMapCodec(), binary.dumps(HeaderMapCodec(), headers)) == headers
True
"""

from http_serde.version import __version__

__all__ = ['__version__']
