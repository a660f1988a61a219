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
Formats a codec can write to and read from.

A codec never deals with text or bytes directly, it talks to a `FormatSink` when encoding and to a `FormatSource`
when decoding. The one property of a format codecs care about is whether it is self-describing, that is, whether a
reader can tell a scalar from a sequence by looking at the input:

- `tree`, `json` and `yaml` are self-describing;
- `binary` is not.
"""

from http_serde.formats.sink import Encoder, FormatSink
from http_serde.formats.source import Decoder, FormatSource, Many, One, OneOrMany

__all__ = [
    'Decoder',
    'Encoder',
    'FormatSink',
    'FormatSource',
    'Many',
    'One',
    'OneOrMany',
]
