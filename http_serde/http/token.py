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

# RFC 9110 section 5.6.2: token = 1*tchar
TCHARS: frozenset[str] = frozenset(
    "!#$%&'*+-.^_`|~"
    '0123456789'
    'abcdefghijklmnopqrstuvwxyz'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
)


def is_token(value: str) -> bool:
    """Whether `value` is a non-empty HTTP token.

    >>> is_token('content-type'), is_token('GET'), is_token(''), is_token('a b')
    (True, True, False, False)
    """
    return bool(value) and all(char in TCHARS for char in value)
