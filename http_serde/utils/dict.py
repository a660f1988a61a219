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

from copy import deepcopy
from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(first_dict: dict[K, Any], second_dict: dict[K, Any]) -> dict[K, Any]:
    """
    Merge `second_dict` over `first_dict` recursively and return the result, both inputs are left untouched.

    Nested dicts are merged key by key, any other value in `second_dict` replaces the one in `first_dict`.

    >>> base = dict(MAX_COLLECTION_LENGTH=10, extra=dict(a=1, b=2))
    >>> override = dict(JSON_INDENT=2, extra=dict(b=3))
    >>> deep_merge(base, override) == dict(MAX_COLLECTION_LENGTH=10, extra=dict(a=1, b=3), JSON_INDENT=2)
    True
    >>> base == dict(MAX_COLLECTION_LENGTH=10, extra=dict(a=1, b=2))
    True
    """
    merged = deepcopy(first_dict)

    def merge_into(first: dict[K, Any], second: dict[K, Any]) -> dict[K, Any]:
        for key, value in second.items():
            if isinstance(first.get(key), dict) and isinstance(value, dict):
                merge_into(first[key], value)
            else:
                first[key] = value
        return first

    return merge_into(merged, second_dict)
