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
YAML on top of the tree format, using PyYAML's safe loader and dumper.

Mappings are constructed as `Entries` so repeated keys reach the decoder, and mappings are dumped in the order they
were written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, Union

import yaml

from http_serde.conf.get_settings import get_global_settings
from http_serde.formats.tree import Entries, from_value, to_value
from http_serde.serialization.exceptions import BadDataError

if TYPE_CHECKING:
    from http_serde.codecs.codec import Codec

T = TypeVar('T')


class EntriesLoader(yaml.SafeLoader):
    """Safe loader that keeps every mapping pair, repeated keys included."""


def _construct_entries(loader: EntriesLoader, node: yaml.MappingNode) -> Entries:
    loader.flatten_mapping(node)
    return Entries(
        (loader.construct_object(key_node, deep=True), loader.construct_object(value_node, deep=True))
        for key_node, value_node in node.value
    )


EntriesLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_entries)


def parse(data: Union[str, bytes]) -> Any:
    """Parse a YAML document into a tree, invalid YAML raises `BadDataError`."""
    try:
        return yaml.load(data, Loader=EntriesLoader)
    except yaml.YAMLError as e:
        raise BadDataError(f'invalid yaml: {e}') from e
    except RecursionError as e:
        raise BadDataError('invalid yaml: nesting too deep') from e


def dumps(codec: Codec[T], value: T) -> str:
    settings = get_global_settings()
    return yaml.safe_dump(
        to_value(codec, value),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=settings.YAML_DEFAULT_FLOW_STYLE,
    )


def loads(codec: Codec[T], data: Union[str, bytes]) -> T:
    return from_value(codec, parse(data))
