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

from pathlib import Path
from typing import Optional, Union

from pydantic import field_validator

from http_serde.utils.pydantic import BaseModel
from http_serde.utils.yaml import model_from_extended_yaml


class CodecSettings(BaseModel):
    # Default byte budget of `binary.loads`, None means no limit.
    MAX_DECODE_BYTES: Optional[int] = None

    # Maximum number of items of a sequence or map read from the binary format.
    MAX_COLLECTION_LENGTH: int = 65536

    # Default indentation of `json.dumps`, None means compact output.
    JSON_INDENT: Optional[int] = None

    # Passed as `default_flow_style` to the YAML dumper.
    YAML_DEFAULT_FLOW_STYLE: bool = False

    @field_validator('MAX_DECODE_BYTES', 'MAX_COLLECTION_LENGTH', 'JSON_INDENT')
    @classmethod
    def _validate_non_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError(f'value must not be negative, got {value}')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns the validated settings."""
        return model_from_extended_yaml(cls, filepath=filepath)
