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
Generic encodings for the binary wire format.

Compound encoders delegate the encoding of their items to another encoder, for example `encode_optional` writes a
presence flag and hands the value to whatever encoder was given for it. Submodules follow the same organization as
the `encoding` package:

    def encode_x(serializer: Serializer, value: ValueType, ...encoders and config params...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...decoders and config params...) -> ValueType:
        ...
"""

from typing import Protocol, TypeVar

from http_serde.serialization.deserializer import Deserializer
from http_serde.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
