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

from typing import Generic, TypeVar

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import SerializationError
from .types import Buffer

D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(SerializationError):
    """ Raised when a wrapped deserializer tries to read past its byte budget.

    The wrapped deserializer must not be used after this, the point where reading stopped is not a value boundary so
    whatever is left in it cannot be interpreted. The decode that was running has to be considered failed as a whole.
    """


class MaxBytesDeserializer(Deserializer, Generic[D]):
    """Deserializer adapter that limits how many bytes can be consumed from `inner`.

    Used to bound the work done when decoding untrusted binary input, a length prefix alone can ask for an arbitrary
    amount of data. The budget is charged before reading, so an oversized request fails without touching `inner`.
    """

    inner: D

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        self.inner = deserializer
        self._bytes_left = max_bytes

    def _charge(self, read_size: int) -> None:
        if read_size > self._bytes_left:
            raise MaxBytesExceededError(f'read exceeds the maximum of bytes by {read_size - self._bytes_left}')
        self._bytes_left -= read_size

    @override
    def finalize(self) -> None:
        self.inner.finalize()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def read_byte(self) -> int:
        self._charge(1)
        return self.inner.read_byte()

    @override
    def read_bytes(self, n: int) -> Buffer:
        self._charge(n)
        return self.inner.read_bytes(n)
