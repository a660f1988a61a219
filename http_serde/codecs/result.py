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

from typing import TypeVar

from typing_extensions import override

from http_serde.codecs.codec import Codec
from http_serde.formats.sink import FormatSink
from http_serde.formats.source import FormatSource
from http_serde.utils.result import Err, Ok, OkErr, Result

T = TypeVar('T')
E = TypeVar('E')

_OK_VARIANT = (0, 'Ok')
_ERR_VARIANT = (1, 'Err')


class ResultCodec(Codec[Result[T, E]]):
    """ Represents `Ok`/`Err` values as a two-variant enum, `Ok` first.

    On the tree formats this is `{"Ok": value}` or `{"Err": error}`, on the binary format a variant index followed by
    the value.
    """

    __slots__ = ('_is_hashable', '_ok', '_err')

    _ok: Codec[T]
    _err: Codec[E]

    def __init__(self, ok: Codec[T], err: Codec[E]) -> None:
        self._ok = ok
        self._err = err
        self._is_hashable = ok.is_hashable() and err.is_hashable()

    @override
    def _check_value(self, value: Result[T, E], /, *, deep: bool) -> None:
        if not isinstance(value, OkErr):
            raise TypeError('expected Ok or Err')
        if deep:
            match value:
                case Ok(inner):
                    self._ok._check_value(inner, deep=True)
                case Err(error):
                    self._err._check_value(error, deep=True)

    @override
    def _encode(self, sink: FormatSink, value: Result[T, E], /) -> None:
        match value:
            case Ok(inner):
                index, name = _OK_VARIANT
                sink.write_variant(index, name, inner, self._ok.encode)
            case Err(error):
                index, name = _ERR_VARIANT
                sink.write_variant(index, name, error, self._err.encode)

    @override
    def _decode(self, source: FormatSource, /) -> Result[T, E]:
        index, value = source.read_variant([
            (_OK_VARIANT[1], self._ok.decode),
            (_ERR_VARIANT[1], self._err.decode),
        ])
        if index == _OK_VARIANT[0]:
            return Ok(value)
        return Err(value)
