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

import pytest
from pydantic import ValidationError

from http_serde.codecs import HeaderMapCodec, IntCodec, ListCodec
from http_serde.conf import CodecSettings, get_global_settings, get_settings_source
from http_serde.conf.get_settings import CONFIG_YAML_ENV_VAR, DEFAULT_SOURCE, _reset_settings_singleton
from http_serde.formats import binary, json, yaml
from http_serde.http import header_map
from http_serde.serialization import TooLongError
from http_serde.serialization.adapters import MaxBytesExceededError


def _get_absolute_filepath(filepath: str) -> Path:
    parent_dir = Path(__file__).parent.parent

    return parent_dir / filepath


@pytest.fixture
def settings_file(monkeypatch):
    """Load the global settings from a fixture file, the test settings are restored afterwards."""
    _reset_settings_singleton()

    def use(filepath):
        if filepath is None:
            monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
        else:
            monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(_get_absolute_filepath(filepath)))

    yield use
    _reset_settings_singleton()


def test_defaults():
    settings = CodecSettings()
    assert settings.MAX_DECODE_BYTES is None
    assert settings.MAX_COLLECTION_LENGTH == 65536
    assert settings.JSON_INDENT is None
    assert settings.YAML_DEFAULT_FLOW_STYLE is False


def test_from_yaml():
    settings = CodecSettings.from_yaml(filepath=_get_absolute_filepath('fixtures/strict_settings.yml'))
    assert settings == CodecSettings(MAX_DECODE_BYTES=64, MAX_COLLECTION_LENGTH=2, JSON_INDENT=2)


def test_from_extended_yaml():
    settings = CodecSettings.from_yaml(filepath=_get_absolute_filepath('fixtures/extended_settings.yml'))
    assert settings == CodecSettings(
        MAX_DECODE_BYTES=64,
        MAX_COLLECTION_LENGTH=8,
        JSON_INDENT=2,
        YAML_DEFAULT_FLOW_STYLE=True,
    )


@pytest.mark.parametrize(['filepath', 'error'], [
    ('fixtures/negative_settings.yml', 'value must not be negative, got -1'),
    ('fixtures/unknown_settings.yml', 'Extra inputs are not permitted'),
])
def test_invalid_settings(filepath, error):
    with pytest.raises(ValidationError) as e:
        CodecSettings.from_yaml(filepath=_get_absolute_filepath(filepath))
    assert error in str(e.value)


def test_settings_are_frozen():
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.MAX_COLLECTION_LENGTH = 1


def test_global_settings_default_source(settings_file):
    settings_file(None)
    assert get_global_settings() == CodecSettings()
    assert get_settings_source() == DEFAULT_SOURCE


def test_global_settings_are_loaded_once(settings_file):
    settings_file('fixtures/strict_settings.yml')
    settings = get_global_settings()
    assert get_global_settings() is settings
    assert get_settings_source().endswith('strict_settings.yml')

    settings_file('fixtures/extended_settings.yml')
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_global_settings()


def test_formats_use_global_settings(settings_file):
    settings_file('fixtures/strict_settings.yml')
    headers = header_map([('a', 'b')])

    assert json.dumps(HeaderMapCodec(), headers) == '{\n  "a": "b"\n}'
    assert json.dumps(HeaderMapCodec(), headers, indent=0) == '{\n"a": "b"\n}'

    with pytest.raises(TooLongError):
        binary.loads(ListCodec(IntCodec()), binary.dumps(ListCodec(IntCodec()), [1, 2, 3]))
    with pytest.raises(MaxBytesExceededError):
        # the first item is a 71 byte integer, longer than the whole input may be
        binary.loads(ListCodec(IntCodec()), bytes.fromhex('02') + b'\xff' * 70 + b'\x00')


def test_yaml_flow_style_from_settings(settings_file):
    settings_file('fixtures/extended_settings.yml')
    headers = header_map([('a', 'b'), ('c', 'd'), ('c', 'e')])
    assert yaml.dumps(HeaderMapCodec(), headers) == '{a: b, c: [d, e]}\n'
