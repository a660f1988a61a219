import os
from pathlib import Path

from http_serde.conf.get_settings import CONFIG_YAML_ENV_VAR

UNITTESTS_SETTINGS_FILEPATH = str(Path(__file__).parent / 'fixtures' / 'unittests.yml')

os.environ[CONFIG_YAML_ENV_VAR] = os.environ.get('HTTP_SERDE_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
