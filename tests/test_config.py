"""
Unit tests for gitminer.config module
"""
import json
import os
import logging

import pytest
import yaml

from gitminer.config import (
    apply_env_overrides,
    configure_logging,
    get_config_path,
    get_default_config,
    load_config,
    merge_configs,
    save_config,
)
from gitminer.exit_codes import ConfigError, CONFIG_ERROR


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point HOME at an empty temp directory and clear GITMINER_* vars."""
    monkeypatch.setenv('HOME', str(tmp_path))
    for key in list(os.environ):
        if key.startswith('GITMINER_'):
            monkeypatch.delenv(key)
    return tmp_path


class TestDefaults:
    """Test the default configuration."""

    def test_sections(self):
        """Test that all sections exist."""
        config = get_default_config()
        for section in ('parser', 'git', 'output', 'logging'):
            assert section in config

    def test_parser_defaults(self):
        """Test parser defaults match the log format."""
        parser = get_default_config()['parser']
        assert parser['header_marker'] == "'"
        assert parser['strict_headers'] is False

    def test_defaults_are_fresh(self):
        """Test callers get independent copies."""
        a = get_default_config()
        a['parser']['strict_headers'] = True
        assert get_default_config()['parser']['strict_headers'] is False


class TestConfigPath:
    """Test config file discovery."""

    def test_default_path(self, home):
        """Test the fallback path when nothing exists."""
        assert get_config_path() == home / '.gitminer' / 'config.json'

    def test_env_override(self, home, monkeypatch):
        """Test GITMINER_CONFIG points at an existing file."""
        path = home / 'custom.yaml'
        path.write_text("parser:\n  strict_headers: true\n")
        monkeypatch.setenv('GITMINER_CONFIG', str(path))
        assert get_config_path() == path

    def test_finds_yaml_in_home(self, home):
        """Test a YAML file in ~/.gitminer is found."""
        config_dir = home / '.gitminer'
        config_dir.mkdir()
        (config_dir / 'config.yaml').write_text("output:\n  top: 3\n")
        assert get_config_path() == config_dir / 'config.yaml'


class TestLoadConfig:
    """Test loading and merging."""

    def test_no_file(self, home):
        """Test loading without a config file gives defaults."""
        assert load_config() == get_default_config()

    def test_yaml_merged_over_defaults(self, home, monkeypatch):
        """Test a partial YAML file keeps other defaults."""
        path = home / 'config.yaml'
        path.write_text(yaml.safe_dump({'parser': {'strict_headers': True}}))
        monkeypatch.setenv('GITMINER_CONFIG', str(path))

        config = load_config()
        assert config['parser']['strict_headers'] is True
        assert config['parser']['header_marker'] == "'"
        assert config['git']['date_format'] == 'short'

    def test_toml(self, home, monkeypatch):
        """Test TOML config files."""
        path = home / 'config.toml'
        path.write_text('[output]\ntop = 25\n')
        monkeypatch.setenv('GITMINER_CONFIG', str(path))
        assert load_config()['output']['top'] == 25

    def test_json(self, home, monkeypatch):
        """Test JSON config files."""
        path = home / 'config.json'
        path.write_text(json.dumps({'logging': {'level': 'DEBUG'}}))
        monkeypatch.setenv('GITMINER_CONFIG', str(path))
        assert load_config()['logging']['level'] == 'DEBUG'

    def test_invalid_file_raises(self, home, monkeypatch):
        """Test a broken file raises ConfigError."""
        path = home / 'config.json'
        path.write_text('{not json')
        monkeypatch.setenv('GITMINER_CONFIG', str(path))
        with pytest.raises(ConfigError) as exc_info:
            load_config()
        assert exc_info.value.exit_code == CONFIG_ERROR

    def test_non_mapping_raises(self, home, monkeypatch):
        """Test a YAML list is rejected."""
        path = home / 'config.yaml'
        path.write_text('- a\n- b\n')
        monkeypatch.setenv('GITMINER_CONFIG', str(path))
        with pytest.raises(ConfigError):
            load_config()


class TestSaveConfig:
    """Test writing configuration."""

    @pytest.mark.parametrize('name', ['config.json', 'config.yaml', 'config.toml'])
    def test_round_trip(self, home, monkeypatch, name):
        """Test a saved config loads back with the same values."""
        path = home / '.gitminer' / name
        config = get_default_config()
        config['output']['top'] = 42

        written = save_config(config, path)
        assert written == path
        assert path.exists()

        monkeypatch.setenv('GITMINER_CONFIG', str(path))
        assert load_config()['output']['top'] == 42


class TestMergeAndEnv:
    """Test merge and environment override helpers."""

    def test_merge_nested(self):
        """Test nested dictionaries merge key by key."""
        merged = merge_configs({'a': {'x': 1, 'y': 2}, 'b': 1}, {'a': {'y': 3}, 'c': 4})
        assert merged == {'a': {'x': 1, 'y': 3}, 'b': 1, 'c': 4}

    def test_env_bool(self, monkeypatch):
        """Test boolean coercion with multi-word keys."""
        monkeypatch.setenv('GITMINER_PARSER_STRICT_HEADERS', 'true')
        config = apply_env_overrides(get_default_config())
        assert config['parser']['strict_headers'] is True

    def test_env_int(self, monkeypatch):
        """Test integer coercion."""
        monkeypatch.setenv('GITMINER_GIT_TIMEOUT_SECONDS', '30')
        config = apply_env_overrides(get_default_config())
        assert config['git']['timeout_seconds'] == 30

    def test_env_string(self, monkeypatch):
        """Test string values pass through."""
        monkeypatch.setenv('GITMINER_PARSER_HEADER_MARKER', "'--")
        config = apply_env_overrides(get_default_config())
        assert config['parser']['header_marker'] == "'--"

    def test_env_unknown_key_ignored(self, monkeypatch):
        """Test unknown keys do not create new entries."""
        monkeypatch.setenv('GITMINER_NOPE_VALUE', '1')
        config = apply_env_overrides(get_default_config())
        assert 'nope' not in config


class TestConfigureLogging:
    """Test logging setup."""

    def test_level_from_config(self):
        """Test the configured level is applied to the package logger."""
        config = get_default_config()
        config['logging']['level'] = 'INFO'
        configure_logging(config)
        assert logging.getLogger('gitminer').level == logging.INFO

    def test_debug_flag_wins(self):
        """Test debug forces DEBUG level."""
        configure_logging(get_default_config(), debug=True)
        assert logging.getLogger('gitminer').level == logging.DEBUG
