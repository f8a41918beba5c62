import logging

import pytest

from pwdhash.config import ConfigError, load_log_level, setup_config


def test_default_log_level():
    config = setup_config()
    assert config['log_level'] == logging.WARNING
    assert config['errors'] == []


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv('PWDHASH_LOG_LEVEL', 'debug')
    assert setup_config()['log_level'] == logging.DEBUG


def test_log_level_from_env_file(isolated_env, monkeypatch):
    (isolated_env / 'testing.env').write_text('PWDHASH_LOG_LEVEL=INFO\n')
    monkeypatch.setenv('ENVIRONMENT', 'testing')
    assert setup_config()['log_level'] == logging.INFO


def test_log_level_from_dotenv_in_cwd(isolated_env):
    (isolated_env / '.env').write_text('PWDHASH_LOG_LEVEL=ERROR\n')
    assert setup_config()['log_level'] == logging.ERROR


def test_parent_dotenv_is_ignored(isolated_env, monkeypatch):
    (isolated_env / '.env').write_text('PWDHASH_LOG_LEVEL=DEBUG\n')
    subdir = isolated_env / 'work'
    subdir.mkdir()
    monkeypatch.chdir(subdir)
    assert setup_config()['log_level'] == logging.WARNING


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv('PWDHASH_LOG_LEVEL', 'chatty')
    config = setup_config()
    assert config['log_level'] == logging.WARNING
    assert len(config['errors']) == 1
    assert "Unknown log level" in config['errors'][0]


def test_load_log_level_rejects_unknown():
    with pytest.raises(ConfigError):
        load_log_level('nope')
