import logging

import pytest

from registry_lib.config.config import RegistryConfig
from registry_lib.logging_config import LOG_FORMAT, configure_logging, level_from_name, read_log_level


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_read_log_level_defaults(tmp_path):
    assert read_log_level(None) == logging.WARNING
    assert read_log_level(tmp_path / 'missing.yml') == logging.WARNING


def test_read_log_level_from_yaml(tmp_path):
    path = tmp_path / 'registry.yml'
    path.write_text('log_level: debug\n', encoding='utf-8')
    assert read_log_level(path) == logging.DEBUG


def test_read_log_level_unknown_or_malformed(tmp_path):
    path = tmp_path / 'registry.yml'
    path.write_text('log_level: chatty\n', encoding='utf-8')
    assert read_log_level(path) == logging.WARNING

    path.write_text('log_level: [unclosed\n', encoding='utf-8')
    assert read_log_level(path) == logging.WARNING

    path.write_text('- just a list\n', encoding='utf-8')
    assert read_log_level(path) == logging.WARNING


def test_configure_logging_sets_root_level(tmp_path, restore_root_logging):
    path = tmp_path / 'registry.yml'
    path.write_text('log_level: INFO\n', encoding='utf-8')
    logger = configure_logging(path)
    root = logging.getLogger()
    assert logger.name == 'registry_lib'
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_uses_loaded_config(tmp_path, restore_root_logging):
    # the config object wins over the file path
    path = tmp_path / 'registry.yml'
    path.write_text('log_level: ERROR\n', encoding='utf-8')
    configure_logging(path, config=RegistryConfig(log_level='debug'))
    assert logging.getLogger().level == logging.DEBUG


def test_level_from_name():
    assert level_from_name('info') == logging.INFO
    assert level_from_name('chatty') == logging.WARNING
    assert level_from_name(None) == logging.WARNING
