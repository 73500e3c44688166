import logging

import pytest

from frqs.config import configure_logging, load_config


def test_defaults(monkeypatch):
    for name in ['FRQS_KEY_LENGTH', 'FRQS_ENCODE_DEPTH', 'FRQS_TOLERANCE_PERCENT', 'FRQS_LOG_LEVEL']:
        monkeypatch.delenv(name, raising=False)

    config = load_config()
    assert config == {
        'FRQS_KEY_LENGTH': 32,
        'FRQS_ENCODE_DEPTH': 3,
        'FRQS_TOLERANCE_PERCENT': 5.0,
        'FRQS_LOG_LEVEL': 'WARNING'
    }


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('FRQS_KEY_LENGTH', '64')
    monkeypatch.setenv('FRQS_ENCODE_DEPTH', '5')
    monkeypatch.setenv('FRQS_TOLERANCE_PERCENT', '12.5')
    monkeypatch.setenv('FRQS_LOG_LEVEL', 'debug')

    config = load_config()
    assert config['FRQS_KEY_LENGTH'] == 64
    assert config['FRQS_ENCODE_DEPTH'] == 5
    assert config['FRQS_TOLERANCE_PERCENT'] == 12.5
    assert config['FRQS_LOG_LEVEL'] == 'DEBUG'


def test_invalid_number_names_variable(monkeypatch):
    monkeypatch.setenv('FRQS_KEY_LENGTH', 'lots')
    with pytest.raises(ValueError, match='FRQS_KEY_LENGTH') as excinfo:
        load_config()
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_configure_logging_accepts_unknown_level():
    configure_logging('NOT_A_LEVEL')
    configure_logging('info')
    assert logging.getLogger('frqs').getEffectiveLevel() <= logging.WARNING
