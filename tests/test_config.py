import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from bflab.config import Settings, configure_logging, load_settings


@pytest.fixture
def fresh_settings():
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_defaults():
    s = Settings()
    assert s.log_level == "INFO"
    assert s.global_seed == 1337
    assert s.max_variables == 24
    assert s.log_linear_components is True


def test_load_settings_reads_environment(monkeypatch, fresh_settings):
    monkeypatch.setenv("BFLAB_LOG_LEVEL", "debug")
    monkeypatch.setenv("BFLAB_MAX_VARIABLES", "12")
    monkeypatch.setenv("BFLAB_LOG_LINEAR_COMPONENTS", "no")
    monkeypatch.setenv("BFLAB_GLOBAL_SEED", "7")
    s = load_settings()
    assert s.log_level == "DEBUG"
    assert s.max_variables == 12
    assert s.log_linear_components is False
    assert s.global_seed == 7
    assert load_settings() is s


@pytest.mark.parametrize("kwargs", [
    dict(log_level="verbose"),
    dict(max_variables=0),
    dict(max_variables=64),
])
def test_invalid_settings(kwargs):
    with pytest.raises(ValidationError):
        Settings(**kwargs)


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    root.handlers = []
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logging_sets_root_level(clean_root_logger):
    configure_logging(Settings(log_level="DEBUG"))
    assert clean_root_logger.level == logging.DEBUG
    assert clean_root_logger.handlers
