import os

import pytest

from paytrack.config import DEFAULT_MAX_AMOUNT, PaymentSettings, load_settings


@pytest.fixture(name="env_file")
def env_file_fixture(tmp_path, monkeypatch):
    monkeypatch.delenv("PAYTRACK_MAX_AMOUNT", raising=False)
    monkeypatch.delenv("PAYTRACK_LOG_LEVEL", raising=False)
    yield tmp_path / ".env"
    # load_dotenv writes straight into os.environ
    os.environ.pop("PAYTRACK_MAX_AMOUNT", None)
    os.environ.pop("PAYTRACK_LOG_LEVEL", None)


def test_defaults(env_file):
    settings = load_settings(str(env_file))
    assert settings.max_amount == DEFAULT_MAX_AMOUNT == 100000
    assert settings.log_level == "INFO"


def test_reads_env_file(env_file):
    env_file.write_text("PAYTRACK_MAX_AMOUNT=500\nPAYTRACK_LOG_LEVEL=debug\n")
    settings = load_settings(str(env_file))
    assert settings.max_amount == 500
    assert settings.log_level == "DEBUG"


def test_process_env_wins_over_file(env_file, monkeypatch):
    env_file.write_text("PAYTRACK_MAX_AMOUNT=500\n")
    monkeypatch.setenv("PAYTRACK_MAX_AMOUNT", "700")
    assert load_settings(str(env_file)).max_amount == 700


def test_invalid_max_amount(env_file, monkeypatch):
    monkeypatch.setenv("PAYTRACK_MAX_AMOUNT", "lots")
    with pytest.raises(ValueError):
        load_settings(str(env_file))


def test_max_amount_must_be_positive():
    with pytest.raises(ValueError):
        PaymentSettings(max_amount=0)
