import logging

import pytest

from ledgersig.core.settings import CodecSettings, RuntimeSettings, get_settings
from ledgersig.protocol.enums import DeSerializationMode
from ledgersig.utils.logging import get_logger


@pytest.fixture
def env(monkeypatch):
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, env):
        env.delenv("LEDGERSIG_CODEC_VALIDATION_ENABLED", raising=False)
        env.delenv("LEDGERSIG_LOG_LEVEL", raising=False)

        settings = get_settings()

        assert settings.codec.validation_enabled is True
        assert settings.codec.default_mode == DeSerializationMode.PERFORM_VALIDATION
        assert settings.runtime.log_level == "INFO"

    def test_validation_disabled_from_env(self, env):
        env.setenv("LEDGERSIG_CODEC_VALIDATION_ENABLED", "0")

        assert CodecSettings().default_mode == DeSerializationMode.NONE

    @pytest.mark.parametrize(
        "raw, expected",
        [("debug", "DEBUG"), ("WARN", "WARNING"), ("bogus", "INFO"), ("", "INFO")],
    )
    def test_log_level_normalized(self, env, raw, expected):
        env.setenv("LEDGERSIG_LOG_LEVEL", raw)

        assert RuntimeSettings().log_level == expected

    def test_cached(self, env):
        assert get_settings() is get_settings()


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("ledgersig.signature").name == "ledgersig.signature"
        assert get_logger("tools").name == "ledgersig.tools"

    def test_root_level_applied(self):
        get_logger("ledgersig")
        assert logging.getLogger("ledgersig").level != logging.NOTSET
