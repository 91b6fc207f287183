"""Unit tests for logger settings & environment loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from ologs.config import EnvSettingsLoader, LoggerSettings, Settings
from ologs.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str
    tags: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(LoggerSettings)
        assert settings == LoggerSettings()
        assert settings.level == "info"
        assert settings.format == "text"
        assert settings.syslog_port == 514

    def test_reads_prefixed_variables(self) -> None:
        environ = {
            "OLOGS_APPLICATION": "billing",
            "OLOGS_LEVEL": "debug",
            "OLOGS_FORMAT": "json",
            "OLOGS_SYSLOG_HOST": "logs.internal",
            "OLOGS_SYSLOG_PORT": "1514",
            "OLOGS_SENTRY_DSN": "https://key@sentry.example/1",
            "OLOGS_SENTRY_ENVIRONMENT": "staging",
            "OLOGS_SENTRY_DEBUG": "yes",
        }
        settings = EnvSettingsLoader(environ=environ).load(LoggerSettings)
        assert settings.application == "billing"
        assert settings.level == "debug"
        assert settings.format == "json"
        assert settings.syslog_host == "logs.internal"
        assert settings.syslog_port == 1514
        assert settings.sentry_dsn == "https://key@sentry.example/1"
        assert settings.sentry_environment == "staging"
        assert settings.sentry_debug is True

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OLOGS_APPLICATION", "from-env")
        assert EnvSettingsLoader().load(LoggerSettings).application == "from-env"

    def test_bool_false_values(self) -> None:
        for falsy in ("false", "0", "no", "off"):
            settings = EnvSettingsLoader(environ={"OLOGS_SENTRY_DEBUG": falsy}).load(LoggerSettings)
            assert settings.sentry_debug is False

    def test_non_numeric_port(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(environ={"OLOGS_SYSLOG_PORT": "udp"}).load(LoggerSettings)
        assert exc_info.value.setting_name == "OLOGS_SYSLOG_PORT"

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_list_coercion(self) -> None:
        settings = EnvSettingsLoader(environ={"REQ_TOKEN": "t", "REQ_TAGS": "a, b,,c"}).load(RequiredSettings)
        assert settings.tags == ["a", "b", "c"]


# ---------------------------------------------------------------------------
# LoggerSettings validation
# ---------------------------------------------------------------------------


class TestLoggerSettings:
    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            LoggerSettings(format="xml")

    def test_format_case_insensitive(self) -> None:
        assert LoggerSettings(format="JSON").format == "JSON"

    def test_port_out_of_range(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            LoggerSettings(syslog_port=70000)

    def test_invalid_value_from_env_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader(environ={"OLOGS_FORMAT": "yaml"}).load(LoggerSettings)
