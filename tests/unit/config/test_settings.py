"""Unit tests for config settings & validation."""

import dataclasses
from typing import ClassVar

import pytest

from eventfold.config import (
    AppSettings,
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from eventfold.application.event_sourcing import DEFAULT_NAMESPACE, DEFAULT_SOURCE


class TestAppSettingsDefaults:
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.event_source == DEFAULT_SOURCE
        assert settings.event_namespace == DEFAULT_NAMESPACE
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.loan_period_days == 14

    def test_loan_period_must_be_positive(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            AppSettings(loan_period_days=0)
        assert exc_info.value.setting_name == "loan_period_days"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AppSettings(log_level="chatty")

    def test_namespace_must_not_end_with_dot(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AppSettings(event_namespace="io.example.")

    def test_empty_source_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AppSettings(event_source="")


@dataclasses.dataclass
class _ShopSettings(Settings):
    _prefix: ClassVar[str] = "shop"

    api_url: str
    workers: int = 1


@dataclasses.dataclass
class _BrokenSettings(Settings):
    flavour: "UndefinedFlavour" = "plain"  # type: ignore[name-defined]  # noqa: F821


class TestEnvSettingsLoader:
    def test_prefix_is_not_a_field(self) -> None:
        assert [f.name for f in dataclasses.fields(AppSettings)] == [
            "event_source",
            "event_namespace",
            "log_level",
            "log_json",
            "loan_period_days",
        ]

    def test_custom_settings_class(self) -> None:
        settings = EnvSettingsLoader(
            environ={"SHOP_API_URL": "http://shop.local", "SHOP_WORKERS": "4"}
        ).load(_ShopSettings)
        assert settings == _ShopSettings(api_url="http://shop.local", workers=4)

    def test_required_setting_missing(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(_ShopSettings)
        assert exc_info.value.setting_name == "SHOP_API_URL"

    def test_unresolvable_field_type(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader(environ={}).load(_BrokenSettings)

    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(AppSettings)
        assert settings == AppSettings()

    def test_loads_prefixed_values(self) -> None:
        settings = EnvSettingsLoader(
            environ={
                "EVENTFOLD_EVENT_SOURCE": "tag:shop.example.org",
                "EVENTFOLD_EVENT_NAMESPACE": "org.example.shop",
                "EVENTFOLD_LOG_LEVEL": "debug",
                "EVENTFOLD_LOAN_PERIOD_DAYS": "21",
            }
        ).load(AppSettings)
        assert settings.event_source == "tag:shop.example.org"
        assert settings.event_namespace == "org.example.shop"
        assert settings.log_level == "debug"
        assert settings.loan_period_days == 21

    @pytest.mark.parametrize(("raw", "expected"), [("false", False), ("0", False), ("Yes", True)])
    def test_loads_bool(self, raw: str, expected: bool) -> None:
        settings = EnvSettingsLoader(environ={"EVENTFOLD_LOG_JSON": raw}).load(AppSettings)
        assert settings.log_json is expected

    def test_invalid_bool(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(environ={"EVENTFOLD_LOG_JSON": "maybe"}).load(AppSettings)
        assert exc_info.value.setting_name == "EVENTFOLD_LOG_JSON"

    def test_invalid_int(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(environ={"EVENTFOLD_LOAN_PERIOD_DAYS": "two weeks"}).load(AppSettings)
        assert exc_info.value.reason == "expected an integer"

    def test_validation_failure_surfaces_as_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader(environ={"EVENTFOLD_LOAN_PERIOD_DAYS": "0"}).load(AppSettings)

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVENTFOLD_LOAN_PERIOD_DAYS", "30")
        assert EnvSettingsLoader().load(AppSettings).loan_period_days == 30


class TestConfigErrors:
    def test_missing_required_setting(self) -> None:
        err = MissingRequiredSettingError("EVENTFOLD_X")
        assert err.setting_name == "EVENTFOLD_X"
        assert err.code == "missing_required_setting"
        assert isinstance(err, ConfigError)

    def test_invalid_value_message(self) -> None:
        err = InvalidSettingValueError("port", "abc", "expected an integer")
        assert err.message == "Setting 'port' has invalid value 'abc': expected an integer"
