"""Tests for EnvgetSettings — package settings from ENVGET_* variables."""

from pathlib import Path

import pytest

from envget.config.settings import EnvgetSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENVGET_EMPTY_IS_MISSING", "ENVGET_VERBOSE", "ENVGET_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


class TestEnvgetSettingsDefaults:
    def test_all_defaults(self) -> None:
        """With no env vars, all fields use code defaults."""
        settings = EnvgetSettings()
        assert settings.empty_is_missing is False
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = EnvgetSettings()
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestEnvVars:
    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVGET_EMPTY_IS_MISSING", "true")
        assert EnvgetSettings().empty_is_missing is True

    def test_case_insensitive_names(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("envget_verbose", "1")
        assert EnvgetSettings().verbose is True

    def test_invalid_value_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVGET_LOG_JSON", "sometimes")
        with pytest.raises(ValueError):
            EnvgetSettings()


class TestInitKwargs:
    def test_kwargs_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Explicit kwargs take priority over env vars."""
        monkeypatch.setenv("ENVGET_VERBOSE", "true")
        settings = EnvgetSettings(verbose=False)
        assert settings.verbose is False

    def test_ignores_dotenv_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("ENVGET_LOG_JSON=true\n")
        monkeypatch.chdir(tmp_path)
        assert EnvgetSettings().log_json is False
