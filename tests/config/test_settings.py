"""Tests for AppSettings: defaults, TOML source, env vars, CLI flags."""

from pathlib import Path

import click
import pytest

from annoguide.config.settings import AppSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ANNOGUIDE_CONFIG",
        "ANNOGUIDE_API__AUTH_TOKEN",
        "ANNOGUIDE_API__BASE_URL",
        "ANNOGUIDE_CODEC__STRATEGY",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = AppSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.api.base_url == "https://jsonplaceholder.typicode.com"
        assert settings.api.auth_token is None
        assert settings.api.user_id == 2
        assert settings.api.post_id == 1
        assert settings.codec.strategy == "validate"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AppSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "annoguide.toml").write_text(
            '[api]\nbase_url = "https://api.example.test"\n[codec]\nstrategy = "construct"\n'
        )
        settings = AppSettings.from_cli(start=tmp_path)
        assert settings.api.base_url == "https://api.example.test"
        assert settings.api.timeout == 30.0  # default preserved
        assert settings.codec.strategy == "construct"
        assert settings.config_path == tmp_path / "annoguide.toml"

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "annoguide.toml").write_text("[api]\nuser_id = 7\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert AppSettings.from_cli(start=nested).api.user_id == 7

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[api]\npost_id = 9\n")
        settings = AppSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.api.post_id == 9
        assert settings.config_path == custom

    def test_invalid_strategy_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "annoguide.toml").write_text('[codec]\nstrategy = "reflect"\n')
        with pytest.raises(Exception):
            AppSettings.from_cli(start=tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "annoguide.toml").write_text("[api\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AppSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "annoguide.toml").write_text('[api]\nauth_token = "from-toml"\n')
        monkeypatch.setenv("ANNOGUIDE_API__AUTH_TOKEN", "from-env")
        assert AppSettings.from_cli(start=tmp_path).api.auth_token == "from-env"

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = AppSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True
