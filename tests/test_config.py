"""Tests for settings loading."""

from fleet_api.config import Settings


def test_settings_read_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("JWT_EXPIRE_HOURS=12\n")

    settings = Settings(_env_file=env_file)

    assert settings.JWT_EXPIRE_HOURS == 12
    assert Settings.model_config["env_file"] == ".env"


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv("JWT_EXPIRE_HOURS", "6")
    env_file = tmp_path / ".env"
    env_file.write_text("JWT_EXPIRE_HOURS=12\n")

    assert Settings(_env_file=env_file).JWT_EXPIRE_HOURS == 6
