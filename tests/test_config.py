"""Tests for crossbuild configuration."""

import os

import pytest

from crossbuild.config import Settings, get_settings, load_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove crossbuild variables from the environment."""
    for key in list(os.environ):
        if key.startswith("CROSSBUILD_"):
            monkeypatch.delenv(key)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings()

        assert settings.root_name == "CROSSBUILD_ROOT"
        assert settings.profiles_dir == ".profiles"
        assert settings.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        """Test CROSSBUILD_* variables override defaults."""
        monkeypatch.setenv("CROSSBUILD_ROOT_NAME", "JIRI_ROOT")
        monkeypatch.setenv("CROSSBUILD_PROFILES_DIR", ".jiri_root/profiles")

        settings = Settings()

        assert settings.root_name == "JIRI_ROOT"
        assert settings.profiles_dir == ".jiri_root/profiles"

    def test_root_from_root_variable(self, monkeypatch, tmp_path):
        """Test the root value comes from the root variable."""
        monkeypatch.setenv("CROSSBUILD_ROOT", str(tmp_path))

        root = Settings().root()

        assert root.name == "CROSSBUILD_ROOT"
        assert root.value == str(tmp_path)
        assert str(root) == "${CROSSBUILD_ROOT}"

    def test_root_dir_takes_precedence(self, monkeypatch, tmp_path):
        """Test an explicit root_dir wins over the root variable."""
        monkeypatch.setenv("CROSSBUILD_ROOT", "/elsewhere")

        assert Settings(root_dir=str(tmp_path)).resolved_root_dir() == str(tmp_path)

    def test_root_defaults_to_cwd(self, monkeypatch, tmp_path):
        """Test the current directory is used when nothing is set."""
        monkeypatch.chdir(tmp_path)

        assert Settings().resolved_root_dir() == os.getcwd()

    def test_profiles_root(self, tmp_path):
        """Test the profiles directory is relative to the root."""
        profiles = Settings(root_dir=str(tmp_path)).profiles_root()

        assert str(profiles) == "${CROSSBUILD_ROOT}" + os.sep + ".profiles"
        assert profiles.expand() == str(tmp_path / ".profiles")


class TestLoadConfig:
    """Tests for load_config and get_settings."""

    def test_missing_file(self, tmp_path):
        """Test a missing config file yields no values."""
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_empty_file(self, tmp_path):
        """Test an empty config file yields no values."""
        config_path = tmp_path / "crossbuild.yaml"
        config_path.write_text("")

        assert load_config(config_path) == {}

    def test_non_mapping_rejected(self, tmp_path):
        """Test a config file that is not a mapping raises."""
        config_path = tmp_path / "crossbuild.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(config_path)

    def test_get_settings_from_file(self, tmp_path):
        """Test file values are applied."""
        config_path = tmp_path / "crossbuild.yaml"
        config_path.write_text("profiles_dir: third_party/profiles\nlog_level: DEBUG\nunknown: 1\n")

        settings = get_settings(config_path)

        assert settings.profiles_dir == "third_party/profiles"
        assert settings.log_level == "DEBUG"

    def test_environment_overrides_file(self, monkeypatch, tmp_path):
        """Test environment variables take precedence over the file."""
        config_path = tmp_path / "crossbuild.yaml"
        config_path.write_text("log_level: DEBUG\n")
        monkeypatch.setenv("CROSSBUILD_LOG_LEVEL", "WARNING")

        assert get_settings(config_path).log_level == "WARNING"
