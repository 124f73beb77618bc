"""Tests for caswitch/config/paths.py — working dir and home resolution."""

from caswitch.config import Paths
from caswitch.config.paths import resolve_home_dir


class TestPathsFromEnv:

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CASWITCH_WORKING_DIR", str(tmp_path / "work"))
        monkeypatch.setenv("CASWITCH_HOME", str(tmp_path / "home"))
        paths = Paths.from_env()
        assert paths.working_dir == (tmp_path / "work").resolve()
        assert paths.home_dir == (tmp_path / "home").resolve()
        assert paths.claude_settings_file == (
            paths.home_dir / ".claude" / "settings.json"
        )

    def test_explicit_arguments_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CASWITCH_WORKING_DIR", str(tmp_path / "env"))
        paths = Paths.from_env(
            working_dir=tmp_path / "cli",
            home_dir=tmp_path / "home",
        )
        assert paths.working_dir == (tmp_path / "cli").resolve()

    def test_global_config_file_name_is_fixed(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CASWITCH_CONFIG_FILE", "other.json")
        paths = Paths.from_env(working_dir=tmp_path, home_dir=tmp_path)
        assert paths.global_config_file == tmp_path.resolve() / "config.json"
        assert paths.opencode_store_file == tmp_path.resolve() / "opencode.json"

    def test_home_defaults_to_user_home(self, monkeypatch):
        monkeypatch.delenv("CASWITCH_HOME", raising=False)
        monkeypatch.setenv("HOME", "/tmp/fake-home")
        assert str(resolve_home_dir()) == "/tmp/fake-home"
