"""Tests for caswitch/sync/gemini.py — the .env file."""

from caswitch.providers.models import GeminiActiveConfig
from caswitch.sync.gemini import GeminiSynchronizer, env_value, render_env


def _config(**overrides) -> GeminiActiveConfig:
    values = {
        "site": "relay",
        "site_url": "https://relay",
        "api_key_name": "main",
        "api_key": "gm-key",
    }
    values.update(overrides)
    return GeminiActiveConfig(**values)


class TestRenderEnv:

    def test_line_order(self):
        text = render_env(
            _config(base_url="https://relay/gemini", model="gemini-2.5-pro"),
        )
        assert text == (
            "GOOGLE_GEMINI_BASE_URL=https://relay/gemini\n"
            "GEMINI_API_KEY=gm-key\n"
            "GEMINI_MODEL=gemini-2.5-pro\n"
        )

    def test_only_api_key(self):
        assert render_env(_config()) == "GEMINI_API_KEY=gm-key\n"

    def test_plain_values_stay_unquoted(self):
        assert env_value("https://relay/v1beta?x=1") == "https://relay/v1beta?x=1"

    def test_hash_and_space_are_quoted(self):
        assert env_value("abc #def") == '"abc #def"'

    def test_newline_is_escaped(self):
        assert env_value("a\nb") == '"a\\nb"'


class TestGeminiSynchronizer:

    def test_sync_then_read_back(self, tmp_path):
        synchronizer = GeminiSynchronizer(tmp_path / ".gemini")
        written = synchronizer.sync(_config(model="gemini-2.5-flash"))
        assert written == [synchronizer.env_file]
        assert synchronizer.read_env() == {
            "GEMINI_API_KEY": "gm-key",
            "GEMINI_MODEL": "gemini-2.5-flash",
        }

    def test_leaves_settings_json_alone(self, tmp_path):
        gemini_dir = tmp_path / ".gemini"
        gemini_dir.mkdir()
        settings = gemini_dir / "settings.json"
        settings.write_text('{"theme": "dark"}')
        GeminiSynchronizer(gemini_dir).sync(_config())
        assert settings.read_text() == '{"theme": "dark"}'

    def test_read_env_without_file(self, tmp_path):
        assert GeminiSynchronizer(tmp_path / ".gemini").read_env() == {}

    def test_special_values_read_back_intact(self, tmp_path):
        synchronizer = GeminiSynchronizer(tmp_path / ".gemini")
        synchronizer.sync(
            _config(api_key="abc #def", model='two\nlines "quoted" \\ end'),
        )
        assert synchronizer.read_env() == {
            "GEMINI_API_KEY": "abc #def",
            "GEMINI_MODEL": 'two\nlines "quoted" \\ end',
        }

    def test_repeated_sync_is_byte_identical(self, tmp_path):
        synchronizer = GeminiSynchronizer(tmp_path / ".gemini")
        config = _config(base_url="https://relay/gemini", model="gemini-2.5-pro")
        synchronizer.sync(config)
        first = synchronizer.env_file.read_bytes()
        synchronizer.sync(config)
        assert synchronizer.env_file.read_bytes() == first
