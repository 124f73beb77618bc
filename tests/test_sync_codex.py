"""Tests for caswitch/sync/codex.py — config.toml and auth.json."""

import json

import pytest

from caswitch.providers.models import CodexActiveConfig
from caswitch.sync.codex import (
    CodexSynchronizer,
    render_config_toml,
)

tomllib = pytest.importorskip("tomllib")


def _config(**overrides) -> CodexActiveConfig:
    values = {
        "site": "packy",
        "site_url": "https://packycode.com",
        "api_key_name": "main",
        "api_key": "sk-codex",
    }
    values.update(overrides)
    return CodexActiveConfig(**values)


class TestRenderConfigToml:

    def test_full_config_parses(self):
        text = render_config_toml(
            _config(
                base_url="https://codex/v1",
                model="gpt-5",
                model_reasoning_effort="high",
                network_access="enabled",
                disable_response_storage=True,
                wire_api="responses",
            ),
        )
        data = tomllib.loads(text)
        assert data["model_provider"] == "packy"
        assert data["model"] == "gpt-5"
        assert data["model_reasoning_effort"] == "high"
        assert data["network_access"] == "enabled"
        assert data["disable_response_storage"] is True
        assert data["model_providers"]["packy"] == {
            "name": "packy",
            "base_url": "https://codex/v1",
            "wire_api": "responses",
            "requires_openai_auth": True,
        }

    def test_absent_fields_emit_nothing(self):
        data = tomllib.loads(render_config_toml(_config()))
        assert data == {
            "model_provider": "packy",
            "model_providers": {
                "packy": {"name": "packy", "requires_openai_auth": True},
            },
        }

    def test_false_flag_is_written(self):
        data = tomllib.loads(
            render_config_toml(_config(disable_response_storage=False)),
        )
        assert data["disable_response_storage"] is False

    def test_model_provider_overrides_site(self):
        data = tomllib.loads(render_config_toml(_config(model_provider="my")))
        assert data["model_provider"] == "my"
        assert "my" in data["model_providers"]

    def test_odd_provider_id_is_quoted(self):
        text = render_config_toml(_config(model_provider="my relay.v2"))
        assert '[model_providers."my relay.v2"]' in text
        data = tomllib.loads(text)
        assert data["model_provider"] == "my relay.v2"
        assert "my relay.v2" in data["model_providers"]

    def test_top_level_keys_precede_provider_table(self):
        text = render_config_toml(_config(model="gpt-5"))
        assert text.startswith('model_provider = "packy"\nmodel = "gpt-5"\n')
        assert "\n\n[model_providers.packy]\n" in text

    def test_control_characters_are_escaped(self):
        text = render_config_toml(
            _config(model="gpt\x7f5", base_url="https://x/\x01v1"),
        )
        assert "\x7f" not in text
        data = tomllib.loads(text)
        assert data["model"] == "gpt\x7f5"
        assert data["model_providers"]["packy"]["base_url"] == "https://x/\x01v1"

    def test_quotes_backslashes_and_newlines_survive(self):
        model = 'a "quoted"\\path\nnext\ttab'
        data = tomllib.loads(render_config_toml(_config(model=model)))
        assert data["model"] == model
        assert list(data) == ["model_provider", "model", "model_providers"]


class TestCodexSynchronizer:

    def test_writes_both_files(self, tmp_path):
        synchronizer = CodexSynchronizer(tmp_path / ".codex")
        written = synchronizer.sync(_config(model="gpt-5"))
        assert written == [synchronizer.auth_json, synchronizer.config_toml]
        assert written == synchronizer.target_paths()
        auth = json.loads(synchronizer.auth_json.read_text(encoding="utf-8"))
        assert auth == {"OPENAI_API_KEY": "sk-codex"}
        config = tomllib.loads(
            synchronizer.config_toml.read_text(encoding="utf-8"),
        )
        assert config["model"] == "gpt-5"

    def test_overwrites_foreign_content(self, tmp_path):
        synchronizer = CodexSynchronizer(tmp_path / ".codex")
        synchronizer.codex_dir.mkdir()
        synchronizer.config_toml.write_text('approval_policy = "never"\n')
        synchronizer.sync(_config())
        config = tomllib.loads(synchronizer.config_toml.read_text())
        assert "approval_policy" not in config

    def test_repeated_sync_is_byte_identical(self, tmp_path):
        synchronizer = CodexSynchronizer(tmp_path / ".codex")
        config = _config(model="gpt-5", wire_api="responses")
        synchronizer.sync(config)
        first = [path.read_bytes() for path in synchronizer.target_paths()]
        synchronizer.sync(config)
        second = [path.read_bytes() for path in synchronizer.target_paths()]
        assert first == second
