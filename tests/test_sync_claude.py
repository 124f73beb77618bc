"""Tests for caswitch/sync/claude.py — settings.json deep merge."""

import json

import pytest

from caswitch.providers.models import ClaudeActiveConfig, VertexConfig
from caswitch.sync.claude import (
    ClaudeSynchronizer,
    OWNED_ENV_KEYS,
    build_env,
    deep_merge,
)


def _config(**overrides) -> ClaudeActiveConfig:
    values = {
        "site": "a",
        "site_url": "https://a",
        "token_name": "t1",
        "token": "sk-ant-1",
        "base_url": "https://api.a",
    }
    values.update(overrides)
    return ClaudeActiveConfig(**values)


@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / ".claude" / "settings.json"


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestDeepMerge:

    def test_objects_merge_recursively(self):
        target = {"env": {"A": "1"}, "x": 1}
        deep_merge(target, {"env": {"B": "2"}, "x": 2})
        assert target == {"env": {"A": "1", "B": "2"}, "x": 2}

    def test_non_object_overwrites(self):
        target = {"env": "broken"}
        deep_merge(target, {"env": {"B": "2"}})
        assert target == {"env": {"B": "2"}}


class TestBuildEnv:

    def test_standard_mode(self):
        env = build_env(_config(model="claude-opus"))
        assert env == {
            "ANTHROPIC_AUTH_TOKEN": "sk-ant-1",
            "ANTHROPIC_BASE_URL": "https://api.a",
            "ANTHROPIC_MODEL": "claude-opus",
        }

    def test_standard_mode_without_base_url(self):
        assert build_env(_config(base_url=None)) == {
            "ANTHROPIC_AUTH_TOKEN": "sk-ant-1",
        }

    def test_vertex_mode_ignores_base_url(self):
        env = build_env(
            _config(
                vertex=VertexConfig(
                    enabled=True,
                    project_id="proj",
                    base_url="https://vertex",
                    skip_auth=True,
                ),
            ),
        )
        assert env == {
            "ANTHROPIC_AUTH_TOKEN": "sk-ant-1",
            "CLAUDE_CODE_USE_VERTEX": "1",
            "ANTHROPIC_VERTEX_PROJECT_ID": "proj",
            "ANTHROPIC_VERTEX_BASE_URL": "https://vertex",
            "CLAUDE_CODE_SKIP_VERTEX_AUTH": "1",
            "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC": "1",
        }

    def test_every_emitted_key_is_owned(self):
        env = build_env(
            _config(
                model="m",
                vertex=VertexConfig(
                    enabled=True,
                    project_id="p",
                    base_url="b",
                    skip_auth=True,
                ),
            ),
        )
        assert set(env) <= set(OWNED_ENV_KEYS)


class TestClaudeSynchronizer:

    def test_creates_missing_file(self, settings_file):
        written = ClaudeSynchronizer(settings_file).sync(_config())
        assert written == [settings_file]
        assert ClaudeSynchronizer(settings_file).target_paths() == written
        assert _read(settings_file) == {
            "env": {
                "ANTHROPIC_AUTH_TOKEN": "sk-ant-1",
                "ANTHROPIC_BASE_URL": "https://api.a",
            },
        }

    def test_preserves_foreign_keys(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(
            json.dumps(
                {
                    "permissions": {"allow": ["Bash(ls)"]},
                    "env": {"MY_VAR": "keep", "ANTHROPIC_AUTH_TOKEN": "old"},
                },
            ),
        )
        ClaudeSynchronizer(settings_file).sync(_config())
        settings = _read(settings_file)
        assert settings["permissions"] == {"allow": ["Bash(ls)"]}
        assert settings["env"]["MY_VAR"] == "keep"
        assert settings["env"]["ANTHROPIC_AUTH_TOKEN"] == "sk-ant-1"

    def test_strips_legacy_top_level_keys(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(
            json.dumps(
                {
                    "ANTHROPIC_AUTH_TOKEN": "legacy",
                    "ANTHROPIC_BASE_URL": "https://legacy",
                    "model": "opus",
                },
            ),
        )
        ClaudeSynchronizer(settings_file).sync(_config())
        settings = _read(settings_file)
        assert "ANTHROPIC_AUTH_TOKEN" not in settings
        assert "ANTHROPIC_BASE_URL" not in settings
        assert settings["model"] == "opus"

    def test_vertex_to_standard_leaves_no_residue(self, settings_file):
        synchronizer = ClaudeSynchronizer(settings_file)
        synchronizer.sync(
            _config(
                vertex=VertexConfig(
                    enabled=True,
                    project_id="proj",
                    skip_auth=True,
                ),
            ),
        )
        assert _read(settings_file)["env"]["CLAUDE_CODE_USE_VERTEX"] == "1"

        synchronizer.sync(_config())
        env = _read(settings_file)["env"]
        assert env == {
            "ANTHROPIC_AUTH_TOKEN": "sk-ant-1",
            "ANTHROPIC_BASE_URL": "https://api.a",
        }

    def test_malformed_file_is_replaced(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("{oops")
        ClaudeSynchronizer(settings_file).sync(_config())
        assert _read(settings_file)["env"]["ANTHROPIC_AUTH_TOKEN"] == "sk-ant-1"

    def test_non_object_env_is_replaced(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"env": ["x"]}))
        ClaudeSynchronizer(settings_file).sync(_config())
        assert _read(settings_file)["env"]["ANTHROPIC_BASE_URL"] == (
            "https://api.a"
        )
