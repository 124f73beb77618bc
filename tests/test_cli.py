"""Tests for the click CLI (caswitch/cli)."""

import json

import pytest
from click.testing import CliRunner

from caswitch.cli.main import cli


@pytest.fixture
def invoke(tmp_path):
    runner = CliRunner()
    base = [
        "--working-dir",
        str(tmp_path / "ca-switch"),
        "--home",
        str(tmp_path / "home"),
    ]

    def _invoke(*args, **kwargs):
        return runner.invoke(cli, base + list(args), **kwargs)

    return _invoke


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestSiteCommands:

    def test_add_site_key_and_switch(self, invoke, tmp_path):
        assert invoke("claude", "add-site", "relay", "--url", "https://r").exit_code == 0
        assert invoke(
            "claude", "config", "relay", "--base-url", "https://api.r",
        ).exit_code == 0
        result = invoke("claude", "add-key", "relay", "main", "--value", "sk-ant-secret")
        assert result.exit_code == 0, result.output

        result = invoke("claude", "switch", "relay", "main")
        assert result.exit_code == 0, result.output
        settings = _read(tmp_path / "home" / ".claude" / "settings.json")
        assert settings["env"]["ANTHROPIC_AUTH_TOKEN"] == "sk-ant-secret"
        assert settings["env"]["ANTHROPIC_BASE_URL"] == "https://api.r"

    def test_list_masks_secrets(self, invoke):
        invoke("codex", "add-site", "p", "--url", "https://p")
        invoke("codex", "add-key", "p", "main", "--value", "sk-verysecretvalue")
        result = invoke("codex", "list")
        assert result.exit_code == 0
        assert "sk-verysecretvalue" not in result.output
        assert "alue" in result.output

    def test_switch_prompts_for_missing_arguments(self, invoke):
        invoke("gemini", "add-site", "g", "--url", "https://g")
        invoke("gemini", "add-key", "g", "k1", "--value", "gm-1")
        invoke("gemini", "add-key", "g", "k2", "--value", "gm-2")
        result = invoke("gemini", "switch", input="1\n2\n")
        assert result.exit_code == 0, result.output
        shown = invoke("gemini", "env")
        assert "GEMINI_API_KEY" in shown.output

        status = invoke("status")
        assert "g / k2" in status.output

    def test_missing_site_is_an_error(self, invoke):
        result = invoke("claude", "switch", "nope", "main")
        assert result.exit_code == 1
        assert "Site 'nope' not found" in result.output

    def test_duplicate_site_is_an_error(self, invoke):
        invoke("codex", "add-site", "p", "--url", "https://p")
        result = invoke("codex", "add-site", "p", "--url", "https://p")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_remove_site_asks_for_confirmation(self, invoke):
        invoke("codex", "add-site", "p", "--url", "https://p")
        result = invoke("codex", "remove-site", "p", input="n\n")
        assert "Cancelled" in result.output
        assert "p" in invoke("codex", "list").output
        result = invoke("codex", "remove-site", "p", "--yes")
        assert result.exit_code == 0
        assert "No Codex sites configured" in invoke("codex", "list").output

    def test_show_and_clear(self, invoke):
        invoke("claude", "add-site", "relay", "--url", "https://r")
        invoke("claude", "add-key", "relay", "main", "--value", "sk-ant-secret")
        invoke("claude", "switch", "relay", "main")
        shown = invoke("claude", "show")
        assert "relay" in shown.output
        assert "sk-ant-secret" not in shown.output

        assert invoke("claude", "clear").exit_code == 0
        assert "not configured" in invoke("claude", "show").output


class TestOpenCodeCommands:

    def _setup(self, invoke):
        invoke(
            "opencode", "add-provider", "alpha",
            "--base-url", "https://alpha/v1", "--api-key", "sk-alpha-key",
        )
        invoke("opencode", "add-model", "alpha", "gpt-4o", "--name", "GPT-4o")
        invoke(
            "opencode", "add-provider", "beta",
            "--base-url", "https://beta/v1", "--api-key", "sk-beta-key",
        )
        invoke("opencode", "add-model", "beta", "mini")

    def test_switch_and_apply(self, invoke, tmp_path):
        self._setup(invoke)
        result = invoke(
            "opencode", "switch",
            "--main", "alpha", "gpt-4o",
            "--small", "beta", "mini",
        )
        assert result.exit_code == 0, result.output
        data = _read(tmp_path / "home" / ".opencode" / "opencode.json")
        assert set(data["provider"]) == {"alpha", "beta"}

        project = tmp_path / "project"
        result = invoke("opencode", "apply", str(project))
        assert result.exit_code == 0, result.output
        assert (project / ".opencode" / "opencode.json").is_file()

    def test_small_defaults_to_main(self, invoke, tmp_path):
        self._setup(invoke)
        result = invoke("opencode", "switch", "--main", "alpha", "gpt-4o")
        assert result.exit_code == 0, result.output
        data = _read(tmp_path / "home" / ".opencode" / "opencode.json")
        assert list(data["provider"]) == ["alpha"]

    def test_unknown_model(self, invoke):
        self._setup(invoke)
        result = invoke(
            "opencode", "switch", "--main", "alpha", "nope",
        )
        assert result.exit_code == 1
        assert "Model 'nope' not found" in result.output

    def test_list_marks_roles(self, invoke):
        self._setup(invoke)
        invoke(
            "opencode", "switch",
            "--main", "alpha", "gpt-4o",
            "--small", "beta", "mini",
        )
        output = invoke("opencode", "list").output
        assert "gpt-4o: GPT-4o [main]" in output
        assert "mini: mini [small]" in output
        assert "sk-alpha-key" not in output


class TestBackupCommands:

    def test_export_and_restore(self, invoke, tmp_path):
        invoke("claude", "add-site", "relay", "--url", "https://r")
        snapshot = tmp_path / "snapshot.json"
        result = invoke("backup", "export", str(snapshot))
        assert result.exit_code == 0, result.output

        store = tmp_path / "ca-switch" / "claude.json"
        store.unlink()
        result = invoke("backup", "restore", str(snapshot), "--yes")
        assert result.exit_code == 0, result.output
        assert "relay" in _read(store)["sites"]
