"""Shared fixtures for the caswitch test suite."""

import pytest

from caswitch.config import ConfigManager, Paths
from caswitch.providers.models import (
    ClaudeSettingsPatch,
    CodexSettingsPatch,
    GeminiSettingsPatch,
    OpenCodeModelInfo,
    OpenCodeModelLimit,
)


@pytest.fixture
def paths(tmp_path) -> Paths:
    """Isolated working dir and fake home under tmp_path."""
    return Paths(
        working_dir=tmp_path / "ca-switch",
        home_dir=tmp_path / "home",
    )


@pytest.fixture
def manager(paths) -> ConfigManager:
    return ConfigManager(paths)


@pytest.fixture
def claude_site(manager):
    """Site 'anyrouter' with one token and a base URL."""
    manager.claude.add_site("anyrouter", "https://anyrouter.top", "relay")
    manager.claude.update_site_config(
        "anyrouter",
        ClaudeSettingsPatch(base_url="https://api.anyrouter.top"),
    )
    manager.claude.add_secret("anyrouter", "default", "sk-ant-1234567890")
    return "anyrouter"


@pytest.fixture
def codex_site(manager):
    manager.codex.add_site("packy", "https://packycode.com")
    manager.codex.update_site_config(
        "packy",
        CodexSettingsPatch(
            base_url="https://codex-api.packycode.com/v1",
            model="gpt-5",
            model_reasoning_effort="high",
            wire_api="responses",
        ),
    )
    manager.codex.add_secret("packy", "main", "sk-codex-abcdef")
    return "packy"


@pytest.fixture
def gemini_site(manager):
    manager.gemini.add_site("relay", "https://relay.example")
    manager.gemini.update_site_config(
        "relay",
        GeminiSettingsPatch(
            base_url="https://relay.example/gemini",
            model="gemini-2.5-pro",
        ),
    )
    manager.gemini.add_secret("relay", "main", "gm-key-123456")
    return "relay"


@pytest.fixture
def opencode_providers(manager):
    """Three providers: 'alpha' and 'beta' with models, 'gamma' unused."""
    store = manager.opencode
    store.add_provider(
        "alpha",
        base_url="https://alpha.example/v1",
        api_key="sk-alpha-000000",
        npm="@ai-sdk/openai-compatible",
    )
    store.add_model(
        "alpha",
        "gpt-4o",
        OpenCodeModelInfo(
            name="GPT-4o",
            limit=OpenCodeModelLimit(context=128000, output=16384),
        ),
    )
    store.add_provider(
        "beta",
        base_url="https://beta.example/v1",
        api_key="sk-beta-111111",
    )
    store.add_model("beta", "mini", OpenCodeModelInfo(name="Mini"))
    store.add_provider(
        "gamma",
        base_url="https://gamma.example/v1",
        api_key="sk-gamma-222222",
    )
    store.add_model("gamma", "big", OpenCodeModelInfo(name="Big"))
    return store

