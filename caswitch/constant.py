# -*- coding: utf-8 -*-
# Where caswitch keeps its own documents (config.json and the stores).
WORKING_DIR_ENV = "CASWITCH_WORKING_DIR"
DEFAULT_WORKING_DIR = "~/.ca-switch"

# Base directory of the wrapped tools' own config dirs (~/.claude, ...);
# defaults to the user home.
HOME_ENV = "CASWITCH_HOME"

GLOBAL_CONFIG_FILE = "config.json"

CLAUDE_STORE_FILE = "claude.json"
CODEX_STORE_FILE = "codex.json"
GEMINI_STORE_FILE = "gemini.json"
OPENCODE_STORE_FILE = "opencode.json"

# Env key for CLI log level.
LOG_LEVEL_ENV = "CASWITCH_LOG_LEVEL"

# Format version written into every persisted document.
CONFIG_VERSION = "3.0.0"

FAMILIES = ("claude", "codex", "gemini", "opencode")

# ---------------------------------------------------------------------------
# External tool layout (relative to the home directory)
# ---------------------------------------------------------------------------
CLAUDE_DIR = ".claude"
CLAUDE_SETTINGS_FILE = "settings.json"

CODEX_DIR = ".codex"
CODEX_CONFIG_TOML = "config.toml"
CODEX_AUTH_JSON = "auth.json"

GEMINI_DIR = ".gemini"
GEMINI_ENV_FILE = ".env"
GEMINI_SETTINGS_FILE = "settings.json"

OPENCODE_DIR = ".opencode"
OPENCODE_JSON = "opencode.json"
OPENCODE_SCHEMA_URL = "https://opencode.ai/config.json"
