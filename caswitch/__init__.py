# -*- coding: utf-8 -*-
"""caswitch: switch AI API sites for Claude Code, Codex, Gemini and OpenCode."""

__version__ = "0.3.0"
