"""Installer constants."""

from __future__ import annotations

from pathlib import Path

PLUGIN_NAME = "fivem-dev"
PLUGIN_DISPLAY_NAME = "FiveM Dev Plugin"
DOCS_URL = "https://github.com/melihbozkurt10/fivem-dev-plugin"

# Matched by exact name at any depth: version control plus npm and Python dependency caches
EXCLUDED_NAMES: frozenset[str] = frozenset({".git", "node_modules", ".venv"})

# Relative to the plugin package root; its parent's parent is the package root
INSTALLER_SCRIPT = Path("scripts/install.py")

# Relative to the user's home directory
SKILLS_DIR = Path(".claude/skills") / PLUGIN_NAME
PLUGINS_DIR = Path(".claude/plugins/marketplaces") / PLUGIN_NAME
