"""Installer for the FiveM Dev plugin for Claude Code."""

__version__ = "1.0.0"
