"""Copy the plugin package into Claude Code's skills and plugins directories."""

from __future__ import annotations

from .constants import (
    DOCS_URL,
    EXCLUDED_NAMES,
    INSTALLER_SCRIPT,
    PLUGIN_DISPLAY_NAME,
    PLUGIN_NAME,
    PLUGINS_DIR,
    SKILLS_DIR,
)
from .fs_utils import copy_tree
from .install import install_plugin
from .types import (
    CopyResult,
    CopyTask,
    DestinationRoot,
    InstallConfig,
    InstallResult,
)

__all__ = [
    # constants
    "DOCS_URL",
    "EXCLUDED_NAMES",
    "INSTALLER_SCRIPT",
    "PLUGIN_DISPLAY_NAME",
    "PLUGIN_NAME",
    "PLUGINS_DIR",
    "SKILLS_DIR",
    # fs_utils
    "copy_tree",
    # install
    "install_plugin",
    # types
    "CopyResult",
    "CopyTask",
    "DestinationRoot",
    "InstallConfig",
    "InstallResult",
]
