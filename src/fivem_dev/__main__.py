"""Entry point: python -m fivem_dev"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from fivem_dev.infrastructure.config import build_install_config, check_package_root
from fivem_dev.infrastructure.logger import logger
from fivem_dev.installer import DOCS_URL, PLUGIN_DISPLAY_NAME, PLUGIN_NAME, install_plugin
from fivem_dev.installer.types import CopyResult, DestinationRoot, InstallConfig

if TYPE_CHECKING:
    from pathlib import Path


def print_banner(config: InstallConfig) -> None:
    print(f"\nInstalling {PLUGIN_DISPLAY_NAME} for Claude Code...\n")
    print(f"   Source: {config.package_root}")
    for root in config.destinations:
        print(f"   {root.label.capitalize()}: {root.path}")
    print()


def print_installed(root: DestinationRoot, _result: CopyResult) -> None:
    print(f"Installed to {root.label} directory")


def print_summary() -> None:
    print(f"\n{PLUGIN_DISPLAY_NAME} installed successfully!\n")
    print("Usage:")
    print("   - Ask FiveM questions naturally (skill auto-activates)")
    print(f"   - Use /{PLUGIN_NAME} <query> for direct questions")
    print("   - Restart Claude Code after installation\n")
    print(f"Docs: {DOCS_URL}\n")


def main(config: InstallConfig | None = None) -> None:
    config = config or build_install_config()

    print_banner(config)
    result = install_plugin(config, progress=print_installed)

    if not result.success:
        print(f"Installation failed: {result.error}", file=sys.stderr)
        print("\nManual installation:", file=sys.stderr)
        print(f"   Copy contents to: {result.failed_destination}", file=sys.stderr)
        sys.exit(1)

    print_summary()


def run(package_root: Path | None = None) -> None:
    try:
        config = build_install_config(package_root)
        check_package_root(config.package_root)
        main(config)
    except Exception as err:
        logger.error("Installation aborted", error=str(err))
        print(err, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
