"""Path resolution and install configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fivem_dev.installer.constants import EXCLUDED_NAMES, INSTALLER_SCRIPT, PLUGINS_DIR, SKILLS_DIR
from fivem_dev.installer.types import DestinationRoot, InstallConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

# Only correct when running from a source checkout; check_package_root guards the rest
PACKAGE_ROOT: Path = Path(__file__).resolve().parents[3]
HOME_DIR: Path = Path.home()


def check_package_root(package_root: Path) -> Path:
    """Raise FileNotFoundError unless package_root holds the plugin package."""
    if not (package_root / INSTALLER_SCRIPT).is_file():
        raise FileNotFoundError(
            f"Plugin package not found at {package_root} (missing {INSTALLER_SCRIPT.as_posix()}). "
            "Run scripts/install.py from the plugin package."
        )
    return package_root


def destination_roots(home_dir: Path, *, include_skills: bool = True) -> list[DestinationRoot]:
    """Return the install targets under home_dir.

    The plugins root is always included; the skills root only when
    include_skills is set.
    """
    roots: list[DestinationRoot] = []
    if include_skills:
        roots.append(DestinationRoot(label="skills", path=home_dir / SKILLS_DIR))
    roots.append(DestinationRoot(label="plugins", path=home_dir / PLUGINS_DIR))
    return roots


def build_install_config(
    package_root: Path | None = None,
    home_dir: Path | None = None,
    *,
    include_skills: bool = True,
    excludes: Iterable[str] | None = None,
) -> InstallConfig:
    """Resolve every path once so the installer never looks them up itself."""
    package_root = package_root or PACKAGE_ROOT
    home_dir = home_dir or HOME_DIR
    return InstallConfig(
        package_root=package_root,
        home_dir=home_dir,
        destinations=destination_roots(home_dir, include_skills=include_skills),
        excludes=frozenset(excludes) if excludes is not None else EXCLUDED_NAMES,
    )
