"""Shared fixtures for installer tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files (relative path -> content) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
    return root


def read_tree(root: Path) -> dict[str, str]:
    """Return every regular file under root as relative path -> content."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture()
def package_root(tmp_path: Path) -> Path:
    """A plugin package with a skill, a command, and excluded directories."""
    return write_tree(
        tmp_path / "package",
        {
            "package.json": '{"name": "fivem-dev"}',
            "SKILL.md": "# FiveM Dev",
            "commands/fivem-dev.md": "Answer FiveM questions",
            "scripts/install.py": "print('install')",
            ".git/HEAD": "ref: refs/heads/main",
            "node_modules/dep/index.js": "module.exports = {}",
        },
    )


@pytest.fixture()
def home_dir(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home
