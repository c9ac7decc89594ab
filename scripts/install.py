"""Install the FiveM Dev plugin into ~/.claude."""

from __future__ import annotations

from pathlib import Path

from fivem_dev.__main__ import run

if __name__ == "__main__":
    run(Path(__file__).resolve().parent.parent)
