"""Helper utilities for writing bridge descriptions in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path


class BridgeBuilder:
    """Utility for writing bridge and config files into a throwaway project directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, relative: str, content: str) -> Path:
        """Write dedented ``content`` to ``relative`` and return the file path."""
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    def bridge(self, content: str, name: str = "bridge.yml") -> Path:
        return self.write(name, content)

    def config(self, content: str) -> Path:
        return self.write(".signalgen.yml", content)


__all__ = ["BridgeBuilder"]
