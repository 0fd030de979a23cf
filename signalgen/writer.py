"""Joins generated fragments into header and source text."""

from __future__ import annotations

from typing import Iterable

from .fragments import GeneratedCppBlocks


def render_header(blocks: Iterable[GeneratedCppBlocks]) -> str:
    """Return every fragment's declaration, one per line, in fragment order."""
    lines = [fragment.header.rstrip("\n") for block in blocks for fragment in block.methods]
    return "\n".join(lines) + "\n" if lines else ""


def render_source(blocks: Iterable[GeneratedCppBlocks]) -> str:
    """Return every fragment's definition separated by blank lines; header-only fragments are skipped."""
    sources = [
        fragment.source.rstrip("\n")
        for block in blocks
        for fragment in block.methods
        if fragment.source is not None
    ]
    return "\n\n".join(sources) + "\n" if sources else ""


__all__ = ["render_header", "render_source"]
