"""Tests for signalgen.writer."""

from __future__ import annotations

from signalgen.fragments import CppHeaderFragment, CppPairFragment, GeneratedCppBlocks
from signalgen.writer import render_header, render_source


def _blocks() -> list[GeneratedCppBlocks]:
    return [
        GeneratedCppBlocks(
            methods=[
                CppHeaderFragment(header="Q_SIGNAL void ready();"),
                CppPairFragment(header="void readyConnect();", source="void A::readyConnect()\n{\n}\n"),
            ]
        ),
        GeneratedCppBlocks(
            methods=[CppPairFragment(header="void\nB_doneConnect();\n", source="void B_doneConnect()\n{\n}\n")]
        ),
    ]


def test_render_header_keeps_fragment_order() -> None:
    assert render_header(_blocks()) == (
        "Q_SIGNAL void ready();\nvoid readyConnect();\nvoid\nB_doneConnect();\n"
    )


def test_render_source_skips_declaration_only_fragments() -> None:
    assert render_source(_blocks()) == (
        "void A::readyConnect()\n{\n}\n\nvoid B_doneConnect()\n{\n}\n"
    )


def test_render_empty_blocks() -> None:
    assert render_header([]) == ""
    assert render_source([GeneratedCppBlocks()]) == ""
