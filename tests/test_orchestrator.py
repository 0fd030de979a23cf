"""Tests for signalgen.orchestrator."""

from __future__ import annotations

import logging
from pathlib import Path

from signalgen.bridge import load_bridge
from signalgen.mappings import CxxMappings
from signalgen.orchestrator import GenerationReport, Orchestrator

BROKEN_BRIDGE = """
qobjects:
  - ident: Broken
    signals:
      - name: first
      - name: second
        parameters:
          - {ident: value, type: "dyn Trait"}
  - ident: Healthy
    signals:
      - name: ready
free_signals:
  - qobject: QPushButton
    name: clicked
    parameters:
      - {ident: pair, type: "(i32, i32)"}
"""


def test_generate_collects_every_owner(my_object_bridge: Path) -> None:
    report = Orchestrator().generate(load_bridge(my_object_bridge))

    assert isinstance(report, GenerationReport)
    assert report.ok
    assert [item.owner for item in report.generated] == ["MyObject", "ObjRust_signalRustNameConnect"]
    assert len(report.generated[0].blocks) == 3
    assert len(report.generated[1].blocks) == 1

    header = report.header
    assert header.index("Q_SIGNAL void dataChanged(") < header.index("dataChangedConnect(")
    assert "Q_SIGNAL void baseName(" not in header
    assert "ObjRust_signalRustNameConnect(::mynamespace::ObjCpp& self" in header
    assert "&::mynamespace::ObjCpp::signalRustName," in report.source


def test_generate_is_deterministic(my_object_bridge: Path) -> None:
    orchestrator = Orchestrator()

    first = orchestrator.generate(load_bridge(my_object_bridge))
    second = orchestrator.generate(load_bridge(my_object_bridge))

    assert first.header == second.header
    assert first.source == second.source


def test_generate_isolates_failures_per_signal(bridge_builder, caplog) -> None:
    bridge = load_bridge(bridge_builder.bridge(BROKEN_BRIDGE))

    with caplog.at_level(logging.ERROR, logger="signalgen"):
        report = Orchestrator().generate(bridge)

    assert not report.ok
    assert [failure.owner for failure in report.errors] == [
        "Broken::second",
        "QPushButton_clickedConnect",
    ]
    assert "dyn Trait" in report.errors[0].message
    assert [item.owner for item in report.generated] == ["Broken", "Healthy"]
    assert "Q_SIGNAL void first();" in report.header
    assert "Broken::firstConnect(" in report.source
    assert "second" not in report.header
    assert "second" not in report.source
    assert "Q_SIGNAL void ready();" in report.header
    assert "Skipping Broken::second" in caplog.text


def test_generate_keeps_siblings_around_a_failing_signal(bridge_builder) -> None:
    bridge = load_bridge(
        bridge_builder.bridge(
            """
            qobjects:
              - ident: MyObject
                signals:
                  - name: ok_signal
                  - name: bad
                    parameters:
                      - {ident: v, type: "dyn Trait"}
                  - name: later_signal
                    inherit: true
            """
        )
    )

    report = Orchestrator().generate(bridge)

    assert [failure.owner for failure in report.errors] == ["MyObject::bad"]
    (owner,) = report.generated
    assert owner.owner == "MyObject"
    assert len(owner.blocks) == 3
    header = report.header
    assert header.index("Q_SIGNAL void okSignal();") < header.index("okSignalConnect(")
    assert header.index("okSignalConnect(") < header.index("laterSignalConnect(")
    assert "Q_SIGNAL void laterSignal(" not in header
    assert "badConnect" not in header


def test_generate_applies_mapping_overrides(my_object_bridge: Path) -> None:
    report = Orchestrator().generate(
        load_bridge(my_object_bridge), CxxMappings(namespaces={"ObjRust": "other"})
    )

    assert "ObjRust_signalRustNameConnect(::other::ObjCpp& self" in report.header


def test_run_writes_configured_outputs(bridge_builder, my_object_bridge: Path) -> None:
    bridge_builder.config(
        """
        output:
          header: out/signals.h
          source: out/signals.cpp
        """
    )

    report = Orchestrator().run(str(my_object_bridge))

    header_path = bridge_builder.root / "out" / "signals.h"
    source_path = bridge_builder.root / "out" / "signals.cpp"
    assert header_path.read_text(encoding="utf-8") == report.header
    assert source_path.read_text(encoding="utf-8") == report.source
    assert "MyObject::dataChangedConnect(" in report.source


def test_run_uses_explicit_paths(tmp_path: Path, my_object_bridge: Path) -> None:
    header_path = tmp_path / "explicit.h"

    report = Orchestrator().run(str(my_object_bridge), header_path=header_path)

    assert header_path.read_text(encoding="utf-8") == report.header
    assert not (tmp_path / "explicit.cpp").exists()


def test_run_uses_configured_templates(bridge_builder, my_object_bridge: Path) -> None:
    bridge_builder.write(
        "templates/signals/signal_declaration.j2",
        "Q_SIGNAL void {{ signal_ident }}({{ parameters.types_signal }}); // custom",
    )
    bridge_builder.config("templates_dir: templates\n")

    report = Orchestrator().run(str(my_object_bridge))

    assert "Q_SIGNAL void dataChanged(::std::int32_t trivial, ::std::unique_ptr<QColor> opaque); // custom" in report.header


def test_run_does_not_reuse_templates_between_configs(bridge_builder, tmp_path: Path) -> None:
    second_dir = tmp_path / "second"
    second_dir.mkdir()
    first_bridge = bridge_builder.write(
        "first/bridge.yml",
        """
        qobjects:
          - ident: MyObject
            signals:
              - name: ping
        """,
    )
    second_bridge = second_dir / "bridge.yml"
    second_bridge.write_text(first_bridge.read_text(encoding="utf-8"), encoding="utf-8")
    bridge_builder.write(
        "first/templates/signals/signal_declaration.j2",
        "Q_SIGNAL void {{ signal_ident }}(); // first",
    )
    bridge_builder.write("first/.signalgen.yml", "templates_dir: templates\n")
    orchestrator = Orchestrator()

    first = orchestrator.run(str(first_bridge))
    second = orchestrator.run(str(second_bridge))

    assert "Q_SIGNAL void ping(); // first" in first.header
    assert "Q_SIGNAL void ping();\n" in second.header
    assert "// first" not in second.header
