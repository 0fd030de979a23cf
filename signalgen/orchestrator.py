"""Pipeline orchestration: load a bridge, generate signal code, write the results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .bridge import load_bridge
from .config import SignalgenConfig, load_config
from .errors import TypeResolutionError
from .fragments import GeneratedCppBlocks
from .generator.signals import SignalTemplates, generate_cpp_free_signal, generate_cpp_signals
from .logging import get_logger, owner_logger
from .mappings import CxxMappings
from .models import Bridge
from .naming import QObjectName, SignalName
from .writer import render_header, render_source


@dataclass
class GeneratedOwner:
    """Fragments generated for one owner: a generated QObject or a free signal."""

    owner: str
    blocks: GeneratedCppBlocks


@dataclass
class GenerationFailure:
    """A signal or free signal whose generation was aborted by a type-resolution failure."""

    owner: str
    message: str


@dataclass
class GenerationReport:
    """Result of a generation run over a whole bridge."""

    generated: List[GeneratedOwner] = field(default_factory=list)
    errors: List[GenerationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def header(self) -> str:
        return render_header(item.blocks for item in self.generated)

    @property
    def source(self) -> str:
        return render_source(item.blocks for item in self.generated)


class Orchestrator:
    """Coordinates loading, generation and writing for the ``generate`` command."""

    def __init__(self, templates: SignalTemplates | None = None) -> None:
        self.templates = templates
        self.logger = get_logger("orchestrator")

    def generate(
        self,
        bridge: Bridge,
        mappings: CxxMappings | None = None,
        *,
        templates: SignalTemplates | None = None,
    ) -> GenerationReport:
        """Generate every QObject and free signal of ``bridge``.

        Each signal is generated on its own, so a type that fails to resolve only drops
        the fragments of that signal; its siblings on the same QObject are kept.
        """
        effective = bridge.mappings.merged(mappings) if mappings else bridge.mappings
        templates = templates or self.templates
        report = GenerationReport()

        for qobject in bridge.qobjects:
            idents = QObjectName.from_qobject(qobject)
            owner = idents.cpp_class.cpp
            blocks = GeneratedCppBlocks()
            for signal in qobject.signals:
                try:
                    blocks.extend(
                        generate_cpp_signals([signal], idents, effective, templates=templates)
                    )
                except TypeResolutionError as exc:
                    self._record_failure(report, f"{owner}::{signal.ident.cpp}", exc)
            if not blocks:
                continue
            owner_logger(self.logger, owner).debug("Generated %d fragment(s)", len(blocks))
            report.generated.append(GeneratedOwner(owner=owner, blocks=blocks))

        for signal in bridge.free_signals:
            owner = f"{signal.qobject_ident}_{SignalName.from_signal(signal).connect_name.cpp}"
            try:
                fragment = generate_cpp_free_signal(signal, effective, templates=templates)
            except TypeResolutionError as exc:
                self._record_failure(report, owner, exc)
                continue
            report.generated.append(
                GeneratedOwner(owner=owner, blocks=GeneratedCppBlocks(methods=[fragment]))
            )

        return report

    def run(
        self,
        bridge_path: str,
        *,
        config_path: str | None = None,
        header_path: Path | None = None,
        source_path: Path | None = None,
        config: Optional[SignalgenConfig] = None,
    ) -> GenerationReport:
        """Load the bridge, generate code and write any configured outputs."""
        path = Path(bridge_path).expanduser().resolve()
        self.logger.info("Starting generation for %s", path)
        if config is None:
            config = load_config(Path(config_path) if config_path else path.parent)
        templates = self.templates
        if templates is None and config.templates_dir is not None:
            templates = SignalTemplates(config.templates_dir)

        bridge = load_bridge(path)
        self.logger.debug(
            "Bridge declares %d QObject(s) and %d free signal(s)",
            len(bridge.qobjects),
            len(bridge.free_signals),
        )
        report = self.generate(bridge, config.mappings, templates=templates)

        header_target = header_path or config.output.header
        source_target = source_path or config.output.source
        if header_target is not None:
            self._write(header_target, report.header)
        if source_target is not None:
            self._write(source_target, report.source)

        self.logger.info(
            "Generated %d owner(s) with %d failure(s)", len(report.generated), len(report.errors)
        )
        return report

    def _record_failure(
        self, report: GenerationReport, owner: str, exc: TypeResolutionError
    ) -> None:
        self.logger.error("Skipping %s: %s", owner, exc)
        report.errors.append(GenerationFailure(owner=owner, message=str(exc)))

    def _write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        self.logger.info("Wrote %s", path)


__all__ = ["GeneratedOwner", "GenerationFailure", "GenerationReport", "Orchestrator"]
