"""C++ generation for signals and their closure-based connect helpers."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..fragments import CppFragment, CppHeaderFragment, CppPairFragment, GeneratedCppBlocks
from ..logging import get_logger, owner_logger
from ..mappings import CxxMappings
from ..models import SignalDeclaration
from ..naming import QObjectName, SignalName
from .parameters import ForeignSelf, MemberSelf, Parameters, SelfValue, parameter_types_and_values

_DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

logger = get_logger("generator.signals")


class SignalTemplates:
    """Renders signal fragments from the jinja2 templates under ``signals/``."""

    FREE_HEADER = "signals/free_connect_header.j2"
    FREE_SOURCE = "signals/free_connect_source.j2"
    SIGNAL_DECLARATION = "signals/signal_declaration.j2"
    MEMBER_HEADER = "signals/member_connect_header.j2"
    MEMBER_SOURCE = "signals/member_connect_source.j2"

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render(
        self,
        template_name: str,
        *,
        qobject_ident: str,
        names: SignalName,
        parameters: Parameters,
        self_value: SelfValue,
    ) -> str:
        template = self._env.get_template(template_name)
        return template.render(
            qobject_ident=qobject_ident,
            signal_ident=names.name.cpp,
            connect_ident=names.connect_name.cpp,
            parameters=parameters,
            self_value=self_value,
        )

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        if str(_DEFAULT_TEMPLATES_DIR) not in directories:
            directories.append(str(_DEFAULT_TEMPLATES_DIR))
        return Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )


@lru_cache(maxsize=1)
def default_templates() -> SignalTemplates:
    return SignalTemplates()


def generate_cpp_free_signal(
    signal: SignalDeclaration,
    mappings: CxxMappings,
    *,
    templates: SignalTemplates | None = None,
) -> CppFragment:
    """Generate a free connect helper for a signal on an existing C++ QObject.

    The helper is a standalone function named ``<QObject>_<connectName>`` that takes
    the QObject by reference, eg ``QPushButton_clickedConnect(QPushButton& self, ...)``.
    """
    templates = templates or default_templates()
    names = SignalName.from_signal(signal)
    self_value = ForeignSelf.resolve(signal.qobject_ident, mappings)
    parameters = parameter_types_and_values(signal.parameters, mappings, self_value)
    owner_logger(logger, self_value.ty).debug(
        "Generating free signal %s with %d parameter(s)", names.name.cpp, len(signal.parameters)
    )

    context: Dict[str, object] = {
        "qobject_ident": signal.qobject_ident,
        "names": names,
        "parameters": parameters,
        "self_value": self_value,
    }
    return CppPairFragment(
        header=templates.render(SignalTemplates.FREE_HEADER, **context),
        source=templates.render(SignalTemplates.FREE_SOURCE, **context),
    )


def generate_cpp_signals(
    signals: Iterable[SignalDeclaration],
    qobject_idents: QObjectName,
    mappings: CxxMappings,
    *,
    templates: SignalTemplates | None = None,
) -> GeneratedCppBlocks:
    """Generate Q_SIGNAL declarations and connect helpers for a generated QObject.

    Fragments follow the declared order of ``signals``. A signal that is not inherited
    gets its ``Q_SIGNAL`` declaration right before its connect pair; inherited signals
    already exist on the base class and only get the pair.
    """
    templates = templates or default_templates()
    generated = GeneratedCppBlocks()
    qobject_ident = qobject_idents.cpp_class.cpp
    self_value = MemberSelf(ty=qobject_ident)
    log = owner_logger(logger, qobject_ident)

    for signal in signals:
        names = SignalName.from_signal(signal)
        parameters = parameter_types_and_values(signal.parameters, mappings, self_value)
        log.debug("Generating signal %s (inherit=%s)", names.name.cpp, signal.inherit)

        context: Dict[str, object] = {
            "qobject_ident": qobject_ident,
            "names": names,
            "parameters": parameters,
            "self_value": self_value,
        }
        if not signal.inherit:
            generated.append(
                CppHeaderFragment(
                    header=templates.render(SignalTemplates.SIGNAL_DECLARATION, **context)
                )
            )
        generated.append(
            CppPairFragment(
                header=templates.render(SignalTemplates.MEMBER_HEADER, **context),
                source=templates.render(SignalTemplates.MEMBER_SOURCE, **context),
            )
        )

    return generated


__all__ = ["SignalTemplates", "default_templates", "generate_cpp_free_signal", "generate_cpp_signals"]
