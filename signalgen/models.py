"""Core data models shared across signalgen components."""

from dataclasses import dataclass, field
from typing import List, Optional

from .mappings import CxxMappings


@dataclass(frozen=True)
class CombinedIdent:
    """Pair of identifiers for the same item on the C++ and Rust sides."""

    cpp: str
    rust: str


@dataclass(frozen=True)
class FunctionParameter:
    """A named, typed parameter of a signal."""

    ident: str
    ty: str


@dataclass(frozen=True)
class SignalDeclaration:
    """A signal declared on a QObject, as handed over by the parser."""

    qobject_ident: str
    ident: CombinedIdent
    parameters: List[FunctionParameter] = field(default_factory=list)
    mutable: bool = True
    safe: bool = True
    inherit: bool = False


@dataclass(frozen=True)
class QObjectDeclaration:
    """A generated QObject together with the signals it declares."""

    ident: str
    cxx_name: Optional[str] = None
    signals: List[SignalDeclaration] = field(default_factory=list)


@dataclass
class Bridge:
    """Everything declared in a single bridge description."""

    mappings: CxxMappings = field(default_factory=CxxMappings)
    qobjects: List[QObjectDeclaration] = field(default_factory=list)
    free_signals: List[SignalDeclaration] = field(default_factory=list)
