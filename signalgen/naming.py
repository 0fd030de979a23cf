"""Identifier derivation for generated QObjects and their signals."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Optional

from .models import CombinedIdent, QObjectDeclaration, SignalDeclaration

_SNAKE_SEPARATOR = re.compile(r"_+([A-Za-z0-9])")


def to_lower_camel_case(ident: str) -> str:
    """Convert a snake_case Rust identifier into lowerCamelCase."""
    stripped = ident.strip("_")
    if not stripped:
        return ident
    camel = _SNAKE_SEPARATOR.sub(lambda match: match.group(1).upper(), stripped)
    return camel[:1].lower() + camel[1:]


def combined_ident_from_rust_function(rust: str, cxx_name: Optional[str] = None) -> CombinedIdent:
    """Build a CombinedIdent, honouring an explicit ``cxx_name`` when one was declared."""
    return CombinedIdent(cpp=cxx_name or to_lower_camel_case(rust), rust=rust)


@dataclass(frozen=True)
class SignalName:
    """Names used when generating the connect helpers for a signal."""

    name: CombinedIdent
    connect_name: CombinedIdent

    @classmethod
    def from_signal(cls, signal: SignalDeclaration) -> "SignalName":
        # TODO: use a separator that cannot collide with user-declared methods.
        return cls(
            name=signal.ident,
            connect_name=CombinedIdent(
                cpp=f"{signal.ident.cpp}Connect",
                rust=f"connect_{signal.ident.rust}",
            ),
        )


@dataclass(frozen=True)
class QObjectName:
    """Names of a generated QObject class."""

    ident: str
    cpp_class: CombinedIdent

    @classmethod
    def from_qobject(cls, qobject: QObjectDeclaration) -> "QObjectName":
        return cls(
            ident=qobject.ident,
            cpp_class=CombinedIdent(cpp=qobject.cxx_name or qobject.ident, rust=qobject.ident),
        )


__all__ = [
    "QObjectName",
    "SignalName",
    "combined_ident_from_rust_function",
    "to_lower_camel_case",
]
