"""Marshalling of signal parameters into signal, closure and forwarding lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Sequence, Union

from ..mappings import CxxMappings
from ..models import FunctionParameter


@dataclass(frozen=True)
class MemberSelf:
    """Self is the generated QObject itself, reached through ``*this``."""

    ty: str
    ident: ClassVar[str] = "*this"


@dataclass(frozen=True)
class ForeignSelf:
    """Self is an existing C++ QObject passed in as the ``self`` reference."""

    ty: str
    ident: ClassVar[str] = "self"

    @classmethod
    def resolve(cls, qobject_ident: str, mappings: CxxMappings) -> "ForeignSelf":
        return cls(ty=mappings.cxx(qobject_ident))


SelfValue = Union[MemberSelf, ForeignSelf]


@dataclass(frozen=True)
class Parameters:
    """Parameter lines used by the connect helpers.

    ``signal_types`` excludes self and is used for the Q_SIGNAL prototype and the
    lambda's formal parameters. ``closure_types`` starts with ``Self&`` and forms the
    ``::rust::Fn`` signature. ``forwarded_values`` starts with the bare self ident and
    moves every other argument into the callback.
    """

    signal_types: List[str]
    closure_types: List[str]
    forwarded_values: List[str]

    @property
    def types_signal(self) -> str:
        return ", ".join(self.signal_types)

    @property
    def types_closure(self) -> str:
        return ", ".join(self.closure_types)

    @property
    def values_closure(self) -> str:
        return ", ".join(self.forwarded_values)


def parameter_types_and_values(
    parameters: Sequence[FunctionParameter],
    mappings: CxxMappings,
    self_value: SelfValue,
) -> Parameters:
    """Build the parameter lines, raising TypeResolutionError if any type is unknown."""
    signal_types: List[str] = []
    values: List[str] = []
    for parameter in parameters:
        cpp_type = mappings.to_cpp_type(parameter.ty)
        signal_types.append(f"{cpp_type} {parameter.ident}")
        values.append(f"::std::move({parameter.ident})")

    return Parameters(
        signal_types=signal_types,
        closure_types=[f"{self_value.ty}&", *signal_types],
        forwarded_values=[self_value.ident, *values],
    )


__all__ = [
    "ForeignSelf",
    "MemberSelf",
    "Parameters",
    "SelfValue",
    "parameter_types_and_values",
]
