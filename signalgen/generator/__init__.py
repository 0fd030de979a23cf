"""C++ generators for signal connect helpers."""

from .parameters import ForeignSelf, MemberSelf, Parameters, SelfValue, parameter_types_and_values
from .signals import SignalTemplates, generate_cpp_free_signal, generate_cpp_signals

__all__ = [
    "ForeignSelf",
    "MemberSelf",
    "Parameters",
    "SelfValue",
    "SignalTemplates",
    "generate_cpp_free_signal",
    "generate_cpp_signals",
    "parameter_types_and_values",
]
