"""Exception types raised while generating signal bindings."""

from __future__ import annotations


class SignalgenError(RuntimeError):
    """Base class for signalgen failures."""


class TypeResolutionError(SignalgenError):
    """Raised when a source type cannot be translated into C++."""

    def __init__(self, source_type: str, reason: str) -> None:
        super().__init__(f"Unable to resolve type `{source_type}`: {reason}")
        self.source_type = source_type
        self.reason = reason


class BridgeError(SignalgenError):
    """Raised when a bridge description cannot be read or is malformed."""


class ConfigError(SignalgenError):
    """Raised when the configuration file cannot be parsed."""


__all__ = ["BridgeError", "ConfigError", "SignalgenError", "TypeResolutionError"]
