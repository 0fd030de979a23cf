"""Loading of bridge descriptions (QObjects, signals and mappings) from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import BridgeError
from .mappings import CxxMappings
from .models import Bridge, FunctionParameter, QObjectDeclaration, SignalDeclaration
from .naming import combined_ident_from_rust_function


def load_bridge(path: Path) -> Bridge:
    """Read a bridge description from disk."""
    path = path.expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Bridge description not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise BridgeError(f"Failed to parse {path.name}: {exc}") from exc
    return parse_bridge(data or {})


def parse_bridge(data: Any) -> Bridge:
    """Build a Bridge from an already-decoded mapping."""
    if not isinstance(data, dict):
        raise BridgeError("Bridge description must contain a mapping at the root")

    qobjects = [
        _parse_qobject(entry, index)
        for index, entry in enumerate(_as_list(data.get("qobjects"), "qobjects"))
    ]
    free_signals = []
    for index, entry in enumerate(_as_list(data.get("free_signals"), "free_signals")):
        location = f"free_signals[{index}]"
        entry = _as_mapping(entry, location)
        qobject_ident = _required_str(entry, "qobject", location)
        free_signals.append(_parse_signal(entry, qobject_ident, location))

    return Bridge(
        mappings=parse_mappings(data.get("mappings")),
        qobjects=qobjects,
        free_signals=free_signals,
    )


def parse_mappings(value: Any) -> CxxMappings:
    if value is None:
        return CxxMappings()
    data = _as_mapping(value, "mappings")
    return CxxMappings(
        cxx_names=_as_str_dict(data.get("cxx_names"), "mappings.cxx_names"),
        namespaces=_as_str_dict(data.get("namespaces"), "mappings.namespaces"),
    )


def _parse_qobject(value: Any, index: int) -> QObjectDeclaration:
    location = f"qobjects[{index}]"
    data = _as_mapping(value, location)
    ident = _required_str(data, "ident", location)
    signals = []
    for position, entry in enumerate(_as_list(data.get("signals"), f"{location}.signals")):
        signal_location = f"{location}.signals[{position}]"
        signals.append(_parse_signal(_as_mapping(entry, signal_location), ident, signal_location))
    return QObjectDeclaration(
        ident=ident,
        cxx_name=_as_str(data.get("cxx_name")),
        signals=signals,
    )


def _parse_signal(data: Dict[str, Any], qobject_ident: str, location: str) -> SignalDeclaration:
    name = _required_str(data, "name", location)
    parameters: List[FunctionParameter] = []
    for position, entry in enumerate(_as_list(data.get("parameters"), f"{location}.parameters")):
        parameter_location = f"{location}.parameters[{position}]"
        parameter = _as_mapping(entry, parameter_location)
        parameters.append(
            FunctionParameter(
                ident=_required_str(parameter, "ident", parameter_location),
                ty=_required_str(parameter, "type", parameter_location),
            )
        )
    return SignalDeclaration(
        qobject_ident=qobject_ident,
        ident=combined_ident_from_rust_function(name, _as_str(data.get("cxx_name"))),
        parameters=parameters,
        mutable=_as_bool(data.get("mutable"), True, f"{location}.mutable"),
        safe=_as_bool(data.get("safe"), True, f"{location}.safe"),
        inherit=_as_bool(data.get("inherit"), False, f"{location}.inherit"),
    )


def _as_mapping(value: Any, location: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise BridgeError(f"{location} must be a mapping")
    return value


def _as_list(value: Any, location: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise BridgeError(f"{location} must be a list")
    return value


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _required_str(data: Dict[str, Any], key: str, location: str) -> str:
    value = _as_str(data.get(key))
    if not value:
        raise BridgeError(f"{location} is missing required key `{key}`")
    return value


def _as_bool(value: Any, default: bool, location: str) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise BridgeError(f"{location} must be true or false")
    return value


def _as_str_dict(value: Any, location: str) -> Dict[str, str]:
    if value is None:
        return {}
    data = _as_mapping(value, location)
    return {str(key): str(item) for key, item in data.items()}


__all__ = ["load_bridge", "parse_bridge", "parse_mappings"]
