"""Configuration loading for signalgen (.signalgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .bridge import parse_mappings
from .errors import BridgeError, ConfigError
from .mappings import CxxMappings

CONFIG_FILE_NAME = ".signalgen.yml"


@dataclass
class OutputConfig:
    """Where generated header and source text is written."""

    header: Optional[Path] = None
    source: Optional[Path] = None


@dataclass
class LoggingConfig:
    """Logging settings from .signalgen.yml."""

    verbose: bool = False
    log_file: Optional[Path] = None


@dataclass
class SignalgenConfig:
    """Represents the high-level settings defined in .signalgen.yml."""

    root: Path
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    mappings: CxxMappings = field(default_factory=CxxMappings)
    templates_dir: Optional[Path] = None


def load_config(config_path: Path) -> SignalgenConfig:
    """Load configuration from disk, falling back to defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SignalgenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    output_data = _as_dict(data.get("output"))
    output = OutputConfig(
        header=_as_path(root, output_data.get("header")),
        source=_as_path(root, output_data.get("source")),
    )

    logging_data = _as_dict(data.get("logging"))
    logging_config = LoggingConfig(
        verbose=_as_bool(logging_data.get("verbose")) or False,
        log_file=_as_path(root, logging_data.get("log_file")),
    )

    try:
        mappings = parse_mappings(data.get("mappings"))
    except BridgeError as exc:
        raise ConfigError(f"Invalid mappings in {CONFIG_FILE_NAME}: {exc}") from exc

    return SignalgenConfig(
        root=root,
        output=output,
        logging=logging_config,
        mappings=mappings,
        templates_dir=_as_path(root, data.get("templates_dir")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_path(root: Path, value: Any) -> Optional[Path]:
    if not isinstance(value, str) or not value.strip():
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILE_NAME", "LoggingConfig", "OutputConfig", "SignalgenConfig", "load_config"]
