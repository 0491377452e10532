"""Configuration loader for the rastercodec command-line tool."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv
import yaml

from rastercodec.imaging.framebuffer import ACCEPTED_BPP

DEFAULT_CONFIG_PATH = "config/config.yaml"


@dataclass(frozen=True)
class OutputConfig:
    """Where encoded images go and which format is used by default."""

    directory: str
    default_format: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    output: OutputConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _require_mapping(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = _require_key(data, key, key)
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' config must be a mapping")
    return section


def _check_format(fmt: str) -> str:
    fmt = str(fmt).lower()
    if fmt not in ACCEPTED_BPP:
        raise ValueError(f"Unsupported default_format '{fmt}' in output config")
    return fmt


def default_config() -> AppConfig:
    """Built-in configuration used when no config file is given."""
    load_dotenv()
    return AppConfig(
        output=OutputConfig(
            directory=os.environ.get("RASTERCODEC_OUTPUT_DIR", "output/"),
            default_format="tga",
        ),
        log=LoggingConfig(
            level=os.environ.get("RASTERCODEC_LOG_LEVEL", "INFO"),
            log_dir="logs/",
        ),
    )


def load_config(path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load application configuration from a YAML file.

    ``RASTERCODEC_OUTPUT_DIR`` and ``RASTERCODEC_LOG_LEVEL`` (from the
    environment or a ``.env`` file) override the file values.
    """
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    output_section = _require_mapping(data, "output")
    logging_section = _require_mapping(data, "logging")

    output = OutputConfig(
        directory=os.environ.get(
            "RASTERCODEC_OUTPUT_DIR", _require_key(output_section, "directory", "output")
        ),
        default_format=_check_format(_require_key(output_section, "default_format", "output")),
    )

    logging = LoggingConfig(
        level=os.environ.get("RASTERCODEC_LOG_LEVEL", _require_key(logging_section, "level", "logging")),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(output=output, log=logging)


__all__ = ["AppConfig", "LoggingConfig", "OutputConfig", "default_config", "load_config"]
