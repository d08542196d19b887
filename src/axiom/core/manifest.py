"""
Optional project configuration loaded from axiom.toml.

Example axiom.toml:

    [run]
    extension = "axi"
    enforce_extension = true

    [logging]
    level = "INFO"

The AXIOM_LOG_LEVEL environment variable overrides ``logging.level``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_NAME = "axiom.toml"
LOG_LEVEL_ENV_VAR = "AXIOM_LOG_LEVEL"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ManifestError(Exception):
    """Raised when axiom.toml cannot be read or has invalid values."""


@dataclass
class RunConfig:
    """Source file handling for ``axiom run`` and ``axiom check``."""

    extension: str = "axi"  # without the leading dot
    enforce_extension: bool = True


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class AxiomConfig:
    """Configuration for the axiom CLI. Every section is optional."""

    run: RunConfig = field(default_factory=RunConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Path | None = None  # where it was loaded from, if anywhere


def _normalize_level(value: str, origin: str) -> str:
    level = value.upper().strip()
    if level not in _LOG_LEVELS:
        raise ManifestError(
            f"Invalid log level '{value}' in {origin}. "
            f"Valid values: {', '.join(sorted(_LOG_LEVELS))}"
        )
    return level


def load_config(path: Path) -> AxiomConfig:
    """Load configuration from a TOML file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e

    run_data = data.get("run", {})
    logging_data = data.get("logging", {})

    extension = str(run_data.get("extension", "axi")).lstrip(".")
    if not extension:
        raise ManifestError(f"[run] extension must not be empty in {path}")

    config = AxiomConfig(
        run=RunConfig(
            extension=extension,
            enforce_extension=bool(run_data.get("enforce_extension", True)),
        ),
        logging=LoggingConfig(
            level=_normalize_level(str(logging_data.get("level", "WARNING")), str(path)),
        ),
        path=path,
    )
    logger.debug("Loaded configuration from %s", path)
    return config


def resolve_config(path: Path | None = None, cwd: Path | None = None) -> AxiomConfig:
    """Find and load configuration, then apply environment overrides.

    Resolution order:
    1. The explicit ``path``, if given (must exist)
    2. ``axiom.toml`` in ``cwd`` (defaults to the current directory)
    3. Built-in defaults
    """
    if path is not None:
        if not path.is_file():
            raise ManifestError(f"Config file not found: {path}")
        config = load_config(path)
    else:
        candidate = (cwd or Path.cwd()) / MANIFEST_NAME
        config = load_config(candidate) if candidate.is_file() else AxiomConfig()

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if env_level:
        config.logging.level = _normalize_level(env_level, LOG_LEVEL_ENV_VAR)

    return config
