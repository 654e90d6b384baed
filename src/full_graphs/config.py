"""
Configuration for Full Graph Generators.
========================================

This module contains the configuration constants used by the edge
buffer and the generators, and a loader for YAML overrides. The
shipped defaults live in ``default_config.yaml`` next to this module.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import InvalidArgument

CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "default_config.yaml"

# Integer type of edge sequences
EDGE_DTYPE = "int64"

# Ceiling on the number of integers one edge buffer may hold
MAX_EDGE_VALUES = 1_000_000_000
MAX_EDGE_VALUES_ENV = "FULL_GRAPHS_MAX_EDGE_VALUES"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlay ``override`` onto a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load the generator configuration.

    Parameters
    ----------
    config_path : str or Path, optional
        YAML file whose values override the shipped defaults

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary with ``buffer`` and ``logging`` sections

    Examples
    --------
    >>> config = load_config()
    >>> config["buffer"]["dtype"]
    'int64'
    """
    with open(DEFAULT_CONFIG_PATH, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config = _merge(config, yaml.safe_load(f) or {})

    return config


def get_max_edge_values() -> int:
    """
    Return the active buffer ceiling.

    The ``FULL_GRAPHS_MAX_EDGE_VALUES`` environment variable wins over
    ``buffer.max_edge_values`` in the YAML config.

    Raises
    ------
    InvalidArgument
        If the environment variable is not an integer
    """
    value = os.environ.get(MAX_EDGE_VALUES_ENV)
    if value is None:
        return int(load_config().get("buffer", {}).get("max_edge_values", MAX_EDGE_VALUES))
    try:
        return int(value)
    except ValueError as e:
        logger.error(f"Invalid {MAX_EDGE_VALUES_ENV} value: {value!r}")
        raise InvalidArgument(
            f"{MAX_EDGE_VALUES_ENV} must be an integer, got {value!r}"
        ) from e


def get_edge_dtype() -> str:
    """Return the integer type of edge buffers (``buffer.dtype`` in the config)."""
    return str(load_config().get("buffer", {}).get("dtype", EDGE_DTYPE))


def configure_logging(
    level: Optional[Union[int, str]] = None,
    fmt: Optional[str] = None,
    config_path: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    The library never installs handlers on import; applications call
    this (or configure ``logging`` themselves) to see generator output.
    Level and format default to the ``logging`` section of the config.
    """
    if level is None or fmt is None:
        settings = load_config(config_path).get("logging", {})
        level = level if level is not None else settings.get("level", "INFO")
        fmt = fmt if fmt is not None else settings.get("format", LOG_FORMAT)

    logger = logging.getLogger("full_graphs")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    return logger


__all__ = [
    "CONFIG_DIR",
    "DEFAULT_CONFIG_PATH",
    "EDGE_DTYPE",
    "MAX_EDGE_VALUES",
    "MAX_EDGE_VALUES_ENV",
    "LOG_FORMAT",
    "load_config",
    "get_max_edge_values",
    "get_edge_dtype",
    "configure_logging",
]
