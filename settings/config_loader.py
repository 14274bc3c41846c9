# settings/config_loader.py
# -*- coding: utf-8 -*-
"""
Configuration loader for the bootstrap.

Settings are resolved in this order, later sources winning:
1. Pydantic model defaults.
2. Environment variables (``CLJS_GO_*``, loaded by BaseSettings).
3. The YAML configuration file, if one is found.

The file is taken from ``CLJS_GO_CONFIG_FILE`` when set, otherwise
``cljs_go.yaml`` in the current working directory. A missing file is normal.
An unreadable or malformed file is reported and skipped, as is any value
that fails validation.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .config_models import BootstrapSettings

module_logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "CLJS_GO_CONFIG_FILE"
CONFIG_FILE_DEFAULT = "cljs_go.yaml"


def resolve_config_path(
    config_file_path: Optional[Union[str, Path]] = None,
) -> Path:
    """Picks the YAML file to read: explicit argument, then env var, then default."""
    if config_file_path:
        return Path(config_file_path)
    from_env = os.environ.get(CONFIG_FILE_ENV_VAR)
    if from_env:
        return Path(from_env)
    return Path.cwd() / CONFIG_FILE_DEFAULT


def _read_yaml_config(
    yaml_config_path: Path, logger_to_use: logging.Logger
) -> Dict[str, Any]:
    """
    Reads a YAML mapping from disk.

    Returns an empty dict when the file is absent, unreadable, unparsable or
    does not hold a mapping. Only the first case is silent.
    """
    if not yaml_config_path.is_file():
        logger_to_use.debug(
            f"Configuration file '{yaml_config_path}' not found. Using defaults and environment variables."
        )
        return {}

    try:
        with open(yaml_config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger_to_use.warning(
            f"Could not parse YAML config file '{yaml_config_path}': {e}. Using defaults and environment variables."
        )
        return {}
    except IOError as e:
        logger_to_use.warning(
            f"Could not read config file '{yaml_config_path}': {e}. Using defaults and environment variables."
        )
        return {}

    if yaml_data is None:
        return {}
    if not isinstance(yaml_data, dict):
        logger_to_use.warning(
            f"Config file '{yaml_config_path}' does not contain a valid YAML dictionary. Ignoring."
        )
        return {}

    logger_to_use.debug(f"Loaded configuration from {yaml_config_path}")
    return yaml_data


def _build_settings(
    overrides: Dict[str, Any], logger_to_use: logging.Logger
) -> BootstrapSettings:
    """
    Validates ``overrides`` on top of the environment.

    Fields that fail validation are reported once and replaced by their
    model defaults, so a bad value never stops the bootstrap.
    """
    values = dict(overrides)
    for _ in range(len(BootstrapSettings.model_fields) + 1):
        try:
            return BootstrapSettings(**values)
        except ValidationError as e:
            invalid = sorted(
                {str(error["loc"][0]) for error in e.errors() if error.get("loc")}
                & set(BootstrapSettings.model_fields)
            )
            if not invalid:
                break
            logger_to_use.warning(
                f"Ignoring invalid configuration for {', '.join(invalid)}; using defaults. {e}"
            )
            for field_name in invalid:
                values[field_name] = BootstrapSettings.model_fields[
                    field_name
                ].get_default(call_default_factory=True)
    return BootstrapSettings.model_construct()


def load_settings(
    config_file_path: Optional[Union[str, Path]] = None,
    current_logger: Optional[logging.Logger] = None,
) -> BootstrapSettings:
    """
    Loads bootstrap settings from defaults, the environment and YAML.

    Never fails: unusable sources and invalid values are logged as warnings
    and the affected settings keep their defaults.

    Args:
        config_file_path: Optional explicit path to the YAML file.
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        A validated BootstrapSettings instance.
    """
    logger_to_use = current_logger if current_logger else module_logger

    current_values_dict = _build_settings({}, logger_to_use).model_dump()

    yaml_data = _read_yaml_config(
        resolve_config_path(config_file_path), logger_to_use
    )
    for key, value in yaml_data.items():
        if isinstance(value, dict) and isinstance(
            current_values_dict.get(key), dict
        ):
            current_values_dict[key] = {**current_values_dict[key], **value}
        elif value is not None:
            current_values_dict[key] = value

    return _build_settings(current_values_dict, logger_to_use)
