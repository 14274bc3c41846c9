# go_bootstrap/bs_utils.py
# -*- coding: utf-8 -*-
import logging
import sys
from typing import Optional

from settings.config_models import (
    LOG_LEVEL_DEFAULT,
    LOG_PREFIX_DEFAULT,
    BootstrapSettings,
)


def get_bs_logger(
    name: str, settings: Optional[BootstrapSettings] = None
) -> logging.Logger:
    """Creates and configures a logger for bootstrap modules."""
    prefix = settings.log_prefix if settings else LOG_PREFIX_DEFAULT
    level = settings.log_level if settings else LOG_LEVEL_DEFAULT

    logger = logging.getLogger(f"go_bootstrap.{name.lower()}")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            f"{prefix}:{name.upper()} %(levelname)s: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
