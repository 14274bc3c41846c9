# go_bootstrap/bootstrap_process.py
# -*- coding: utf-8 -*-
"""
The bootstrap step run before ClojureScript to Go translation.

``run_bootstrap`` announces the tool on stdout and then makes sure goimports
is installed by running ``go get``. It never ends the process itself; the
FetchResult goes back to the launcher, which owns that decision.
"""

import logging
from typing import Optional, Sequence

from go_bootstrap.bs_fetch import GOIMPORTS_PACKAGE, FetchResult, fetch_dependency
from go_bootstrap.bs_utils import get_bs_logger
from settings.config_loader import load_settings
from settings.config_models import BootstrapSettings

BANNER = "ClojureScript to Go [go]"


def run_bootstrap(
    args: Sequence[str],
    settings: Optional[BootstrapSettings] = None,
    current_logger: Optional[logging.Logger] = None,
) -> FetchResult:
    """
    Prints the banner, then fetches goimports.

    Args:
        args: Raw command-line tokens. Accepted so any launcher can pass its
              argument vector through; they do not influence the run.
        settings: Bootstrap settings. Loaded from the environment and config
                  file when not given.
        current_logger: An optional logger instance. If not provided, a
                        default bootstrap logger will be created.

    Returns:
        The FetchResult of the single ``go get`` attempt.
    """
    effective_settings = settings or load_settings()
    effective_logger = current_logger or get_bs_logger(
        "Fetch", effective_settings
    )
    symbols = effective_settings.symbols

    print(BANNER, flush=True)

    effective_logger.info(
        f"{symbols.get('package', '')} Ensuring {GOIMPORTS_PACKAGE} is installed..."
    )
    result = fetch_dependency(effective_settings, current_logger=effective_logger)

    if result.ok:
        effective_logger.info(
            f"{symbols.get('success', '')} {GOIMPORTS_PACKAGE} is available."
        )
    else:
        effective_logger.debug(
            f"{symbols.get('error', '')} {result.exit_error}"
        )
    return result
