# go_bootstrap/bs_launcher.py
# -*- coding: utf-8 -*-
"""
Process launcher for the bootstrap callable.

The launcher is handed the bootstrap operation instead of discovering it, and
it is the only place where a failed fetch turns into process termination.
"""

import logging
import sys
from typing import Callable, NoReturn, Optional, Sequence

from go_bootstrap.bs_fetch import FetchResult

BootstrapCallable = Callable[[Sequence[str]], FetchResult]


class BootstrapLauncher:
    """Runs a bootstrap callable once and exits the process if it failed."""

    def __init__(
        self,
        bootstrap: BootstrapCallable,
        launcher_logger: Optional[logging.Logger] = None,
    ):
        """
        Initializes the BootstrapLauncher.

        Args:
            bootstrap: Callable taking the raw argument vector and returning
                       a FetchResult.
            launcher_logger: An optional logger instance.
        """
        self.bootstrap = bootstrap
        self.logger = launcher_logger or logging.getLogger(__name__)

    def launch(self, argv: Sequence[str]) -> None:
        """
        Invokes the bootstrap callable with ``argv``.

        Returns normally when the fetch succeeded. Otherwise the diagnostic is
        written to stderr and the process exits with status 1.
        """
        result = self.bootstrap(list(argv))
        if result.ok:
            self.logger.debug("Bootstrap finished successfully.")
            return

        self.logger.debug(f"Bootstrap failed: {result.exit_error}")
        self.terminate(result.diagnostic)

    @staticmethod
    def terminate(diagnostic: str) -> NoReturn:
        if diagnostic:
            sys.stderr.write(
                diagnostic if diagnostic.endswith("\n") else diagnostic + "\n"
            )
            sys.stderr.flush()
        sys.exit(1)
