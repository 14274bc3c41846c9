# go_bootstrap/__init__.py
# -*- coding: utf-8 -*-
"""
Bootstrap for the ClojureScript to Go toolchain.

Makes sure the goimports tool is installed before translation starts.
"""

from go_bootstrap.bootstrap_process import BANNER, run_bootstrap
from go_bootstrap.bs_fetch import (
    GOIMPORTS_PACKAGE,
    BootstrapError,
    FetchFailure,
    FetchResult,
    LaunchFailure,
)
from go_bootstrap.bs_launcher import BootstrapLauncher

__all__ = [
    "BANNER",
    "GOIMPORTS_PACKAGE",
    "BootstrapError",
    "BootstrapLauncher",
    "FetchFailure",
    "FetchResult",
    "LaunchFailure",
    "run_bootstrap",
]
