# !/usr/bin/env python3
# filename: cljs_go.py
# -*- coding: utf-8 -*-
"""
Entry point for the ClojureScript to Go bootstrap.
"""

import functools
from typing import List, Optional

import click

from go_bootstrap.bootstrap_process import run_bootstrap
from go_bootstrap.bs_launcher import BootstrapLauncher
from go_bootstrap.bs_utils import get_bs_logger
from settings.config_loader import load_settings


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(args):
    """
    Prints the banner and installs goimports with ``go get``.

    Every argument, including anything that looks like an option, is
    accepted and ignored. The exit status is 0 when the fetch succeeds and 1
    when it fails or the go tool cannot be started.
    """
    settings = load_settings()
    launcher = BootstrapLauncher(
        functools.partial(run_bootstrap, settings=settings),
        get_bs_logger("Launcher", settings),
    )
    launcher.launch(args)


def main(argv: Optional[List[str]] = None) -> None:
    cli.main(args=argv, prog_name="cljs-go")


if __name__ == "__main__":
    main()
