# go_bootstrap/bs_fetch.py
# -*- coding: utf-8 -*-
"""
Fetches the goimports tool with ``go get``.

The outcome is reported as a FetchResult instead of being raised, so the
caller decides what a failure means for the process. A non-zero exit and a
command that never started are both failures. They are told apart by the
type of ``FetchResult.exit_error``.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence

from common.command_utils import run_command_combined
from settings.config_models import BootstrapSettings

GOIMPORTS_PACKAGE = "code.google.com/p/go.tools/cmd/goimports"
FETCH_SUBCOMMAND = "get"


class BootstrapError(Exception):
    """Base class for bootstrap failures."""

    def __init__(self, message: str, command: Sequence[str]):
        super().__init__(message)
        self.command = list(command)


class LaunchFailure(BootstrapError):
    """The fetch command could not be started at all."""

    def __init__(self, command: Sequence[str], cause: OSError):
        super().__init__(
            f"Could not start '{subprocess.list2cmdline(list(command))}': {cause}",
            command,
        )
        self.cause = cause


class FetchFailure(BootstrapError):
    """The fetch command ran and exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, output: bytes):
        super().__init__(
            f"'{subprocess.list2cmdline(list(command))}' exited with status {returncode}",
            command,
        )
        self.returncode = returncode
        self.output = output


@dataclass(frozen=True)
class FetchResult:
    """Combined output of one fetch attempt and the error, if it failed."""

    combined_output: bytes
    exit_error: Optional[BootstrapError] = None

    @property
    def ok(self) -> bool:
        return self.exit_error is None

    @property
    def diagnostic(self) -> str:
        """Text to report for a failed fetch; empty on success."""
        if self.exit_error is None:
            return ""
        if isinstance(self.exit_error, FetchFailure):
            return self.combined_output.decode("utf-8", errors="replace")
        return str(self.exit_error)


def build_fetch_command(go_command: str) -> List[str]:
    return [go_command, FETCH_SUBCOMMAND, GOIMPORTS_PACKAGE]


def fetch_dependency(
    settings: BootstrapSettings,
    current_logger: Optional[logging.Logger] = None,
) -> FetchResult:
    """
    Runs ``go get`` for goimports once and classifies the outcome.

    Args:
        settings: Supplies the go executable and logging symbols.
        current_logger: Optional logger for progress records.

    Returns:
        FetchResult with ``exit_error`` set if and only if the command could
        not be started or exited with a non-zero status.
    """
    command = build_fetch_command(settings.go_command)
    try:
        completed = run_command_combined(
            command, settings, current_logger=current_logger
        )
    except OSError as e:
        return FetchResult(b"", LaunchFailure(command, e))

    output = completed.stdout or b""
    if completed.returncode != 0:
        return FetchResult(
            output, FetchFailure(command, completed.returncode, output)
        )
    return FetchResult(output)
