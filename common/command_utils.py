# common/command_utils.py
# -*- coding: utf-8 -*-
"""
Utilities for executing external commands and logging what was run.
"""

import logging
import subprocess
from typing import Optional, Sequence

from settings.config_models import SYMBOLS_DEFAULT, BootstrapSettings

module_logger = logging.getLogger(__name__)


def log_message(
    message: str,
    level: str = "info",
    current_logger: Optional[logging.Logger] = None,
    exc_info: bool = False,
) -> None:
    """
    Logs a message at the named level.

    Args:
        message (str): The log message to be recorded.
        level (str): One of "debug", "info", "warning", "error" or
            "critical". Anything else is logged at info.
        current_logger (Optional[logging.Logger]): Logger to use. Falls back
            to the module logger.
        exc_info (bool): Whether to attach exception details.
    """
    effective_logger = current_logger if current_logger else module_logger

    if level == "warning":
        effective_logger.warning(message, exc_info=exc_info)
    elif level == "error":
        effective_logger.error(message, exc_info=exc_info)
    elif level == "critical":
        effective_logger.critical(message, exc_info=exc_info)
    elif level == "debug":
        effective_logger.debug(message, exc_info=exc_info)
    else:
        effective_logger.info(message, exc_info=exc_info)


def run_command_combined(
    command: Sequence[str],
    settings: Optional[BootstrapSettings],
    current_logger: Optional[logging.Logger] = None,
) -> subprocess.CompletedProcess:
    """
    Runs a command to completion and captures stdout and stderr as one stream.

    The child gets no standard input. Its stderr is redirected into its
    stdout pipe, so ``result.stdout`` holds both streams as raw bytes in the
    order the child wrote them and ``result.stderr`` is None. The call blocks
    until the child exits and never raises for a non-zero exit status.

    Args:
        command (Sequence[str]): The program and its arguments.
        settings (Optional[BootstrapSettings]): Supplies the logging symbols.
        current_logger (Optional[logging.Logger]): Logger for progress records.

    Returns:
        subprocess.CompletedProcess: The finished process with combined output
            in ``stdout``.

    Raises:
        OSError: The command could not be started, e.g. FileNotFoundError when
            the executable is not on PATH or PermissionError when it is not
            executable.
    """
    effective_logger = current_logger if current_logger else module_logger
    symbols = settings.symbols if settings and settings.symbols else SYMBOLS_DEFAULT
    command_to_run = list(command)
    command_to_log_str = subprocess.list2cmdline(command_to_run)

    log_message(
        f"{symbols.get('gear', '⚙️')} Executing: {command_to_log_str}",
        "info",
        effective_logger,
    )
    try:
        result = subprocess.run(
            command_to_run,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as e:
        log_message(
            f"{symbols.get('error', '❌')} Could not start `{command_to_log_str}`: {e}",
            "debug",
            effective_logger,
        )
        raise

    output = result.stdout or b""
    log_message(
        f"   `{command_to_log_str}` finished (rc {result.returncode}, {len(output)} bytes of output).",
        "debug",
        effective_logger,
    )
    return result
