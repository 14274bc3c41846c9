# -*- coding: utf-8 -*-
"""
Tests for the bootstrap launcher.
"""

from unittest.mock import MagicMock

import pytest

from go_bootstrap.bs_fetch import FetchFailure, FetchResult, LaunchFailure
from go_bootstrap.bs_launcher import BootstrapLauncher


def _failed(output: bytes) -> FetchResult:
    return FetchResult(output, FetchFailure(["go", "get", "x"], 1, output))


class TestBootstrapLauncher:
    """Tests for the BootstrapLauncher class."""

    def test_init(self):
        bootstrap = MagicMock()
        logger = MagicMock()

        launcher = BootstrapLauncher(bootstrap, logger)

        assert launcher.bootstrap is bootstrap
        assert launcher.logger is logger

    def test_launch_success_returns(self, capsys):
        bootstrap = MagicMock(return_value=FetchResult(b"go: downloading"))

        assert BootstrapLauncher(bootstrap).launch(["a", "b"]) is None

        bootstrap.assert_called_once_with(["a", "b"])
        assert capsys.readouterr().err == ""

    def test_launch_passes_argv_as_list(self):
        bootstrap = MagicMock(return_value=FetchResult(b""))

        BootstrapLauncher(bootstrap).launch(("x",))

        bootstrap.assert_called_once_with(["x"])

    def test_launch_fetch_failure_exits_with_output(self, capsys):
        bootstrap = MagicMock(return_value=_failed(b"network unreachable"))

        with pytest.raises(SystemExit) as excinfo:
            BootstrapLauncher(bootstrap).launch([])

        assert excinfo.value.code == 1
        assert capsys.readouterr().err == "network unreachable\n"
        bootstrap.assert_called_once()

    def test_launch_keeps_existing_trailing_newline(self, capsys):
        bootstrap = MagicMock(return_value=_failed(b"line one\nline two\n"))

        with pytest.raises(SystemExit):
            BootstrapLauncher(bootstrap).launch([])

        assert capsys.readouterr().err == "line one\nline two\n"

    def test_launch_empty_output_exits_silently(self, capsys):
        bootstrap = MagicMock(return_value=_failed(b""))

        with pytest.raises(SystemExit) as excinfo:
            BootstrapLauncher(bootstrap).launch([])

        assert excinfo.value.code == 1
        assert capsys.readouterr().err == ""

    def test_launch_launch_failure_exits_with_description(self, capsys):
        cause = FileNotFoundError(2, "No such file or directory", "go")
        bootstrap = MagicMock(
            return_value=FetchResult(b"", LaunchFailure(["go", "get", "x"], cause))
        )

        with pytest.raises(SystemExit) as excinfo:
            BootstrapLauncher(bootstrap).launch([])

        assert excinfo.value.code == 1
        assert capsys.readouterr().err == (
            "Could not start 'go get x': [Errno 2] No such file or directory: 'go'\n"
        )
