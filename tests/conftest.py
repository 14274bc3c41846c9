# tests/conftest.py
import os
import shlex
import stat
import sys
from pathlib import Path
from typing import List

import pytest

from settings.config_models import BootstrapSettings


class GoStub:
    """An executable shell script standing in for the go tool."""

    def __init__(self, path: Path, invocations: Path):
        self.path = path
        self.invocations = invocations

    def calls(self) -> List[str]:
        """One entry per run, holding the arguments the stub received."""
        if not self.invocations.exists():
            return []
        return self.invocations.read_text().splitlines()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep host CLJS_GO_* variables and config files out of the tests."""
    for key in list(os.environ):
        if key.startswith("CLJS_GO_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return BootstrapSettings()


@pytest.fixture
def make_go_stub(tmp_path):
    if sys.platform == "win32":
        pytest.skip("go stubs are POSIX shell scripts")

    def _make(body: str = "", exit_code: int = 0, name: str = "go") -> GoStub:
        script = tmp_path / name
        invocations = tmp_path / f"{name}.invocations"
        script.write_text(
            "#!/bin/sh\n"
            f'echo "$*" >> {shlex.quote(str(invocations))}\n'
            f"{body}\n"
            f"exit {exit_code}\n"
        )
        script.chmod(
            script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
        )
        return GoStub(script, invocations)

    return _make
