from __future__ import annotations

import io

import pytest
from rich.console import Console

from tash.builtins import default_registry
from tash.logging_utils import configure_logging
from tash.shell import ShellContext, build_context


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    configure_logging("WARNING")


def _capture_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def context() -> ShellContext:
    return build_context(default_registry(), console=_capture_console(), err_console=_capture_console())
