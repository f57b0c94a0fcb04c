"""External program launcher."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from loguru import logger
from rich.console import Console

from tash.builtins import CommandOutcome


@dataclass(frozen=True)
class ExitStatus:
    """How a child process terminated."""

    code: int | None = None
    signal: int | None = None

    @classmethod
    def from_returncode(cls, returncode: int) -> ExitStatus:
        if returncode < 0:
            return cls(signal=-returncode)
        return cls(code=returncode)

    @property
    def exited(self) -> bool:
        return self.code is not None

    @property
    def signaled(self) -> bool:
        return self.signal is not None

    @property
    def success(self) -> bool:
        return self.code == 0


class ProcessLauncher:
    """Spawn a program, block until it terminates, and report launch failures."""

    def __init__(self, err_console: Console) -> None:
        self._err_console = err_console

    def launch(self, argv: list[str]) -> CommandOutcome:
        status = self.run(argv)
        if status is not None:
            logger.debug("launcher.exit argv0={} code={} signal={}", argv[0], status.code, status.signal)
        return CommandOutcome.CONTINUE

    def run(self, argv: list[str]) -> ExitStatus | None:
        """Run ``argv`` to completion. Returns ``None`` when it could not be started."""

        try:
            # Argument vector is passed verbatim, no shell.
            process = subprocess.Popen(argv)  # noqa: S603
        except (OSError, ValueError) as exc:
            self._report(argv[0], exc)
            return None
        logger.debug("launcher.spawn argv={} pid={}", argv, process.pid)
        return ExitStatus.from_returncode(self._wait(process))

    @staticmethod
    def _wait(process: subprocess.Popen[bytes]) -> int:
        while True:
            try:
                return process.wait()
            except InterruptedError:
                continue

    def _report(self, program: str, exc: OSError | ValueError) -> None:
        reason = getattr(exc, "strerror", None) or str(exc)
        logger.debug("launcher.failed program={} error={!r}", program, exc)
        self._err_console.print(f"tash: {program}: {reason}", markup=False, highlight=False)
