"""Route an argument vector to a builtin or an external program."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from tash.builtins import BuiltinRegistry, CommandOutcome
from tash.errors import UsageError
from tash.launcher import ProcessLauncher

if TYPE_CHECKING:
    from tash.shell import ShellContext


class Dispatcher:
    """Builtins are consulted first; anything else is launched."""

    def __init__(self, registry: BuiltinRegistry, launcher: ProcessLauncher, context: ShellContext) -> None:
        self._registry = registry
        self._launcher = launcher
        self._context = context

    def dispatch(self, argv: list[str]) -> CommandOutcome:
        if not argv:
            return CommandOutcome.CONTINUE

        builtin = self._registry.get(argv[0])
        if builtin is None:
            logger.debug("dispatch.external argv0={}", argv[0])
            return self._launcher.launch(argv)

        logger.debug("dispatch.builtin name={}", builtin.name)
        try:
            return builtin(argv, self._context)
        except UsageError as exc:
            self._context.error(f"tash: {exc}")
        except OSError as exc:
            self._context.error(f"tash: {_describe_os_error(exc)}")
        except ValueError as exc:
            # Paths with an embedded NUL never reach the system call.
            self._context.error(f"tash: {exc}")
        return CommandOutcome.CONTINUE


def _describe_os_error(exc: OSError) -> str:
    reason = exc.strerror or str(exc)
    if exc.filename is not None:
        return f"{reason}: {exc.filename}"
    return reason
