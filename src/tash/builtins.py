"""Builtin commands and their registry."""

from __future__ import annotations

import enum
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

from tash.errors import DuplicateBuiltinError, RegistryFrozenError, UsageError

if TYPE_CHECKING:
    from tash.shell import ShellContext


class CommandOutcome(enum.Enum):
    """Signal returned by every dispatched command."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


BuiltinHandler = Callable[[list[str], "ShellContext"], CommandOutcome]


@dataclass(frozen=True)
class Builtin:
    """Builtin metadata and handler."""

    name: str
    handler: BuiltinHandler

    def __call__(self, args: list[str], context: ShellContext) -> CommandOutcome:
        return self.handler(args, context)


class BuiltinRegistry:
    """Ordered name to builtin mapping, read-only once frozen."""

    def __init__(self) -> None:
        self._builtins: dict[str, Builtin] = {}
        self._frozen = False

    def register(self, builtin: Builtin) -> None:
        if self._frozen:
            raise RegistryFrozenError(builtin.name)
        if builtin.name in self._builtins:
            raise DuplicateBuiltinError(builtin.name)
        self._builtins[builtin.name] = builtin

    def freeze(self) -> BuiltinRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def has(self, name: str) -> bool:
        return name in self._builtins

    def get(self, name: str) -> Builtin | None:
        return self._builtins.get(name)

    def names(self) -> list[str]:
        return list(self._builtins)


def cd(args: list[str], context: ShellContext) -> CommandOutcome:
    """Change the working directory to ``args[1]``."""

    if len(args) < 2:
        raise UsageError('expected argument to "cd"')
    os.chdir(args[1])
    logger.debug("builtin.cd cwd={}", os.getcwd())
    return CommandOutcome.CONTINUE


HELP_HEADER = (
    "The Amazing SHell:TASH!",
    "Type program names and arguments, and hit enter.",
    "The following are built in:",
)
HELP_FOOTER = "Use the man command for information on other programs."


def help_(args: list[str], context: ShellContext) -> CommandOutcome:
    """Print the banner and the builtin names in registry order."""

    lines = [*HELP_HEADER]
    lines.extend(f"  {name}" for name in context.registry.names())
    lines.append(HELP_FOOTER)
    for line in lines:
        context.console.print(line, markup=False, highlight=False)
    return CommandOutcome.CONTINUE


def exit_(args: list[str], context: ShellContext) -> CommandOutcome:
    return CommandOutcome.TERMINATE


def default_registry() -> BuiltinRegistry:
    registry = BuiltinRegistry()
    registry.register(Builtin(name="cd", handler=cd))
    registry.register(Builtin(name="help", handler=help_))
    registry.register(Builtin(name="exit", handler=exit_))
    return registry.freeze()
