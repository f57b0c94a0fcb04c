"""Assemble the interpreter from its parts."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from loguru import logger
from rich.console import Console

from tash.builtins import BuiltinRegistry, default_registry
from tash.config import Settings
from tash.dispatcher import Dispatcher
from tash.launcher import ProcessLauncher
from tash.loop import InteractionLoop
from tash.reader import LineReader, PromptLineReader, StreamLineReader
from tash.tokenizer import Tokenizer


@dataclass(frozen=True)
class ShellContext:
    """Output streams and registry shared by builtins and the dispatcher."""

    console: Console
    err_console: Console
    registry: BuiltinRegistry

    def error(self, message: str) -> None:
        logger.debug("shell.error message={}", message)
        self.err_console.print(message, markup=False, highlight=False)


def build_context(
    registry: BuiltinRegistry | None = None,
    *,
    console: Console | None = None,
    err_console: Console | None = None,
) -> ShellContext:
    return ShellContext(
        console=console if console is not None else Console(highlight=False),
        err_console=err_console if err_console is not None else Console(stderr=True, highlight=False),
        registry=registry if registry is not None else default_registry(),
    )


def build_shell(
    settings: Settings,
    *,
    stdin: TextIO | None = None,
    context: ShellContext | None = None,
) -> InteractionLoop:
    """Wire reader, tokenizer, dispatcher and loop from settings."""

    context = context if context is not None else build_context()
    stream = stdin if stdin is not None else sys.stdin
    interactive = settings.interactive
    if interactive is None:
        interactive = stdin is None and stream.isatty()

    reader: LineReader
    if interactive:
        reader = PromptLineReader(buffer_size=settings.line_buffer_size)
    else:
        reader = StreamLineReader(stream, context.console, buffer_size=settings.line_buffer_size)

    tokenizer = Tokenizer(delimiters=settings.delimiters, buffer_size=settings.token_buffer_size)
    dispatcher = Dispatcher(context.registry, ProcessLauncher(context.err_console), context)
    logger.debug("shell.build interactive={} builtins={}", interactive, context.registry.names())
    return InteractionLoop(reader, tokenizer, dispatcher, prompt=settings.prompt)
