"""Read, tokenize and dispatch until told to stop."""

from __future__ import annotations

import enum

from loguru import logger

from tash.builtins import CommandOutcome
from tash.dispatcher import Dispatcher
from tash.reader import LineReader
from tash.tokenizer import Tokenizer

DEFAULT_PROMPT = "tash> "


class LoopState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class InteractionLoop:
    """Two-state driver: RUNNING until ``exit`` or end of input, then STOPPED."""

    def __init__(
        self,
        reader: LineReader,
        tokenizer: Tokenizer,
        dispatcher: Dispatcher,
        *,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self._reader = reader
        self._tokenizer = tokenizer
        self._dispatcher = dispatcher
        self._prompt = prompt
        self._state = LoopState.RUNNING

    @property
    def state(self) -> LoopState:
        return self._state

    def step(self) -> LoopState:
        """Run one iteration and return the resulting state."""

        if self._state is LoopState.STOPPED:
            return self._state

        try:
            line = self._reader.read_line(self._prompt)
        except EOFError:
            logger.debug("loop.stop reason=eof")
            self._state = LoopState.STOPPED
            return self._state

        argv = self._tokenizer.split(line)
        if self._dispatcher.dispatch(argv) is CommandOutcome.TERMINATE:
            logger.debug("loop.stop reason=terminate")
            self._state = LoopState.STOPPED
        return self._state

    def run(self) -> None:
        while self.step() is LoopState.RUNNING:
            pass
