"""Line readers for the interaction loop."""

from __future__ import annotations

from typing import Protocol, TextIO

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import DummyHistory
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output
from rich.console import Console
from rich.text import Text

from tash.buffers import GrowableBuffer

LINE_BUFFER_SIZE = 1024


class LineReader(Protocol):
    """Reads one line per call and raises ``EOFError`` at end of input."""

    def read_line(self, prompt: str) -> str: ...


class StreamLineReader:
    """Read lines character by character from a text stream."""

    def __init__(
        self,
        stream: TextIO,
        console: Console | None = None,
        *,
        buffer_size: int = LINE_BUFFER_SIZE,
    ) -> None:
        self._stream = stream
        self._console = console
        self._buffer_size = buffer_size

    def read_line(self, prompt: str) -> str:
        if self._console is not None and prompt:
            self._console.print(_prompt_text(prompt), end="")
            self._console.file.flush()

        buffer: GrowableBuffer[str] = GrowableBuffer(self._buffer_size, growth="increment")
        while True:
            char = self._stream.read(1)
            if char == "":
                if len(buffer) == 0:
                    logger.debug("reader.eof")
                    raise EOFError
                # Unterminated final line; the next call reports EOF.
                return buffer.to_text()
            if char == "\n":
                return buffer.to_text()
            buffer.append(char)


class PromptLineReader:
    """Read lines from a terminal through a prompt_toolkit session."""

    def __init__(
        self,
        *,
        buffer_size: int = LINE_BUFFER_SIZE,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        # No history: earlier lines are not recalled.
        self._session: PromptSession[str] = PromptSession(history=DummyHistory(), input=input, output=output)
        self._buffer_size = buffer_size

    def read_line(self, prompt: str) -> str:
        text = self._session.prompt(_prompt_fragments(prompt))
        buffer: GrowableBuffer[str] = GrowableBuffer(self._buffer_size, growth="increment")
        buffer.extend(text)
        return buffer.to_text()


def _split_prompt(prompt: str) -> tuple[str, str]:
    name, sep, rest = prompt.partition(">")
    if not sep:
        return prompt, ""
    return name, sep + rest


def _prompt_text(prompt: str) -> Text:
    name, tail = _split_prompt(prompt)
    return Text.assemble((name, "magenta"), (tail, "red"))


def _prompt_fragments(prompt: str) -> FormattedText:
    name, tail = _split_prompt(prompt)
    fragments = [("ansimagenta", name)]
    if tail:
        fragments.append(("ansired", tail))
    return FormattedText(fragments)
