"""Whitespace tokenizer for command lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from tash.buffers import GrowableBuffer

DEFAULT_DELIMITERS = " \t\r\n\a"
TOKEN_BUFFER_SIZE = 64


def _token_pattern(delimiters: str) -> re.Pattern[str]:
    if not delimiters:
        raise ValueError("delimiters must not be empty")
    return re.compile(f"[^{re.escape(delimiters)}]+")


@dataclass(frozen=True)
class Tokenizer:
    """Split lines on runs of delimiter characters.

    There is no quoting, escaping or substitution: a token is exactly a
    maximal run of non-delimiter characters.
    """

    delimiters: str = DEFAULT_DELIMITERS
    buffer_size: int = TOKEN_BUFFER_SIZE
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_pattern", _token_pattern(self.delimiters))

    def split(self, line: str) -> list[str]:
        tokens: GrowableBuffer[str] = GrowableBuffer(self.buffer_size)
        for match in self._pattern.finditer(line):
            tokens.append(match.group(0))
        return tokens.to_list()


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(line: str, delimiters: str = DEFAULT_DELIMITERS, buffer_size: int = TOKEN_BUFFER_SIZE) -> list[str]:
    """Split one line into an argument vector."""

    if delimiters == DEFAULT_DELIMITERS and buffer_size == TOKEN_BUFFER_SIZE:
        return _DEFAULT_TOKENIZER.split(line)
    return Tokenizer(delimiters=delimiters, buffer_size=buffer_size).split(line)
