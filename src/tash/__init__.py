"""tash - The Amazing SHell."""

from .builtins import BuiltinRegistry, CommandOutcome, default_registry
from .loop import InteractionLoop, LoopState
from .tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "BuiltinRegistry",
    "CommandOutcome",
    "InteractionLoop",
    "LoopState",
    "default_registry",
    "tokenize",
]
