"""Growable buffers backing the line reader and the tokenizer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Literal, TypeVar

from loguru import logger

from tash.errors import AllocationError

T = TypeVar("T")

GrowthPolicy = Literal["double", "increment"]


class GrowableBuffer(Generic[T]):
    """Append-only sequence with an explicit capacity.

    Storage is preallocated up to ``capacity``. When an append overflows it,
    the capacity doubles (``double``) or grows by the initial capacity
    (``increment``) and the items already stored are kept. Running out of
    memory while growing raises ``AllocationError``.
    """

    def __init__(self, initial_capacity: int, growth: GrowthPolicy = "double") -> None:
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        self._initial_capacity = initial_capacity
        self._growth = growth
        self._length = 0
        self._slots: list[T | None] = self._allocate(initial_capacity)

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def append(self, item: T) -> None:
        if self._length >= len(self._slots):
            self._grow()
        self._slots[self._length] = item
        self._length += 1

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.append(item)

    def to_list(self) -> list[T]:
        return [item for item in self]

    def to_text(self) -> str:
        """Join a buffer of characters into a string."""
        return "".join(str(item) for item in self)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for index in range(self._length):
            yield self._slots[index]  # type: ignore[misc]

    def _next_capacity(self) -> int:
        if self._growth == "increment":
            return len(self._slots) + self._initial_capacity
        return len(self._slots) * 2

    def _grow(self) -> None:
        new_capacity = self._next_capacity()
        logger.debug("buffer.grow from={} to={}", len(self._slots), new_capacity)
        slots = self._allocate(new_capacity)
        slots[: self._length] = self._slots[: self._length]
        self._slots = slots

    @staticmethod
    def _allocate(capacity: int) -> list[T | None]:
        try:
            return [None] * capacity
        except MemoryError as exc:
            raise AllocationError(f"cannot allocate buffer of {capacity} slots") from exc
