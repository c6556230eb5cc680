from __future__ import annotations

from typing import NewType

OrderId = NewType("OrderId", int)


class OrderIdSequence:
    """Issues order identifiers: starts at 1, strictly increasing, never reused."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("start must be >= 1")
        self._next = start

    def next_id(self) -> OrderId:
        issued = self._next
        self._next += 1
        return OrderId(issued)

    def peek(self) -> OrderId:
        return OrderId(self._next)
