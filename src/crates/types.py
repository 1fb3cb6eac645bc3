"""Crate stack and move instruction types."""

from dataclasses import dataclass, field
from enum import StrEnum

from src.errors import UnderflowError


class TransferMode(StrEnum):
    """How a multi-crate move is carried out; fixed for a whole run.

    SINGLE: one crate at a time, reversing the moved block.
    BULK: the whole block at once, preserving its order.
    """

    SINGLE = "single"
    BULK = "bulk"


@dataclass(frozen=True, slots=True)
class MoveInstruction:
    """`move <count> from <source> to <target>` with 1-based stack indices."""

    count: int
    source: int
    target: int


@dataclass(slots=True)
class CrateStack:
    """LIFO stack of single-character crate labels, bottom first."""

    labels: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.labels)

    def push(self, label: str) -> None:
        self.labels.append(label)

    def pop(self) -> str:
        if not self.labels:
            raise UnderflowError("pop from an empty crate stack")
        return self.labels.pop()

    def peek(self) -> str | None:
        """Top label, or None for an empty stack."""
        return self.labels[-1] if self.labels else None
