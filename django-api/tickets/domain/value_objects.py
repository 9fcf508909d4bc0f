"""Domain primitives that enforce validity at creation time."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketCategory(str, Enum):
    """The closed set of ticket kinds."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Ticket type must be one of {', '.join(c.value for c in cls)}"
            ) from None


@dataclass(frozen=True)
class TicketCounts:
    """Per-category ticket totals for a single purchase."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    def __post_init__(self) -> None:
        if min(self.adult, self.child, self.infant) < 0:
            raise ValueError("Ticket counts cannot be negative")

    def count_for(self, category: TicketCategory) -> int:
        return getattr(self, category.name.lower())

    def items(self) -> Iterator[tuple[TicketCategory, int]]:
        for category in TicketCategory:
            yield category, self.count_for(category)

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant
