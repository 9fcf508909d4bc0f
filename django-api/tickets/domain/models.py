"""Domain models for purchase input.

These are plain value objects. They check primitive types on construction;
purchase rules (positive counts, capacity, adult supervision) are applied
by the ticket service.
"""

from dataclasses import dataclass

from tickets.domain.value_objects import TicketCategory


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for ``count`` tickets of a single category."""

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            if not isinstance(self.category, str):
                raise TypeError("Ticket type must be a string or TicketCategory")
            object.__setattr__(self, "category", TicketCategory.from_string(self.category))
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError("Number of tickets must be an integer")

    def get_ticket_type(self) -> TicketCategory:
        return self.category

    def get_no_of_tickets(self) -> int:
        return self.count
