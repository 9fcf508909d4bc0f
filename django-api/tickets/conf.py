"""Ticket pricing and purchase limits, read from ``settings.TICKETS``."""

from collections.abc import Mapping
from types import MappingProxyType

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from tickets.domain.value_objects import TicketCategory

DEFAULT_TICKET_PRICES = MappingProxyType(
    {
        TicketCategory.ADULT: 25,
        TicketCategory.CHILD: 15,
        TicketCategory.INFANT: 0,
    }
)

DEFAULT_MAX_TICKETS_PER_PURCHASE = 25


def _tickets_settings() -> Mapping:
    tickets = getattr(settings, "TICKETS", None)
    if tickets is None:
        return {}
    if not isinstance(tickets, Mapping):
        raise ImproperlyConfigured(f"TICKETS must be a mapping, got {type(tickets).__name__}")
    return tickets


def _is_whole_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_price_table(prices: Mapping) -> Mapping[TicketCategory, int]:
    """Return a read-only price table keyed by TicketCategory.

    Keys may be categories or their names. Every category needs a
    non-negative integer price.

    Raises:
        ImproperlyConfigured: If a category is missing or unknown, or a price is invalid.
    """
    if not isinstance(prices, Mapping):
        raise ImproperlyConfigured(f"TICKETS['PRICES'] must be a mapping, got {type(prices).__name__}")
    table: dict[TicketCategory, int] = {}
    for key, price in prices.items():
        try:
            category = TicketCategory(key)
        except ValueError:
            raise ImproperlyConfigured(f"Unknown ticket type in TICKETS['PRICES']: {key!r}") from None
        if not _is_whole_number(price) or price < 0:
            raise ImproperlyConfigured(
                f"Price for {category.value} must be a non-negative integer, got {price!r}"
            )
        table[category] = price

    missing = [c.value for c in TicketCategory if c not in table]
    if missing:
        raise ImproperlyConfigured(f"TICKETS['PRICES'] has no price for: {', '.join(missing)}")
    return MappingProxyType(table)


def get_ticket_prices() -> Mapping[TicketCategory, int]:
    prices = _tickets_settings().get("PRICES")
    if prices is None:
        return DEFAULT_TICKET_PRICES
    return build_price_table(prices)


def check_max_tickets(max_tickets: object) -> int:
    if not _is_whole_number(max_tickets) or max_tickets < 1:
        raise ImproperlyConfigured(
            f"TICKETS['MAX_TICKETS_PER_PURCHASE'] must be a positive integer, got {max_tickets!r}"
        )
    return max_tickets


def get_max_tickets_per_purchase() -> int:
    return check_max_tickets(
        _tickets_settings().get("MAX_TICKETS_PER_PURCHASE", DEFAULT_MAX_TICKETS_PER_PURCHASE)
    )
