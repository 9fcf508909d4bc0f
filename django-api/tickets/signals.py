"""Django signals for completed ticket purchases.

``tickets_purchased`` is sent by TicketService once payment and seat
reservation have both been requested. It is never sent for a rejected
purchase.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent with: account_id, ticket_counts, total_amount, total_seats
tickets_purchased = Signal()


@receiver(tickets_purchased)
def log_ticket_purchase(sender, account_id, ticket_counts, total_amount, total_seats, **kwargs):
    """Write an audit line for every completed purchase."""
    logger.info(
        "Tickets purchased",
        extra={
            "account_id": account_id,
            "adult": ticket_counts.adult,
            "child": ticket_counts.child,
            "infant": ticket_counts.infant,
            "total_amount": total_amount,
            "total_seats": total_seats,
        },
    )
