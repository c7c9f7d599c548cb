"""Ticket queue simulation: can the seller always give change?"""

from __future__ import annotations

from collections.abc import Iterable

TICKET_PRICE = 25
BILLS = (25, 50, 100)


def sell_tickets(queue: Iterable[int]) -> bool:
    """Return True if every customer in *queue* can be sold a ticket.

    Tickets cost 25 and customers pay with a 25, 50 or 100 bill, strictly
    in queue order.  The till starts empty and only holds bills taken from
    earlier customers.  Change for a 100 is given as 50 + 25 when possible,
    otherwise as three 25s.

    Raises:
        ValueError: If a customer offers a bill other than 25, 50 or 100.
    """
    till = {bill: 0 for bill in BILLS}
    for bill in queue:
        if bill not in BILLS:
            raise ValueError(f"Unsupported bill: {bill!r}. Expected one of {BILLS}.")
        till[bill] += 1
        change = bill - TICKET_PRICE
        if change == 25:
            if till[25] < 1:
                return False
            till[25] -= 1
        elif change == 75:
            if till[50] >= 1 and till[25] >= 1:
                till[50] -= 1
                till[25] -= 1
            elif till[25] >= 3:
                till[25] -= 3
            else:
                return False
    return True
