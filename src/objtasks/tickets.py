"""Ticket office simulation: can every customer in the queue get change?

A ticket costs 25. Customers pay with a 25, 50 or 100 bill and the clerk
starts with an empty till.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

log = logging.getLogger("objtasks.tickets")

TICKET_PRICE = 25
DENOMINATIONS = (25, 50, 100)


@dataclass
class Till:
    """Bills the clerk can hand back as change."""

    twenty_fives: int = 0
    fifties: int = 0

    def accept(self, bill: int) -> bool:
        """Take *bill* and pay out change; return False if change is impossible."""
        if bill == 25:
            self.twenty_fives += 1
            return True
        if bill == 50:
            if self.twenty_fives < 1:
                return False
            self.twenty_fives -= 1
            self.fifties += 1
            return True
        # 100: prefer 50 + 25, fall back to three 25s.
        if self.fifties >= 1 and self.twenty_fives >= 1:
            self.fifties -= 1
            self.twenty_fives -= 1
            return True
        if self.twenty_fives >= 3:
            self.twenty_fives -= 3
            return True
        return False


def sell_tickets(queue: Iterable[int]) -> bool:
    """Return True if every customer in *queue* can be given correct change."""
    till = Till()
    for position, bill in enumerate(queue):
        if bill not in DENOMINATIONS:
            raise ValueError(f"Unsupported bill: {bill!r}")
        if not till.accept(bill):
            log.debug("Cannot change %d for customer %d (till=%s)", bill, position, till)
            return False
    return True
