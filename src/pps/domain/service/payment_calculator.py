"""Domain service: writes the amount due and the order name."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from pps.domain.model.order import Order

logger = logging.getLogger(__name__)

TOTAL_PREFIX = "Total Pagar: "
PROCESSING_PREFIX = "Processando: "


class PaymentCalculator:
    """Writes a three-line payment report for an order.

    The report goes to *out* when given, otherwise to whatever
    ``sys.stdout`` is at the time of the call.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def calculate(self, order: Order) -> None:
        # final_value is read before anything is written.
        total = float(order.final_value)

        out = self._out if self._out is not None else sys.stdout
        out.write(f"{TOTAL_PREFIX}{total}\n")
        out.write("\n")
        name = order.name
        out.write(f"{PROCESSING_PREFIX}{name}\n")

        logger.debug("Reported total %s for %r", total, name)
