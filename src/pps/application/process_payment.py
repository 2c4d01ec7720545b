"""Application service: Process Payment use case."""

from __future__ import annotations

import logging

from pps.application.dto import PaymentSpec
from pps.domain.model.order import PaymentOrder
from pps.domain.service.payment_calculator import PaymentCalculator

logger = logging.getLogger(__name__)


class ProcessPaymentHandler:

    def __init__(self, calculator: PaymentCalculator) -> None:
        self._calculator = calculator

    def handle(self, spec: PaymentSpec) -> None:
        order = PaymentOrder(name=spec.name, final_value=spec.final_value)
        logger.info("Processing payment for %r", order.name)
        self._calculator.calculate(order)
