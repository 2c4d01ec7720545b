"""Composition root for the payment handler."""

from __future__ import annotations

from typing import TextIO

from pps.application.process_payment import ProcessPaymentHandler
from pps.domain.service.payment_calculator import PaymentCalculator


def payment_calculator(out: TextIO | None = None) -> PaymentCalculator:
    return PaymentCalculator(out)


def process_payment_handler(out: TextIO | None = None) -> ProcessPaymentHandler:
    return ProcessPaymentHandler(calculator=payment_calculator(out))
