"""Data Transfer Objects that cross from the CLI into the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentSpec:
    """Input: the order to charge, as typed by the user."""

    name: str
    final_value: float
