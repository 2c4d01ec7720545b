"""CLI commands for processing payments."""

from __future__ import annotations

import click

from pps.application.dto import PaymentSpec
from pps.infrastructure.bootstrap import process_payment_handler


@click.command("process")
@click.option("--name", required=True, help="Order name shown in the report.")
@click.option("--value", "final_value", required=True, type=float, help="Final amount due (e.g. 150.5).")
def payment_process(name: str, final_value: float) -> None:
    """Print the amount due for an order."""
    handler = process_payment_handler()
    handler.handle(PaymentSpec(name=name, final_value=final_value))
