import logging
import sys

import click

from pps.infrastructure.cli.payment_commands import payment_process

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="PPS_LOG_LEVEL",
    help="Logging verbosity (written to stderr).",
)
def cli(log_level: str) -> None:
    """PPS: Payment Processing System"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.group()
def payment() -> None:
    """Process payments."""


# Register subcommands
payment.add_command(payment_process)
