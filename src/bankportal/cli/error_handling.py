"""CLI error handling helpers."""

from decimal import Decimal

import click

from bankportal.domain.errors import DomainError
from bankportal.utils.amount_parser import parse_amount


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, amount: str) -> Decimal:
    """Parse an AMOUNT argument, or exit with a CLI error."""
    try:
        return parse_amount(amount)
    except ValueError as exc:
        click.echo(f"Error: Invalid amount format: {exc}", err=True)
        ctx.exit(1)
