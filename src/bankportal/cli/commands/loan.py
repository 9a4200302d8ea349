"""Loan lifecycle commands."""

import click
from bankportal.cli.error_handling import handle_domain_error, parse_amount_or_exit
from bankportal.domain.errors import DomainError
from bankportal.domain.loan import LoanService


@click.group()
def loan_group():
    """Apply for, approve and repay loans."""
    pass


@loan_group.command("apply")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.argument("amount", metavar="AMOUNT")
@click.option("--description", required=True, help="Purpose of the loan")
@click.pass_context
def apply_loan(ctx, account_number: str, amount: str, description: str):
    """Apply for a loan of up to twice the account balance.

    The loan carries a fixed 5% interest rate over 12 months and stays
    PENDING until approved.

    Examples:
        bankportal loan apply 1a2b3c 500 --description "New laptop"
    """
    service = LoanService(ctx.obj["db"])
    value = parse_amount_or_exit(ctx, amount)

    try:
        loan = service.apply_for_loan(account_number, amount=value, description=description)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Loan application submitted (ID: {loan.id})")
    click.echo(f"  Amount: ${loan.amount:,.2f}")
    click.echo(f"  Outstanding: ${loan.outstanding_balance:,.2f}")
    click.echo(f"  Status: {loan.status.value}")


@loan_group.command("approve")
@click.argument("loan_id", type=int, metavar="LOAN_ID")
@click.pass_context
def approve_loan(ctx, loan_id: int):
    """Approve a pending loan and disburse the principal."""
    service = LoanService(ctx.obj["db"])

    try:
        loan = service.approve_loan(loan_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Loan {loan.id} approved")
    click.echo(f"  Disbursed ${loan.amount:,.2f} to account {loan.account_number}")


@loan_group.command("repay")
@click.argument("loan_id", type=int, metavar="LOAN_ID")
@click.argument("amount", metavar="AMOUNT")
@click.pass_context
def repay_loan(ctx, loan_id: int, amount: str):
    """Repay an approved loan from the account balance."""
    service = LoanService(ctx.obj["db"])
    value = parse_amount_or_exit(ctx, amount)

    try:
        loan = service.repay_loan(loan_id, amount=value)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Repaid ${value:,.2f} on loan {loan.id}")
    click.echo(f"  Outstanding: ${loan.outstanding_balance:,.2f}")
    click.echo(f"  Status: {loan.status.value}")


@loan_group.command("list")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.pass_context
def list_loans(ctx, account_number: str):
    """List all loans of an account."""
    service = LoanService(ctx.obj["db"])

    try:
        loans = service.get_loans_by_account_number(account_number)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not loans:
        click.echo("No loans found.")
        return

    click.echo(f"\nLoans for {account_number}:")
    click.echo("-" * 80)
    for loan in loans:
        click.echo(
            f"ID: {loan.id:3d} | {loan.status.value:8s} | Amount: ${loan.amount:>10,.2f} | "
            f"Outstanding: ${loan.outstanding_balance:>10,.2f} | {loan.description}"
        )


def register_commands(cli):
    """Register loan commands with main CLI."""
    cli.add_command(loan_group, name="loan")
