"""Account, PIN and cash commands."""

import click
from bankportal.cli.error_handling import handle_domain_error, parse_amount_or_exit
from bankportal.domain.account import AccountService
from bankportal.domain.entities import TransactionType
from bankportal.domain.errors import DomainError
from bankportal.domain.transaction import TransactionService


def _pin_option(name: str = "--pin", help_text: str = "Account PIN (prompted if not given)"):
    return click.option(name, prompt=True, hide_input=True, help=help_text)


@click.group()
def account_group():
    """Manage accounts, PINs and cash."""
    pass


@account_group.command("show")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.pass_context
def show_account(ctx, account_number: str):
    """Show account balance and PIN status."""
    service = AccountService(ctx.obj["db"])

    account = service.get_account(account_number)
    if account is None:
        click.echo(f"Error: Account {account_number} not found", err=True)
        ctx.exit(1)

    click.echo(f"Account: {account.account_number}")
    click.echo(f"  Balance: ${account.balance:,.2f}")
    click.echo(f"  PIN created: {'yes' if account.has_pin else 'no'}")


@account_group.command("pin-status")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.pass_context
def pin_status(ctx, account_number: str):
    """Check whether a PIN has been created for the account."""
    service = AccountService(ctx.obj["db"])

    try:
        created = service.is_pin_created(account_number)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if created:
        click.echo("PIN has been created for this account")
    else:
        click.echo("PIN has not been created for this account")


@account_group.command("create-pin")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
@_pin_option(help_text="New 4-digit PIN (prompted if not given)")
@click.pass_context
def create_pin(ctx, account_number: str, password: str, pin: str):
    """Create the account PIN (only once).

    Examples:
        bankportal account create-pin 1a2b3c --password secret --pin 1234
    """
    service = AccountService(ctx.obj["db"])

    try:
        service.create_pin(account_number, password=password, pin=pin)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("PIN created successfully")


@account_group.command("update-pin")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@_pin_option("--old-pin", help_text="Current PIN (prompted if not given)")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
@_pin_option("--new-pin", help_text="New 4-digit PIN (prompted if not given)")
@click.pass_context
def update_pin(ctx, account_number: str, old_pin: str, password: str, new_pin: str):
    """Change the account PIN."""
    service = AccountService(ctx.obj["db"])

    try:
        service.update_pin(account_number, old_pin=old_pin, password=password, new_pin=new_pin)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("PIN updated successfully")


@account_group.command("deposit")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.argument("amount", metavar="AMOUNT")
@_pin_option()
@click.pass_context
def deposit(ctx, account_number: str, amount: str, pin: str):
    """Deposit cash (multiples of 100, at most 100,000).

    Examples:
        bankportal account deposit 1a2b3c 500 --pin 1234
    """
    service = AccountService(ctx.obj["db"])
    value = parse_amount_or_exit(ctx, amount)

    try:
        account = service.cash_deposit(account_number, pin=pin, amount=value)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deposited ${value:,.2f}")
    click.echo(f"  Balance: ${account.balance:,.2f}")


@account_group.command("withdraw")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.argument("amount", metavar="AMOUNT")
@_pin_option()
@click.pass_context
def withdraw(ctx, account_number: str, amount: str, pin: str):
    """Withdraw cash (multiples of 100, at most 100,000)."""
    service = AccountService(ctx.obj["db"])
    value = parse_amount_or_exit(ctx, amount)

    try:
        account = service.cash_withdrawal(account_number, pin=pin, amount=value)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Withdrew ${value:,.2f}")
    click.echo(f"  Balance: ${account.balance:,.2f}")


@account_group.command("transfer")
@click.argument("source", metavar="SOURCE_ACCOUNT")
@click.argument("target", metavar="TARGET_ACCOUNT")
@click.argument("amount", metavar="AMOUNT")
@_pin_option(help_text="PIN of the source account (prompted if not given)")
@click.pass_context
def transfer(ctx, source: str, target: str, amount: str, pin: str):
    """Transfer funds to another account.

    Examples:
        bankportal account transfer 1a2b3c 4d5e6f 1000 --pin 1234
    """
    service = AccountService(ctx.obj["db"])
    value = parse_amount_or_exit(ctx, amount)

    try:
        source_account, _ = service.fund_transfer(source, target, pin=pin, amount=value)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Transferred ${value:,.2f} from {source} to {target}")
    click.echo(f"  Balance: ${source_account.balance:,.2f}")


@account_group.command("history")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.pass_context
def history(ctx, account_number: str):
    """List the account's transactions, newest first."""
    service = TransactionService(ctx.obj["db"])

    try:
        transactions = service.list_transactions(account_number)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nTransactions for {account_number}:")
    click.echo("-" * 80)
    for txn in transactions:
        counterpart = ""
        if txn.transaction_type == TransactionType.CASH_TRANSFER:
            if txn.source_account_number == account_number:
                counterpart = f" to {txn.target_account_number}"
            else:
                counterpart = f" from {txn.source_account_number}"
        click.echo(
            f"ID: {txn.id:4d} | {txn.transaction_date:%Y-%m-%d %H:%M} | "
            f"{txn.transaction_type.value:17s} | ${txn.amount:>12,.2f}{counterpart}"
        )


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
