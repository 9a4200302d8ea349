"""User registration commands."""

import click
from bankportal.cli.error_handling import handle_domain_error
from bankportal.domain.account import AccountService
from bankportal.domain.errors import DomainError
from bankportal.domain.user import UserService


@click.group()
def user_group():
    """Manage account holders."""
    pass


@user_group.command("register")
@click.argument("name", metavar="NAME")
@click.option("--email", required=True, help="Email address (must be unique)")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Account password (prompted if not given)",
)
@click.pass_context
def register_user(ctx, name: str, email: str, password: str):
    """Register a user and open their account.

    Examples:
        bankportal user register "Jane Doe" --email jane@example.com
    """
    db = ctx.obj["db"]
    user_service = UserService(db)
    account_service = AccountService(db)

    try:
        with db.unit_of_work():
            user = user_service.register_user(name=name, email=email, password=password)
            account = account_service.create_account(user.id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Registered user '{user.name}' (ID: {user.id})")
    click.echo(f"Account number: {account.account_number}")
    click.echo("Create a PIN with 'bankportal account create-pin' before moving money.")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
