"""Main CLI entry point."""

import click
from bankportal.database.factories import create_sqlite_database
from bankportal.logging_config import setup_logging

# Import and register all commands at module level
from bankportal.cli.commands import (
    user,
    account,
    loan,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BANKPORTAL_DB_PATH environment variable)",
    envvar="BANKPORTAL_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
    envvar="BANKPORTAL_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Bankportal - account, cash and loan management.

    Every command that moves money needs the account PIN; PIN creation and
    changes need the account holder's password.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
user.register_commands(cli)
account.register_commands(cli)
loan.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
