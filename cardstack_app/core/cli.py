"""Flask CLI commands for account and session housekeeping."""

import click
from flask import current_app
from flask.cli import AppGroup

users_cli = AppGroup("users", help="Manage user accounts.")
sessions_cli = AppGroup("sessions", help="Manage sign-in sessions.")


@users_cli.command("create")
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
def create_user(email, password):
    """Create an account for EMAIL."""
    from ..modules.auth.services.auth_service import AuthService
    from .error_handlers import CardstackError

    try:
        user = AuthService.register_user(email, password)
    except CardstackError as exc:
        raise click.ClickException(exc.message) from exc

    click.echo(f"Created user {user.email} (id={user.id}).")


@sessions_cli.command("purge")
def purge_sessions():
    """Delete expired sign-in sessions."""
    from ..modules.auth.services.session_guard import SessionGuard

    removed = SessionGuard.purge_expired()
    current_app.logger.info("Purged %s expired session(s)", removed)
    click.echo(f"Removed {removed} expired session(s).")
