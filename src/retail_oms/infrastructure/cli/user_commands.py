"""CLI commands for users."""

from __future__ import annotations

import click

from retail_oms.application.add_user import AddUserHandler
from retail_oms.application.delete_user import DeleteUserHandler
from retail_oms.application.show_user import ShowUserHandler
from retail_oms.application.update_user import UpdateUserHandler
from retail_oms.infrastructure.bootstrap import order_repository, user_repository
from retail_oms.infrastructure.cli.errors import domain_errors


@click.command("add")
@click.option("--username", required=True, help="Unique username.")
@click.option("--email", required=True, help="Unique email address.")
@click.option("--first-name", default="", help="First name.")
@click.option("--last-name", default="", help="Last name.")
def user_add(username: str, email: str, first_name: str, last_name: str) -> None:
    """Register a new user."""
    handler = AddUserHandler(user_repo=user_repository())

    with domain_errors():
        user = handler.handle(
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )

    click.echo(f"User #{user.id} '{user.username}' added")


@click.command("list")
def user_list() -> None:
    """List all users."""
    users = user_repository().list_all()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<6} {'Username':<20} {'Email':<30}")
    click.echo("-" * 58)
    for u in users:
        click.echo(f"{u.id:<6} {u.username:<20} {u.email:<30}")


@click.command("show")
@click.option("--id", "user_id", default=None, help="User ID.")
@click.option("--username", default=None, help="Username.")
def user_show(user_id: str | None, username: str | None) -> None:
    """Show one user, looked up by ID or username."""
    if (user_id is None) == (username is None):
        raise click.UsageError("Give exactly one of --id or --username.")
    handler = ShowUserHandler(user_repo=user_repository())

    with domain_errors():
        user = handler.by_id(user_id) if user_id is not None else handler.by_username(username)

    click.echo(f"User #{user.id}  {user.username} <{user.email}>")
    if user.full_name:
        click.echo(f"  name={user.full_name}")


@click.command("update")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--username", default=None, help="New unique username.")
@click.option("--email", default=None, help="New unique email address.")
@click.option("--first-name", default=None, help="New first name.")
@click.option("--last-name", default=None, help="New last name.")
def user_update(
    user_id: str,
    username: str | None,
    email: str | None,
    first_name: str | None,
    last_name: str | None,
) -> None:
    """Update a user's details."""
    handler = UpdateUserHandler(user_repo=user_repository())

    with domain_errors():
        user = handler.handle(
            user_id=user_id,
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )

    click.echo(f"User #{user.id} updated: {user.username} <{user.email}>")


@click.command("delete")
@click.option("--id", "user_id", required=True, help="User ID.")
def user_delete(user_id: str) -> None:
    """Delete a user who has no orders."""
    handler = DeleteUserHandler(
        user_repo=user_repository(),
        order_repo=order_repository(),
    )

    with domain_errors():
        handler.handle(user_id)

    click.echo(f"User #{user_id} deleted")
