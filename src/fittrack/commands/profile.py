"""Profile commands for the signed-in user."""

import mimetypes
from pathlib import Path

import click

from ..models.requests import UpdateProfileData
from .base import async_command, echo_info, echo_success, ensure_logged_in, open_app


def _echo_user(user) -> None:
    click.echo()
    click.echo(f"{user.display_name} (@{user.username})  [{user.initials}]")
    click.echo(f"Email: {user.email}")
    if user.location:
        click.echo(f"Location: {user.location}")
    if user.bio:
        click.echo(f"Bio: {user.bio}")
    if user.profile_picture:
        click.echo(f"Avatar: {user.profile_picture}")
    if user.created_at:
        click.echo(f"Member since: {user.created_at:%Y-%m-%d}")


@click.group()
def profile():
    """View and edit your profile."""


@profile.command()
@click.pass_context
@async_command
async def show(ctx):
    """Show your profile."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        user = await app.auth.get_profile()
        stats = await app.users.get_user_stats(user.id)

    _echo_user(user)
    if stats:
        click.echo()
        click.echo("Stats:")
        for key, value in stats.items():
            click.echo(f"  {key.replace('_', ' ')}: {value}")


@profile.command()
@click.option("--full-name", default=None, help="Display name")
@click.option("--bio", default=None, help="Short bio")
@click.option("--location", default=None, help="Location")
@click.pass_context
@async_command
async def update(ctx, full_name: str | None, bio: str | None, location: str | None):
    """Update profile fields."""
    data = UpdateProfileData(full_name=full_name, bio=bio, location=location)
    if data.is_empty:
        echo_info("Nothing to update. Pass --full-name, --bio or --location")
        return

    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        user = await app.auth.update_profile(data)
    echo_success("Profile updated")
    _echo_user(user)


@profile.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@async_command
async def avatar(ctx, path: Path):
    """Upload a new profile picture."""
    content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        user = await app.auth.update_avatar(path.name, path.read_bytes(), content_type)
    echo_success(f"Avatar updated: {user.profile_picture or path.name}")


@profile.command(name="delete")
@click.option("--password", "-p", prompt=True, hide_input=True, help="Current password")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete_account(ctx, password: str, force: bool):
    """Permanently delete your account."""
    if not force and not click.confirm("This deletes your account and all activities. Continue?"):
        echo_info("Cancelled")
        return

    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        await app.auth.delete_account(password)
    echo_success("Account deleted")
