"""Athlete lookup and follow commands."""

import click

from ..models.requests import PaginationParams
from ..utils.formatting import format_distance, format_duration
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_logged_in,
    format_table,
    open_app,
    truncate,
)


def _user_rows(users) -> list[list[str]]:
    return [[str(u.id), u.username, truncate(u.display_name), u.location or ""] for u in users]


@click.group()
def users():
    """Find and follow other athletes."""


@users.command()
@click.argument("username")
@click.option("--activities", "-a", "show_activities", is_flag=True, help="List recent activities")
@click.pass_context
@async_command
async def show(ctx, username: str, show_activities: bool):
    """Show an athlete's profile."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        user = await app.users.get_user_by_username(username)
        stats = await app.users.get_user_stats(user.id)
        recent = await app.users.get_user_activities(user.id) if show_activities else []

    click.echo()
    click.echo(f"{user.display_name} (@{user.username}, ID: {user.id})")
    if user.location:
        click.echo(f"Location: {user.location}")
    if user.bio:
        click.echo(user.bio)
    for key, value in stats.items():
        click.echo(f"  {key.replace('_', ' ')}: {value}")

    if show_activities:
        click.echo()
        if not recent:
            echo_info("No activities")
        for activity in recent:
            click.echo(
                f"  [{activity.id}] {activity.title} - "
                f"{format_distance(activity.distance)} in {format_duration(activity.duration)}"
            )


@users.command()
@click.argument("query")
@click.option("--limit", "-n", default=10, type=int, help="Maximum results")
@click.pass_context
@async_command
async def search(ctx, query: str, limit: int):
    """Search athletes by name or username."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        found = await app.users.search_users(query, limit)

    if not found:
        echo_info(f"No athletes match '{query}'")
        return
    click.echo(format_table(["ID", "Username", "Name", "Location"], _user_rows(found)))


@users.command()
@click.argument("user_id", type=int)
@click.pass_context
@async_command
async def follow(ctx, user_id: int):
    """Follow an athlete."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        await app.social.follow(user_id)
    echo_success(f"Now following user {user_id}")


@users.command()
@click.argument("user_id", type=int)
@click.pass_context
@async_command
async def unfollow(ctx, user_id: int):
    """Stop following an athlete."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        await app.social.unfollow(user_id)
    echo_success(f"Unfollowed user {user_id}")


@users.command()
@click.argument("user_id", type=int, required=False)
@click.option("--following", is_flag=True, help="List who the athlete follows instead")
@click.option("--limit", "-n", default=50, type=int, help="Maximum results")
@click.pass_context
@async_command
async def followers(ctx, user_id: int | None, following: bool, limit: int):
    """List followers of an athlete (yourself by default)."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        if user_id is None:
            me = app.store.session.user or await app.auth.get_profile()
            user_id = me.id
        params = PaginationParams(limit=limit)
        if following:
            people = await app.users.get_user_following(user_id, params)
        else:
            people = await app.users.get_user_followers(user_id, params)

    if not people:
        echo_info("Nobody here yet")
        return
    click.echo(format_table(["ID", "Username", "Name", "Location"], _user_rows(people)))
