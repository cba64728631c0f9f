"""Dashboard and local preference commands."""

from datetime import datetime, timedelta, timezone

import click

from ..models.requests import PaginationParams
from ..state.ui import Theme
from ..utils.formatting import (
    capitalize,
    format_distance,
    format_duration,
    format_relative_time,
    format_summary,
    get_activity_type_color,
    summarize_activities,
)
from .base import async_command, echo_info, echo_success, ensure_logged_in, open_app

SUMMARY_DAYS = 7


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


@click.command()
@click.option("--limit", "-n", default=10, type=int, help="Number of feed entries to show")
@click.pass_context
@async_command
async def dashboard(ctx, limit: int):
    """Show this week's totals and the activity feed."""
    now = datetime.now(timezone.utc)
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        user = app.store.session.user or await app.auth.get_profile()
        feed = await app.activities.list_activities(PaginationParams(limit=max(limit, 50)))
        show_colors = app.store.ui.theme == Theme.DARK

    click.echo()
    click.echo(f"Welcome back, {user.display_name}")
    click.echo()
    summary = summarize_activities(feed, since=now - timedelta(days=SUMMARY_DAYS))
    click.echo(format_summary(summary, title=f"Last {SUMMARY_DAYS} days"))
    click.echo()

    if not feed:
        echo_info("Your feed is empty. Follow athletes with 'fittrack users follow'")
        return

    click.echo("Recent activity")
    click.echo("-" * 40)
    for activity in feed[:limit]:
        label = capitalize(activity.activity_type.value)
        if show_colors:
            label = click.style(label, fg=_hex_to_rgb(get_activity_type_color(activity.activity_type)))
        author = activity.user.display_name if activity.user else f"user {activity.user_id}"
        when = format_relative_time(activity.started_at, now) if activity.started_at else ""
        click.echo(
            f"[{activity.id}] {label} {activity.title} by {author} - "
            f"{format_distance(activity.distance)}, {format_duration(activity.duration)} {when}".rstrip()
        )


@click.group()
def prefs():
    """Local display preferences."""


@prefs.command()
@click.pass_context
@async_command
async def show(ctx):
    """Show current preferences."""
    async with open_app(ctx) as app:
        ui = app.store.ui
    click.echo(f"Theme:   {ui.theme.value}")
    click.echo(f"Sidebar: {'open' if ui.is_sidebar_open else 'closed'}")


@prefs.command()
@click.argument("value", type=click.Choice([t.value for t in Theme]))
@click.pass_context
@async_command
async def theme(ctx, value: str):
    """Switch between light and dark themes."""
    async with open_app(ctx) as app:
        app.store.set_theme(Theme(value))
    echo_success(f"Theme set to {value}")


@prefs.command()
@click.argument("value", type=click.Choice(["on", "off", "toggle"]))
@click.pass_context
@async_command
async def sidebar(ctx, value: str):
    """Open, close or toggle the sidebar."""
    async with open_app(ctx) as app:
        if value == "toggle":
            state = app.store.toggle_sidebar()
        else:
            state = app.store.set_sidebar_open(value == "on")
    echo_success(f"Sidebar {'open' if state.is_sidebar_open else 'closed'}")
