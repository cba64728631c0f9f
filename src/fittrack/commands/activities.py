"""Activity feed, kudos and comment commands."""

import json

import click

from ..flows.activity_form import FORM_ACTIVITY_TYPES, ActivityForm
from ..models.requests import PaginationParams
from ..utils.formatting import (
    capitalize,
    format_calories,
    format_distance,
    format_duration,
    format_elevation,
    format_pace,
    format_relative_time,
    format_speed,
)
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_logged_in,
    format_table,
    open_app,
    truncate,
)


@click.group()
def activities():
    """Browse and manage activities."""


@activities.command(name="list")
@click.option("--limit", "-n", default=20, type=int, help="Number of activities to show")
@click.option("--skip", default=0, type=int, help="Number of activities to skip")
@click.pass_context
@async_command
async def list_activities(ctx, limit: int, skip: int):
    """List recent activities."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        items = await app.activities.list_activities(PaginationParams(skip=skip, limit=limit))

    if not items:
        echo_info("No activities yet. Record one with 'fittrack activities create'")
        return

    headers = ["ID", "Type", "Title", "Distance", "Time", "When", "Kudos"]
    rows = []
    for activity in items:
        rows.append([
            str(activity.id),
            capitalize(activity.activity_type.value),
            truncate(activity.title),
            format_distance(activity.distance),
            format_duration(activity.duration),
            format_relative_time(activity.started_at) if activity.started_at else "N/A",
            str(activity.kudos_count),
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(items)} activit{'y' if len(items) == 1 else 'ies'}")


@activities.command()
@click.argument("activity_id", type=int)
@click.option("--comments", "-c", is_flag=True, help="Show comments")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
@click.pass_context
@async_command
async def show(ctx, activity_id: int, comments: bool, as_json: bool):
    """Show details of a specific activity."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        activity = await app.activities.get_activity(activity_id)
        activity_comments = await app.activities.get_comments(activity_id) if comments else []

    if as_json:
        click.echo(json.dumps(activity.to_dict(), indent=2))
        return

    click.echo()
    click.echo("=" * 60)
    click.echo(f"{activity.title} (ID: {activity.id})")
    click.echo("=" * 60)
    if activity.user:
        click.echo(f"By: {activity.user.display_name}")
    click.echo(f"Type: {capitalize(activity.activity_type.value)}  Status: {activity.status}")
    if activity.started_at:
        click.echo(f"Started: {activity.started_at:%Y-%m-%d %H:%M}")
    if activity.description:
        click.echo()
        click.echo(activity.description)
    click.echo()
    click.echo(f"Distance:  {format_distance(activity.distance)}")
    click.echo(f"Time:      {format_duration(activity.duration)}")
    click.echo(f"Pace:      {format_pace(activity.avg_speed)}")
    click.echo(f"Speed:     {format_speed(activity.avg_speed)} (max {format_speed(activity.max_speed)})")
    click.echo(f"Elevation: +{format_elevation(activity.elevation_gain)} / -{format_elevation(activity.elevation_loss)}")
    click.echo(f"Calories:  {format_calories(activity.calories)}")
    if activity.avg_heart_rate:
        max_hr = f" (max {activity.max_heart_rate})" if activity.max_heart_rate else ""
        click.echo(f"Heart rate: {activity.avg_heart_rate} bpm{max_hr}")
    click.echo()
    kudos_mark = " (you gave kudos)" if activity.has_kudos else ""
    click.echo(f"Kudos: {activity.kudos_count}{kudos_mark}  Comments: {activity.comments_count}")

    if comments:
        click.echo()
        click.echo("Comments:")
        click.echo("-" * 40)
        if not activity_comments:
            click.echo("  (none)")
        for comment in activity_comments:
            author = comment.user.display_name if comment.user else "Unknown"
            click.echo(f"  {author}: {comment.content}")


@activities.command()
@click.option("--title", "-t", required=True, help="Activity title")
@click.option(
    "--type",
    "activity_type",
    default="run",
    type=click.Choice([t.value for t in FORM_ACTIVITY_TYPES]),
    help="Activity type",
)
@click.option("--description", "-d", default="", help="Description")
@click.pass_context
@async_command
async def create(ctx, title: str, activity_type: str, description: str):
    """Create a new activity."""
    form = ActivityForm(title=title, activity_type=activity_type, description=description)
    payload = form.to_payload()

    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        activity = await app.activities.create_activity(payload)
    echo_success(f"Activity {activity.id} created: {activity.title}")


@activities.command()
@click.argument("activity_id", type=int)
@click.pass_context
@async_command
async def complete(ctx, activity_id: int):
    """Mark an activity as completed."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        activity = await app.activities.complete_activity(activity_id)
    echo_success(f"Activity {activity.id} completed")


@activities.command()
@click.argument("activity_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, activity_id: int, force: bool):
    """Delete an activity."""
    if not force and not click.confirm(f"Delete activity {activity_id}?"):
        echo_info("Cancelled")
        return

    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        await app.activities.delete_activity(activity_id)
    echo_success(f"Activity {activity_id} deleted")


@click.group()
def kudos():
    """Give or take back kudos."""


@kudos.command()
@click.argument("activity_id", type=int)
@click.pass_context
@async_command
async def give(ctx, activity_id: int):
    """Give kudos to an activity."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        await app.activities.give_kudos(activity_id)
    echo_success(f"Kudos given to activity {activity_id}")


@kudos.command()
@click.argument("activity_id", type=int)
@click.pass_context
@async_command
async def remove(ctx, activity_id: int):
    """Remove your kudos from an activity."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        await app.activities.remove_kudos(activity_id)
    echo_success(f"Kudos removed from activity {activity_id}")


@click.command()
@click.argument("activity_id", type=int)
@click.argument("content")
@click.pass_context
@async_command
async def comment(ctx, activity_id: int, content: str):
    """Comment on an activity."""
    if not content.strip():
        echo_error("Comment cannot be empty")
        ctx.exit(1)
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        await app.activities.add_comment(activity_id, content.strip())
    echo_success("Comment posted")
