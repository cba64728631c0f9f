"""Segment and leaderboard commands."""

import click

from ..models.requests import PaginationParams
from ..utils.formatting import capitalize, format_distance, format_duration, format_speed
from .base import async_command, echo_info, ensure_logged_in, format_table, open_app, truncate


@click.group()
def segments():
    """Browse segments and their leaderboards."""


@segments.command(name="list")
@click.option("--limit", "-n", default=20, type=int, help="Number of segments to show")
@click.pass_context
@async_command
async def list_segments(ctx, limit: int):
    """List segments."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        items = await app.segments.list_segments(PaginationParams(limit=limit))

    if not items:
        echo_info("No segments found")
        return

    headers = ["ID", "Name", "Type", "Distance", "Grade", "Efforts"]
    rows = [
        [
            str(s.id),
            truncate(s.name),
            capitalize(s.activity_type.value),
            format_distance(s.distance),
            f"{s.avg_grade:.1f}%",
            str(s.efforts_count) if s.efforts_count is not None else "-",
        ]
        for s in items
    ]
    click.echo()
    click.echo(format_table(headers, rows))


@segments.command()
@click.argument("segment_id", type=int)
@click.option("--limit", "-n", default=10, type=int, help="Number of efforts to show")
@click.pass_context
@async_command
async def leaderboard(ctx, segment_id: int, limit: int):
    """Show the leaderboard of a segment."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        segment = await app.segments.get_segment(segment_id)
        efforts = await app.segments.get_leaderboard(segment_id)
        current_user = app.store.session.user

    click.echo()
    click.echo(f"{segment.name} - {format_distance(segment.distance)}, {segment.avg_grade:.1f}% avg grade")
    click.echo()

    if not efforts:
        echo_info("No efforts recorded yet")
        return

    headers = ["Rank", "Athlete", "Time", "Speed", ""]
    rows = []
    for effort in efforts[:limit]:
        badges = []
        if effort.is_kom:
            badges.append("KOM")
        if effort.is_pr:
            badges.append("PR")
        if current_user is not None and effort.user.id == current_user.id:
            badges.append("you")
        rows.append([
            str(effort.rank),
            effort.user.display_name,
            format_duration(effort.elapsed_time),
            format_speed(effort.avg_speed),
            " ".join(badges),
        ])
    click.echo(format_table(headers, rows))
