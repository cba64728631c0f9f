"""CLI entry point for fittrack."""

import click

from .commands import (
    activities,
    comment,
    dashboard,
    kudos,
    login,
    logout,
    password,
    prefs,
    profile,
    register,
    segments,
    users,
    verify,
    whoami,
)
from .config import get_settings
from .logger import setup_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="fittrack")
@click.option("--api-url", envvar="FITTRACK_API_URL", default=None, help="FitTrack API base URL")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, api_url: str | None, verbose: bool):
    """fittrack: a command-line client for the FitTrack activity tracker.

    Record activities, follow athletes and compete on segments from
    your terminal.

    Example usage:

        # Create an account and verify it with the emailed code
        fittrack register

        # Sign in
        fittrack login -u alice

        # See what happened this week
        fittrack dashboard

        # Browse and record activities
        fittrack activities list
        fittrack activities create --title "Morning run" --type run
    """
    ctx.ensure_object(dict)
    if api_url:
        ctx.obj["api_url"] = api_url

    settings = ctx.obj.get("settings") or get_settings()
    setup_logger("DEBUG" if verbose else settings.log_level, settings.log_file)


# Register commands
main.add_command(login)
main.add_command(logout)
main.add_command(whoami)
main.add_command(register)
main.add_command(verify)
main.add_command(password)
main.add_command(dashboard)
main.add_command(profile)
main.add_command(activities)
main.add_command(kudos)
main.add_command(comment)
main.add_command(segments)
main.add_command(users)
main.add_command(prefs)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
