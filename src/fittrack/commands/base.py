"""Shared CLI utilities."""

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from functools import wraps

import click
import httpx
from questionary import Style

from ..auth.credentials import create_credential_store
from ..clients.endpoints import FitTrackAPI
from ..clients.http import ApiClient
from ..config import Settings, get_settings
from ..db.repositories import StateRepository
from ..errors import FitTrackError, SessionExpiredError
from ..services import ActivityService, AuthService, SegmentService, SocialService, UserService
from ..state.store import AppStore

# Custom style for prompts
custom_style = Style(
    [
        ("qmark", "fg:#fc4c02 bold"),
        ("question", "bold"),
        ("answer", "fg:#fc4c02 bold"),
        ("pointer", "fg:#fc4c02 bold"),
        ("highlighted", "fg:#fc4c02 bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def async_command(f):
    """Decorator to run async Click commands.

    API and validation errors end the command with a message and exit code 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except FitTrackError as e:
            echo_error(str(e))
            raise SystemExit(1)
        except httpx.RequestError as e:
            echo_error(f"Could not reach the FitTrack API: {e}")
            raise SystemExit(1)

    return wrapper


@dataclass
class AppContext:
    """Everything a command needs to talk to the API."""

    settings: Settings
    client: ApiClient
    store: AppStore
    api: FitTrackAPI
    auth: AuthService
    users: UserService
    activities: ActivityService
    segments: SegmentService
    social: SocialService


def get_app_settings(ctx: click.Context) -> Settings:
    """Settings for this invocation, honouring --api-url."""
    obj = ctx.find_root().obj or {}
    settings = obj.get("settings") or get_settings()
    api_url = obj.get("api_url")
    if api_url:
        settings = settings.model_copy(update={"api_url": api_url.rstrip("/")})
    return settings


def _session_expired() -> None:
    echo_warning("Session expired. Run 'fittrack login' to sign in again.")


@asynccontextmanager
async def open_app(ctx: click.Context):
    """Build the client, store and services; persist state on the way out."""
    settings = get_app_settings(ctx)
    obj = ctx.find_root().obj or {}

    credentials = create_credential_store(settings)
    persistence = (
        None if settings.credential_backend == "memory" else StateRepository(settings.db_path)
    )
    client = ApiClient(
        settings=settings,
        credentials=credentials,
        transport=obj.get("transport"),
        on_session_expired=_session_expired,
    )
    store = AppStore(credentials, persistence)
    await store.hydrate()

    api = FitTrackAPI(client)
    app = AppContext(
        settings=settings,
        client=client,
        store=store,
        api=api,
        auth=AuthService(api, store),
        users=UserService(api),
        activities=ActivityService(api, store),
        segments=SegmentService(api),
        social=SocialService(api),
    )
    try:
        yield app
    except SessionExpiredError:
        await store.logout()
        raise
    finally:
        await store.persist()
        await client.aclose()


async def ensure_logged_in(ctx: click.Context, app: AppContext) -> None:
    """Exit unless a session token is stored."""
    if not await app.auth.is_authenticated():
        click.echo(
            click.style("Error: ", fg="red")
            + "Not logged in. Run 'fittrack login' first."
        )
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line.rstrip())

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line.rstrip())

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line.rstrip())

    return "\n".join(lines)


def truncate(text: str, width: int = 30) -> str:
    return text[:width] + "..." if len(text) > width else text
