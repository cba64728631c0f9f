"""Login, registration, verification and password commands."""

import click
import questionary

from ..errors import ApiError, ValidationError
from ..flows.otp import EmailVerificationFlow, VerificationState
from ..flows.password import ChangePasswordFlow, PasswordResetFlow
from ..flows.registration import RegistrationFlow
from ..models.requests import LoginCredentials, RegisterData
from .base import (
    async_command,
    custom_style,
    echo_error,
    echo_info,
    echo_success,
    ensure_logged_in,
    open_app,
)


async def _ask_text(message: str, default: str = "") -> str:
    answer = await questionary.text(message, default=default, style=custom_style).ask_async()
    if answer is None:
        raise click.Abort()
    return answer


async def _ask_password(message: str) -> str:
    answer = await questionary.password(message, style=custom_style).ask_async()
    if answer is None:
        raise click.Abort()
    return answer


@click.command()
@click.option("--username", "-u", help="Username")
@click.option("--password", "-p", help="Password (prompted when omitted)")
@click.pass_context
@async_command
async def login(ctx, username: str | None, password: str | None):
    """Log in and store the session tokens."""
    username = username or await _ask_text("Username:")
    password = password or await _ask_password("Password:")

    async with open_app(ctx) as app:
        try:
            user = await app.auth.login(LoginCredentials(username=username, password=password))
        except ApiError as e:
            echo_error(e.message("Invalid credentials. Please try again."))
            ctx.exit(1)
        echo_success(f"Logged in as {user.display_name} (@{user.username})")


@click.command()
@click.pass_context
@async_command
async def logout(ctx):
    """Log out and forget the stored tokens."""
    async with open_app(ctx) as app:
        await app.auth.logout()
    echo_success("Logged out")


@click.command()
@click.pass_context
@async_command
async def whoami(ctx):
    """Show the logged-in user."""
    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        user = await app.auth.get_profile()
        click.echo(f"{user.display_name} (@{user.username})")
        click.echo(f"Email: {user.email}")
        if user.location:
            click.echo(f"Location: {user.location}")


async def _run_verification(flow: EmailVerificationFlow, code: str | None) -> bool:
    """Prompt for codes until verified or the user gives up."""
    if flow.state is VerificationState.NO_EMAIL:
        echo_error("No email provided. Please register first to verify your email.")
        return False

    interactive = code is None
    if interactive:
        await flow.start()
        if flow.error:
            echo_error(flow.error)
        else:
            echo_info(f"We sent a {flow.otp.length}-digit code to {flow.email}")

    while flow.state is VerificationState.AWAITING_CODE:
        entry = code if not interactive else await _ask_text("Verification code (or 'resend'):")
        if interactive and entry.strip().lower() == "resend":
            if await flow.send_code():
                echo_info("A new code is on its way")
            else:
                echo_error(flow.error or "Failed to send OTP")
            continue

        flow.otp.clear()
        flow.otp.paste(entry)
        if await flow.verify():
            break
        echo_error(flow.error or "Invalid OTP code")
        if not interactive or not click.confirm("Try again?", default=True):
            return False

    echo_success("Email verified! You can now log in.")
    return True


@click.command()
@click.option("--email", "-e", help="Email address")
@click.option("--username", "-u", help="Username")
@click.option("--full-name", default=None, help="Full name")
@click.option("--password", "-p", help="Password (prompted when omitted)")
@click.option("--code", help="Verification code, if you already have one")
@click.pass_context
@async_command
async def register(ctx, email, username, full_name, password, code):
    """Create an account and verify the email address."""
    email = email or await _ask_text("Email:")
    username = username or await _ask_text("Username:")
    if full_name is None:
        full_name = await _ask_text("Full name (optional):")
    if password is None:
        password = await _ask_password("Password:")
        confirm = await _ask_password("Confirm password:")
        if password != confirm:
            raise ValidationError.single("Passwords do not match", "password")

    async with open_app(ctx) as app:
        flow = RegistrationFlow(app.auth)
        verification = await flow.submit(
            RegisterData(email=email, username=username, password=password, full_name=full_name)
        )
        if verification is None:
            echo_error(flow.error or "Registration failed. Please try again.")
            ctx.exit(1)
        echo_success(f"Account created for {username}")
        if not await _run_verification(verification, code):
            ctx.exit(1)


@click.command()
@click.argument("email")
@click.option("--code", help="Verification code")
@click.pass_context
@async_command
async def verify(ctx, email: str, code: str | None):
    """Verify EMAIL with the code sent to it."""
    async with open_app(ctx) as app:
        flow = EmailVerificationFlow(app.auth, email)
        if not await _run_verification(flow, code):
            ctx.exit(1)


@click.group()
def password():
    """Change or reset your password."""


@password.command()
@click.option("--current", help="Current password")
@click.option("--new", "new_password", help="New password")
@click.pass_context
@async_command
async def change(ctx, current: str | None, new_password: str | None):
    """Change the password of the logged-in user."""
    current = current or await _ask_password("Current password:")
    if new_password is None:
        new_password = await _ask_password("New password:")
        confirm = await _ask_password("Confirm new password:")
    else:
        confirm = new_password

    async with open_app(ctx) as app:
        await ensure_logged_in(ctx, app)
        flow = ChangePasswordFlow(app.auth)
        if not await flow.submit(current, new_password, confirm):
            echo_error(flow.error)
            ctx.exit(1)
        echo_success(flow.success_message)


@password.command()
@click.argument("email")
@click.option("--resend", is_flag=True, help="Resend the reset link")
@click.pass_context
@async_command
async def forgot(ctx, email: str, resend: bool):
    """Email a password reset link to EMAIL."""
    async with open_app(ctx) as app:
        flow = PasswordResetFlow(app.auth)
        ok = await flow.resend(email) if resend else await flow.request_reset(email)
        if not ok:
            echo_error(flow.error)
            ctx.exit(1)
        echo_success(flow.success_message)


@password.command()
@click.option("--token", required=True, help="Token from the reset email")
@click.option("--new", "new_password", help="New password")
@click.pass_context
@async_command
async def reset(ctx, token: str, new_password: str | None):
    """Set a new password using a reset token."""
    if new_password is None:
        new_password = await _ask_password("New password:")
        confirm = await _ask_password("Confirm new password:")
    else:
        confirm = new_password

    async with open_app(ctx) as app:
        flow = PasswordResetFlow(app.auth, token=token)
        if not await flow.reset_password(new_password, confirm):
            echo_error(flow.error)
            ctx.exit(1)
        echo_success(flow.success_message)
