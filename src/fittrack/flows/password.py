"""Password requirements and the reset/change password screens."""

from collections.abc import Callable
from enum import Enum

from ..errors import ApiError, InvalidTransitionError
from ..models.requests import ChangePasswordData, ResetPasswordData

MIN_PASSWORD_LENGTH = 8

PASSWORD_REQUIREMENTS: list[tuple[str, Callable[[str], bool]]] = [
    (f"At least {MIN_PASSWORD_LENGTH} characters", lambda p: len(p) >= MIN_PASSWORD_LENGTH),
    ("Contains uppercase letter", lambda p: any(c.isupper() for c in p)),
    ("Contains lowercase letter", lambda p: any(c.islower() for c in p)),
    ("Contains number", lambda p: any(c.isdigit() for c in p)),
]


def failed_requirements(password: str) -> list[str]:
    """Labels of the requirements the password does not meet."""
    return [label for label, test in PASSWORD_REQUIREMENTS if not test(password)]


class ResetStep(str, Enum):
    REQUEST = "request"
    RESET = "reset"
    SUCCESS = "success"


class PasswordResetFlow:
    """Forgot-password screen: request a link, then set a new password."""

    def __init__(self, auth, token: str | None = None):
        self.auth = auth
        self.token = token
        self.step = ResetStep.RESET if token else ResetStep.REQUEST
        self.error: str | None = None
        self.success_message: str | None = None
        self.is_loading = False

    async def request_reset(self, email: str) -> bool:
        if self.step is not ResetStep.REQUEST:
            raise InvalidTransitionError(f"Cannot request a reset link at step {self.step.value}")
        self.error = None
        self.is_loading = True
        try:
            await self.auth.request_password_reset(email)
        except ApiError as e:
            self.error = e.message("Failed to send reset email. Please try again.")
            return False
        finally:
            self.is_loading = False
        self.success_message = "Password reset link sent to your email!"
        self.step = ResetStep.SUCCESS
        return True

    async def resend(self, email: str) -> bool:
        self.error = None
        try:
            await self.auth.resend_password_reset(email)
        except ApiError as e:
            self.error = e.message("Failed to resend reset email. Please try again.")
            return False
        self.success_message = "Password reset link sent again!"
        return True

    async def reset_password(self, password: str, confirm_password: str) -> bool:
        if self.step is not ResetStep.RESET or not self.token:
            raise InvalidTransitionError("A reset token is required to set a new password")
        self.error = None
        if password != confirm_password:
            self.error = "Passwords do not match"
            return False
        if len(password) < MIN_PASSWORD_LENGTH:
            self.error = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            return False

        self.is_loading = True
        try:
            await self.auth.reset_password(
                ResetPasswordData(token=self.token, new_password=password)
            )
        except ApiError as e:
            self.error = e.message("Failed to reset password. Please try again.")
            return False
        finally:
            self.is_loading = False
        self.success_message = "Password reset successfully!"
        self.step = ResetStep.SUCCESS
        return True


class ChangePasswordFlow:
    """Change-password screen for a logged-in user."""

    def __init__(self, auth):
        self.auth = auth
        self.error: str | None = None
        self.success_message: str | None = None
        self.is_loading = False

    async def submit(self, current_password: str, new_password: str, confirm_password: str) -> bool:
        self.error = None
        self.success_message = None
        if new_password != confirm_password:
            self.error = "New passwords do not match"
            return False
        if len(new_password) < MIN_PASSWORD_LENGTH:
            self.error = f"New password must be at least {MIN_PASSWORD_LENGTH} characters long"
            return False

        self.is_loading = True
        try:
            await self.auth.change_password(
                ChangePasswordData(
                    current_password=current_password,
                    new_password=new_password,
                )
            )
        except ApiError as e:
            self.error = e.message("Failed to change password. Please try again.")
            return False
        finally:
            self.is_loading = False
        self.success_message = "Password changed successfully!"
        return True
