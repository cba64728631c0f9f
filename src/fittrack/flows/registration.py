"""Account registration screen.

Registration does not log the user in: a successful submit hands over to
email verification, and the user logs in once the address is confirmed.
"""

from ..errors import ApiError, ValidationError
from ..models.requests import RegisterData
from .otp import EmailVerificationFlow
from .password import failed_requirements


def validate_registration(data: RegisterData) -> None:
    """Raise ValidationError with per-field messages."""
    errors: dict[str, str] = {}
    if not data.username.strip():
        errors["username"] = "Username is required"
    if "@" not in data.email:
        errors["email"] = "A valid email address is required"
    if failed_requirements(data.password):
        errors["password"] = "Please meet all password requirements"
    if errors:
        raise ValidationError(errors)


class RegistrationFlow:
    def __init__(self, auth):
        self.auth = auth
        self.error: str | None = None
        self.field_errors: dict[str, str] = {}
        self.is_loading = False

    async def submit(self, data: RegisterData) -> EmailVerificationFlow | None:
        """Register and return the verification flow for the new address."""
        self.error = None
        self.field_errors = {}
        try:
            validate_registration(data)
        except ValidationError as e:
            self.field_errors = e.field_errors
            self.error = str(e)
            return None

        self.is_loading = True
        try:
            await self.auth.register(data)
        except ApiError as e:
            self.error = e.message("Registration failed. Please try again.")
            return None
        finally:
            self.is_loading = False

        return EmailVerificationFlow(self.auth, data.email)
