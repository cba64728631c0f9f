"""Screen-level state machines driven by the CLI."""

from .activity_form import ActivityForm
from .otp import EmailVerificationFlow, OtpInput, VerificationState
from .password import ChangePasswordFlow, PasswordResetFlow, ResetStep, failed_requirements
from .registration import RegistrationFlow, validate_registration

__all__ = [
    "ActivityForm",
    "ChangePasswordFlow",
    "EmailVerificationFlow",
    "failed_requirements",
    "OtpInput",
    "PasswordResetFlow",
    "RegistrationFlow",
    "ResetStep",
    "validate_registration",
    "VerificationState",
]
