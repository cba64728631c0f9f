"""Email verification with a six-digit one-time code.

``OtpInput`` models the six single-digit boxes and which one has focus.
``EmailVerificationFlow`` drives the screen:

    no-email (terminal)
    awaiting-code -> verifying -> verified (terminal)
                  <- (rejected, with error)

The resend cooldown only gates this client. The server must enforce its own
rate limit.
"""

import math
import re
import time
from collections.abc import Callable
from enum import Enum

from loguru import logger

from ..errors import ApiError, InvalidTransitionError

OTP_LENGTH = 6
RESEND_COOLDOWN_SECONDS = 60

_DIGITS = re.compile(r"[0-9]*")


class OtpInput:
    """Six single-digit slots with a focus cursor."""

    def __init__(self, length: int = OTP_LENGTH):
        self.length = length
        self.slots: list[str] = [""] * length
        self.focus = 0

    @property
    def code(self) -> str:
        return "".join(self.slots)

    @property
    def is_complete(self) -> bool:
        return len(self.code) == self.length

    def enter(self, index: int, value: str) -> bool:
        """Type into a slot. Returns False when the value was rejected."""
        if not _DIGITS.fullmatch(value):
            return False
        self.slots[index] = value[-1:]
        self.focus = index
        if value and index < self.length - 1:
            self.focus = index + 1
        return True

    def backspace(self, index: int) -> None:
        """Clear a filled slot, or step back from an empty one."""
        if self.slots[index]:
            self.slots[index] = ""
            self.focus = index
        elif index > 0:
            self.focus = index - 1

    def paste(self, text: str) -> None:
        digits = re.sub(r"[^0-9]", "", text)[: self.length]
        for i, digit in enumerate(digits):
            self.slots[i] = digit
        if len(digits) == self.length:
            self.focus = self.length - 1

    def clear(self) -> None:
        self.slots = [""] * self.length
        self.focus = 0


class VerificationState(str, Enum):
    NO_EMAIL = "no-email"
    AWAITING_CODE = "awaiting-code"
    VERIFYING = "verifying"
    VERIFIED = "verified"


class EmailVerificationFlow:
    """State for the verify-email screen."""

    def __init__(
        self,
        auth,
        email: str | None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.auth = auth
        self.email = (email or "").strip()
        self.clock = clock
        self.otp = OtpInput()
        self.error: str | None = None
        self.is_loading = False
        self.code_sent = False
        self._cooldown_until = 0.0
        self.state = (
            VerificationState.AWAITING_CODE if self.email else VerificationState.NO_EMAIL
        )

    @property
    def seconds_until_resend(self) -> int:
        return max(math.ceil(self._cooldown_until - self.clock()), 0)

    @property
    def can_resend(self) -> bool:
        return self.state is VerificationState.AWAITING_CODE and self.seconds_until_resend == 0

    async def start(self) -> None:
        """Send the first code as soon as the screen opens."""
        if self.email and not self.code_sent:
            await self.send_code()

    async def send_code(self) -> bool:
        if not self.email:
            self.error = "Email is required"
            return False
        if self.state is not VerificationState.AWAITING_CODE:
            raise InvalidTransitionError(f"Cannot send a code while {self.state.value}")
        if self.seconds_until_resend > 0:
            self.error = f"Please wait {self.seconds_until_resend}s before requesting a new code"
            return False

        self.is_loading = True
        self.error = None
        try:
            await self.auth.send_otp(self.email)
        except ApiError as e:
            self.error = e.message("Failed to send OTP")
            return False
        finally:
            self.is_loading = False

        self.code_sent = True
        self._cooldown_until = self.clock() + RESEND_COOLDOWN_SECONDS
        logger.debug(f"Verification code sent to {self.email}")
        return True

    async def verify(self) -> bool:
        if self.state is not VerificationState.AWAITING_CODE:
            raise InvalidTransitionError(f"Cannot verify while {self.state.value}")
        if not self.otp.is_complete:
            self.error = f"Please enter the complete {self.otp.length}-digit code"
            return False

        self.state = VerificationState.VERIFYING
        self.is_loading = True
        self.error = None
        try:
            await self.auth.verify_otp(self.email, self.otp.code)
        except ApiError as e:
            self.state = VerificationState.AWAITING_CODE
            self.error = e.message("Invalid OTP code")
            self.otp.clear()
            return False
        finally:
            self.is_loading = False

        self.state = VerificationState.VERIFIED
        logger.info(f"Email {self.email} verified")
        return True
