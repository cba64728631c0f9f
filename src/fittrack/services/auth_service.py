"""Authentication service: API calls plus session bookkeeping."""

import httpx
from loguru import logger

from ..clients.endpoints import FitTrackAPI
from ..errors import ApiError
from ..models.requests import (
    ChangePasswordData,
    LoginCredentials,
    RegisterData,
    ResetPasswordData,
    UpdateProfileData,
)
from ..models.user import TokenPair, User
from ..state.store import AppStore


class AuthService:
    """Combines the auth/user endpoints with the session store."""

    def __init__(self, api: FitTrackAPI, store: AppStore):
        self.api = api
        self.store = store
        api.client.add_expiry_listener(store.expire_session)

    @property
    def credentials(self):
        return self.store.credentials

    async def register(self, data: RegisterData) -> User | None:
        """Create an account. The caller continues with email verification."""
        payload = await self.api.auth.register(data)
        logger.info(f"Registered account {data.username}")
        if isinstance(payload, dict):
            user_data = payload.get("user", payload)
            if isinstance(user_data, dict) and "id" in user_data:
                return User.from_dict(user_data)
        return None

    async def login(self, credentials: LoginCredentials) -> User:
        """Log in, persist the tokens and set the session user."""
        payload = await self.api.auth.login(credentials)
        await self.credentials.store(
            TokenPair(
                access_token=payload["access_token"],
                refresh_token=payload.get("refresh_token"),
            )
        )
        user = User.from_dict(payload["user"])
        self.store.set_user(user)
        logger.info(f"Logged in as {user.username}")
        return user

    async def logout(self) -> None:
        """Invalidate the server session if possible; always clear locally."""
        try:
            await self.api.auth.logout()
        except (ApiError, httpx.HTTPError) as e:
            logger.warning(f"Logout API call failed: {e}")
        finally:
            await self.store.logout()

    async def refresh(self, refresh_token: str) -> dict:
        return await self.api.auth.refresh(refresh_token)

    async def request_password_reset(self, email: str) -> dict | None:
        return await self.api.auth.forgot_password(email)

    async def reset_password(self, data: ResetPasswordData) -> dict | None:
        return await self.api.auth.reset_password(data)

    async def change_password(self, data: ChangePasswordData) -> dict | None:
        return await self.api.auth.change_password(data)

    async def verify_email(self, token: str) -> dict | None:
        return await self.api.auth.verify_email(token)

    async def resend_verification(self) -> dict | None:
        return await self.api.auth.resend_verification()

    async def resend_password_reset(self, email: str) -> dict | None:
        return await self.api.auth.resend_reset(email)

    async def send_otp(self, email: str) -> dict | None:
        return await self.api.auth.send_otp(email)

    async def verify_otp(self, email: str, otp: str) -> dict | None:
        return await self.api.auth.verify_otp(email, otp)

    async def get_profile(self) -> User:
        """Fetch the current user and refresh the session copy."""
        user = User.from_dict(await self.api.users.get_me())
        self.store.set_user(user)
        return user

    async def update_profile(self, data: UpdateProfileData) -> User:
        user = User.from_dict(await self.api.users.update_me(data))
        self.store.set_user(user)
        return user

    async def update_avatar(
        self, filename: str, content: bytes, content_type: str = "application/octet-stream"
    ) -> User:
        user = User.from_dict(
            await self.api.users.update_avatar(filename, content, content_type)
        )
        self.store.set_user(user)
        return user

    async def delete_account(self, password: str) -> None:
        await self.api.users.delete_me(password)
        await self.store.logout()
        logger.info("Account deleted")

    async def is_authenticated(self) -> bool:
        return bool(await self.credentials.get_access_token())

    async def get_access_token(self) -> str | None:
        return await self.credentials.get_access_token()

    async def get_refresh_token(self) -> str | None:
        return await self.credentials.get_refresh_token()

    async def clear_tokens(self) -> None:
        await self.credentials.clear()
