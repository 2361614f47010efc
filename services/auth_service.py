# -*- coding: utf-8 -*-
"""
Authentication Service - signs users in against the portal API.

POST {AUTH.LOGIN}
Body: {"email": "...", "password": "..."}

Expected success response:
    {"data": {"token": "<jwt>", "user": {"dashboardUrl": "...", ...}}}

Token and user are persisted through the injected SessionStore.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from models.user import PortalUser
from services.api_client import PortalApiClient
from services.error_mapper import server_message
from services.exceptions import ApiException, NetworkException
from services.session_store import (
    TOKEN_KEY,
    USER_KEY,
    SessionStore,
    clear_auth,
    is_valid_jwt,
)
from services.translation_manager import tr
from services.wizard.step_validator import is_email
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class LoginOutcome:
    user: Optional[PortalUser] = None
    token: Optional[str] = None
    error: str = ""
    network_error: bool = False

    @property
    def success(self) -> bool:
        return self.user is not None


def validate_credentials(email: str, password: str) -> Dict[str, str]:
    """Local sign-in form validation."""
    errors: Dict[str, str] = {}
    if not (email or "").strip():
        errors["email"] = tr("validation.email_required")
    elif not is_email(email):
        errors["email"] = tr("validation.email_enter_valid")
    if not password:
        errors["password"] = tr("validation.password_required")
    return errors


class AuthService:
    """Authentication service that delegates to the REST API."""

    def __init__(self, client: PortalApiClient, session_store: SessionStore):
        self.client = client
        self.session_store = session_store

    def login(self, email: str, password: str) -> LoginOutcome:
        """
        Authenticate a user and persist the session.

        Returns:
            LoginOutcome with either the user or a user-facing error
        """
        try:
            response = self.client.post_json(
                self.client.endpoints.AUTH.LOGIN,
                {"email": email, "password": password}
            )

        except ApiException as e:
            logger.warning(f"API login failed ({e.status_code}) for {email}: {e.response_data}")
            if e.status_code == 423:
                return LoginOutcome(error=tr("error.login.locked"))
            if e.status_code == 403:
                return LoginOutcome(error=server_message(e, tr("error.login.failed")))
            return LoginOutcome(error=server_message(e, tr("error.login.failed")))

        except NetworkException as e:
            logger.error(f"Cannot connect to API for login: {e}")
            return LoginOutcome(error=tr("toast.network_error"), network_error=True)

        try:
            data = response["data"]
            token = data["token"]
            user_data = data["user"]
        except (TypeError, KeyError) as e:
            logger.error(f"Invalid login response: {e}")
            return LoginOutcome(error=tr("error.login.failed"))

        if not isinstance(user_data, dict) or not is_valid_jwt(token):
            logger.error(f"Invalid login response: user={type(user_data).__name__}, token rejected")
            return LoginOutcome(error=tr("error.login.failed"))
        user = PortalUser.from_api(user_data)

        self.session_store.set(TOKEN_KEY, token)
        self.session_store.set(USER_KEY, user.to_dict())
        logger.info(f"Logged in as {user.email} ({user.role})")
        return LoginOutcome(user=user, token=token)

    def restore_session(self) -> Optional[PortalUser]:
        """
        Return the persisted user when the stored session looks valid.

        A malformed token or user record is cleared silently.
        """
        token = self.session_store.get(TOKEN_KEY)
        user_data = self.session_store.get(USER_KEY)

        if not token or not user_data:
            return None

        if not is_valid_jwt(token) or not isinstance(user_data, dict):
            logger.warning("Clearing malformed stored session")
            clear_auth(self.session_store)
            return None

        try:
            return PortalUser.from_api(user_data)
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Clearing unreadable stored user: {e}")
            clear_auth(self.session_store)
            return None

    def current_user(self) -> Optional[PortalUser]:
        return self.restore_session()

    def logout(self):
        """Notify the API (best effort) and forget the session."""
        try:
            self.client.post_json(self.client.endpoints.AUTH.LOGOUT, {}, auth=True)
        except (ApiException, NetworkException) as e:
            logger.info(f"Logout request failed, clearing local session anyway: {e}")
        finally:
            clear_auth(self.session_store)
        logger.info("Logged out")
