from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .repository import UserRepository
from .tokens import TokenRegistry

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):].strip() or None


class AuthService:
    """Use case: log in, check a bearer token, log out."""

    def __init__(self, users: UserRepository, tokens: TokenRegistry):
        self._users = users
        self._tokens = tokens

    def login(self, username: str, password: str) -> str:
        username = require_non_empty(username, "Username")
        require_non_empty(password, "Password")

        user = self._users.get_by_username(username)
        if not user or not user.is_active:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. a corrupted or unsupported hash format
            ok = False

        if not ok:
            logger.info("Rejected login for %r", username)
            raise AuthenticationError("Invalid credentials")

        logger.info("User %r logged in", username)
        return self._tokens.issue(username)

    def check(self, token: Optional[str]) -> str:
        username = self._tokens.resolve(token)
        if username is None:
            raise AuthenticationError("Authentication required")
        return username

    def logout(self, token: Optional[str]) -> bool:
        return self._tokens.revoke(token)
