from __future__ import annotations

from typing import Iterable, Optional, Protocol

from werkzeug.security import generate_password_hash

from .model import User


class UserRepository(Protocol):
    """Lookup interface for login identities.

    Note (DIP): AuthService depends on this interface, not on where the
    credentials come from.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError


class InMemoryUserRepository(UserRepository):
    """Fixed credential list loaded from settings; passwords are kept hashed."""

    def __init__(self, users: Iterable[User]):
        self._users = {u.username: u for u in users}

    @classmethod
    def from_credentials(cls, credentials: Iterable[tuple[str, str]]) -> "InMemoryUserRepository":
        return cls(
            User(username=str(username), password_hash=generate_password_hash(str(password)))
            for username, password in credentials
        )

    def get_by_username(self, username: str) -> Optional[User]:
        return self._users.get(username)
