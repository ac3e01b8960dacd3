from __future__ import annotations

import secrets
from typing import Optional


class TokenRegistry:
    """In-memory bearer token -> username map.

    Tokens never expire; they disappear on logout or process restart.
    """

    def __init__(self, *, nbytes: int = 32):
        self._nbytes = nbytes
        self._tokens: dict[str, str] = {}

    def issue(self, username: str) -> str:
        token = secrets.token_urlsafe(self._nbytes)
        while token in self._tokens:
            token = secrets.token_urlsafe(self._nbytes)
        self._tokens[token] = username
        return token

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        return self._tokens.get(token)

    def revoke(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return self._tokens.pop(token, None) is not None
