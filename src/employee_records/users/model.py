from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A login identity from the configured credential list."""

    username: str
    password_hash: str
    is_active: bool = True
