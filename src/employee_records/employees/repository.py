from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Persistence interface for the employee collection.

    Note: The store owns the collection in memory; the repository only loads it
    once at startup and writes the whole collection back after each mutation.
    """

    def load_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_all(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError
