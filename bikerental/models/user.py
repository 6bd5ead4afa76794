"""
User
---------------------------
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a User in the system.

    .. note:: The password is stored as given.
    """

    name: str
    email: str
    password: str
    id: Optional[str] = None

    def __str__(self):
        return f"[{self.id}] {self.name} ({self.email})"
