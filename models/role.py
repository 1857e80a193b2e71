"""
models/role.py
--------------
Domain model for authorization roles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ERole(str, Enum):
    """The closed set of role kinds a user can hold."""

    ROLE_USER = "ROLE_USER"
    ROLE_MODERATOR = "ROLE_MODERATOR"
    ROLE_ADMIN = "ROLE_ADMIN"


@dataclass
class Role:
    """
    A stored role.

    Attributes:
        name: The role kind.
        id: Database primary key (None until saved).
    """
    name: ERole
    id: Optional[int] = None

    def __post_init__(self) -> None:
        # Accept the stored string form as well as the enum member.
        self.name = ERole(self.name)

    def __str__(self) -> str:
        return f"Role(id={self.id}, name={self.name.value})"
