"""
models/user.py
--------------
Domain model for plain user records.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    name: str
    email: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"User #{self.id}: {self.name} <{self.email or '-'}>"
