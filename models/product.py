"""
models/product.py
-----------------
Domain model for catalogue products.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Product:
    """
    A product that can be added to an order.

    Attributes:
        name: Display name.
        price: Unit price, never negative.
        picture_url: Optional image location.
        id: Database primary key (None for new records).
    """
    name: str
    price: float
    picture_url: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Product price cannot be negative: {self.price}")

    def __str__(self) -> str:
        return f"{self.name} ({self.price:.2f})"
