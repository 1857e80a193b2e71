"""
models/order.py
---------------
Domain models for orders and their product lines.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import NamedTuple, Optional

from models.product import Product


class OrderProductPK(NamedTuple):
    """Composite key of an order line."""
    order_id: int
    product_id: int


@dataclass
class OrderProduct:
    """
    One line of an order: a product and how many of it.

    Attributes:
        order_id: Owning order.
        product_id: Ordered product.
        quantity: Number of units, at least 1.
        product: The loaded Product, when the repository joined it in.
    """
    order_id: int
    product_id: int
    quantity: int
    product: Optional[Product] = None

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive: {self.quantity}")

    @property
    def pk(self) -> OrderProductPK:
        return OrderProductPK(self.order_id, self.product_id)

    @property
    def total_price(self) -> float:
        """Unit price times quantity (0 when the product is not loaded)."""
        if self.product is None:
            return 0.0
        return self.product.price * self.quantity

    def __str__(self) -> str:
        label = self.product.name if self.product else f"product #{self.product_id}"
        return f"{self.quantity} x {label}"


@dataclass
class Order:
    """
    A customer order.

    Attributes:
        date_created: Day the order was placed.
        status: Free-form status label (default: PAID).
        order_products: Lines, filled in by OrderRepository.find_by_id.
        id: Database primary key (None for new records).
    """
    date_created: date = field(default_factory=date.today)
    status: str = "PAID"
    order_products: list[OrderProduct] = field(default_factory=list)
    id: Optional[int] = None

    @property
    def total_order_price(self) -> float:
        return sum((line.total_price for line in self.order_products), 0.0)

    @property
    def number_of_products(self) -> int:
        return len(self.order_products)

    def __str__(self) -> str:
        return (
            f"Order #{self.id} | {self.date_created} | {self.status} | "
            f"{self.number_of_products} line(s), total {self.total_order_price:.2f}"
        )
