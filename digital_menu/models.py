"""Domain models for the digital menu."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator


@dataclass(frozen=True)
class MenuItem:
    """A purchasable catalog item."""

    id: int
    title: str
    description: str
    price: Decimal
    image: str
    category: str


@dataclass(frozen=True)
class CartLine:
    """One catalog item in the cart, with its quantity (always >= 1)."""

    id: int
    title: str
    description: str
    price: Decimal
    image: str
    category: str
    quantity: int = 1

    @classmethod
    def from_menu_item(cls, item: MenuItem, quantity: int = 1) -> CartLine:
        return cls(
            id=item.id,
            title=item.title,
            description=item.description,
            price=item.price,
            image=item.image,
            category=item.category,
            quantity=quantity,
        )

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity

    @property
    def menu_item(self) -> MenuItem:
        """Rebuild the catalog item this line was copied from."""
        return MenuItem(
            id=self.id,
            title=self.title,
            description=self.description,
            price=self.price,
            image=self.image,
            category=self.category,
        )


@dataclass(frozen=True)
class Cart:
    """Ordered cart lines, in the order each item was first added.

    Totals are not stored here; see digital_menu.cart for the derived queries.
    """

    lines: tuple[CartLine, ...] = ()

    @classmethod
    def empty(cls) -> Cart:
        return cls()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def line_for(self, item_id: int) -> CartLine | None:
        for line in self.lines:
            if line.id == item_id:
                return line
        return None
