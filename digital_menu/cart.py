"""Cart transitions and derived totals.

Every transition takes a Cart and returns a Cart; the input is never mutated.
Unknown item ids are ignored rather than reported, so all three transitions
always succeed.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from digital_menu.models import Cart, CartLine, MenuItem

logger = logging.getLogger(__name__)


def add_item(cart: Cart, item: MenuItem) -> Cart:
    """Add one unit of item, incrementing its line if it is already in the cart."""
    existing = cart.line_for(item.id)
    if existing is None:
        logger.debug("cart_add id=%s qty=1 new_line=True", item.id)
        return Cart(lines=cart.lines + (CartLine.from_menu_item(item),))

    quantity = existing.quantity + 1
    logger.debug("cart_add id=%s qty=%s new_line=False", item.id, quantity)
    return Cart(lines=_replace_line(cart.lines, item.id, quantity))


def decrement_or_remove_item(cart: Cart, item_id: int) -> Cart:
    """Take one unit away from a line, dropping the line when its last unit goes."""
    existing = cart.line_for(item_id)
    if existing is None:
        return cart

    if existing.quantity > 1:
        logger.debug("cart_decrement id=%s qty=%s", item_id, existing.quantity - 1)
        return Cart(lines=_replace_line(cart.lines, item_id, existing.quantity - 1))

    logger.debug("cart_decrement id=%s removed=True", item_id)
    return Cart(lines=tuple(line for line in cart.lines if line.id != item_id))


def delete_item(cart: Cart, item_id: int) -> Cart:
    """Remove the whole line for item_id, whatever its quantity."""
    if cart.line_for(item_id) is None:
        return cart
    logger.debug("cart_delete id=%s", item_id)
    return Cart(lines=tuple(line for line in cart.lines if line.id != item_id))


def total_items(cart: Cart) -> int:
    return sum(line.quantity for line in cart.lines)


def total_price(cart: Cart) -> Decimal:
    """Sum of price * quantity over all lines, unrounded."""
    return sum((line.subtotal for line in cart.lines), Decimal("0"))


def _replace_line(lines: tuple[CartLine, ...], item_id: int, quantity: int) -> tuple[CartLine, ...]:
    return tuple(
        CartLine(
            id=line.id,
            title=line.title,
            description=line.description,
            price=line.price,
            image=line.image,
            category=line.category,
            quantity=quantity,
        )
        if line.id == item_id
        else line
        for line in lines
    )
