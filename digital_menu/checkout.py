"""Order summary formatting and the messaging handoff."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable
from urllib.parse import quote

from digital_menu.cart import total_items, total_price
from digital_menu.config import (
    CURRENCY_SYMBOL,
    DESTINATION_NUMBER,
    MESSAGING_BASE_URI,
    ORDER_GREETING,
    resolve_destination_number,
    resolve_messaging_base_uri,
)
from digital_menu.models import Cart

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")
# Characters JavaScript's encodeURIComponent leaves alone on top of quote()'s defaults.
_URI_COMPONENT_SAFE = "!~*'()"

EMPTY_CART_MESSAGE = "Your cart is empty. Add items first."


class EmptyCartError(ValueError):
    """Raised when checkout is attempted with nothing in the cart."""

    def __init__(self, message: str = EMPTY_CART_MESSAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CheckoutSettings:
    """Where and how an order message is sent."""

    base_uri: str = MESSAGING_BASE_URI
    destination: str = DESTINATION_NUMBER
    currency: str = CURRENCY_SYMBOL
    greeting: str = ORDER_GREETING

    @classmethod
    def from_env(cls) -> CheckoutSettings:
        return cls(
            base_uri=resolve_messaging_base_uri(),
            destination=resolve_destination_number(),
        )


@dataclass(frozen=True)
class PlacedOrder:
    """What was handed off at checkout."""

    message: str
    url: str
    total_items: int
    total_price: Decimal


def format_amount(amount: Decimal) -> str:
    """Render a money amount with exactly two decimals, rounding half up."""
    return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_order_summary(cart: Cart, currency: str = CURRENCY_SYMBOL) -> str:
    """Render cart lines plus a total line, e.g. ``2x X-Burger (R$ 41.80)``."""
    if cart.is_empty:
        raise EmptyCartError()

    lines = [f"{line.quantity}x {line.title} ({currency} {format_amount(line.subtotal)})" for line in cart]
    return "\n".join(lines) + f"\n\nTotal: {currency} {format_amount(total_price(cart))}"


def compose_order_message(cart: Cart, greeting: str = ORDER_GREETING, currency: str = CURRENCY_SYMBOL) -> str:
    """Prefix the order summary with a greeting paragraph, if one is given."""
    summary = format_order_summary(cart, currency)
    if not greeting:
        return summary
    return f"{greeting}\n\n{summary}"


def build_checkout_url(message: str, base_uri: str, destination: str) -> str:
    """Build ``<base_uri><destination>?text=<message>`` with the message percent-encoded."""
    return f"{base_uri}{destination}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"


def place_order(
    cart: Cart,
    open_url: Callable[[str], object],
    settings: CheckoutSettings | None = None,
) -> PlacedOrder:
    """Hand the cart off to the messaging endpoint.

    Raises EmptyCartError before anything is opened when the cart is empty.
    The opener's return value is logged but otherwise not interpreted.
    """
    if cart.is_empty:
        logger.info("checkout_blocked reason=empty_cart")
        raise EmptyCartError()

    if settings is None:
        settings = CheckoutSettings.from_env()

    message = compose_order_message(cart, settings.greeting, settings.currency)
    url = build_checkout_url(message, settings.base_uri, settings.destination)
    order = PlacedOrder(message=message, url=url, total_items=total_items(cart), total_price=total_price(cart))

    opened = open_url(url)
    logger.info(
        "checkout_handoff lines=%s items=%s total=%s opened=%r",
        len(cart),
        order.total_items,
        format_amount(order.total_price),
        opened,
    )
    return order
