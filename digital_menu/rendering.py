"""Rendering helpers shared by the app and its modal screens."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from digital_menu.cart import total_items, total_price
from digital_menu.checkout import format_amount
from digital_menu.config import CURRENCY_SYMBOL
from digital_menu.constant import CATEGORY_BADGE_STYLES, FALLBACK_BADGE_STYLE
from digital_menu.models import Cart, CartLine, MenuItem


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    return CATEGORY_BADGE_STYLES.get(category, FALLBACK_BADGE_STYLE)


def format_money(amount: Decimal, currency: str = CURRENCY_SYMBOL) -> str:
    return f"{currency} {format_amount(amount)}"


def format_menu_item(item: MenuItem) -> Text:
    """Render a result row: category badge, title and unit price."""
    text = Text()
    if item.category:
        text.append(f" {item.category} ", style=badge_style(item.category))
        text.append(" ")
    text.append(item.title)
    text.append(f"  {format_money(item.price)}", style="bold")
    return text


def format_cart_line(line: CartLine) -> Text:
    """Render ``<qty>x <title>  <subtotal>``, with the unit price when qty > 1."""
    text = Text()
    text.append(f"{line.quantity}x ", style="bold")
    text.append(line.title)
    text.append(f"  {format_money(line.subtotal)}")
    if line.quantity > 1:
        text.append(f" ({format_money(line.price)} each)", style="dim")
    return text


def format_cart_total(cart: Cart) -> Text:
    text = Text()
    text.append("Total: ", style="bold")
    text.append(format_money(total_price(cart)), style="bold")
    return text


def cart_badge(cart: Cart) -> str:
    """Header badge text; empty when the cart holds nothing."""
    count = total_items(cart)
    if count <= 0:
        return ""
    return f"Cart ({count})"


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Slice of a list to show so the selected row stays roughly centered."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        half = rows // 2
        start = selected - half
        start = max(0, start)
        start = min(start, total - rows)

    return (start, start + rows)
