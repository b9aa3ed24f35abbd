"""Cart modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from digital_menu.cart import add_item, decrement_or_remove_item, delete_item
from digital_menu.models import Cart, CartLine
from digital_menu.rendering import format_cart_line, format_cart_total

CartTransition = Callable[[Cart], Cart]


class CartModal(ModalScreen[None]):
    """Centered modal to review cart lines, change quantities and finish the order."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("right", "increment", "One more"),
        ("plus", "increment", "One more"),
        ("left", "decrement", "One less"),
        ("minus", "decrement", "One less"),
        ("x", "delete_line", "Remove line"),
        ("delete", "delete_line", "Remove line"),
        ("enter", "finish_order", "Finish order"),
    ]

    CSS = """
    CartModal {
        align: right middle;
        background: $background 60%;
    }

    #cart-dialog {
        width: 64;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #cart-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #cart-body {
        margin-bottom: 1;
        color: white;
    }

    #cart-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        get_cart: Callable[[], Cart],
        update_cart: Callable[[CartTransition], Cart],
        on_checkout: Callable[[], None],
    ) -> None:
        super().__init__()
        self.get_cart = get_cart
        self.update_cart = update_cart
        self.on_checkout = on_checkout

    def compose(self) -> ComposeResult:
        with Container(id="cart-dialog"):
            yield Static("Your Cart", id="cart-title")
            yield Static(id="cart-body")
            yield Static(
                "J/K/↑/↓ move, →/+ one more, ←/- one less, X remove, Enter finish order, Esc/q close",
                id="cart-help",
            )

    def on_mount(self) -> None:
        self.refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        cart = self.get_cart()
        if cart.is_empty:
            return
        self.cursor_index = (self.cursor_index + delta) % len(cart)
        self.refresh_content()

    def action_increment(self) -> None:
        line = self._selected_line()
        if line is None:
            return
        item = line.menu_item
        self.update_cart(lambda cart: add_item(cart, item))
        self.refresh_content()

    def action_decrement(self) -> None:
        line = self._selected_line()
        if line is None:
            return
        item_id = line.id
        self.update_cart(lambda cart: decrement_or_remove_item(cart, item_id))
        self.refresh_content()

    def action_delete_line(self) -> None:
        line = self._selected_line()
        if line is None:
            return
        item_id = line.id
        self.update_cart(lambda cart: delete_item(cart, item_id))
        self.refresh_content()

    def action_finish_order(self) -> None:
        self.on_checkout()

    def _selected_line(self) -> CartLine | None:
        cart = self.get_cart()
        if cart.is_empty:
            return None
        if not (0 <= self.cursor_index < len(cart)):
            return None
        return cart.lines[self.cursor_index]

    def refresh_content(self) -> None:
        body = self.query_one("#cart-body", Static)
        cart = self.get_cart()
        if cart.is_empty:
            self.cursor_index = 0
            body.update("Your cart is empty")
            return

        if self.cursor_index >= len(cart):
            self.cursor_index = len(cart) - 1

        content = Text(style="white")
        for idx, line in enumerate(cart):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            content.append(pointer)
            content.append_text(format_cart_line(line))

        content.append("\n\n")
        content.append_text(format_cart_total(cart))
        body.update(content)
