"""Main Textual app class."""

from __future__ import annotations

import logging
import webbrowser
from typing import Callable, Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from digital_menu.cart import add_item, total_items
from digital_menu.cart_modal import CartModal, CartTransition
from digital_menu.checkout import CheckoutSettings, EmptyCartError, place_order
from digital_menu.data import default_catalog, filter_catalog
from digital_menu.models import Cart, MenuItem
from digital_menu.notice_modal import NoticeModal
from digital_menu.rendering import (
    badge_style,
    cart_badge,
    format_cart_line,
    format_cart_total,
    format_menu_item,
    format_money,
    window_bounds,
)

logger = logging.getLogger(__name__)


def open_in_browser(url: str) -> bool:
    """Open url in a new browser tab."""
    return webbrowser.open(url, new=2)


class MenuApp(App):
    """A Textual app for browsing the menu, filling a cart and sending the order."""

    TITLE = "Cardápio Online"
    SUB_TITLE = "Cart empty"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #details {
        height: 4;
        padding: 0 1;
        color: $text-muted;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-total {
        height: 1;
        margin-top: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    search_text = reactive("")
    selected_index = reactive(0)

    BINDINGS = [
        ("up", "cycle_results(-1)", "Previous item"),
        ("down", "cycle_results(1)", "Next item"),
        ("enter", "add_selected", "Add item"),
        ("backspace", "backspace_query", "Delete query char"),
        ("escape", "cancel_search", "Exit search"),
        Binding("ctrl+s", "checkout", "Send order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog: Iterable[MenuItem] | None = None,
        open_url: Callable[[str], object] = open_in_browser,
        settings: CheckoutSettings | None = None,
    ) -> None:
        super().__init__()
        self.catalog: tuple[MenuItem, ...] = tuple(catalog) if catalog is not None else default_catalog()
        self.open_url = open_url
        self.settings = settings if settings is not None else CheckoutSettings.from_env()
        self.cart = Cart.empty()
        self.system_status = ""
        logger.debug("app_init catalog_items=%s", len(self.catalog))

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")
                yield Static(id="details")
            with Vertical(id="cart-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static("(cart is empty)", id="cart-list")
                yield Static(id="cart-total")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        logger.debug("on_key key=%r char=%r state=%r", event.key, event.character, self.input_state)

        if self.input_state == "search":
            self.search_text += event.character
            self.selected_index = 0
            self._refresh_menu()
            event.stop()
            return

        key = event.character.lower()
        if key == "s":
            self.input_state = "search"
            self.search_text = ""
            self.selected_index = 0
            self._refresh_menu()
            event.stop()
            return

        if key == "j":
            self.action_cycle_results(1)
            event.stop()
            return

        if key == "k":
            self.action_cycle_results(-1)
            event.stop()
            return

        if key == "a":
            self.action_add_selected()
            event.stop()
            return

        if key == "c":
            self.action_open_cart()
            event.stop()
            return

    def visible_items(self) -> list[MenuItem]:
        """Catalog items matching the current search text."""
        return filter_catalog(self.search_text, self.catalog)

    def update_cart(self, transition: CartTransition) -> Cart:
        """Replace the held cart with transition(cart) and re-render."""
        self.cart = transition(self.cart)
        self._refresh_cart()
        return self.cart

    def action_cancel_search(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_text = ""
        self.selected_index = 0
        self._refresh_menu()

    def action_cycle_results(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        results = self.visible_items()
        if not results:
            self.selected_index = 0
            self._refresh_menu()
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_menu()

    def action_add_selected(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        results = self.visible_items()
        if not results:
            return

        if self.selected_index >= len(results):
            self.selected_index = 0
        item = results[self.selected_index]
        self.update_cart(lambda cart: add_item(cart, item))
        self.system_status = f"Added {item.title}"
        self._refresh_search_bar()

    def action_backspace_query(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "search":
            return

        if not self.search_text:
            return
        self.search_text = self.search_text[:-1]
        self.selected_index = 0
        self._refresh_menu()

    def action_open_cart(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.push_screen(CartModal(lambda: self.cart, self.update_cart, self.action_checkout))

    def action_checkout(self) -> None:
        if isinstance(self.screen, NoticeModal):
            return

        logger.debug("checkout_enter lines=%s items=%s", len(self.cart), total_items(self.cart))
        try:
            order = place_order(self.cart, self.open_url, self.settings)
        except EmptyCartError as exc:
            self.system_status = "Nothing to send"
            self._refresh_search_bar()
            self.push_screen(NoticeModal(str(exc), title="Empty cart"))
            return

        self.system_status = f"Order sent: {order.total_items} item(s), {format_money(order.total_price)}"
        self._refresh_search_bar()

    def _main_static(self, selector: str) -> Static | None:
        # Widgets live on the base screen, which may sit below a modal.
        try:
            return self.screen_stack[0].query_one(selector, Static)
        except (IndexError, NoMatches):
            return None

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_cart()

    def _refresh_menu(self) -> None:
        self._refresh_search_bar()
        self._refresh_results(self.visible_items())

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _refresh_search_bar(self) -> None:
        bar = self._main_static("#search-bar")
        if bar is None:
            return
        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(f"S search, J/K move, Enter/A add, C cart, Ctrl+S send order.\n{status}")
            return

        text = Text()
        text.append(" Search ", style="bold #ffffff on #2f6db5")
        text.append(f": {self.search_text}")
        text.append("\nEsc to leave search", style="dim")
        bar.update(text)

    def _refresh_results(self, results: list[MenuItem]) -> None:
        results_widget = self._main_static("#results")
        details_widget = self._main_static("#details")
        if results_widget is None or details_widget is None:
            return

        if not results:
            results_widget.update("No results")
            details_widget.update("")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self._visible_rows(results_widget)
        start, end = window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_menu_item(results[idx]))

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)

        selected = results[self.selected_index]
        details = Text()
        details.append(selected.category, style=badge_style(selected.category))
        details.append(f"\n{selected.description}")
        details_widget.update(details)

    def _refresh_cart(self) -> None:
        self.sub_title = cart_badge(self.cart) or self.SUB_TITLE

        cart_widget = self._main_static("#cart-list")
        total_widget = self._main_static("#cart-total")
        if cart_widget is None or total_widget is None:
            return

        if self.cart.is_empty:
            cart_widget.update("(cart is empty)")
            total_widget.update("")
            return

        lines = Text()
        for idx, line in enumerate(self.cart):
            if idx > 0:
                lines.append("\n")
            lines.append_text(format_cart_line(line))
        cart_widget.update(lines)
        total_widget.update(format_cart_total(self.cart))
