from __future__ import annotations

from decimal import Decimal

import pytest

from digital_menu.cart import total_price
from digital_menu.cart_modal import CartModal
from digital_menu.checkout import CheckoutSettings
from digital_menu.menu_app import MenuApp
from digital_menu.notice_modal import NoticeModal

SETTINGS = CheckoutSettings(base_uri="https://wa.me/", destination="5500000000000")


def _make_app(catalog, opened: list[str]) -> MenuApp:
    return MenuApp(catalog=catalog, open_url=opened.append, settings=SETTINGS)


def _quantities(app: MenuApp) -> list[tuple[int, int]]:
    return [(line.id, line.quantity) for line in app.cart]


@pytest.mark.asyncio
async def test_enter_adds_highlighted_item(catalog) -> None:
    app = _make_app(catalog, [])
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter", "down", "a")

        assert _quantities(app) == [(1, 2), (2, 1)]
        assert total_price(app.cart) == Decimal("58.30")
        assert app.sub_title == "Cart (3)"


@pytest.mark.asyncio
async def test_search_filters_visible_items(catalog) -> None:
    app = _make_app(catalog, [])
    async with app.run_test() as pilot:
        await pilot.press("s", "b", "u", "r", "g")

        assert app.input_state == "search"
        assert app.search_text == "burg"
        assert [item.id for item in app.visible_items()] == [1]

        await pilot.press("backspace")
        assert app.search_text == "bur"

        await pilot.press("escape")
        assert app.input_state == "normal"
        assert app.visible_items() == list(catalog)


@pytest.mark.asyncio
async def test_enter_in_search_adds_filtered_item(catalog) -> None:
    app = _make_app(catalog, [])
    async with app.run_test() as pilot:
        await pilot.press("s", "m", "i", "l", "k", "enter")

        assert _quantities(app) == [(4, 1)]


@pytest.mark.asyncio
async def test_checkout_with_empty_cart_shows_notice(catalog) -> None:
    opened: list[str] = []
    app = _make_app(catalog, opened)
    async with app.run_test() as pilot:
        await pilot.press("ctrl+s")
        await pilot.pause()

        assert isinstance(app.screen, NoticeModal)
        assert opened == []

        await pilot.press("enter")
        await pilot.pause()

        assert not isinstance(app.screen, NoticeModal)
        assert app.cart.is_empty


@pytest.mark.asyncio
async def test_checkout_hands_off_order_url(catalog) -> None:
    opened: list[str] = []
    app = _make_app(catalog, opened)
    async with app.run_test() as pilot:
        await pilot.press("enter", "ctrl+s")
        await pilot.pause()

        assert len(opened) == 1
        assert opened[0].startswith("https://wa.me/5500000000000?text=")
        assert "1x%20X-Burger%20Cl%C3%A1ssico%20(R%24%2020.90)" in opened[0]
        assert _quantities(app) == [(1, 1)]


@pytest.mark.asyncio
async def test_cart_modal_changes_quantities(catalog) -> None:
    opened: list[str] = []
    app = _make_app(catalog, opened)
    async with app.run_test() as pilot:
        await pilot.press("enter", "down", "enter", "c")
        await pilot.pause()
        assert isinstance(app.screen, CartModal)

        await pilot.press("right")
        assert _quantities(app) == [(1, 2), (2, 1)]

        await pilot.press("left", "left")
        assert _quantities(app) == [(2, 1)]

        await pilot.press("enter")
        await pilot.pause()
        assert len(opened) == 1

        await pilot.press("x")
        assert app.cart.is_empty

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, CartModal)
        assert app.sub_title == MenuApp.SUB_TITLE


@pytest.mark.asyncio
async def test_cart_modal_checkout_on_empty_cart_shows_notice(catalog) -> None:
    opened: list[str] = []
    app = _make_app(catalog, opened)
    async with app.run_test() as pilot:
        await pilot.press("c")
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()

        assert isinstance(app.screen, NoticeModal)
        assert opened == []
