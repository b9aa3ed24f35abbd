from __future__ import annotations

from decimal import Decimal

import pytest

from digital_menu.cart import add_item
from digital_menu.checkout import (
    CheckoutSettings,
    EmptyCartError,
    build_checkout_url,
    compose_order_message,
    format_amount,
    format_order_summary,
    place_order,
)
from digital_menu.models import Cart

SETTINGS = CheckoutSettings(base_uri="https://wa.me/", destination="5500000000000", currency="R$", greeting="Hi!")


@pytest.fixture
def scenario_a_cart(burger, onion_rings) -> Cart:
    return add_item(add_item(add_item(Cart.empty(), burger), burger), onion_rings)


def test_format_amount_rounds_half_up_to_cents() -> None:
    assert format_amount(Decimal("58.3")) == "58.30"
    assert format_amount(Decimal("0.005")) == "0.01"
    assert format_amount(Decimal("1.994")) == "1.99"
    assert format_amount(Decimal("0")) == "0.00"


def test_order_summary_lists_lines_then_total(scenario_a_cart) -> None:
    assert format_order_summary(scenario_a_cart) == (
        "2x X-Burger Clássico (R$ 41.80)\n"
        "1x Onion Rings (R$ 16.50)\n"
        "\n"
        "Total: R$ 58.30"
    )


def test_order_summary_uses_given_currency(burger) -> None:
    cart = add_item(Cart.empty(), burger)

    assert format_order_summary(cart, currency="BRL") == "1x X-Burger Clássico (BRL 20.90)\n\nTotal: BRL 20.90"


def test_order_summary_rejects_empty_cart() -> None:
    with pytest.raises(EmptyCartError):
        format_order_summary(Cart.empty())


def test_order_message_starts_with_greeting(scenario_a_cart) -> None:
    message = compose_order_message(scenario_a_cart, greeting="Olá!")

    assert message.startswith("Olá!\n\n2x X-Burger Clássico")
    assert compose_order_message(scenario_a_cart, greeting="") == format_order_summary(scenario_a_cart)


def test_checkout_url_encodes_like_uri_component() -> None:
    url = build_checkout_url("Olá! 2x (R$ 1.00)\nTotal: *ok*", "https://wa.me/", "5521")

    assert url == "https://wa.me/5521?text=Ol%C3%A1!%202x%20(R%24%201.00)%0ATotal%3A%20*ok*"


def test_place_order_opens_url_once(scenario_a_cart) -> None:
    opened: list[str] = []

    order = place_order(scenario_a_cart, opened.append, SETTINGS)

    assert opened == [order.url]
    assert order.url.startswith("https://wa.me/5500000000000?text=Hi!%0A%0A2x%20X-Burger")
    assert order.message.endswith("Total: R$ 58.30")
    assert order.total_items == 3
    assert order.total_price == Decimal("58.30")


def test_place_order_ignores_opener_result(burger) -> None:
    cart = add_item(Cart.empty(), burger)

    order = place_order(cart, lambda url: False, SETTINGS)

    assert order.total_items == 1


def test_place_order_on_empty_cart_never_opens() -> None:
    opened: list[str] = []

    with pytest.raises(EmptyCartError, match="empty"):
        place_order(Cart.empty(), opened.append, SETTINGS)

    assert opened == []


def test_empty_cart_error_is_a_value_error() -> None:
    assert issubclass(EmptyCartError, ValueError)


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DIGITAL_MENU_DESTINATION", "5511999999999")
    monkeypatch.setenv("DIGITAL_MENU_MESSAGING_BASE_URI", "https://api.whatsapp.com/send/")

    settings = CheckoutSettings.from_env()

    assert settings.destination == "5511999999999"
    assert settings.base_uri == "https://api.whatsapp.com/send/"


def test_settings_from_env_falls_back_on_blank(monkeypatch) -> None:
    monkeypatch.setenv("DIGITAL_MENU_DESTINATION", "  ")
    monkeypatch.delenv("DIGITAL_MENU_MESSAGING_BASE_URI", raising=False)

    settings = CheckoutSettings.from_env()

    assert settings.destination == "5521973058890"
    assert settings.base_uri == "https://wa.me/"
