"""Runtime configuration defaults for the menu, checkout handoff and logging."""

from __future__ import annotations

import os

# Messaging handoff target. The destination is a phone number in international format.
MESSAGING_BASE_URI = "https://wa.me/"
DESTINATION_NUMBER = "5521973058890"

CURRENCY_SYMBOL = "R$"
ORDER_GREETING = "Olá! Gostaria de fazer o seguinte pedido:"

# Optional JSON catalog replacing the built-in menu.
CATALOG_PATH: str | None = None

DEBUG_LOG_PATH = "/tmp/digital-menu-debug.log"

_BASE_URI_ENV = "DIGITAL_MENU_MESSAGING_BASE_URI"
_DESTINATION_ENV = "DIGITAL_MENU_DESTINATION"
_CATALOG_PATH_ENV = "DIGITAL_MENU_CATALOG_PATH"
_DEBUG_LOG_ENV = "DIGITAL_MENU_DEBUG_LOG"


def _env_or_default(name: str, default: str | None) -> str | None:
    value = os.environ.get(name, "").strip()
    if value:
        return value
    return default


def resolve_messaging_base_uri() -> str:
    """Return the messaging base URI, honoring DIGITAL_MENU_MESSAGING_BASE_URI."""
    return _env_or_default(_BASE_URI_ENV, MESSAGING_BASE_URI) or MESSAGING_BASE_URI


def resolve_destination_number() -> str:
    """Return the order destination, honoring DIGITAL_MENU_DESTINATION."""
    return _env_or_default(_DESTINATION_ENV, DESTINATION_NUMBER) or DESTINATION_NUMBER


def resolve_catalog_path() -> str | None:
    """Return the external catalog path, or None to use the built-in menu."""
    return _env_or_default(_CATALOG_PATH_ENV, CATALOG_PATH)


def resolve_debug_log_path() -> str:
    return _env_or_default(_DEBUG_LOG_ENV, DEBUG_LOG_PATH) or DEBUG_LOG_PATH
