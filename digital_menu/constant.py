"""Static menu records.

Prices are kept as strings so they convert to Decimal without float drift.
"""

from __future__ import annotations

# Canonical menu values consumed by digital_menu.data (which wraps these into MenuItem instances).
MENU_ITEMS: list[dict[str, int | str]] = [
    {
        "id": 1,
        "title": "X-Burger Clássico",
        "description": "Hambúrguer artesanal, queijo cheddar, alface, tomate e molho especial",
        "price": "20.90",
        "image": "https://images.unsplash.com/photo-1568901346375-23c9450c58cd?auto=format&fit=crop&w=800&q=80",
        "category": "Burgers",
    },
    {
        "id": 2,
        "title": "Onion Rings",
        "description": "Anéis de cebola crocantes com molho barbecue",
        "price": "16.50",
        "image": "https://images.unsplash.com/photo-1639024471283-03518883512d?auto=format&fit=crop&w=800&q=80",
        "category": "Acompanhamentos",
    },
    {
        "id": 3,
        "title": "Batata Frita",
        "description": "Batatas fritas crocantes com sal e orégano",
        "price": "12.90",
        "image": "https://images.unsplash.com/photo-1630384060421-cb20d0e0649d?auto=format&fit=crop&w=800&q=80",
        "category": "Acompanhamentos",
    },
    {
        "id": 4,
        "title": "Milkshake de Chocolate",
        "description": "Delicioso milkshake de chocolate com calda e chantilly",
        "price": "16.90",
        "image": "https://images.unsplash.com/photo-1572490122747-3968b75cc699?auto=format&fit=crop&w=800&q=80",
        "category": "Bebidas",
    },
]

# Badge colors by category; unknown categories fall back to FALLBACK_BADGE_STYLE.
CATEGORY_BADGE_STYLES: dict[str, str] = {
    "Burgers": "bold #ffffff on #b23a48",
    "Acompanhamentos": "bold #0b1f0f on #5fbf72",
    "Bebidas": "bold #ffffff on #2f6db5",
}

FALLBACK_BADGE_STYLE = "bold #1a1a1a on #d9b44a"
