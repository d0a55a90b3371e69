from decimal import Decimal
from typing import Iterable

from restaurant.domain.menu import MENU, MenuItem


def split_ordered_items(raw: str) -> list[str]:
    """Split the comma separated form value. Names are kept untrimmed."""
    return raw.split(",")


def compute_total(
    ordered_items: Iterable[str],
    *,
    menu: Iterable[MenuItem] = MENU,
) -> Decimal:
    """Sum the menu price of every ordered name.

    Names are trimmed and then matched exactly, case included, against every
    menu entry. A name that matches nothing adds zero.
    """
    menu = tuple(menu)
    total = Decimal("0.00")
    for name in ordered_items:
        for item in menu:
            if name.strip() == item.name:
                total += item.price
    return total
