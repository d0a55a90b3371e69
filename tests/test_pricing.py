from decimal import Decimal

import pytest

from restaurant.domain.menu import MENU, MenuItem
from restaurant.domain.pricing import compute_total, split_ordered_items


@pytest.mark.parametrize(
    "items,expected",
    (
        ([], Decimal("0")),
        (["Burger"], Decimal("50.00")),
        (["Burger", "Pizza"], Decimal("200.00")),
        ([" Burger "], Decimal("50.00")),
        (["burger"], Decimal("0")),
        (["Burger", "Burger"], Decimal("100.00")),
        (["Burger", "Unknown"], Decimal("50.00")),
        (["Ice Cream"], Decimal("45.00")),
        (["Ice  Cream"], Decimal("0")),
        (["\tSoup\n", "Soda"], Decimal("55.00")),
    ),
)
def test_compute_total(items: list[str], expected: Decimal) -> None:
    assert compute_total(items) == expected


def test_compute_total_every_menu_item() -> None:
    got = compute_total(item.name for item in MENU)
    assert got == sum((item.price for item in MENU), Decimal("0"))
    assert got == Decimal("555.00")


def test_compute_total_duplicate_menu_names_each_match() -> None:
    menu = (MenuItem("Tea", Decimal("5.00")), MenuItem("Tea", Decimal("7.50")))
    assert compute_total(["Tea"], menu=menu) == Decimal("12.50")


def test_menu_is_fixed() -> None:
    assert len(MENU) == 10
    assert len({item.name for item in MENU}) == 10
    assert all(item.price >= 0 for item in MENU)


@pytest.mark.parametrize(
    "raw,expected",
    (
        ("Burger", ["Burger"]),
        ("Burger,Unknown", ["Burger", "Unknown"]),
        ("Pizza, Soda", ["Pizza", " Soda"]),
        ("Fries,,Fries", ["Fries", "", "Fries"]),
    ),
)
def test_split_ordered_items_keeps_whitespace(raw: str, expected: list[str]) -> None:
    assert split_ordered_items(raw) == expected
