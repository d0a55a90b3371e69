from decimal import Decimal
from typing import NamedTuple


class MenuItem(NamedTuple):
    name: str
    price: Decimal


MENU: tuple[MenuItem, ...] = (
    MenuItem("Burger", Decimal("50.00")),
    MenuItem("Pizza", Decimal("150.00")),
    MenuItem("Pasta", Decimal("100.00")),
    MenuItem("Sandwich", Decimal("40.00")),
    MenuItem("Fries", Decimal("30.00")),
    MenuItem("Soda", Decimal("20.00")),
    MenuItem("Coffee", Decimal("25.00")),
    MenuItem("Salad", Decimal("60.00")),
    MenuItem("Ice Cream", Decimal("45.00")),
    MenuItem("Soup", Decimal("35.00")),
)
