import datetime

from jinja2 import Environment

from restaurant.domain.menu import MENU, MenuItem
from restaurant.domain.models import CustomerOrder


def money(amount: object) -> str:
    return f"{amount:.2f}"


class OrderListing:
    def __init__(
        self,
        orders: list[CustomerOrder],
        *,
        environment: Environment,
        menu: tuple[MenuItem, ...] = MENU,
        template_name: str = "index.html",
    ) -> None:
        self.orders = orders
        self.menu = menu
        self.env = environment
        self.name = template_name

    @property
    def menu_rows(self) -> list[dict[str, str]]:
        return [{"name": item.name, "price": money(item.price)} for item in self.menu]

    @property
    def order_rows(self) -> list[dict[str, str]]:
        return [
            {
                "name": order.name,
                "total": money(order.total_amount),
                "ordered_items": ", ".join(order.ordered_items),
            }
            for order in self.orders
        ]

    @property
    def year(self) -> int:
        return datetime.date.today().year

    def render(self) -> str:
        return self.env.get_template(self.name).render(listing=self)
