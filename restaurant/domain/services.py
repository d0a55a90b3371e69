import logging

from restaurant.domain.models import CustomerOrder
from restaurant.domain.pricing import compute_total, split_ordered_items
from restaurant.domain.repository import OrderRepository


logger = logging.getLogger(__name__)


class MissingField(ValueError):
    pass


def require(value: object, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise MissingField(field)
    return value


async def list_orders(*, repository: OrderRepository) -> list[CustomerOrder]:
    return await repository.list_orders()


async def place_order(
    *,
    name: str,
    phone: str,
    ordered_items: str,
    repository: OrderRepository,
) -> CustomerOrder:
    items = split_ordered_items(ordered_items)
    order = CustomerOrder(
        name=name,
        phone=phone,
        ordered_items=items,
        total_amount=compute_total(items),
    )
    await repository.insert_order(order)
    logger.info(
        "Stored order for %s: %d item(s), total %s",
        name,
        len(items),
        order.total_amount,
    )
    return order
