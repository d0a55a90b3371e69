import asyncio
import logging

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from restaurant.domain.models import CustomerOrder


logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class StoreUnavailable(StoreError):
    pass


class PersistenceError(StoreError):
    pass


class OrderRepository:
    """Customer orders kept in a document collection.

    pymongo is blocking, so each call runs in a worker thread. The collection
    (and the client behind it) is shared by every request.
    """

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def _find_all(self) -> list[CustomerOrder]:
        return [CustomerOrder.from_document(doc) for doc in self.collection.find({})]

    async def list_orders(self) -> list[CustomerOrder]:
        try:
            return await asyncio.to_thread(self._find_all)
        except PyMongoError as e:
            logger.exception("Error retrieving customers")
            raise StoreUnavailable(str(e)) from e
        except (TypeError, ValueError, ArithmeticError) as e:
            # A document whose total is not a number.
            logger.exception("Unreadable customer document")
            raise StoreUnavailable(str(e)) from e

    async def insert_order(self, order: CustomerOrder) -> None:
        try:
            await asyncio.to_thread(self.collection.insert_one, order.to_document())
        except PyMongoError as e:
            logger.exception("Error saving customer %s", order.name)
            raise PersistenceError(str(e)) from e
