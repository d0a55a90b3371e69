import asyncio
import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from restaurant.config import Config
from restaurant.domain.repository import OrderRepository, StoreUnavailable


logger = logging.getLogger(__name__)


def client_factory(config: Config) -> MongoClient:
    # timeoutMS bounds every operation, not just server selection.
    return MongoClient(
        config.mongo_url,
        serverSelectionTimeoutMS=config.store_timeout_ms,
        timeoutMS=config.store_timeout_ms,
    )


async def connect(client: MongoClient) -> None:
    try:
        await asyncio.to_thread(client.admin.command, "ping")
    except PyMongoError as e:
        raise StoreUnavailable(f"Failed to connect to MongoDB: {e}") from e
    logger.info("Connected to MongoDB!")


def order_repository(client: MongoClient, config: Config) -> OrderRepository:
    return OrderRepository(client[config.db_name][config.collection_name])
