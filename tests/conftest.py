import copy
from typing import Any, Iterator

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from restaurant.domain.repository import OrderRepository


class InMemoryCollection:
    """Just enough of a pymongo collection for the repository."""

    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    def find(self, filter: dict[str, Any]) -> Iterator[dict[str, Any]]:
        self._check()
        assert filter == {}
        return iter([copy.deepcopy(d) for d in self.docs])

    def insert_one(self, document: dict[str, Any]) -> None:
        self._check()
        document.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(document))


@pytest.fixture
def collection() -> InMemoryCollection:
    return InMemoryCollection()


@pytest.fixture
def repo(collection: InMemoryCollection) -> OrderRepository:
    return OrderRepository(collection)  # pyright: ignore[reportArgumentType]
