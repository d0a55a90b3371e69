from decimal import Decimal
from typing import Any, Mapping

from bson.decimal128 import Decimal128


class CustomerOrder:
    def __init__(
        self,
        *,
        name: str,
        phone: str,
        ordered_items: list[str],
        total_amount: Decimal,
    ) -> None:
        self.name = name
        self.phone = phone
        self.ordered_items = ordered_items
        self.total_amount = total_amount

    def __repr__(self) -> str:
        return (
            f"<CustomerOrder(name={self.name}, items={len(self.ordered_items)}, "
            f"total={self.total_amount})>"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomerOrder):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "phone": self.phone,
            "orderedItems": list(self.ordered_items),
            "totalAmount": self.total_amount,
        }

    def to_document(self) -> dict[str, Any]:
        """Stored shape. BSON has no native Decimal, so the total is a Decimal128."""
        doc = self.to_dict()
        doc["totalAmount"] = Decimal128(self.total_amount)
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "CustomerOrder":
        return cls(
            name=doc.get("name", ""),
            phone=doc.get("phone", ""),
            ordered_items=list(doc.get("orderedItems") or []),
            total_amount=to_decimal(doc.get("totalAmount", 0)),
        )


def to_decimal(value: Any) -> Decimal:
    # Older documents hold the total as a double.
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal128):
        return value.to_decimal()
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)
