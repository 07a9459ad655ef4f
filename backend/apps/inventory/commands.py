from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CategoryWriteCommand:
    name: str

    @staticmethod
    def from_raw(payload: Optional[Dict[str, Any]]) -> "CategoryWriteCommand":
        data = dict(payload or {})
        return CategoryWriteCommand(name=str(data.get("name", "")).strip())

    def fields(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProductWriteCommand:
    """Full set of writable product fields; every write replaces all of them."""

    name: str
    category_id: int
    price: Decimal = Decimal("0.00")
    description: str = ""
    stock: int = 0

    def __post_init__(self):
        # Commands built by hand may pass price as str/float.
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", _to_decimal(self.price))

    @staticmethod
    def from_raw(payload: Optional[Dict[str, Any]]) -> "ProductWriteCommand":
        data = dict(payload or {})
        # ignore id if present
        data.pop("id", None)
        category_id = data.get("category_id", data.get("categoryId"))
        return ProductWriteCommand(
            name=str(data.get("name", "")).strip(),
            category_id=int(category_id) if category_id is not None else 0,
            price=_to_decimal(data.get("price", "0")),
            description=str(data.get("description") or "").strip(),
            stock=int(data.get("stock") or 0),
        )

    def fields(self) -> Dict[str, Any]:
        return asdict(self)


def _to_decimal(value: Any) -> Decimal:
    try:
        return Decimal(str(value)).quantize(Decimal("0.01"))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid price: {value!r}")
