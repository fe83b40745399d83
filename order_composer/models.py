from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Extra:
    id: int
    name: str
    value: Number
    quantity: int = 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class Food:
    id: int
    name: str
    description: str
    price: Number
    category: Optional[int] = None
    image_url: str = ""
    thumbnail_url: str = ""
    extras: Tuple[Extra, ...] = ()
    formatted_price: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], formatted_price: str = "") -> "Food":
        extras = tuple(
            Extra(id=e["id"], name=e["name"], value=e["value"], quantity=e.get("quantity", 0))
            for e in data["extras"]
        )
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            price=data["price"],
            category=data.get("category"),
            image_url=data.get("image_url", ""),
            thumbnail_url=data.get("thumbnail_url", ""),
            extras=extras,
            formatted_price=formatted_price,
        )


@dataclass(frozen=True)
class SelectionState:
    food: Optional[Food] = None
    extras: Tuple[Extra, ...] = ()
    quantity: int = 1  # never below 1


@dataclass(frozen=True)
class OrderPayload:
    product_id: int
    name: str
    description: str
    price: Number
    category: Optional[int]
    thumbnail_url: str
    extras: Tuple[Extra, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, object]:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "thumbnail_url": self.thumbnail_url,
            "extras": [e.to_dict() for e in self.extras],
        }
