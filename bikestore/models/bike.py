"""
Bike
-------------------------

Represents a bike for sale in the store. A bike is created with a generated
identifier which never changes, while its brand, model and price may be
replaced wholesale by an update.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Any, Union
from uuid import UUID, uuid4

Price = Union[int, float]


@dataclass
class Bike:

    brand: str
    model: str
    price: Price
    id: UUID = field(default_factory=uuid4)

    def copy(self) -> "Bike":
        """Returns a detached copy of the bike."""
        return replace(self)

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "brand": self.brand,
            "model": self.model,
            "price": self.price,
        }
