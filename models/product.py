"""
models/product.py
-----------------
Product records as the dashboard expects them from ``GET {API_URL}/products``.

The API in this repository does not serve products; the shape below is an
assumed contract taken from what the dashboard renders.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Product:
    id: Optional[int]
    name: str
    price: Any
    stock: Any

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Product":
        return cls(
            id=record.get("id"),
            name=record.get("name", ""),
            price=record.get("price", ""),
            stock=record.get("stock", ""),
        )
