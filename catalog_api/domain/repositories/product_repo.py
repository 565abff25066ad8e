# catalog_api/domain/repositories/product_repo.py

from __future__ import annotations
import math
import threading
from numbers import Real
from typing import Optional, List
from catalog_api.domain.errors import ValidationError
from catalog_api.domain.models.product import Product
from catalog_api.domain.services.constants import DEFAULT_CATEGORY, PRODUCT_ID_PREFIX

class ProductRepo:
    """
    In-memory product catalog, keyed by product id.
    Ids are sequential (p1, p2, ...) and never reused; insertion order is kept for listing.
    One instance per process, created at startup and handed to the routes.
    """

    def __init__(self):
        self._by_id: dict[str, Product] = {}
        self._counter = 1
        self._lock = threading.Lock()

    def create(self, name: str, price: float = 0, category: Optional[str] = DEFAULT_CATEGORY) -> Product:
        if not name or not isinstance(name, str):
            raise ValidationError("name is required")
        # bool is a Real subclass, but True is not a price
        if isinstance(price, bool) or not isinstance(price, Real) or math.isnan(price):
            raise ValidationError("price must be a number")

        with self._lock:
            product = Product(
                id=f"{PRODUCT_ID_PREFIX}{self._counter}",
                name=name,
                price=price,
                category=category or DEFAULT_CATEGORY,
            )
            self._counter += 1
            self._by_id[product.id] = product
        return product

    def get_by_id(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def list(self, category: Optional[str] = None) -> List[Product]:
        """All products in creation order, or only those whose category equals `category`."""
        products = list(self._by_id.values())
        if not category:
            return products
        return [p for p in products if p.category == category]

    def __len__(self) -> int:
        return len(self._by_id)
