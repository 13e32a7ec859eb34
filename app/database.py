import uuid
from typing import Dict, Any, List, Iterable, Optional

# The in-memory product collection. It lives as long as the process does.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductNotFound(Exception):
    def __init__(self, product_id: str):
        super().__init__(f"product {product_id!r} not found")
        self.product_id = product_id


class ProductStore:
    """
    Insertion-ordered product records keyed by id.

    Every read hands out copies, so nothing outside the store holds a
    reference into it between requests.
    """

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._seed = [dict(p) for p in (seed or [])]
        self._products: Dict[str, Dict[str, Any]] = {}
        self.reset()

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: str) -> bool:
        return product_id in self._products

    def reset(self) -> None:
        self._products = {p["id"]: dict(p) for p in self._seed}

    def _new_id(self) -> str:
        while True:
            pid = uuid.uuid4().hex
            if pid not in self._products:
                return pid

    def list(self) -> List[Dict[str, Any]]:
        return [dict(p) for p in self._products.values()]

    def get(self, product_id: str) -> Dict[str, Any]:
        p = self._products.get(product_id)
        if p is None:
            raise ProductNotFound(product_id)
        return dict(p)

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        pid = self._new_id()
        record = {"id": pid}
        record.update((k, v) for k, v in fields.items() if k != "id")
        self._products[pid] = record
        return dict(record)

    def replace(self, product_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        existing = self._products.get(product_id)
        if existing is None:
            raise ProductNotFound(product_id)
        updated = {**existing, **fields, "id": product_id}
        # assigning to an existing key keeps the record's position
        self._products[product_id] = updated
        return dict(updated)

    def remove(self, product_id: str) -> None:
        if product_id not in self._products:
            raise ProductNotFound(product_id)
        del self._products[product_id]
