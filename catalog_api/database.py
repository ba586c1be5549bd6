import asyncio
import copy
from typing import Dict, Any, List, Optional

# In-memory catalog and its locks. Nothing here survives a restart.

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

PRODUCTS: List[Dict[str, Any]] = copy.deepcopy(SEED_PRODUCTS)
# One lock guards the whole catalog. It is created lazily and dropped on
# reset, so each event loop that drives the app (TestClient, asyncio.run)
# starts from a lock it can own.
_LOCK: Optional[asyncio.Lock] = None

def _get_lock() -> asyncio.Lock:
    global _LOCK
    if _LOCK is None:
        _LOCK = asyncio.Lock()
    return _LOCK

def find_product_index(product_id: str) -> Optional[int]:
    for i, p in enumerate(PRODUCTS):
        if p["id"] == product_id:
            return i
    return None

def reset_store() -> None:
    global _LOCK
    # mutate in place so modules holding a reference to PRODUCTS stay valid
    PRODUCTS[:] = copy.deepcopy(SEED_PRODUCTS)
    _LOCK = None
