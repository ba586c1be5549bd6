import logging
from collections import Counter
from typing import Optional, Dict, Any, List

from .config import settings
from .core import ProductIn, ProductUpdate, _make_product_dict, _new_product_id, _parse_positive_int
from .database import PRODUCTS, _get_lock, find_product_index
from .errors import NotFoundError, ValidationError

# Query and mutation logic behind the product routes. Every function
# takes the catalog lock and hands back copies of the stored records.

logger = logging.getLogger(__name__)

# Query operations
async def list_products_logic(
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    page_num = _parse_positive_int(page, 1)
    page_size = _parse_positive_int(limit, settings.default_page_limit)

    async with _get_lock():
        filtered = list(PRODUCTS)
        if category:
            wanted = category.lower()
            filtered = [p for p in filtered if p["category"].lower() == wanted]

        start = (page_num - 1) * page_size
        end = page_num * page_size
        return {
            "page": page_num,
            "totalProducts": len(filtered),
            "products": [dict(p) for p in filtered[start:end]],
        }

async def search_products_logic(name: Optional[str]) -> List[Dict[str, Any]]:
    if not name:
        raise ValidationError("Please provide a name to search")
    term = name.lower()
    async with _get_lock():
        return [dict(p) for p in PRODUCTS if term in p["name"].lower()]

async def product_stats_logic() -> Dict[str, Any]:
    async with _get_lock():
        counts = Counter(p["category"].lower() for p in PRODUCTS)
        return {"totalProducts": len(PRODUCTS), "stats": dict(counts)}

async def get_product_logic(product_id: str) -> Dict[str, Any]:
    async with _get_lock():
        idx = find_product_index(product_id)
        if idx is None:
            raise NotFoundError("Product not found")
        return dict(PRODUCTS[idx])

# Mutation operations
async def create_product_logic(payload: ProductIn) -> Dict[str, Any]:
    async with _get_lock():
        pid = _new_product_id()
        while find_product_index(pid) is not None:
            pid = _new_product_id()
        product = _make_product_dict(pid, payload)
        PRODUCTS.append(product)
    logger.info("Created product %s (%s)", pid, product["name"])
    return dict(product)

async def update_product_logic(product_id: str, payload: ProductUpdate) -> Dict[str, Any]:
    changes = payload.changes()
    async with _get_lock():
        idx = find_product_index(product_id)
        if idx is None:
            raise NotFoundError("Product not found")
        # swap in a new dict so readers never see a half-applied update
        updated = {**PRODUCTS[idx], **changes}
        PRODUCTS[idx] = updated
    logger.info("Updated product %s fields=%s", product_id, sorted(changes))
    return dict(updated)

async def delete_product_logic(product_id: str) -> Dict[str, Any]:
    async with _get_lock():
        idx = find_product_index(product_id)
        if idx is None:
            raise NotFoundError("Product not found")
        deleted = PRODUCTS.pop(idx)
    logger.info("Deleted product %s", product_id)
    return {"message": "Product deleted", "deleted": [deleted]}
