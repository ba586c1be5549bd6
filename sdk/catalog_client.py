# sdk/catalog_client.py
import os
import requests
import httpx
from typing import Any, Dict, Optional

DEFAULT_BASE_URL = os.getenv("CATALOG_API_URL", "http://127.0.0.1:3000")

class CatalogClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, api_key: Optional[str] = None, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout
        self.api_key = api_key or os.getenv("CATALOG_API_KEY")
        if self.api_key:
            self.session.headers.update({"X-API-Key": self.api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def reset(self):
        r = self.session.post(self._url("/reset"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Queries
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None):
        params: Dict[str, Any] = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def search_products(self, name: str):
        r = self.session.get(self._url("/api/products/search"), params={"name": name}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def product_stats(self):
        r = self.session.get(self._url("/api/products/stats"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Mutations
    def create_product(self, name: str, price: float, category: str,
                       description: Optional[str] = None, in_stock: Optional[bool] = None):
        payload: Dict[str, Any] = {"name": name, "price": price, "category": category}
        if description is not None:
            payload["description"] = description
        if in_stock is not None:
            payload["inStock"] = in_stock
        r = self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, **fields):
        # in_stock is accepted as a keyword for convenience
        if "in_stock" in fields:
            fields["inStock"] = fields.pop("in_stock")
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=fields, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str):
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Async create, returns the raw response so callers can inspect 4xx bodies
    async def create_product_async(self, name: str, price: float, category: str,
                                   description: Optional[str] = None, in_stock: Optional[bool] = None):
        payload: Dict[str, Any] = {"name": name, "price": price, "category": category}
        if description is not None:
            payload["description"] = description
        if in_stock is not None:
            payload["inStock"] = in_stock
        headers = {"X-API-Key": self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(self._url("/api/products"), json=payload, headers=headers)


def _str_to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "y")


if __name__ == "__main__":
    import argparse
    from rich import print

    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Catalog API base URL")
    parser.add_argument("--api-key", help="Value for the X-API-Key header")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products (filtered, paginated)")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--page", type=int, help="Page number (1-based)")
    lp.add_argument("--limit", type=int, help="Page size")

    sp = subparsers.add_parser("search", help="Search products by name")
    sp.add_argument("--name", required=True, help="Text to look for in product names")

    subparsers.add_parser("stats", help="Product counts per category")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--category", required=True)
    cp.add_argument("--description")
    cp.add_argument("--in-stock", type=_str_to_bool, help="true/false")

    up = subparsers.add_parser("update-product", help="Update selected fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    up.add_argument("--description")
    up.add_argument("--in-stock", type=_str_to_bool, help="true/false")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    subparsers.add_parser("reset", help="Restore the seed catalog")

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url, api_key=args.api_key)

    try:
        if args.command == "list-products":
            print(c.list_products(args.category, args.page, args.limit))
        elif args.command == "search":
            print(c.search_products(args.name))
        elif args.command == "stats":
            print(c.product_stats())
        elif args.command == "get-product":
            print(c.get_product(args.product_id))
        elif args.command == "create-product":
            print(c.create_product(args.name, args.price, args.category, args.description, args.in_stock))
        elif args.command == "update-product":
            fields = {
                k: v for k, v in {
                    "name": args.name,
                    "price": args.price,
                    "category": args.category,
                    "description": args.description,
                    "in_stock": args.in_stock,
                }.items() if v is not None
            }
            print(c.update_product(args.product_id, **fields))
        elif args.command == "delete-product":
            print(c.delete_product(args.product_id))
        elif args.command == "reset":
            print(c.reset())
    except requests.exceptions.HTTPError as e:
        try:
            detail = e.response.json().get("message")
        except ValueError:
            detail = e.response.text
        print(f"[red]HTTP {e.response.status_code}:[/red] {detail}")
        raise SystemExit(1)
