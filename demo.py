#!/usr/bin/env python
from sdk.catalog_client import CatalogClient

def main():
    c = CatalogClient()

    # -----------------------------
    # Reset everything for demo
    # -----------------------------
    print("Resetting catalog...")
    print(c.reset())

    # -----------------------------
    # Browse the seed catalog
    # -----------------------------
    print("\nFirst page (default page size)...")
    print(c.list_products())

    print("\nSecond page of electronics, one per page...")
    print(c.list_products(category="Electronics", page=2, limit=1))

    print("\nSearching for 'lap'...")
    print(c.search_products("lap"))

    print("\nCategory stats...")
    print(c.product_stats())

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating a product...")
    mouse = c.create_product("Mouse", 25, "electronics", description="Wireless mouse")
    print(mouse)

    print("\nMarking it out of stock...")
    print(c.update_product(mouse["id"], in_stock=False))

    print("\nFetching it back...")
    print(c.get_product(mouse["id"]))

    print("\nDeleting it...")
    print(c.delete_product(mouse["id"]))

    print("\nStats after delete...")
    print(c.product_stats())

if __name__ == "__main__":
    main()
