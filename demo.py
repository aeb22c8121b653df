#!/usr/bin/env python
from catalog_sdk.pycatalog import CatalogClient

def main():
    c = CatalogClient(base_url="http://127.0.0.1:8081")

    # -----------------------------
    # Create products
    # -----------------------------
    print("Creating products...")
    pid1 = c.create_product("Laptop", "14 inch, 16GB RAM", {"USD": (149999, 100)}, tags=["electronics"])
    pid2 = c.create_product("Mouse", "Wireless mouse", {"USD": (1, 1), "GBP": (7528, 100)})
    print(pid1, pid2)

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing product IDs...")
    print(c.list_products())

    # -----------------------------
    # Merge price points: GBP updated, HUF added, USD left intact
    # -----------------------------
    print(f"\nSetting prices of product {pid2}...")
    c.set_prices(pid2, {"GBP": (2000, 100), "HUF": (7717, 1)})
    print(c.get_product(pid2))

    # -----------------------------
    # Full update (replaces everything, tags included)
    # -----------------------------
    print(f"\nUpdating product {pid1}...")
    c.update_product(pid1, "Laptop", "14 inch, 32GB RAM", {"USD": (179999, 100)})
    print(c.get_product(pid1))

if __name__ == "__main__":
    main()
