# demo.py - walk through the seed catalog against a running server
import os

import requests
from rich import print

from sdk.productapi import ProductClient


def main():
    c = ProductClient(base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"))

    print(f"\n🏠 {c.welcome()}")

    phone = c.get_product("2")
    print(f"\n📱 Product 2: {phone}")

    c.delete_product("3")
    print("\n🗑️  Deleted product 3")
    try:
        c.get_product("3")
    except requests.exceptions.HTTPError as e:
        print(f"❌ Product 3 is gone: {e.response.status_code} {e.response.json()}")

    mouse = c.create_product("Mouse", "Wireless", 25, "electronics", True)
    print(f"\n🖱️  Created: {mouse}")

    products = c.list_products()
    print(f"\n📦 {len(products)} products in the catalog")

    bad = requests.get(f"{c.base_url}/api/products", timeout=c.timeout)
    print(f"\n🔒 Without the key: {bad.status_code} {bad.json()}")


if __name__ == "__main__":
    main()
