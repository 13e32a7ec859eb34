# sdk/productapi.py
import requests
import httpx
from typing import Optional, Dict, Any, List
from rich import print


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: str = "12345",
                 api_key_param: str = "apikey", timeout: int = 10, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.api_key = api_key
        self.api_key_param = api_key_param
        # the server reads the key from the query string, not from a header
        self.session.params = {api_key_param: api_key}

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def welcome(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        r.raise_for_status()
        return r.text

    # Products
    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/api/products"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, description: str, price: float, category: str,
                       in_stock: bool = True) -> Dict[str, Any]:
        r = self.session.post(self._url("/api/products"), json={
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, name: str, description: str, price: float,
                       category: str, in_stock: bool) -> Dict[str, Any]:
        r = self.session.put(self._url(f"/api/products/{product_id}"), json={
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()

    # Async create (example)
    async def create_product_async(self, name: str, description: str, price: float, category: str,
                                   in_stock: bool = True, transport: Optional[httpx.AsyncBaseTransport] = None):
        payload = {"name": name, "description": description, "price": price,
                   "category": category, "inStock": in_stock}
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=transport) as client:
            r = await client.post("/api/products", json=payload, params={self.api_key_param: self.api_key})
            return r


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "y")


if __name__ == "__main__":
    import argparse
    from sdk.productapi import ProductClient

    parser = argparse.ArgumentParser(description="Product API CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:3000")
    parser.add_argument("--api-key", default="12345")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    for cmd, help_text in (("create-product", "Create a new product"), ("update-product", "Replace a product")):
        sp = subparsers.add_parser(cmd, help=help_text)
        if cmd == "update-product":
            sp.add_argument("--product-id", required=True, help="ID of the product")
        sp.add_argument("--name", required=True, help="Product name")
        sp.add_argument("--description", required=True, help="Product description")
        sp.add_argument("--price", type=float, required=True, help="Price")
        sp.add_argument("--category", required=True, help="Product category")
        sp.add_argument("--in-stock", default="true", help="true/false")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")

    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list-products":
        print(c.list_products())
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "create-product":
        print(c.create_product(args.name, args.description, args.price, args.category, _parse_bool(args.in_stock)))
    elif args.command == "update-product":
        print(c.update_product(args.product_id, args.name, args.description, args.price,
                               args.category, _parse_bool(args.in_stock)))
    elif args.command == "delete-product":
        c.delete_product(args.product_id)
        print(f"[green]deleted {args.product_id}[/green]")
