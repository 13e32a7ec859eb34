import logging
from typing import Dict, Any, List

from fastapi import HTTPException

from .core import ProductIn, PRODUCT_NOT_FOUND_MESSAGE, _product_fields
from .database import ProductStore, ProductNotFound

# This file contains the core logic for all API endpoints.

logger = logging.getLogger(__name__)


def _not_found(exc: ProductNotFound) -> HTTPException:
    logger.debug("lookup miss: %s", exc.product_id)
    return HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND_MESSAGE)


async def list_products_logic(store: ProductStore) -> List[Dict[str, Any]]:
    return store.list()


async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    try:
        return store.get(product_id)
    except ProductNotFound as exc:
        raise _not_found(exc)


async def create_product_logic(store: ProductStore, payload: ProductIn) -> Dict[str, Any]:
    product = store.create(_product_fields(payload))
    logger.info("created product %s (%s)", product["id"], product["name"])
    return product


async def update_product_logic(store: ProductStore, product_id: str, payload: ProductIn) -> Dict[str, Any]:
    try:
        product = store.replace(product_id, _product_fields(payload))
    except ProductNotFound as exc:
        raise _not_found(exc)
    logger.info("updated product %s", product_id)
    return product


async def delete_product_logic(store: ProductStore, product_id: str) -> None:
    try:
        store.remove(product_id)
    except ProductNotFound as exc:
        raise _not_found(exc)
    logger.info("deleted product %s", product_id)
