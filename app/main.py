# app/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional, List

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .auth import StaticKeyPolicy
from .config import Settings, get_settings
from .core import ProductIn, INVALID_PRODUCT_MESSAGE, NOT_FOUND_MESSAGE
from .database import ProductStore, SEED_PRODUCTS
from .logging_config import configure_logging
from .middleware import APIKeyMiddleware, ErrorHandlerMiddleware, RequestLogMiddleware
from .models import Product, ErrorOut
from .sdk import (
    list_products_logic, get_product_logic, create_product_logic,
    update_product_logic, delete_product_logic,
)

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to the Product API! Go to /api/products to see all products."

router = APIRouter()


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


# ---------------------------
# Root (public, see Settings.public_paths)
# ---------------------------
@router.get("/", response_class=PlainTextResponse)
async def root():
    return WELCOME_TEXT


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/api/products", response_model=List[Product])
async def list_products(store: ProductStore = Depends(get_store)):
    return await list_products_logic(store)


@router.get("/api/products/{product_id}", response_model=Product, responses={404: {"model": ErrorOut}})
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)


@router.post("/api/products", status_code=201, response_model=Product, responses={400: {"model": ErrorOut}})
async def create_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
    return await create_product_logic(store, payload)


@router.put(
    "/api/products/{product_id}",
    response_model=Product,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)
async def update_product(product_id: str, payload: ProductIn, store: ProductStore = Depends(get_store)):
    return await update_product_logic(store, product_id, payload)


@router.delete(
    "/api/products/{product_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": ErrorOut}},
)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    await delete_product_logic(store, product_id)
    return Response(status_code=204)


# ---------------------------
# Error envelope: every failure is {"error": "..."}
# ---------------------------
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        # a known path with an unsupported method matches no route
        return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_PRODUCT_MESSAGE})


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = ProductStore(seed=SEED_PRODUCTS if settings.seed_products else None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info("product store ready with %d products", len(app.state.store))
        yield

    app = FastAPI(title="product-api (in-memory demo)", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    # added innermost first; requests pass through them in reverse order
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(
        APIKeyMiddleware,
        policy=StaticKeyPolicy(settings.api_key_param, settings.api_key),
        public_paths=settings.public_paths,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(router)
    return app


app = create_app()
