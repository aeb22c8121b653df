# catalog/main.py
import argparse
import logging
from dataclasses import replace
from typing import Optional, Dict, Any, Callable, List

import uvicorn
from fastapi import FastAPI, Request, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import Settings, settings as default_settings
from .errors import ValidationError, InvalidIdError, StoreError
from .logging_config import setup_logging
from .logic import (
    create_product_logic, update_product_logic, list_products_logic,
    product_details_logic, set_prices_logic,
)
from .schemas import ProductIn, SetPricesIn, JSONResp, _make_product, _make_prices, _make_product_dict
from .seed import insert_test_data
from .store import Store, InMemoryStore

logger = logging.getLogger(__name__)

# Operations (names of the API calls)
OP_CREATE = "create"        # Create a new product
OP_LIST = "list"            # List the IDs of all products
OP_DETAILS = "details"      # Details of one product
OP_UPDATE = "update"        # Replace a product
OP_SET_PRICES = "setprices" # Merge price points into a product

# General messages sent in responses
MSG_GENERAL_STORE_ERR = "Product store unavailable"
MSG_INVALID_ID_ERR = "Invalid ID!"


# ---------------------------
# Helpers
# ---------------------------
def get_store(request: Request) -> Store:
    return request.app.state.store


def _run(op: str, fn: Callable[..., Any], *args) -> Dict[str, Any]:
    """Call a logic function and wrap its outcome in a JSONResp."""
    try:
        data = fn(*args)
    except ValidationError as e:
        return JSONResp(op=op, error=str(e)).to_dict()
    except InvalidIdError as e:
        logger.info("%s: no product with id %d", op, e.product_id)
        return JSONResp(op=op, error=MSG_INVALID_ID_ERR).to_dict()
    except StoreError as e:
        logger.warning("%s: store error: %s", op, e)
        return JSONResp(op=op, error=MSG_GENERAL_STORE_ERR).to_dict()
    return JSONResp(op=op, success=True, data=data).to_dict()


def create_app(store: Optional[Store] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = InMemoryStore()
        if settings.test_data:
            insert_test_data(store)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST", "GET", "PUT"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def disable_caching(request: Request, call_next):
        response = await call_next(request)
        response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
        return response

    @app.exception_handler(RequestValidationError)
    async def bad_body(request: Request, exc: RequestValidationError):
        logger.info("Error decoding %s request: %s", request.url.path, exc.errors())
        return PlainTextResponse("Can't decode input JSON", status_code=400)

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.post("/" + OP_CREATE)
    def create(payload: ProductIn, store: Store = Depends(get_store)):
        def logic():
            return {"id": create_product_logic(store, _make_product(payload))}
        return _run(OP_CREATE, logic)

    @app.get("/" + OP_LIST)
    def list_products(store: Store = Depends(get_store)):
        return _run(OP_LIST, list_products_logic, store)

    @app.get("/" + OP_DETAILS + "/")
    def details_no_id():
        logger.info("Invalid path: /%s/", OP_DETAILS)
        return PlainTextResponse("Path must be like /details/id", status_code=400)

    @app.get("/" + OP_DETAILS + "/{product_id}")
    def details(product_id: str, store: Store = Depends(get_store)):
        # plain decimal digits only, no sign or underscores
        pid = int(product_id) if product_id.isascii() and product_id.isdigit() else 0
        if pid <= 0:
            logger.info("Invalid path: /%s/%s", OP_DETAILS, product_id)
            return PlainTextResponse("Path must be like /details/id", status_code=400)

        def logic():
            return _make_product_dict(product_details_logic(store, pid))
        return _run(OP_DETAILS, logic)

    @app.put("/" + OP_UPDATE)
    def update(payload: ProductIn, store: Store = Depends(get_store)):
        def logic():
            return {"id": update_product_logic(store, _make_product(payload))}
        return _run(OP_UPDATE, logic)

    @app.put("/" + OP_SET_PRICES)
    def set_prices(payload: SetPricesIn, store: Store = Depends(get_store)):
        def logic():
            return {"id": set_prices_logic(store, payload.id, _make_prices(payload.prices))}
        return _run(OP_SET_PRICES, logic)

    return app


def main(argv: Optional[List[str]] = None) -> None:
    """Start the server. Usage: python -m catalog.main [--addr host:port] [--no-testdata]"""
    parser = argparse.ArgumentParser(description="Product catalog web service")
    parser.add_argument("--addr", default=f"{default_settings.host}:{default_settings.port}",
                        help="address to start the server on (host:port)")
    parser.add_argument("--testdata", action=argparse.BooleanOptionalAction,
                        default=default_settings.test_data,
                        help="insert test products on startup")
    args = parser.parse_args(argv)

    host, _, port = args.addr.rpartition(":")
    app = create_app(settings=replace(default_settings, test_data=args.testdata))
    logger.info("Starting server on %r...", args.addr)
    uvicorn.run(app, host=host or "0.0.0.0", port=int(port))


if __name__ == "__main__":
    main()
