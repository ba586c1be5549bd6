# catalog_api/main.py
import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import settings
from .core import ProductIn, ProductUpdate
from .database import reset_store
from .errors import register_error_handlers
from .logging_config import setup_logging
from .logic import (
    list_products_logic, search_products_logic, product_stats_logic,
    get_product_logic, create_product_logic, update_product_logic,
    delete_product_logic,
)
from .security import require_api_key

setup_logging(settings.log_level, settings.log_file or None)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.project_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response

@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello World!"

# ---------------------------
# Product queries
# ---------------------------
@app.get("/api/products")
async def list_products(category: Optional[str] = None, page: Optional[str] = None, limit: Optional[str] = None):
    return await list_products_logic(category, page, limit)

# search and stats must be registered before /api/products/{product_id}
@app.get("/api/products/search")
async def search_products(name: Optional[str] = None):
    return await search_products_logic(name)

@app.get("/api/products/stats")
async def product_stats():
    return await product_stats_logic()

@app.get("/api/products/{product_id}")
async def get_product(product_id: str):
    return await get_product_logic(product_id)

# ---------------------------
# Product mutations
# ---------------------------
@app.post("/api/products", status_code=201, dependencies=[Depends(require_api_key)])
async def create_product(payload: ProductIn):
    return await create_product_logic(payload)

@app.put("/api/products/{product_id}", dependencies=[Depends(require_api_key)])
async def update_product(product_id: str, payload: ProductUpdate):
    return await update_product_logic(product_id, payload)

@app.delete("/api/products/{product_id}", dependencies=[Depends(require_api_key)])
async def delete_product(product_id: str):
    return await delete_product_logic(product_id)

# ---------------------------
# Utility: reset (for tests/demo)
# ---------------------------
@app.post("/reset")
async def reset_all():
    reset_store()
    logger.info("Catalog reset to seed data")
    return {"status": "reset"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
