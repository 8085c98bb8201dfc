"""
Products API - FastAPI router for browsing the product catalog.
"""
from fastapi import APIRouter, HTTPException
from fastapi.encoders import jsonable_encoder

from ..engine.errors import ProductNotFound
from .state import engine

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products():
    """List all catalog products with their rate tables."""
    return [jsonable_encoder(p) for p in engine.catalog.products]


@router.get("/{product_id}")
async def get_product(product_id: int):
    """Get a single product by id."""
    try:
        return jsonable_encoder(engine.catalog.get_product(product_id))
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
