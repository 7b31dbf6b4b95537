"""
Product catalogue endpoints.  Read-only; the catalogue is seeded with
`scripts/seed_products.py`.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..schemas import ProductList, ProductDetail
from ..deps import get_db
from ..services import orders as orders_service


router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ProductList)
def list_products(db: Session = Depends(get_db)):
    return {"products": orders_service.list_products(db)}


@router.get("/{product_id}", response_model=ProductDetail)
def get_product(product_id: int, db: Session = Depends(get_db)):
    product = orders_service.get_product(db, product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return {"product": product}
