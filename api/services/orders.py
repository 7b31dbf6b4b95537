"""
Catalogue and order service functions.
"""
from __future__ import annotations

from typing import List, Optional
from sqlalchemy.orm import Session

from .. import models, schemas


def list_products(db: Session) -> List[models.Product]:
    return db.query(models.Product).order_by(models.Product.id).all()


def get_product(db: Session, product_id: int) -> Optional[models.Product]:
    return db.query(models.Product).filter(models.Product.id == product_id).first()


def place_order(db: Session, user: models.User, order_in: schemas.OrderCreate) -> models.Order:
    """Persist an order for ``user``.  Items are stored as submitted."""
    order = models.Order(
        user_id=user.id,
        items=[item.model_dump() for item in order_in.items],
        total=order_in.total,
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


def list_orders(db: Session, user: models.User) -> List[models.Order]:
    return (
        db.query(models.Order)
        .filter(models.Order.user_id == user.id)
        .order_by(models.Order.created_at.desc(), models.Order.id.desc())
        .all()
    )
