"""
Order endpoints for the authenticated customer.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..schemas import OrderCreate, OrderResponse, OrderList
from ..deps import get_db, get_current_user
from ..services import orders as orders_service
from ..audit import log_action
from .. import models


router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderResponse)
def place_order(
    order_in: OrderCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    """Place an order for the current user."""
    order = orders_service.place_order(db, current_user, order_in)
    log_action("order_placed", user_id=current_user.id, order_id=order.id, total=order.total)
    return {"order": order}


@router.get("", response_model=OrderList)
def my_orders(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    """List the current user's orders, newest first."""
    return {"orders": orders_service.list_orders(db, current_user)}
