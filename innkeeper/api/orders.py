"""
Order and billing endpoints for the restaurant dashboard.
"""
import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import dining as dining_repo
from innkeeper.api.deps import require_roles, RESTAURANT_ROLES
from innkeeper.services import cart_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])
billing_router = APIRouter(tags=["billing"])


@router.get("/", response_model=List[schemas.Order])
def list_orders(
    room_number: Optional[str] = None,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    return dining_repo.list_orders(db, room_number=room_number)


@router.get("/room/{room_number}", response_model=List[schemas.Order])
def list_room_orders(room_number: str, db: Session = Depends(get_db)):
    """Guest view of their own room's orders."""
    return dining_repo.list_orders(db, room_number=room_number)


@router.delete("/{order_id}", response_model=schemas.MessageResponse)
def cancel_order(order_id: uuid.UUID, db: Session = Depends(get_db)):
    order = dining_repo.get_order(db, order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    if order.status != "pending":
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only pending orders can be cancelled.")
    room_number = order.room_number
    dining_repo.delete_order(db, order)
    logger.info("Cancelled order %s for room %s", order_id, room_number)
    return schemas.MessageResponse(message="Order cancelled")


@router.post("/{order_id}/deliver", response_model=schemas.Billing)
def deliver_order(
    order_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    order = dining_repo.get_order(db, order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    try:
        return cart_service.deliver_order(db, order)
    except cart_service.CartError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@billing_router.get("/", response_model=List[schemas.Billing])
def list_billings(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    return dining_repo.list_billings(db)


@billing_router.get("/{order_id}", response_model=schemas.Billing)
def get_billing(
    order_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    billing = dining_repo.get_billing_for_order(db, order_id)
    if billing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Billing not found")
    return billing
