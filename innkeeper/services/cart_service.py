"""
Cart editing and checkout.

Cart items are stored as JSON dicts; every change assigns a fresh list so the
JSON column is marked dirty.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from innkeeper.db import models, schemas
from innkeeper.db.repositories import dining as dining_repo
from innkeeper.db.repositories import rooms as room_repo

logger = logging.getLogger(__name__)

ORDERABLE_ROOM_STATUSES = ("occupied", "booked")


class CartError(Exception):
    """Cart operation rejected; ``status_code`` mirrors the HTTP status."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def serialize_item(item: schemas.CartItem) -> Dict[str, Any]:
    data = item.model_dump(mode="json", exclude_none=True)
    if not data.get("added_at"):
        data["added_at"] = models.now_utc().isoformat()
    return data


def merge_item(items: List[Dict[str, Any]], new_item: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return a new list with ``new_item`` added; same name and price merge quantities."""
    merged = [dict(i) for i in items]
    for existing in merged:
        if existing.get("name") == new_item.get("name") and float(existing.get("price") or 0) == float(new_item.get("price") or 0):
            existing["quantity"] = int(existing.get("quantity") or 1) + int(new_item.get("quantity") or 1)
            return merged
    merged.append(dict(new_item))
    return merged


def get_cart(db: Session, room_number: str) -> schemas.Cart:
    cart = dining_repo.get_cart(db, room_number)
    if cart is None:
        return schemas.Cart(room_number=room_number, items=[])
    return schemas.Cart.model_validate(cart)


def replace_items(db: Session, room_number: str, items: List[schemas.CartItem]) -> models.Cart:
    return dining_repo.upsert_cart(db, room_number, [serialize_item(i) for i in items])


def add_item(db: Session, room_number: str, item: schemas.CartItem) -> models.Cart:
    cart = dining_repo.get_cart(db, room_number)
    current = list(cart.items) if cart is not None else []
    return dining_repo.upsert_cart(db, room_number, merge_item(current, serialize_item(item)))


def _require_index(cart, index: int) -> None:
    if cart is None:
        raise CartError("Cart not found", status_code=404)
    if index < 0 or index >= len(cart.items):
        raise CartError("Invalid item index", status_code=400)


def set_quantity(db: Session, room_number: str, index: int, quantity: int) -> models.Cart:
    cart = dining_repo.get_cart(db, room_number)
    _require_index(cart, index)
    items = [dict(i) for i in cart.items]
    items[index]["quantity"] = quantity
    return dining_repo.upsert_cart(db, room_number, items)


def remove_item(db: Session, room_number: str, index: int) -> models.Cart:
    cart = dining_repo.get_cart(db, room_number)
    _require_index(cart, index)
    items = [dict(i) for n, i in enumerate(cart.items) if n != index]
    return dining_repo.upsert_cart(db, room_number, items)


def checkout(db: Session, room_number: str) -> models.Order:
    """Turn the room's cart into a pending order and empty the cart."""
    room = room_repo.get_room_by_number(db, room_number)
    if room is None:
        raise CartError("Room not found.", status_code=404)
    if room.status not in ORDERABLE_ROOM_STATUSES:
        raise CartError(f"Room {room.room_number} is not occupied.", status_code=400)
    cart = dining_repo.get_cart(db, room_number)
    if cart is None or not cart.items:
        raise CartError("Cart is empty.", status_code=400)

    order = dining_repo.create_order(db, room_number=room_number, items=list(cart.items))
    dining_repo.upsert_cart(db, room_number, [])
    logger.info("Room %s placed order %s with %d items", room_number, order.id, len(order.items))
    return order


def order_total(items: List[Dict[str, Any]]) -> float:
    return round(sum(float(i.get("price") or 0) * int(i.get("quantity") or 1) for i in items), 2)


def deliver_order(db: Session, order: models.Order) -> models.Billing:
    """Mark a pending order delivered and record its bill."""
    if order.status == "delivered":
        raise CartError("Order already delivered.", status_code=400)
    order.status = "delivered"
    order.delivered_at = models.now_utc()
    billing = dining_repo.create_billing(
        db,
        order_id=order.id,
        room_number=order.room_number,
        items=list(order.items),
        checked_out_at=order.checked_out_at,
        delivered_at=order.delivered_at,
        total_price=order_total(order.items),
    )
    db.commit()
    db.refresh(billing)
    return billing
