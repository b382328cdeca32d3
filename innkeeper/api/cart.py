"""
Guest cart endpoints, keyed by room number.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import dining as dining_repo
from innkeeper.services import cart_service, analytics_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cart"])


def _run(fn, *args):
    try:
        return fn(*args)
    except cart_service.CartError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{room_number}", response_model=schemas.Cart)
def get_cart(room_number: str, db: Session = Depends(get_db)):
    return cart_service.get_cart(db, room_number)


@router.post("/{room_number}", response_model=schemas.Cart)
def replace_cart(room_number: str, payload: schemas.CartItemsReplace, db: Session = Depends(get_db)):
    return cart_service.replace_items(db, room_number, payload.items)


@router.post("/{room_number}/items", response_model=schemas.Cart)
def add_item(room_number: str, item: schemas.CartItem, db: Session = Depends(get_db)):
    return cart_service.add_item(db, room_number, item)


@router.patch("/{room_number}/{item_idx}/quantity", response_model=schemas.Cart)
def set_quantity(room_number: str, item_idx: int, payload: schemas.CartQuantityUpdate, db: Session = Depends(get_db)):
    return _run(cart_service.set_quantity, db, room_number, item_idx, payload.quantity)


@router.delete("/{room_number}/{item_idx}", response_model=schemas.Cart)
def remove_item(room_number: str, item_idx: int, db: Session = Depends(get_db)):
    return _run(cart_service.remove_item, db, room_number, item_idx)


@router.get("/{room_number}/upsell", response_model=schemas.UpsellResponse)
def checkout_upsell(room_number: str, db: Session = Depends(get_db)):
    cart = cart_service.get_cart(db, room_number)
    items = [i.model_dump() for i in cart.items]
    foods = [schemas.Food.model_validate(f).model_dump() for f in dining_repo.list_foods(db)]
    return analytics_service.build_checkout_upsell(items, foods)


@router.post("/{room_number}/checkout", status_code=status.HTTP_201_CREATED, response_model=schemas.CheckoutResult)
def checkout(room_number: str, db: Session = Depends(get_db)):
    order = _run(cart_service.checkout, db, room_number)
    return schemas.CheckoutResult(order=order)
