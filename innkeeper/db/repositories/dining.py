"""
Menu, cart, order and billing repository functions.
"""
from __future__ import annotations

import uuid
from typing import Optional, List
from sqlalchemy.orm import Session

from innkeeper.db import models


def list_foods(db: Session) -> List[models.Food]:
    return db.query(models.Food).order_by(models.Food.name.asc()).all()


def get_food(db: Session, food_id: uuid.UUID) -> Optional[models.Food]:
    return db.get(models.Food, food_id)


def create_food(db: Session, **fields) -> models.Food:
    food = models.Food(**fields)
    db.add(food)
    db.commit()
    db.refresh(food)
    return food


def update_food(db: Session, food: models.Food, **fields) -> models.Food:
    for key, value in fields.items():
        setattr(food, key, value)
    db.commit()
    db.refresh(food)
    return food


def list_active_combos(db: Session) -> List[models.CarouselCombo]:
    return (
        db.query(models.CarouselCombo)
        .filter(models.CarouselCombo.active.is_(True))
        .order_by(models.CarouselCombo.created_at.desc())
        .all()
    )


def get_combo(db: Session, combo_id: uuid.UUID) -> Optional[models.CarouselCombo]:
    return db.get(models.CarouselCombo, combo_id)


def create_combo(db: Session, **fields) -> models.CarouselCombo:
    combo = models.CarouselCombo(active=True, **fields)
    db.add(combo)
    db.commit()
    db.refresh(combo)
    return combo


def update_combo(db: Session, combo: models.CarouselCombo, **fields) -> models.CarouselCombo:
    for key, value in fields.items():
        setattr(combo, key, value)
    db.commit()
    db.refresh(combo)
    return combo


def get_cart(db: Session, room_number: str) -> Optional[models.Cart]:
    return db.query(models.Cart).filter(models.Cart.room_number == room_number).first()


def upsert_cart(db: Session, room_number: str, items: list) -> models.Cart:
    cart = get_cart(db, room_number)
    if cart is None:
        cart = models.Cart(room_number=room_number, items=items)
        db.add(cart)
    else:
        # Assign a new list so the JSON column is flagged dirty
        cart.items = list(items)
        cart.updated_at = models.now_utc()
    db.commit()
    db.refresh(cart)
    return cart


def create_order(db: Session, *, room_number: str, items: list) -> models.Order:
    order = models.Order(room_number=room_number, items=items, status='pending')
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


def list_orders(db: Session, room_number: Optional[str] = None) -> List[models.Order]:
    query = db.query(models.Order)
    if room_number:
        query = query.filter(models.Order.room_number == room_number)
    return query.order_by(models.Order.checked_out_at.desc()).all()


def get_order(db: Session, order_id: uuid.UUID) -> Optional[models.Order]:
    return db.get(models.Order, order_id)


def delete_order(db: Session, order: models.Order) -> None:
    db.delete(order)
    db.commit()


def create_billing(db: Session, **fields) -> models.Billing:
    billing = models.Billing(**fields)
    db.add(billing)
    return billing


def list_billings(db: Session) -> List[models.Billing]:
    return db.query(models.Billing).order_by(models.Billing.delivered_at.desc()).all()


def get_billing_for_order(db: Session, order_id: uuid.UUID) -> Optional[models.Billing]:
    return db.query(models.Billing).filter(models.Billing.order_id == order_id).first()
