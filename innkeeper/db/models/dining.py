import uuid
from sqlalchemy import Column, String, Text, DateTime, Float, Boolean, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


FOOD_CATEGORIES = ('breakfast', 'lunch', 'dinner', 'desserts', 'snack', 'beverages')
COMBO_CATEGORIES = ('meal', 'snack', 'beverage', 'dessert')


class Food(Base):
    __tablename__ = 'foods'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String(50), nullable=False, index=True)
    img = Column(Text, nullable=False)
    details = Column(Text, nullable=True)


class CarouselCombo(Base):
    __tablename__ = 'carousel_combos'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default='')
    price = Column(Float, nullable=False)
    img = Column(Text, nullable=False)
    # [{name, category, qty}]
    items = Column(JSONB, nullable=False, default=list)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)


class Cart(Base):
    __tablename__ = 'carts'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    room_number = Column(String(50), nullable=False, unique=True, index=True)
    # [{name, img, category, price, quantity, added_at, combo_contents?}]
    items = Column(JSONB, nullable=False, default=list)
    updated_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)


class Order(Base):
    __tablename__ = 'orders'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    room_number = Column(String(50), nullable=False)
    items = Column(JSONB, nullable=False, default=list)
    checked_out_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    status = Column(String(20), nullable=False, default='pending')
    delivered_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('ix_orders_room_number_checked_out_at', 'room_number', 'checked_out_at'),
        Index('ix_orders_status', 'status'),
    )


class Billing(Base):
    __tablename__ = 'billings'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(UUID(as_uuid=True), ForeignKey('orders.id', ondelete='CASCADE'), nullable=False, unique=True)
    room_number = Column(String(50), nullable=False, index=True)
    items = Column(JSONB, nullable=False, default=list)
    checked_out_at = Column(DateTime(timezone=True), nullable=True)
    delivered_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    total_price = Column(Float, nullable=False)
