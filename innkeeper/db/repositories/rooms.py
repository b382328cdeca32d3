"""
Room, stay and front-desk repository functions.
"""
from __future__ import annotations

import uuid
from typing import Optional, List
from sqlalchemy import func
from sqlalchemy.orm import Session

from innkeeper.db import models


def normalize_room_number(room_number: str) -> str:
    return (room_number or '').strip().lower()


def list_rooms(db: Session) -> List[models.Room]:
    return db.query(models.Room).order_by(models.Room.room_number.asc()).all()


def get_room(db: Session, room_id: uuid.UUID) -> Optional[models.Room]:
    return db.get(models.Room, room_id)


def get_room_by_number(db: Session, room_number: str) -> Optional[models.Room]:
    """Case-insensitive, whitespace-trimmed room lookup."""
    key = normalize_room_number(room_number)
    if not key:
        return None
    return (
        db.query(models.Room)
        .filter(func.lower(func.trim(models.Room.room_number)) == key)
        .first()
    )


def create_room(db: Session, **fields) -> models.Room:
    room = models.Room(**fields)
    db.add(room)
    db.commit()
    db.refresh(room)
    return room


def save(db: Session, obj):
    db.commit()
    db.refresh(obj)
    return obj


def list_customers(db: Session) -> List[models.Customer]:
    return db.query(models.Customer).order_by(models.Customer.checkin_date.desc()).all()


def latest_customer_for_room(db: Session, room_number: str) -> Optional[models.Customer]:
    key = normalize_room_number(room_number)
    return (
        db.query(models.Customer)
        .filter(func.lower(func.trim(models.Customer.room_number)) == key)
        .order_by(models.Customer.checkin_date.desc())
        .first()
    )


def create_customer(db: Session, **fields) -> models.Customer:
    customer = models.Customer(**fields)
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


def list_bookings(db: Session) -> List[models.Booking]:
    return db.query(models.Booking).order_by(models.Booking.booked_at.desc()).all()


def create_booking(db: Session, **fields) -> models.Booking:
    booking = models.Booking(**fields)
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def create_reservation(db: Session, **fields) -> models.Reservation:
    reservation = models.Reservation(**fields)
    db.add(reservation)
    db.commit()
    db.refresh(reservation)
    return reservation


def list_reservations(db: Session) -> List[models.Reservation]:
    return db.query(models.Reservation).order_by(models.Reservation.created_at.desc()).all()


def create_contact_message(db: Session, **fields) -> models.ContactMessage:
    message = models.ContactMessage(**fields)
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def list_contact_messages(db: Session) -> List[models.ContactMessage]:
    return db.query(models.ContactMessage).order_by(models.ContactMessage.created_at.desc()).all()
