"""
Guest stay endpoints: check-in, stay extension and checkout.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import rooms as room_repo
from innkeeper.api.deps import require_roles, actor_name, HOTEL_ROLES
from innkeeper.services import room_status_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["customers"])


@router.get("/", response_model=List[schemas.Customer])
def list_customers(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    return room_repo.list_customers(db)


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.Customer)
def check_in(
    payload: schemas.CustomerCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    _account, current_user = user_context
    room = room_repo.get_room_by_number(db, payload.room_number)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found.")
    if room.status not in ("available", "booked"):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Room {room.room_number} is {room.status}.")

    data = payload.model_dump()
    data["room_number"] = room.room_number
    customer = room_repo.create_customer(db, **data)
    room.guest_name = payload.name
    room.guest_contact = payload.contact_number
    room_status_service.set_room_status(db, room, "occupied", user=actor_name(current_user))
    room_repo.save(db, room)
    logger.info("Checked in %s to room %s", customer.name, room.room_number)
    return customer


@router.put("/extend", response_model=schemas.CheckoutResponse)
def extend_stay(
    payload: schemas.StayExtension,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    customer = room_repo.latest_customer_for_room(db, payload.room_number)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found for this room.")
    room = room_repo.get_room_by_number(db, payload.room_number)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found.")
    customer.updated_checkout_date = payload.new_checkout
    room_repo.save(db, customer)
    return schemas.CheckoutResponse(message="Check-out updated", room=room, customer=customer)


@router.put("/checkout", response_model=schemas.CheckoutResponse)
def checkout(
    payload: schemas.CheckoutRequest,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    """Free the room, clear guest info and close the latest stay."""
    _account, current_user = user_context
    room = room_repo.get_room_by_number(db, payload.room_number)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found.")

    room.guest_name = ""
    room.guest_contact = ""
    room_status_service.set_room_status(db, room, "available", user=actor_name(current_user))
    room_repo.save(db, room)

    customer = room_repo.latest_customer_for_room(db, room.room_number)
    if customer is not None:
        customer.status = "checked out"
        room_repo.save(db, customer)
    else:
        logger.warning("No customer record found for checkout of room %s", room.room_number)
    return schemas.CheckoutResponse(message="Checked out", room=room, customer=customer)
