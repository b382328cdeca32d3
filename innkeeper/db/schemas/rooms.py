import uuid
from datetime import datetime
from typing import Optional, List, Dict, Any, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


RoomType = Literal['Standard', 'Deluxe']
RoomStatus = Literal['available', 'booked', 'occupied', 'checked-out', 'cleaning', 'maintenance']


class RoomCreate(BaseModel):
    room_number: str = Field(min_length=1)
    room_type: RoomType
    status: RoomStatus
    description: str = ''
    price: float = 0
    amenities: List[str] = Field(default_factory=list)

    @field_validator('room_number')
    @classmethod
    def _strip_number(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('room_number must not be blank')
        return v

    @field_validator('price', mode='before')
    @classmethod
    def _coerce_price(cls, v):
        if v in (None, ''):
            return 0
        return v

    @field_validator('amenities', mode='before')
    @classmethod
    def _split_amenities(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [a.strip() for a in v.split(',') if a.strip()]
        return v


class Room(BaseModel):
    id: uuid.UUID
    room_number: str
    room_type: str
    description: str
    price: float
    amenities: List[str]
    status: str
    guest_name: str
    guest_contact: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class RoomStatusUpdate(BaseModel):
    status: RoomStatus


class RoomValidateRequest(BaseModel):
    room_number: Optional[str] = None


class RoomValidateResponse(BaseModel):
    valid: bool
    error: Optional[str] = None


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1)
    contact_number: str = Field(min_length=1)
    room_number: str = Field(min_length=1)
    checkin_time: Optional[str] = None
    checkout_date: Optional[str] = None


class Customer(BaseModel):
    id: uuid.UUID
    name: str
    contact_number: str
    room_number: str
    status: str
    checkin_date: datetime
    checkin_time: Optional[str] = None
    checkout_date: Optional[str] = None
    updated_checkout_date: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class StayExtension(BaseModel):
    room_number: str = Field(min_length=1)
    new_checkout: str = Field(min_length=1)


class CheckoutRequest(BaseModel):
    room_number: str = Field(min_length=1)


class CheckoutResponse(BaseModel):
    message: str
    room: Room
    customer: Optional[Customer] = None


class BookingCreate(BaseModel):
    room_id: uuid.UUID
    customer_name: str = Field(min_length=1)
    customer_email: Optional[str] = None
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None
    special_id: Optional[str] = None
    partial_payment: Optional[float] = None
    payment_status: Optional[str] = None
    payment_details: Optional[Dict[str, Any]] = None
    booking_status: Optional[str] = 'confirmed'
    total_amount: Optional[float] = None


class Booking(BaseModel):
    id: uuid.UUID
    room_id: Optional[uuid.UUID] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None
    special_id: Optional[str] = None
    partial_payment: Optional[float] = None
    payment_status: Optional[str] = None
    payment_details: Optional[Dict[str, Any]] = None
    booking_status: Optional[str] = None
    total_amount: Optional[float] = None
    booked_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class ReservationCreate(BaseModel):
    name: str = Field(min_length=1)
    room: str = Field(min_length=1)
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    amenity: str = Field(min_length=1)


class Reservation(ReservationCreate):
    id: uuid.UUID
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ContactMessageCreate(BaseModel):
    name: str = Field(min_length=1)
    room_number: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactMessage(ContactMessageCreate):
    id: uuid.UUID
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
