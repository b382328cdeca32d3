import uuid
from sqlalchemy import Column, String, Text, DateTime, Float, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship
from .base import Base, now_utc


ROOM_TYPES = ('Standard', 'Deluxe')
ROOM_STATUSES = ('available', 'booked', 'occupied', 'checked-out', 'cleaning', 'maintenance')
CUSTOMER_STATUSES = ('checked in', 'checked out')


class Room(Base):
    __tablename__ = 'rooms'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    room_number = Column(String(50), nullable=False, unique=True, index=True)
    room_type = Column(String(30), nullable=False)
    description = Column(Text, nullable=False, default='')
    price = Column(Float, nullable=False, default=0)
    amenities = Column(JSONB, nullable=False, default=list)
    status = Column(String(30), nullable=False, default='available')
    guest_name = Column(String(200), nullable=False, default='')
    guest_contact = Column(String(100), nullable=False, default='')
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    bookings = relationship("Booking", back_populates="room")


class Customer(Base):
    __tablename__ = 'customers'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    contact_number = Column(String(100), nullable=False)
    room_number = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default='checked in')
    checkin_date = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    checkin_time = Column(String(20), nullable=True)
    checkout_date = Column(String(50), nullable=True)
    updated_checkout_date = Column(String(50), nullable=True)

    __table_args__ = (
        Index('ix_customers_room_number_checkin_date', 'room_number', 'checkin_date'),
    )


class Booking(Base):
    __tablename__ = 'bookings'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    room_id = Column(UUID(as_uuid=True), ForeignKey('rooms.id', ondelete='SET NULL'), nullable=True)
    customer_name = Column(String(200), nullable=True)
    customer_email = Column(String(320), nullable=True)
    check_in_date = Column(DateTime(timezone=True), nullable=True)
    check_out_date = Column(DateTime(timezone=True), nullable=True)
    special_id = Column(String(100), nullable=True)
    partial_payment = Column(Float, nullable=True)
    payment_status = Column(String(50), nullable=True)
    payment_details = Column(JSONB, nullable=True)
    booking_status = Column(String(50), nullable=True)
    total_amount = Column(Float, nullable=True)
    booked_at = Column(DateTime(timezone=True), default=now_utc, nullable=True)

    room = relationship("Room", back_populates="bookings")


class Reservation(Base):
    __tablename__ = 'reservations'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    room = Column(String(50), nullable=False)
    date = Column(String(20), nullable=False)
    time = Column(String(20), nullable=False)
    amenity = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)


class ContactMessage(Base):
    __tablename__ = 'contact_messages'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    room_number = Column(String(50), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
