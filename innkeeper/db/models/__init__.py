"""
Domain-split SQLAlchemy models with a single import surface.

Exposes `Base`, `now_utc`, `as_utc` and all ORM classes.
"""

from .base import Base, now_utc, as_utc  # re-export

# Domain models
from .users import User, Employee, USER_ROLES, JOB_TITLES
from .rooms import Room, Customer, Booking, Reservation, ContactMessage, ROOM_TYPES, ROOM_STATUSES
from .dining import Food, CarouselCombo, Cart, Order, Billing, FOOD_CATEGORIES, COMBO_CATEGORIES
from .tasks import Task, TaskRequest, TASK_TYPES, TASK_STATUSES, TASK_PRIORITIES
from .attendance import Attendance
from .activity import ActivityLog
from .notifications import Notification, HotelAdminNotification

__all__ = [
    # base
    "Base",
    "now_utc",
    "as_utc",
    # staff
    "User",
    "Employee",
    "USER_ROLES",
    "JOB_TITLES",
    # rooms/stays
    "Room",
    "Customer",
    "Booking",
    "Reservation",
    "ContactMessage",
    "ROOM_TYPES",
    "ROOM_STATUSES",
    # dining
    "Food",
    "CarouselCombo",
    "Cart",
    "Order",
    "Billing",
    "FOOD_CATEGORIES",
    "COMBO_CATEGORIES",
    # tasks
    "Task",
    "TaskRequest",
    "TASK_TYPES",
    "TASK_STATUSES",
    "TASK_PRIORITIES",
    # attendance/activity
    "Attendance",
    "ActivityLog",
    # notifications
    "Notification",
    "HotelAdminNotification",
]
