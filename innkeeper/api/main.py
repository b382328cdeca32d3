"""
FastAPI app assembly: logging, middleware and router wiring.
"""
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from innkeeper import __version__
from innkeeper.utils.urls import get_app_base_url
from innkeeper.api.users import router as users_router
from innkeeper.api.employees import router as employees_router
from innkeeper.api.rooms import router as rooms_router
from innkeeper.api.customers import router as customers_router
from innkeeper.api.bookings import router as bookings_router
from innkeeper.api.reservations import router as reservations_router
from innkeeper.api.contact import router as contact_router
from innkeeper.api.food import router as food_router
from innkeeper.api.carousel import router as carousel_router
from innkeeper.api.cart import router as cart_router
from innkeeper.api.orders import router as orders_router, billing_router
from innkeeper.api.analytics import router as analytics_router
from innkeeper.api.tasks import router as tasks_router
from innkeeper.api.requests import router as requests_router
from innkeeper.api.attendance import router as attendance_router, payroll_router
from innkeeper.api.activity_logs import router as activity_logs_router
from innkeeper.api.notifications import router as notifications_router
from innkeeper.api.hotel_admin_notifications import router as hotel_admin_notifications_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Innkeeper Hotel Service",
    description="API for hotel rooms, guest stays, in-room dining and staff operations.",
    version=__version__,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

origins = sorted({
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
    get_app_base_url(),
})

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router, prefix="/api/users")
app.include_router(employees_router, prefix="/api/employee")
app.include_router(rooms_router, prefix="/api/rooms")
app.include_router(customers_router, prefix="/api/customers")
app.include_router(bookings_router, prefix="/api/bookings")
app.include_router(reservations_router, prefix="/api/reservations")
app.include_router(contact_router, prefix="/api/contact")
app.include_router(food_router, prefix="/api/food")
app.include_router(carousel_router, prefix="/api/carousel")
app.include_router(cart_router, prefix="/api/cart")
app.include_router(orders_router, prefix="/api/orders")
app.include_router(billing_router, prefix="/api/billing")
app.include_router(analytics_router, prefix="/api/analytics")
app.include_router(tasks_router, prefix="/api/tasks")
app.include_router(requests_router, prefix="/api/requests")
app.include_router(attendance_router, prefix="/api/attendance")
app.include_router(payroll_router, prefix="/api/payroll")
app.include_router(activity_logs_router, prefix="/api/activity-logs")
app.include_router(notifications_router, prefix="/api/notifications")
app.include_router(hotel_admin_notifications_router, prefix="/api/hoteladnotifs")


@app.get("/")
def read_root():
    return {"message": "Hello from the Innkeeper backend!"}


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "innkeeper-service"}
