"""
Domain-split Pydantic schemas with a single import surface.
"""

from .users import (
    UserBase,
    UserCreate,
    User,
    LoginRequest,
    LoginResponse,
    PasswordCheck,
    EmployeeBase,
    EmployeeCreate,
    Employee,
    EmployeeCreated,
    EmployeeLoginResponse,
    EmployeeProfileUpdate,
    PasswordChange,
    NextEmployeeNumber,
)
from .rooms import (
    RoomCreate,
    Room,
    RoomStatusUpdate,
    RoomValidateRequest,
    RoomValidateResponse,
    CustomerCreate,
    Customer,
    StayExtension,
    CheckoutRequest,
    CheckoutResponse,
    BookingCreate,
    Booking,
    ReservationCreate,
    Reservation,
    ContactMessageCreate,
    ContactMessage,
    MessageResponse,
)
from .dining import (
    FoodCreate,
    FoodUpdate,
    Food,
    SuccessResponse,
    ComboItem,
    CarouselComboCreate,
    CarouselComboUpdate,
    CarouselCombo,
    ComboDeleted,
    ComboComponent,
    CartItem,
    CartItemsReplace,
    CartQuantityUpdate,
    Cart,
    Order,
    CheckoutResult,
    Billing,
    UpsellSuggestion,
    UpsellResponse,
)
from .tasks import (
    TaskNote,
    TaskCreate,
    TaskStatusUpdate,
    TaskNoteCreate,
    Task,
    TaskStatusResult,
    TaskRequestCreate,
    TaskRequest,
)
from .attendance import AttendanceTap, Attendance, AttendanceTapResult, PayrollEntry, PayrollResponse
from .activity import ActivityLogCreate, ActivityLog
from .notifications import (
    Notification,
    UnreadCount,
    HotelAdminNotificationCreate,
    HotelAdminNotification,
    HotelAdminNotificationSaved,
)
from .analytics import OrderSummary, OrderAnalysis, OrderAnalysisReport
