import uuid
from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, Field


UserRole = Literal['restaurantAdmin', 'hotelAdmin', 'employeeAdmin', 'employee']
JobTitle = Literal['Cleaner', 'Clerk', 'Maintenance', 'Manager', 'Staff']


class UserBase(BaseModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    role: UserRole = 'restaurantAdmin'
    name: Optional[str] = None
    employee_number: Optional[int] = None
    job_title: JobTitle = 'Staff'
    contact_number: str = ''
    card_id: Optional[str] = None


class UserCreate(UserBase):
    role: UserRole
    password: str = Field(min_length=1)


class User(UserBase):
    id: uuid.UUID
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    token: str
    role: str


class PasswordCheck(BaseModel):
    password: str = Field(min_length=1)


class EmployeeBase(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    role: str = 'employee'
    department: Optional[str] = None
    job_title: Optional[JobTitle] = None
    contact_number: str = ''
    status: str = 'active'
    date_hired: Optional[datetime] = None
    shift: Optional[str] = None
    notes: str = ''
    card_id: Optional[str] = None


class EmployeeCreate(EmployeeBase):
    # The display name may arrive as name, full_name or username
    name: Optional[str] = None
    full_name: Optional[str] = None
    employee_number: Optional[int] = None
    employee_code: Optional[str] = None
    password: Optional[str] = None

    def resolved_name(self) -> Optional[str]:
        for candidate in (self.name, self.full_name, self.username):
            if candidate and candidate.strip():
                return candidate.strip()
        return None


class Employee(EmployeeBase):
    id: uuid.UUID
    name: str
    employee_number: int
    employee_code: Optional[str] = None
    department: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class EmployeeCreated(BaseModel):
    message: str = 'Employee created'
    id: uuid.UUID
    employee_number: int
    email_sent: bool = False
    email_error: Optional[str] = None


class EmployeeLoginResponse(BaseModel):
    success: bool = True
    message: str = 'Login successful'
    token: str
    employee: Employee


class EmployeeProfileUpdate(BaseModel):
    name: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None


class PasswordChange(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=1)


class NextEmployeeNumber(BaseModel):
    number: int
    padded: str
    raw: str
