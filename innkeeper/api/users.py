"""
Admin account endpoints: login, registration, listing and the hotel admin
password check used to unlock sensitive dashboard actions.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import users as user_repo
from innkeeper.api.deps import require_roles, ADMIN_ROLES
from innkeeper.utils.passwords import hash_password, verify_password
from innkeeper.utils.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/login", response_model=schemas.LoginResponse)
def login(payload: schemas.LoginRequest, db: Session = Depends(get_db)):
    user = user_repo.get_user_by_email(db, payload.email.strip())
    if user is None or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(subject=str(user.id), role=user.role, kind="user")
    return schemas.LoginResponse(token=token, role=user.role)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=schemas.MessageResponse)
def register(payload: schemas.UserCreate, db: Session = Depends(get_db)):
    data = payload.model_dump(exclude={"password"})
    data["username"] = data["username"].strip()
    data["email"] = data["email"].strip()
    taken = user_repo.find_user_conflict(
        db,
        username=data["username"],
        email=data["email"],
        employee_number=data.get("employee_number"),
        card_id=data.get("card_id"),
    )
    if taken:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"A user with that {taken} already exists.")
    user_repo.create_user(db, password_hash=hash_password(payload.password), **data)
    logger.info("Registered %s user %s", data["role"], data["username"])
    return schemas.MessageResponse(message="User registered successfully")


@router.get("/", response_model=List[schemas.User])
def list_users(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*ADMIN_ROLES)),
):
    return user_repo.list_users(db)


@router.post("/verify-hoteladmin-password")
def verify_hotel_admin_password(payload: schemas.PasswordCheck, db: Session = Depends(get_db)):
    """Accept the password of any hotelAdmin account."""
    for admin in user_repo.list_users_by_role(db, "hotelAdmin"):
        if verify_password(payload.password, admin.password_hash):
            return {"valid": True}
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password.")
