"""
API dependency helpers.

Resolves the caller from a bearer JWT and enforces role requirements.
"""
import logging
import uuid
from typing import Optional, Tuple, Dict, Any

from fastapi import Header, HTTPException, status, Depends
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import models
from innkeeper.db.repositories import users as user_repo
from innkeeper.utils.runtime import dev_mode_active
from innkeeper.utils.security import safe_decode_token

logger = logging.getLogger(__name__)

ADMIN_ROLES = ('restaurantAdmin', 'hotelAdmin', 'employeeAdmin')
RESTAURANT_ROLES = ('restaurantAdmin',)
HOTEL_ROLES = ('hotelAdmin',)
STAFF_ADMIN_ROLES = ('employeeAdmin', 'hotelAdmin')
TASK_ROLES = ('employeeAdmin', 'hotelAdmin', 'employee')

DEV_CONTEXT = {
    "id": None,
    "kind": "dev",
    "role": "dev",
    "name": "Development User",
    "is_dev": True,
}

# Contract:
# Returns (User | Employee | None, current_user_context_dict)
# Raises 401 if the bearer token is missing, invalid or names an unknown account.

def get_current_user_context(
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(default=None),
) -> Tuple[Any, Dict[str, Any]]:
    if dev_mode_active() and not authorization:
        return None, dict(DEV_CONTEXT)

    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    claims = safe_decode_token(authorization[7:].strip())
    if not claims or not claims.get("sub"):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    try:
        account_id = uuid.UUID(str(claims["sub"]))
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    kind = claims.get("kind", "user")
    if kind == "employee":
        account = user_repo.get_employee(db, account_id)
        if account is None or account.status != "active":
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
        name = account.name
    else:
        account = user_repo.get_user(db, account_id)
        if account is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
        name = account.name or account.username

    current_user = {
        "id": account.id,
        "kind": kind,
        "role": account.role,
        "name": name,
        "is_dev": False,
    }
    return account, current_user


def require_roles(*roles: str):
    """Dependency factory: 403 unless the caller holds one of ``roles``."""

    def _dependency(user_context=Depends(get_current_user_context)):
        _account, current_user = user_context
        if current_user["is_dev"] or current_user["role"] in roles:
            return user_context
        logger.info("Role check failed: role=%s required=%s", current_user["role"], roles)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    return _dependency


def get_current_employee(
    user_context=Depends(get_current_user_context),
) -> models.Employee:
    account, current_user = user_context
    if current_user["kind"] != "employee":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Employee session required")
    return account


def actor_name(current_user: Dict[str, Any]) -> Optional[str]:
    """Name recorded on activity entries and task notes."""
    return current_user.get("name")
