"""
JWT helpers for admin and employee sessions.

Tokens carry ``sub`` (account id), ``role`` and ``kind`` (``user`` or
``employee``) and are signed with ``JWT_SECRET`` (HS256).
"""
from __future__ import annotations

import os
from datetime import datetime, timedelta, UTC
from typing import Any, Dict, Optional

from jose import JWTError, jwt

JWT_ALGORITHM = "HS256"
DEFAULT_EXPIRE_MINUTES = 24 * 60


def _secret() -> str:
    return os.getenv("JWT_SECRET", "secretkey")


def _expire_minutes() -> int:
    try:
        return int(os.getenv("JWT_EXPIRE_MINUTES", str(DEFAULT_EXPIRE_MINUTES)))
    except ValueError:
        return DEFAULT_EXPIRE_MINUTES


def create_access_token(*, subject: str, role: str, kind: str = "user", expires_minutes: Optional[int] = None, extra: Optional[Dict[str, Any]] = None) -> str:
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=expires_minutes or _expire_minutes())
    claims: Dict[str, Any] = {
        "sub": str(subject),
        "role": role,
        "kind": kind,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    if extra:
        claims.update(extra)
    return jwt.encode(claims, _secret(), algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    return jwt.decode(token, _secret(), algorithms=[JWT_ALGORITHM])


def safe_decode_token(token: str) -> Optional[Dict[str, Any]]:
    try:
        return decode_token(token)
    except JWTError:
        return None
