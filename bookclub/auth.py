"""Caller identity and role checks -- FastAPI dependencies.

Authentication happens upstream: the gateway in front of this service
verifies the session and forwards the caller as two headers,
``X-User`` (the e-mail address) and ``X-Role`` (``user`` or ``admin``).
These dependencies only turn those headers into a ``CurrentUser`` and
reject callers whose role is too low.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi import Depends, Header, HTTPException, status


class Role(str, Enum):
    user = "user"
    admin = "admin"

    @property
    def level(self) -> int:
        return {"user": 1, "admin": 2}[self.value]


@dataclass(frozen=True)
class CurrentUser:
    email: str
    role: Role


def has_permission(user: CurrentUser, required_role: Role) -> bool:
    return user.role.level >= required_role.level


async def get_current_user(
    x_user: Optional[str] = Header(None, alias="X-User"),
    x_role: Optional[str] = Header(None, alias="X-Role"),
) -> CurrentUser:
    """Build the caller from the gateway headers.

    Raises ``401 Unauthorized`` when no user is given and ``403`` when
    the role is not one we know.
    """
    if not x_user or not x_user.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    try:
        role = Role((x_role or Role.user.value).strip().lower())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unknown role '{x_role}'",
        )
    return CurrentUser(email=x_user.strip(), role=role)


async def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Reject non-administrators before the route body runs.

    Because this runs as a dependency, a caller without the role never
    learns whether the targeted book or comment exists.
    """
    if not has_permission(user, Role.admin):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Requires role '{Role.admin.value}'",
        )
    return user
