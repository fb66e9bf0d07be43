"""
Staff access check.

There is no authentication: callers state their role in a header and the
admin routes compare it as plain text.
"""
from typing import Optional

from fastapi import Header, HTTPException, status

ADMIN_ROLE = "admin"


def require_admin(x_user_role: Optional[str] = Header(default=None)) -> str:
    """Reject the request unless it claims the admin role."""
    if x_user_role != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required"
        )
    return x_user_role
