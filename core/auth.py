import secrets
from typing import Optional

from fastapi import Header, HTTPException, status

from core.config import settings


def _extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def require_admin(authorization: Optional[str] = Header(None)) -> None:
    """Guard for mutating endpoints.

    With no ``ADMIN_TOKEN`` configured the API stays open, which is how local
    development runs.
    """
    expected = settings.ADMIN_TOKEN
    if not expected:
        return None

    token = _extract_bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    if not secrets.compare_digest(token, expected):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return None
