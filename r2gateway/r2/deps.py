import hmac

from fastapi import Header, HTTPException, status
from typing import Optional

from r2gateway.config.settings import settings
from r2gateway.r2.client import R2Client

# Singleton, closed on application shutdown
r2_client = R2Client.from_settings(settings.r2)


def get_r2_client() -> R2Client:
    return r2_client


def require_secret(x_secret: Optional[str] = Header(default=None)) -> None:
    expected = settings.r2.secret
    if not expected or x_secret is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing secret")
    if not hmac.compare_digest(x_secret.encode(), expected.encode()):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid secret")
