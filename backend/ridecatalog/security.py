"""Shared-secret gate for admin-scoped operations."""
import hmac
import logging
from typing import Optional

from fastapi import Depends, Header, Request

from ridecatalog.errors import UnauthorizedError

logger = logging.getLogger(__name__)

ADMIN_KEY_HEADER = "X-Admin-Key"


class AdminGate:
    """Compares a supplied key against the configured admin secret."""

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("Admin secret must be a non-empty string")
        self._secret = secret.encode("utf-8")

    def check(self, supplied_key: Optional[str]) -> bool:
        if not supplied_key:
            return False
        return hmac.compare_digest(supplied_key.encode("utf-8"), self._secret)


def get_admin_gate(request: Request) -> AdminGate:
    return request.app.state.admin_gate


def require_admin(
    x_admin_key: Optional[str] = Header(default=None, alias=ADMIN_KEY_HEADER),
    gate: AdminGate = Depends(get_admin_gate),
) -> None:
    """Route dependency: reject the request before any store access."""
    if not gate.check(x_admin_key):
        logger.warning("Rejected admin request with missing or invalid key")
        raise UnauthorizedError()
