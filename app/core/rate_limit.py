"""Rate limiting configuration."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import get_settings

settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)


def rate_limit_traffic():
    """Rate limit for traffic snapshot requests."""
    return f"{settings.RATE_LIMIT_PER_MINUTE}/minute"


def rate_limit_routes():
    """Rate limit for route recommendation requests."""
    return f"{settings.RATE_LIMIT_PER_MINUTE}/minute"
