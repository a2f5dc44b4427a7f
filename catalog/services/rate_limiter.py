"""
Rate Limiting Service

Per-client rate limiting of the /books endpoints with slowapi.

Tiers:
- Reads (list, get, stream, error): RATE_LIMIT_DEFAULT
- Writes (create, update, delete): RATE_LIMIT_WRITE

RATE_LIMIT_ENABLED=false turns every limit off; the test suite runs that
way and builds its own limiter where it needs one.
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from catalog.config import Settings, get_settings

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = 60


def get_client_ip(request: Request) -> str:
    """
    Key requests by the address of the client that sent them.

    Behind a proxy the first X-Forwarded-For entry (or X-Real-IP) names
    the client; otherwise the socket peer does.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter(config: Settings | None = None) -> Limiter:
    """
    Build a limiter from the rate limit settings.

    Args:
        config: Settings to read; the cached application settings by default

    Returns:
        Limiter keyed by client IP, using a fixed window
    """
    config = config or get_settings()
    rate_limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[config.rate_limit_default],
        storage_uri=config.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=config.rate_limit_enabled,
    )
    logger.info(
        f"Rate limiter ready - enabled: {config.rate_limit_enabled}, "
        f"reads: {config.rate_limit_default}, writes: {config.rate_limit_write}"
    )
    return rate_limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Answer a request over its limit with 429 Too Many Requests.

    The body names the limit that was hit; Retry-After tells the client
    how long to back off and X-RateLimit-Limit repeats the limit.
    """
    limit_detail = str(exc.detail)
    logger.warning(f"Rate limit {limit_detail} hit by {get_client_ip(request)}")

    return JSONResponse(
        status_code=429,
        content={
            "error": "rate_limit_exceeded",
            "message": "Too many requests. Please slow down.",
            "detail": limit_detail,
        },
        headers={
            "Retry-After": str(RETRY_AFTER_SECONDS),
            "X-RateLimit-Limit": limit_detail,
        },
    )
