import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.core.settings import settings

logger = logging.getLogger(__name__)

# Applied to every route through SlowAPIMiddleware; keyed by client address.
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit hit by {get_remote_address(request)} on {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=429, content={"detail": f"Rate limit exceeded: {exc.detail}"})
