"""
Rate Limiting Middleware
Charges every request against one per-client budget before routing,
so mounted static files and unmatched paths count too.
"""

import logging
from typing import Callable

from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from limits import parse_many
from slowapi import Limiter
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

GLOBAL_SCOPE = "global"


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        limiter: Limiter,
        rate_limit: str,
        key_func: Callable[[Request], str],
        message: str,
    ):
        super().__init__(app)
        self.limiter = limiter
        self.limits = parse_many(rate_limit)
        self.key_func = key_func
        self.message = message

    async def dispatch(self, request: Request, call_next):
        if self.limiter.enabled:
            key = self.key_func(request)
            for limit in self.limits:
                if not self.limiter.limiter.hit(limit, GLOBAL_SCOPE, key):
                    logger.warning(f"Rate limit exceeded for {key}: {limit}")
                    return PlainTextResponse(
                        self.message,
                        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    )

        return await call_next(request)
