"""
Security Headers Middleware
Adds a baseline set of browser security headers to every response.
"""

from typing import Dict

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

CONTENT_SECURITY_POLICY = {
    "default-src": ["'self'"],
    "base-uri": ["'self'"],
    "font-src": ["'self'", "https:", "data:"],
    "form-action": ["'self'"],
    "frame-ancestors": ["'self'"],
    "img-src": ["'self'", "data:"],
    "object-src": ["'none'"],
    "script-src": ["'self'"],
    "script-src-attr": ["'none'"],
    "style-src": ["'self'", "'unsafe-inline'"],
    "upgrade-insecure-requests": [],
}


def build_content_security_policy(directives: Dict[str, list]) -> str:
    """Render CSP directives into a header value."""
    return "; ".join(
        " ".join([name, *sources]) for name, sources in directives.items()
    )


def build_security_headers(hsts_max_age: int) -> Dict[str, str]:
    return {
        "Content-Security-Policy": build_content_security_policy(CONTENT_SECURITY_POLICY),
        "Cross-Origin-Opener-Policy": "same-origin",
        "Cross-Origin-Resource-Policy": "same-origin",
        "Origin-Agent-Cluster": "?1",
        "Referrer-Policy": "no-referrer",
        "Strict-Transport-Security": f"max-age={hsts_max_age}; includeSubDomains",
        "X-Content-Type-Options": "nosniff",
        "X-DNS-Prefetch-Control": "off",
        "X-Download-Options": "noopen",
        "X-Frame-Options": "SAMEORIGIN",
        "X-Permitted-Cross-Domain-Policies": "none",
        "X-XSS-Protection": "0",
    }


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, hsts_max_age: int = 60 * 60 * 24 * 180):
        super().__init__(app)
        self.headers = build_security_headers(hsts_max_age)

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
