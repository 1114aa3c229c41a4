"""
API Dependencies
Reusable FastAPI dependencies for request handlers.
"""

from typing import FrozenSet

from fastapi import Request


def get_common_passwords(request: Request) -> FrozenSet[str]:
    """
    Return the common-password blocklist loaded at startup.
    Falls back to an empty set if the application lifespan has not run.
    """
    return getattr(request.app.state, "common_passwords", frozenset())
