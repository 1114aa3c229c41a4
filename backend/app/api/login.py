"""
Login Router
Serves the login form and validates submitted passwords.
"""

import logging
from pathlib import Path
from typing import AbstractSet, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.dependencies import get_common_passwords
from app.utils.password_policy import validate_password

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


async def _read_submitted_password(request: Request) -> Optional[str]:
    """
    Pull the password out of a JSON or form body.
    Returns None when it is absent, empty or not a string.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            logger.info("Rejected login request with malformed JSON body")
            return None
        password = payload.get("password") if isinstance(payload, dict) else None
    else:
        form = await request.form()
        password = form.get("password")

    if not isinstance(password, str) or not password:
        return None
    return password


@router.get("/", response_class=HTMLResponse)
async def login_form(request: Request):
    """Render the login form with the password requirements."""
    return templates.TemplateResponse(request, "index.html")


@router.post("/login", response_class=HTMLResponse)
async def login(
    request: Request,
    common_passwords: AbstractSet[str] = Depends(get_common_passwords),
):
    """
    Validate the submitted password.
    400 with an error page if it is missing or breaks the policy, welcome page otherwise.
    """
    password = await _read_submitted_password(request)
    if password is None:
        return templates.TemplateResponse(
            request,
            "login_error.html",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    validation = validate_password(password, common_passwords)

    if not validation.is_valid:
        logger.warning(f"Password rejected with {len(validation.errors)} policy violation(s)")
        return templates.TemplateResponse(
            request,
            "validation_failed.html",
            {"errors": validation.errors},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    logger.info("Password accepted")
    return templates.TemplateResponse(request, "welcome.html", {"password": password})
