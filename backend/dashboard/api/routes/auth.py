"""Auth Routes — credentials sign-in."""

from fastapi import APIRouter, Depends, Form

from dashboard.api.deps import get_auth_handlers
from dashboard.api.routes.action_responses import to_http_response
from dashboard.services.handle_auth import AuthHandlers

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/sign-in")
async def sign_in(
    email: str | None = Form(None),
    password: str | None = Form(None),
    handlers: AuthHandlers = Depends(get_auth_handlers),
):
    """Redirects on success; returns the sign-in message on failure."""
    result = await handlers.authenticate({"email": email, "password": password})
    return to_http_response(result)
