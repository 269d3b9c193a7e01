"""Registration and login endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from media_relay.api.schemas import LoginRequest, RegisterRequest, UserResponse

if TYPE_CHECKING:
    from media_relay.containers import AppContainer

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, request: Request) -> dict[str, object]:
    """Create an account and return its non-secret fields."""
    container: AppContainer = request.app.state.container
    account = await container.user_service.register(
        payload.email, payload.password, payload.full_name
    )
    return {
        "message": "User registered successfully",
        "email": account.email,
        "fullname": account.full_name,
    }


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Check credentials and return the matching identity."""
    container: AppContainer = request.app.state.container
    account = await container.user_service.login(payload.email, payload.password)
    return {
        "message": "Login successful",
        "user": UserResponse.from_account(account).model_dump(),
    }
