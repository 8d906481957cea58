"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status

from ..core.schemas.auth import CredentialsRequest, TokenResponse
from ..core.schemas.common import ErrorResponse
from ..core.services import AuthService
from ..middleware.auth import get_auth_service

router = APIRouter(tags=["authentication"])


@router.post(
    "/registerUser",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def register_user(
    request: CredentialsRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """Register a new user and get a JWT."""
    token = await auth_service.register(request.username, request.password)
    return TokenResponse(response="User registered successfully.", token=token)


@router.post(
    "/loginUser",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login_user(
    request: CredentialsRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """Login user and get a JWT."""
    token = await auth_service.login(request.username, request.password)
    return TokenResponse(response="User logged in successfully.", token=token)
