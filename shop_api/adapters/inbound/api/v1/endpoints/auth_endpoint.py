# shop_api/adapters/inbound/api/v1/endpoints/auth_endpoint.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.adapters.inbound.api.deps import get_session, get_current_token
from shop_api.application.use_cases.auth_use_cases import AsyncAuthService
from shop_api.application.dtos.user_dto import (
    MessageResponse,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserOutput,
    UserRegisteredResponse,
)
from shop_api.shared.utils.error_responses import auth_errors, token_errors, common_errors
from shop_api.shared.utils.success_responses import auth_success, common_success, login_success

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
)


@router.post(
    "/register",
    response_model=UserRegisteredResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Creates a user account. The password is stored hashed and never returned.",
    responses={**auth_success, **auth_errors}
)
async def register_user(
        user_input: UserCreate,
        db: AsyncSession = Depends(get_session),
):
    service = AsyncAuthService(db)
    user = await service.register_user(user_input)
    return UserRegisteredResponse(
        message="User registered successfully",
        data=UserOutput.model_validate(user),
    )


@router.post(
    "/login",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Login user",
    description="Authenticates user credentials and returns a signed bearer token.",
    responses={**login_success, **auth_errors}
)
async def login_user(
        user_input: UserLogin,
        db: AsyncSession = Depends(get_session),
):
    service = AsyncAuthService(db)
    token = await service.login_user(user_input)
    return TokenResponse(token=token)


@router.post(
    "/logout",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Logout user",
    description="Revokes the bearer token used in this request. Repeating it is harmless.",
    responses={**common_success, **token_errors, **common_errors}
)
async def logout_user(
        token: str = Depends(get_current_token),
        db: AsyncSession = Depends(get_session),
):
    service = AsyncAuthService(db)
    await service.logout_user(token)
    return MessageResponse(message="Logged out")
