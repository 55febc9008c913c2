# shop_api/adapters/inbound/api/v1/endpoints/user_endpoint.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.adapters.inbound.api.deps import get_session, get_current_identity
from shop_api.application.use_cases.auth_use_cases import AsyncAuthService
from shop_api.application.dtos.user_dto import UserDataResponse, UserOutput
from shop_api.domain.models.identity import DecodedIdentity
from shop_api.shared.utils.error_responses import user_errors
from shop_api.shared.utils.success_responses import user_success

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/user",
    tags=["Users"],
)


@router.get(
    "",
    response_model=UserDataResponse,
    status_code=status.HTTP_200_OK,
    summary="Get current user",
    description="Returns the profile of the user who owns the bearer token.",
    responses={**user_success, **user_errors}
)
async def get_me(
        identity: DecodedIdentity = Depends(get_current_identity),
        db: AsyncSession = Depends(get_session),
):
    service = AsyncAuthService(db)
    user = await service.get_current_user(identity.user_id)
    return UserDataResponse(data=UserOutput.model_validate(user))
