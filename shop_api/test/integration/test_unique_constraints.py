# shop_api/test/integration/test_unique_constraints.py

# Para Rodar o Script:
# pytest shop_api/test/integration/test_unique_constraints.py -v

# Testes de Restrições Únicas: o índice único de email vale mesmo sem a checagem da aplicação.

import uuid
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.adapters.outbound.persistence.repositories import user_repository
from shop_api.application.dtos.user_dto import UserCreate
from shop_api.application.use_cases.auth_use_cases import AsyncAuthService
from shop_api.domain.exceptions import ResourceAlreadyExistsException


def user_input(email: str) -> UserCreate:
    return UserCreate(username="alice", email=email, password="Strong123Password", role="user")


@pytest.mark.asyncio
async def test_unique_email_on_create(db_session: AsyncSession):
    """
    Testa se a validação de email único funciona corretamente na criação.
    """
    auth_service = AsyncAuthService(db_session)
    unique_email = f"unique-create-{uuid.uuid4()}@example.com"

    user1 = await auth_service.register_user(user_input(unique_email))
    assert user1.email == unique_email

    with pytest.raises(ResourceAlreadyExistsException):
        await auth_service.register_user(user_input(unique_email))


@pytest.mark.asyncio
async def test_unique_index_catches_race_past_advisory_check(db_session: AsyncSession):
    """
    Simula a corrida: a checagem prévia diz que o email está livre, mas o
    índice único do banco recusa o segundo insert.
    """
    auth_service = AsyncAuthService(db_session)
    email = f"race-{uuid.uuid4()}@example.com"
    await auth_service.register_user(user_input(email))

    with patch.object(user_repository, "email_exists", new=AsyncMock(return_value=False)):
        with pytest.raises(ResourceAlreadyExistsException) as exc_info:
            await auth_service.register_user(user_input(email))

    assert exc_info.value.message == "User with this email already exists."


@pytest.mark.asyncio
async def test_stored_password_is_a_hash(db_session: AsyncSession):
    auth_service = AsyncAuthService(db_session)

    user = await auth_service.register_user(user_input(f"hash-{uuid.uuid4()}@example.com"))

    assert user.password != "Strong123Password"
    assert user.password.startswith("$2")
