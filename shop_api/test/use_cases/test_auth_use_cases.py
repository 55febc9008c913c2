# shop_api/test/use_cases/test_auth_use_cases.py

# pytest shop_api/test/use_cases/test_auth_use_cases.py -v

"""
Testes do serviço de autenticação com repositórios simulados.
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest

from shop_api.application.dtos.user_dto import UserCreate, UserLogin
from shop_api.application.use_cases.auth_use_cases import AsyncAuthService
from shop_api.domain.exceptions import (
    DatabaseOperationException,
    InvalidCredentialsException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)

MODULE = "shop_api.application.use_cases.auth_use_cases"


def register_input():
    return UserCreate(username="alice", email="alice@example.com", password="secret1", role="user")


def fake_hasher(verify_result=True):
    hasher = MagicMock()
    hasher.hash_password = AsyncMock(return_value="$2b$04$hashed")
    hasher.verify_password = AsyncMock(return_value=verify_result)
    return hasher


@pytest.mark.asyncio
async def test_register_hashes_password_before_persisting():
    hasher = fake_hasher()
    created = SimpleNamespace(id=uuid4(), email="alice@example.com")

    with patch(f"{MODULE}.user_repository") as repo:
        repo.email_exists = AsyncMock(return_value=False)
        repo.create = AsyncMock(return_value=created)

        service = AsyncAuthService(MagicMock(), token_service=MagicMock(), hasher=hasher)
        user = await service.register_user(register_input())

    assert user is created
    hasher.hash_password.assert_awaited_once_with("secret1")
    stored = repo.create.await_args.kwargs["obj_in"]
    assert stored["password"] == "$2b$04$hashed", "Senha deveria ser persistida já com hash"
    assert stored["role"] == "user"


@pytest.mark.asyncio
async def test_register_duplicate_email_is_rejected_before_hashing():
    hasher = fake_hasher()

    with patch(f"{MODULE}.user_repository") as repo:
        repo.email_exists = AsyncMock(return_value=True)
        repo.create = AsyncMock()

        service = AsyncAuthService(MagicMock(), token_service=MagicMock(), hasher=hasher)
        with pytest.raises(ResourceAlreadyExistsException) as exc_info:
            await service.register_user(register_input())

    assert exc_info.value.message == "User with this email already exists."
    hasher.hash_password.assert_not_awaited()
    repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_register_unique_index_violation_maps_to_same_message():
    """
    Corrida entre duas requisições: a checagem passa e o índice único recusa.
    """
    with patch(f"{MODULE}.user_repository") as repo:
        repo.email_exists = AsyncMock(return_value=False)
        repo.create = AsyncMock(side_effect=ResourceAlreadyExistsException("User with these data already exists"))

        service = AsyncAuthService(MagicMock(), token_service=MagicMock(), hasher=fake_hasher())
        with pytest.raises(ResourceAlreadyExistsException) as exc_info:
            await service.register_user(register_input())

    assert exc_info.value.message == "User with this email already exists."


@pytest.mark.asyncio
async def test_login_returns_token_from_token_service():
    user = SimpleNamespace(id=uuid4(), email="alice@example.com", password="$2b$04$hashed")
    token_service = MagicMock()
    token_service.issue.return_value = "signed-token"

    with patch(f"{MODULE}.user_repository") as repo:
        repo.get_by_email = AsyncMock(return_value=user)

        service = AsyncAuthService(MagicMock(), token_service=token_service, hasher=fake_hasher())
        token = await service.login_user(UserLogin(email="alice@example.com", password="secret1"))

    assert token == "signed-token"
    token_service.issue.assert_called_once_with(str(user.id), "alice@example.com")


@pytest.mark.asyncio
@pytest.mark.parametrize("user_found, password_ok", [(False, True), (True, False)])
async def test_login_failures_are_indistinguishable(user_found, password_ok):
    user = SimpleNamespace(id=uuid4(), email="alice@example.com", password="$2b$04$hashed")
    token_service = MagicMock()

    with patch(f"{MODULE}.user_repository") as repo:
        repo.get_by_email = AsyncMock(return_value=user if user_found else None)

        service = AsyncAuthService(MagicMock(), token_service=token_service, hasher=fake_hasher(password_ok))
        with pytest.raises(InvalidCredentialsException) as exc_info:
            await service.login_user(UserLogin(email="alice@example.com", password="secret1"))

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Incorrect email or password."
    token_service.issue.assert_not_called()


@pytest.mark.asyncio
async def test_logout_uses_token_expiry_for_blacklist_entry():
    expires_at = datetime(2030, 1, 1, tzinfo=timezone.utc)
    token_service = MagicMock()
    token_service.get_expiration.return_value = expires_at

    with patch(f"{MODULE}.token_repository") as repo:
        repo.add_to_blacklist = AsyncMock(return_value=True)

        db = MagicMock()
        service = AsyncAuthService(db, token_service=token_service, hasher=fake_hasher())
        await service.logout_user("raw-token")

    repo.add_to_blacklist.assert_awaited_once_with(db, "raw-token", expires_at)


@pytest.mark.asyncio
async def test_logout_falls_back_when_expiry_is_unreadable():
    token_service = MagicMock()
    token_service.get_expiration.return_value = None

    with patch(f"{MODULE}.token_repository") as repo:
        repo.add_to_blacklist = AsyncMock(return_value=True)

        service = AsyncAuthService(MagicMock(), token_service=token_service, hasher=fake_hasher())
        await service.logout_user("raw-token")

    _, _, expires_at = repo.add_to_blacklist.await_args.args
    assert expires_at > datetime.now(timezone.utc)


@pytest.mark.asyncio
async def test_logout_store_failure_is_propagated():
    token_service = MagicMock()
    token_service.get_expiration.return_value = None

    with patch(f"{MODULE}.token_repository") as repo:
        repo.add_to_blacklist = AsyncMock(side_effect=RuntimeError("connection lost"))

        service = AsyncAuthService(MagicMock(), token_service=token_service, hasher=fake_hasher())
        with pytest.raises(DatabaseOperationException):
            await service.logout_user("raw-token")


@pytest.mark.asyncio
async def test_get_current_user_not_found():
    with patch(f"{MODULE}.user_repository") as repo:
        repo.get = AsyncMock(return_value=None)

        service = AsyncAuthService(MagicMock(), token_service=MagicMock(), hasher=fake_hasher())
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await service.get_current_user(str(uuid4()))

    assert exc_info.value.message == "User not found."


@pytest.mark.asyncio
async def test_get_current_user_with_malformed_id_skips_store():
    with patch(f"{MODULE}.user_repository") as repo:
        repo.get = AsyncMock()

        service = AsyncAuthService(MagicMock(), token_service=MagicMock(), hasher=fake_hasher())
        with pytest.raises(ResourceNotFoundException):
            await service.get_current_user("not-a-uuid")

    repo.get.assert_not_awaited()
