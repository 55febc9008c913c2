# shop_api/test/unit/test_auth_gate.py

# Para rodar o arquivo
# pytest shop_api/test/unit/test_auth_gate.py -v

"""
Testes unitários do gate de autenticação, com blacklist e serviço de tokens
simulados.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from shop_api.adapters.inbound.api.deps import extract_bearer_token, get_current_identity
from shop_api.domain.exceptions import InvalidTokenException
from shop_api.domain.models.identity import DecodedIdentity

DEPS = "shop_api.adapters.inbound.api.deps"


def make_request(authorization=None) -> Request:
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode("latin-1")))
    return Request({"type": "http", "method": "GET", "path": "/api/user", "headers": headers})


@pytest.fixture
def token_service():
    service = MagicMock()
    service.verify.return_value = DecodedIdentity(user_id="user-1", email="alice@example.com")
    return service


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, "Authorization header missing"),
        ("", "Authorization header missing"),
        ("Basic abc123", "Invalid authorization scheme"),
        ("Bearer", "Missing authorization token"),
        ("Bearer    ", "Missing authorization token"),
    ],
)
def test_extract_bearer_token_rejections(header, expected):
    with pytest.raises(HTTPException) as exc_info:
        extract_bearer_token(header)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == expected
    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}


def test_extract_bearer_token_accepts_any_case_scheme():
    assert extract_bearer_token("bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.asyncio
async def test_valid_token_attaches_identity(token_service):
    request = make_request("Bearer good-token")

    with patch(f"{DEPS}.token_repository") as repo:
        repo.is_blacklisted = AsyncMock(return_value=False)
        identity = await get_current_identity(request, None, db=MagicMock(), token_service=token_service)

    assert identity.user_id == "user-1"
    assert request.state.identity == identity
    assert request.state.token == "good-token"
    token_service.verify.assert_called_once_with("good-token")


@pytest.mark.asyncio
async def test_blacklisted_token_is_rejected_before_verification(token_service):
    request = make_request("Bearer revoked-token")

    with patch(f"{DEPS}.token_repository") as repo:
        repo.is_blacklisted = AsyncMock(return_value=True)
        with pytest.raises(HTTPException) as exc_info:
            await get_current_identity(request, None, db=MagicMock(), token_service=token_service)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Token has been invalidated, login again"
    token_service.verify.assert_not_called()


@pytest.mark.asyncio
async def test_verify_failure_message_is_forwarded(token_service):
    request = make_request("Bearer expired-token")
    token_service.verify.side_effect = InvalidTokenException(message="Token has expired")

    with patch(f"{DEPS}.token_repository") as repo:
        repo.is_blacklisted = AsyncMock(return_value=False)
        with pytest.raises(HTTPException) as exc_info:
            await get_current_identity(request, None, db=MagicMock(), token_service=token_service)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Token has expired"
    assert not hasattr(request.state, "identity"), "Identidade não deveria ser anexada"


@pytest.mark.asyncio
async def test_missing_header_stops_before_store_lookup(token_service):
    request = make_request()

    with patch(f"{DEPS}.token_repository") as repo:
        repo.is_blacklisted = AsyncMock(return_value=False)
        with pytest.raises(HTTPException):
            await get_current_identity(request, None, db=MagicMock(), token_service=token_service)

    repo.is_blacklisted.assert_not_called()
    token_service.verify.assert_not_called()
