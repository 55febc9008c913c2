# shop_api/test/unit/test_plaintext_password_guard.py

# Para rodar o script
# pytest shop_api/test/unit/test_plaintext_password_guard.py

import logging

import pytest
from sqlalchemy import select

from shop_api.adapters.outbound.persistence.models import User
from shop_api.adapters.outbound.security.password_hasher import PasswordHasher
from shop_api.domain.models.user_role import UserRole
from shop_api.shared.middleware.logging_middleware import PlaintextPasswordGuard

GUARD_LOGGER = "shop_api.shared.middleware.logging_middleware"


class DummyUser:
    def __init__(self, password):
        self.password = password


@pytest.mark.asyncio
async def test_existing_hash_is_left_alone(caplog):
    """
    Garante que senhas já criptografadas não sejam re-hashadas nem logadas.
    """
    hashed_password = await PasswordHasher.hash_password("TestPassword123")
    user = DummyUser(password=hashed_password)

    with caplog.at_level(logging.ERROR, logger=GUARD_LOGGER):
        assert PlaintextPasswordGuard.enforce(user) is False

    assert user.password == hashed_password, "Senha hashada foi alterada indevidamente!"
    assert caplog.records == []


def test_plaintext_is_hashed_and_logged_as_error(caplog):
    """
    Texto puro chegando ao ORM é bug: vira hash e gera log ERROR.
    """
    user = DummyUser(password="TestPassword123")

    with caplog.at_level(logging.ERROR, logger=GUARD_LOGGER):
        assert PlaintextPasswordGuard.enforce(user) is True

    assert PlaintextPasswordGuard.is_hashed(user.password)
    assert PasswordHasher.verify_password_sync("TestPassword123", user.password)
    assert [r.levelno for r in caplog.records] == [logging.ERROR]
    assert "DummyUser" in caplog.records[0].getMessage()
    assert "TestPassword123" not in caplog.records[0].getMessage()


@pytest.mark.asyncio
async def test_flush_never_stores_plaintext(db_session, caplog):
    """
    O listener do Base atua no flush: a linha gravada tem hash bcrypt.
    """
    user = User(username="bob", email="bob@example.com", password="PlainSecret1", role=UserRole.USER.value)
    db_session.add(user)

    with caplog.at_level(logging.ERROR, logger=GUARD_LOGGER):
        await db_session.commit()

    stored = (await db_session.execute(select(User.password).where(User.email == "bob@example.com"))).scalar_one()
    assert stored != "PlainSecret1"
    assert PasswordHasher.verify_password_sync("PlainSecret1", stored)
    assert any(r.levelno == logging.ERROR for r in caplog.records)
