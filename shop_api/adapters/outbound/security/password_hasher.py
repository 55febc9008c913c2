# shop_api/adapters/outbound/security/password_hasher.py

import logging

import bcrypt
from starlette.concurrency import run_in_threadpool

from shop_api.adapters.configuration.config import settings
from shop_api.domain.exceptions import CredentialHashingException

# Configurar logger
logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    One-way hashing of user passwords (bcrypt, salted, cost-factored).

    The async methods push the bcrypt work to a thread so the event loop
    keeps serving other requests. Plaintext is never logged.
    """

    rounds: int = settings.BCRYPT_ROUNDS

    # ---- PASSWORD METHODS ----

    @classmethod
    def hash_password_sync(cls, password: str) -> str:
        """Synchronously hash a password (for ORM hooks)."""
        try:
            hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=cls.rounds))
            return hashed.decode("utf-8")
        except (ValueError, TypeError) as e:
            logger.error("Password hashing failed: %s", type(e).__name__)
            raise CredentialHashingException(original_error=e)

    @classmethod
    def verify_password_sync(cls, plain_password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
        except (ValueError, TypeError) as e:
            # hash armazenado corrompido ou senha fora do limite do bcrypt
            logger.error("Password verification failed: %s", type(e).__name__)
            raise CredentialHashingException(message="Password verification failed.", original_error=e)

    @classmethod
    async def hash_password(cls, password: str) -> str:
        """Asynchronously hash a password."""
        return await run_in_threadpool(cls.hash_password_sync, password)

    @classmethod
    async def verify_password(cls, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a hashed password."""
        return await run_in_threadpool(cls.verify_password_sync, plain_password, hashed_password)
