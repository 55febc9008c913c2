# shop_api/adapters/outbound/persistence/repositories/token_repository.py

from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shop_api.adapters.outbound.persistence.models.token_blacklist_model import TokenBlacklist
from shop_api.application.ports.outbound.blacklist_repository_port import IBlacklistRepository
from shop_api.domain.exceptions import DatabaseOperationException
from shop_api.shared.utils.datetime_utils import DateTimeUtil
import logging

logger = logging.getLogger(__name__)


class AsyncTokenRepository(IBlacklistRepository):
    """Repository for managing token blacklist."""

    @staticmethod
    async def add_to_blacklist(db: AsyncSession, token: str, expires_at: datetime) -> bool:
        """
        Add a token to the blacklist (insert-or-ignore).

        Args:
            db: Async database session
            token: Raw bearer token to blacklist
            expires_at: When the entry stops mattering (the token's own expiry)

        Returns:
            True if a new entry was written, False if the token was already there
        """
        try:
            existing = await db.get(TokenBlacklist, token)
            if existing is not None:
                return False

            db.add(TokenBlacklist(
                token=token,
                expires_at=DateTimeUtil.for_storage(expires_at),
                revoked_at=DateTimeUtil.for_storage(),
            ))
            await db.commit()
            return True
        except IntegrityError:
            # logout concorrente com o mesmo token: o registro já existe
            await db.rollback()
            logger.info("Token already blacklisted by a concurrent request")
            return False
        except SQLAlchemyError as e:
            await db.rollback()
            raise DatabaseOperationException(
                message="Error adding token to blacklist",
                original_error=e
            )

    @staticmethod
    async def is_blacklisted(db: AsyncSession, token: str) -> bool:
        """
        Check if a token is in the blacklist.

        Entries past their expires_at count as absent even before cleanup.
        """
        try:
            query = select(TokenBlacklist.token).where(
                TokenBlacklist.token == token,
                TokenBlacklist.expires_at > DateTimeUtil.utcnow_naive(),
            )
            result = await db.execute(query)
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            raise DatabaseOperationException(
                message="Error checking token blacklist",
                original_error=e
            )

    @staticmethod
    async def cleanup_expired(db: AsyncSession) -> int:
        """
        Remove expired tokens from blacklist to keep the table size manageable.

        Returns:
            Number of records deleted
        """
        try:
            query = delete(TokenBlacklist).where(TokenBlacklist.expires_at <= DateTimeUtil.utcnow_naive())
            result = await db.execute(query)
            await db.commit()
            return result.rowcount or 0
        except SQLAlchemyError as e:
            await db.rollback()
            raise DatabaseOperationException(
                message="Error cleaning up expired blacklisted tokens",
                original_error=e
            )


# Create singleton instance
token_repository = AsyncTokenRepository()
