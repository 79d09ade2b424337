"""
User Repository Implementation
SQLAlchemy-based user repository
"""
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func
from loguru import logger

from workpass.domain.entities import User
from workpass.domain.enums import UserRole, ExperienceLevel, OtpChannel
from workpass.application.repositories.interfaces import IUserRepository
from workpass.infrastructure.persistence.models.user import UserModel
from workpass.core.exceptions import RepositoryException


# Columns refreshed from identity-provider claims on every upsert
IDENTITY_COLUMNS = ("email", "first_name", "last_name", "profile_image_url")


class SQLAlchemyUserRepository(IUserRepository):
    """SQLAlchemy implementation of user repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        try:
            result = await self.session.execute(
                select(UserModel).where(UserModel.id == user_id)
            )
            model = result.scalar_one_or_none()

            if model:
                return self._to_entity(model)
            return None

        except Exception as e:
            logger.error(f"Failed to get user by ID {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to get user: {str(e)}")

    async def upsert(self, user: User) -> User:
        """Insert user or refresh identity columns on conflict"""
        try:
            values = {"id": user.id}
            values.update({column: getattr(user, column) for column in IDENTITY_COLUMNS})

            stmt = pg_insert(UserModel).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[UserModel.id],
                set_={
                    **{column: stmt.excluded[column] for column in IDENTITY_COLUMNS},
                    "updated_at": func.now(),
                },
            ).returning(UserModel)

            result = await self.session.execute(
                stmt, execution_options={"populate_existing": True}
            )
            model = result.scalar_one()
            await self.session.flush()

            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to upsert user {user.id}: {str(e)}")
            raise RepositoryException(f"Failed to upsert user: {str(e)}")

    async def update_work_readiness_score(self, user_id: str, score: int) -> bool:
        try:
            result = await self.session.execute(
                update(UserModel)
                .where(UserModel.id == user_id)
                .values(work_readiness_score=score)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount > 0

        except Exception as e:
            logger.error(f"Failed to store work readiness score for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to store work readiness score: {str(e)}")

    async def mark_contact_verified(self, identifier: str, channel: OtpChannel) -> int:
        """Mark the verified flag on every user whose email/phone matches"""
        if channel == OtpChannel.EMAIL:
            condition = UserModel.email == identifier
            values = {"is_email_verified": True}
        else:
            condition = UserModel.phone == identifier
            values = {"is_phone_verified": True}

        try:
            result = await self.session.execute(
                update(UserModel)
                .where(condition)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount:
                logger.info(f"Marked {channel.value} verified for {result.rowcount} user(s)")
            return result.rowcount

        except Exception as e:
            logger.error(f"Failed to mark {channel.value} verified for {identifier}: {str(e)}")
            raise RepositoryException(f"Failed to mark contact verified: {str(e)}")

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity"""
        return User(
            id=model.id,
            email=model.email,
            phone=model.phone,
            first_name=model.first_name,
            last_name=model.last_name,
            profile_image_url=model.profile_image_url,
            role=UserRole(model.role) if model.role else None,
            experience_level=ExperienceLevel(model.experience_level) if model.experience_level else None,
            is_email_verified=bool(model.is_email_verified),
            is_phone_verified=bool(model.is_phone_verified),
            work_readiness_score=model.work_readiness_score or 0,
            created_at=model.created_at,
            updated_at=model.updated_at
        )


# Alias for convenience
UserRepository = SQLAlchemyUserRepository
