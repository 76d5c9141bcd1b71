"""
Investment preferences repository implementation.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from augure.domain.entities.investment_preferences import (
    PREFERENCE_FIELDS,
    InvestmentPreferences,
)
from augure.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from augure.domain.repositories.i_investment_preferences_repository import (
    IInvestmentPreferencesRepository,
)
from augure.infrastructure.persistence.models import InvestmentPreferencesModel


class InvestmentPreferencesRepository(IInvestmentPreferencesRepository):
    """SQLAlchemy implementation of investment preferences repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user(self, user_id: UUID) -> Optional[InvestmentPreferences]:
        """Get preferences for user."""
        model = await self._get_model(user_id)
        return self._to_entity(model) if model else None

    async def create(
        self, preferences: InvestmentPreferences
    ) -> InvestmentPreferences:
        """
        Insert preferences.

        Raises:
            DuplicateEntityError: If the user already has preferences
        """
        model = InvestmentPreferencesModel(
            id=preferences.id,
            user_id=preferences.user_id,
            created_at=preferences.created_at,
            updated_at=preferences.updated_at,
            **preferences.scores(),
        )

        try:
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()
        except IntegrityError:
            raise DuplicateEntityError(
                "InvestmentPreferences", f"user_id {preferences.user_id}"
            )

        await self.session.refresh(model)
        return self._to_entity(model)

    async def update(
        self, preferences: InvestmentPreferences
    ) -> InvestmentPreferences:
        """
        Overwrite stored scores.

        Raises:
            EntityNotFoundError: If the user has no preferences yet
        """
        model = await self._get_model(preferences.user_id)

        if not model:
            raise EntityNotFoundError("InvestmentPreferences", str(preferences.user_id))

        for name, value in preferences.scores().items():
            setattr(model, name, value)
        model.updated_at = preferences.updated_at

        await self.session.flush()
        await self.session.refresh(model)

        return self._to_entity(model)

    async def _get_model(self, user_id: UUID) -> Optional[InvestmentPreferencesModel]:
        stmt = select(InvestmentPreferencesModel).where(
            InvestmentPreferencesModel.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: InvestmentPreferencesModel) -> InvestmentPreferences:
        """Convert model to domain entity."""
        return InvestmentPreferences(
            id=model.id,
            user_id=model.user_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in PREFERENCE_FIELDS},
        )
