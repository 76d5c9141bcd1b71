"""
Update investment preferences use case.

Upsert semantics: the first write creates the row and must carry every
score, later writes may change any subset.
"""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from augure.domain.entities.investment_preferences import (
    PREFERENCE_FIELDS,
    InvestmentPreferences,
)
from augure.domain.exceptions import ValidationError
from augure.domain.repositories.i_investment_preferences_repository import (
    IInvestmentPreferencesRepository,
)


def _camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


@dataclass
class UpdatePreferencesCommand:
    """Command carrying the scores to set; None means unchanged."""

    user_id: UUID
    scores: dict[str, Optional[int]] = field(default_factory=dict)


class UpdatePreferences:
    """
    Use case for creating or updating investment preferences.

    Business rules:
    - Scores are integers in [1, 10]
    - Creation requires all ten scores
    """

    def __init__(self, preferences_repository: IInvestmentPreferencesRepository):
        """
        Initialize use case.

        Args:
            preferences_repository: Investment preferences repository
        """
        self.preferences_repository = preferences_repository

    async def execute(self, command: UpdatePreferencesCommand) -> InvestmentPreferences:
        """
        Create or update preferences.

        Args:
            command: User and scores to apply

        Returns:
            Stored preferences

        Raises:
            ValidationError: If a score is out of range, or a score is
                missing while creating
        """
        scores = {k: v for k, v in command.scores.items() if v is not None}
        existing = await self.preferences_repository.get_by_user(command.user_id)

        try:
            if existing:
                existing.apply_updates(scores)
                return await self.preferences_repository.update(existing)

            for name in PREFERENCE_FIELDS:
                if name not in scores:
                    raise ValidationError(
                        field=None,
                        reason=f"Missing required field: {_camel(name)}",
                    )

            preferences = InvestmentPreferences(user_id=command.user_id, **scores)
        except ValueError as e:
            raise ValidationError(field=None, reason=str(e))

        return await self.preferences_repository.create(preferences)
