"""
User profile API routes.

- GET /user/profile - User, preferences and wallets
- GET /user/preferences - Investment preferences
- PATCH /user/preferences - Create or update investment preferences
"""

from fastapi import APIRouter, Depends

from augure.application.use_cases.get_preferences import GetPreferences
from augure.application.use_cases.get_user_profile import GetUserProfile
from augure.application.use_cases.update_preferences import (
    UpdatePreferences,
    UpdatePreferencesCommand,
)
from augure.di.dependencies import (
    get_get_preferences,
    get_get_user_profile,
    get_update_preferences,
)
from augure.domain.entities.user import User
from augure.presentation.api.middleware.auth import get_current_user
from augure.presentation.schemas.user_schemas import (
    PreferencesEnvelope,
    PreferencesResponse,
    ProfileResponse,
    UpdatePreferencesRequest,
    UserResponse,
)
from augure.presentation.schemas.wallet_schemas import WalletResponse

router = APIRouter(prefix="/user", tags=["Users"])


@router.get(
    "/profile",
    response_model=ProfileResponse,
    summary="Get current user profile",
)
async def get_profile(
    current_user: User = Depends(get_current_user),
    use_case: GetUserProfile = Depends(get_get_user_profile),
) -> ProfileResponse:
    profile = await use_case.execute(current_user)

    return ProfileResponse(
        user=UserResponse.from_entity(profile.user),
        preferences=(
            PreferencesResponse.from_entity(profile.preferences)
            if profile.preferences
            else None
        ),
        wallets=[WalletResponse.from_entity(w) for w in profile.wallets],
    )


@router.get(
    "/preferences",
    response_model=PreferencesEnvelope,
    summary="Get investment preferences",
)
async def get_preferences(
    current_user: User = Depends(get_current_user),
    use_case: GetPreferences = Depends(get_get_preferences),
) -> PreferencesEnvelope:
    preferences = await use_case.execute(current_user.id)

    return PreferencesEnvelope(
        preferences=PreferencesResponse.from_entity(preferences) if preferences else None
    )


@router.patch(
    "/preferences",
    response_model=PreferencesEnvelope,
    summary="Create or update investment preferences",
)
async def update_preferences(
    request: UpdatePreferencesRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdatePreferences = Depends(get_update_preferences),
) -> PreferencesEnvelope:
    """
    Upsert preferences.

    The first call must include all ten scores; later calls may send any
    subset.
    """
    preferences = await use_case.execute(
        UpdatePreferencesCommand(
            user_id=current_user.id,
            scores=request.model_dump(exclude_none=True),
        )
    )

    return PreferencesEnvelope(preferences=PreferencesResponse.from_entity(preferences))
