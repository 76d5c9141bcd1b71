"""
Authentication API routes.

- POST /auth/register - Create account, issue tokens
- POST /auth/login - Log in, issue tokens
- POST /auth/validate - Check an access token
- PATCH /auth/password - Change password
- DELETE /auth/account - Delete account and all its data
"""

from fastapi import APIRouter, Depends, status

from augure.application.use_cases.delete_account import DeleteAccount
from augure.application.use_cases.login_user import LoginUser
from augure.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from augure.application.use_cases.update_password import (
    UpdatePassword,
    UpdatePasswordCommand,
)
from augure.application.use_cases.validate_token import ValidateToken
from augure.di.dependencies import (
    get_delete_account,
    get_login_user,
    get_register_user,
    get_update_password,
    get_validate_token,
)
from augure.domain.entities.user import User
from augure.infrastructure.auth import jwt_handler
from augure.presentation.api.middleware.auth import get_current_user
from augure.presentation.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UpdatePasswordRequest,
    ValidateTokenRequest,
    ValidateTokenResponse,
)
from augure.presentation.schemas.base import SuccessResponse
from augure.presentation.schemas.user_schemas import UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _issue_tokens(user: User) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.from_entity(user),
        token=jwt_handler.create_access_token(user_id=user.id, email=user.email),
        refresh_token=jwt_handler.create_refresh_token(user_id=user.id),
    )


# ================================================================
# Register / Login
# ================================================================


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new account",
)
async def register(
    request: RegisterRequest,
    use_case: RegisterUser = Depends(get_register_user),
) -> AuthResponse:
    """
    Create account with optional investment preferences.

    Flow:
    1. Check email is unused
    2. Create user
    3. Store preferences if supplied (failure only logged)
    4. Issue access and refresh tokens
    """
    user = await use_case.execute(
        RegisterUserCommand(
            email=request.email,
            password=request.password,
            preferences=(
                request.preferences.model_dump() if request.preferences else None
            ),
        )
    )
    return _issue_tokens(user)


@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Login with email and password",
)
async def login(
    request: LoginRequest,
    use_case: LoginUser = Depends(get_login_user),
) -> AuthResponse:
    user = await use_case.execute(email=request.email, password=request.password)
    return _issue_tokens(user)


# ================================================================
# Token validation
# ================================================================


@router.post(
    "/validate",
    response_model=ValidateTokenResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Validate access token",
)
async def validate(
    request: ValidateTokenRequest,
    use_case: ValidateToken = Depends(get_validate_token),
) -> ValidateTokenResponse:
    """Always 200; an invalid token is reported as valid=false with error."""
    result = await use_case.execute(request.token)

    return ValidateTokenResponse(
        valid=result.valid,
        user=UserResponse.from_entity(result.user) if result.user else None,
        error=result.error,
    )


# ================================================================
# Account management
# ================================================================


@router.patch(
    "/password",
    response_model=SuccessResponse,
    summary="Change password",
)
async def update_password(
    request: UpdatePasswordRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdatePassword = Depends(get_update_password),
) -> SuccessResponse:
    await use_case.execute(
        UpdatePasswordCommand(
            user_id=current_user.id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )
    return SuccessResponse()


@router.delete(
    "/account",
    response_model=SuccessResponse,
    summary="Delete account",
)
async def delete_account(
    current_user: User = Depends(get_current_user),
    use_case: DeleteAccount = Depends(get_delete_account),
) -> SuccessResponse:
    """Delete the caller's account with its preferences, wallets and analyses."""
    await use_case.execute(current_user.id)
    return SuccessResponse()
