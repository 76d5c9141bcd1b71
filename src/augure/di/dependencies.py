"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
Use cases are session-scoped: one database session per request.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from augure.di.container import get_container

# ================================================================
# Database Dependencies
# ================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Yields async database session from container. Commits when the
    request succeeds, rolls back otherwise.
    """
    container = get_container()
    async with container.database.session() as session:
        yield session


# ================================================================
# Service Dependencies
# ================================================================


def get_password_hasher():
    """Get password hasher dependency."""
    return get_container().password_hasher


def get_market_data_client():
    """Get market data client dependency."""
    return get_container().market_data_client


def get_transaction_source():
    """Get transaction source dependency."""
    return get_container().transaction_source


def get_insight_generator():
    """Get insight generator dependency."""
    return get_container().insight_generator


# ================================================================
# Account Use Cases
# ================================================================


def get_register_user(
    session: AsyncSession = Depends(get_db_session),
    password_hasher=Depends(get_password_hasher),
):
    """Get RegisterUser use case dependency."""
    from augure.application.use_cases.register_user import RegisterUser

    container = get_container()
    return RegisterUser(
        user_repository=container.get_user_repository(session),
        preferences_repository=container.get_preferences_repository(session),
        password_hasher=password_hasher,
    )


def get_login_user(
    session: AsyncSession = Depends(get_db_session),
    password_hasher=Depends(get_password_hasher),
):
    """Get LoginUser use case dependency."""
    from augure.application.use_cases.login_user import LoginUser

    container = get_container()
    return LoginUser(
        user_repository=container.get_user_repository(session),
        password_hasher=password_hasher,
    )


def get_validate_token(
    session: AsyncSession = Depends(get_db_session),
):
    """Get ValidateToken use case dependency."""
    from augure.application.use_cases.validate_token import ValidateToken
    from augure.infrastructure.auth.jwt_handler import decode_access_token

    container = get_container()
    return ValidateToken(
        user_repository=container.get_user_repository(session),
        token_decoder=decode_access_token,
    )


def get_update_password(
    session: AsyncSession = Depends(get_db_session),
    password_hasher=Depends(get_password_hasher),
):
    """Get UpdatePassword use case dependency."""
    from augure.application.use_cases.update_password import UpdatePassword

    container = get_container()
    return UpdatePassword(
        user_repository=container.get_user_repository(session),
        password_hasher=password_hasher,
    )


def get_delete_account(
    session: AsyncSession = Depends(get_db_session),
):
    """Get DeleteAccount use case dependency."""
    from augure.application.use_cases.delete_account import DeleteAccount

    container = get_container()
    return DeleteAccount(user_repository=container.get_user_repository(session))


# ================================================================
# Profile Use Cases
# ================================================================


def get_list_wallets(
    session: AsyncSession = Depends(get_db_session),
):
    """Get ListWallets use case dependency."""
    from augure.application.use_cases.list_wallets import ListWallets

    container = get_container()
    return ListWallets(
        wallet_repository=container.get_wallet_repository(session),
        analysis_repository=container.get_analysis_repository(session),
    )


def get_get_user_profile(
    session: AsyncSession = Depends(get_db_session),
    list_wallets=Depends(get_list_wallets),
):
    """Get GetUserProfile use case dependency."""
    from augure.application.use_cases.get_user_profile import GetUserProfile

    container = get_container()
    return GetUserProfile(
        preferences_repository=container.get_preferences_repository(session),
        list_wallets=list_wallets,
    )


def get_get_preferences(
    session: AsyncSession = Depends(get_db_session),
):
    """Get GetPreferences use case dependency."""
    from augure.application.use_cases.get_preferences import GetPreferences

    container = get_container()
    return GetPreferences(
        preferences_repository=container.get_preferences_repository(session)
    )


def get_update_preferences(
    session: AsyncSession = Depends(get_db_session),
):
    """Get UpdatePreferences use case dependency."""
    from augure.application.use_cases.update_preferences import UpdatePreferences

    container = get_container()
    return UpdatePreferences(
        preferences_repository=container.get_preferences_repository(session)
    )


def get_connect_wallet(
    session: AsyncSession = Depends(get_db_session),
):
    """Get ConnectWallet use case dependency."""
    from augure.application.use_cases.connect_wallet import ConnectWallet

    container = get_container()
    return ConnectWallet(wallet_repository=container.get_wallet_repository(session))


def get_disconnect_wallet(
    session: AsyncSession = Depends(get_db_session),
):
    """Get DisconnectWallet use case dependency."""
    from augure.application.use_cases.disconnect_wallet import DisconnectWallet

    container = get_container()
    return DisconnectWallet(
        wallet_repository=container.get_wallet_repository(session)
    )


def get_set_primary_wallet(
    session: AsyncSession = Depends(get_db_session),
):
    """Get SetPrimaryWallet use case dependency."""
    from augure.application.use_cases.set_primary_wallet import SetPrimaryWallet

    container = get_container()
    return SetPrimaryWallet(
        wallet_repository=container.get_wallet_repository(session)
    )


# ================================================================
# Analysis Use Cases
# ================================================================


def get_generate_full_analysis(
    session: AsyncSession = Depends(get_db_session),
    transaction_source=Depends(get_transaction_source),
    market_data_client=Depends(get_market_data_client),
    insight_generator=Depends(get_insight_generator),
):
    """Get GenerateFullAnalysis use case dependency."""
    from augure.application.use_cases.generate_full_analysis import (
        GenerateFullAnalysis,
    )

    container = get_container()
    return GenerateFullAnalysis(
        transaction_source=transaction_source,
        market_data_client=market_data_client,
        insight_generator=insight_generator,
        preferences_repository=container.get_preferences_repository(session),
        analysis_repository=container.get_analysis_repository(session),
    )


def get_get_analysis_history(
    session: AsyncSession = Depends(get_db_session),
):
    """Get GetAnalysisHistory use case dependency."""
    from augure.application.use_cases.get_analysis_history import (
        GetAnalysisHistory,
    )

    container = get_container()
    return GetAnalysisHistory(
        analysis_repository=container.get_analysis_repository(session)
    )


def get_get_analysis(
    session: AsyncSession = Depends(get_db_session),
):
    """Get GetAnalysis use case dependency."""
    from augure.application.use_cases.get_analysis import GetAnalysis

    container = get_container()
    return GetAnalysis(analysis_repository=container.get_analysis_repository(session))
