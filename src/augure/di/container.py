"""
Dependency Injection Container for Augure.

Manages all service instances and their dependencies.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from augure.config.settings import Settings, get_settings
from augure.domain.repositories.i_connected_wallet_repository import (
    IConnectedWalletRepository,
)
from augure.domain.repositories.i_investment_preferences_repository import (
    IInvestmentPreferencesRepository,
)
from augure.domain.repositories.i_user_repository import IUserRepository
from augure.domain.repositories.i_wallet_analysis_repository import (
    IWalletAnalysisRepository,
)
from augure.domain.services.i_cache import ICache
from augure.domain.services.i_insight_generator import IInsightGenerator
from augure.domain.services.i_market_data_client import IMarketDataClient
from augure.domain.services.i_password_hasher import IPasswordHasher
from augure.domain.services.i_transaction_source import ITransactionSource
from augure.infrastructure.ai.gemini_insight_generator import (
    GeminiInsightGenerator,
)
from augure.infrastructure.auth.password_hasher import PBKDF2PasswordHasher
from augure.infrastructure.cache.ttl_cache import InMemoryTTLCache
from augure.infrastructure.market_data.coingecko_client import CoinGeckoClient
from augure.infrastructure.market_data.sample_transaction_source import (
    SampleTransactionSource,
)
from augure.infrastructure.persistence.database import Database
from augure.infrastructure.persistence.repositories.connected_wallet_repository import (  # noqa: E501
    ConnectedWalletRepository,
)
from augure.infrastructure.persistence.repositories.investment_preferences_repository import (  # noqa: E501
    InvestmentPreferencesRepository,
)
from augure.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from augure.infrastructure.persistence.repositories.wallet_analysis_repository import (  # noqa: E501
    WalletAnalysisRepository,
)
from augure.infrastructure.resilience.retry import Retry, RetryConfig


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of services (database, cache, external
    clients). Repositories are session-scoped and built per call.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize container with None instances.

        Args:
            settings: Settings to build services from (defaults to the
                process-wide settings)
        """
        self._settings = settings

        # Infrastructure
        self._database: Optional[Database] = None
        self._cache: Optional[ICache] = None

        # Domain Services
        self._market_data_client: Optional[IMarketDataClient] = None
        self._transaction_source: Optional[ITransactionSource] = None
        self._insight_generator: Optional[IInsightGenerator] = None
        self._password_hasher: Optional[IPasswordHasher] = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    async def initialize(self) -> None:
        """Initialize all services and establish connections."""
        await self.database.connect()

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._market_data_client:
            await self._market_data_client.close()

        if self._insight_generator:
            await self._insight_generator.close()

        if self._database:
            await self._database.disconnect()

    def _retry(self, name: str) -> Retry:
        """Fresh retry policy; each integration owns its attempt budget."""
        return Retry(
            RetryConfig(
                max_retries=self.settings.RETRY_MAX_RETRIES,
                initial_delay=self.settings.RETRY_INITIAL_DELAY,
                backoff_multiplier=self.settings.RETRY_BACKOFF_MULTIPLIER,
            ),
            name=name,
        )

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=self.settings.DATABASE_URL,
                echo=self.settings.DATABASE_ECHO,
            )
        return self._database

    @property
    def cache(self) -> ICache:
        """Get process-wide TTL cache."""
        if self._cache is None:
            self._cache = InMemoryTTLCache(ttl=self.settings.CACHE_TTL_SECONDS)
        return self._cache

    # Domain Service Getters

    @property
    def market_data_client(self) -> IMarketDataClient:
        """Get CoinGecko price client."""
        if self._market_data_client is None:
            self._market_data_client = CoinGeckoClient(
                base_url=self.settings.COINGECKO_BASE_URL,
                cache=self.cache,
                retry=self._retry("coingecko"),
                api_key=self.settings.COINGECKO_API_KEY,
                timeout=self.settings.COINGECKO_TIMEOUT,
            )
        return self._market_data_client

    @property
    def transaction_source(self) -> ITransactionSource:
        """Get wallet transaction source."""
        if self._transaction_source is None:
            self._transaction_source = SampleTransactionSource(cache=self.cache)
        return self._transaction_source

    @property
    def insight_generator(self) -> IInsightGenerator:
        """Get Gemini insight generator."""
        if self._insight_generator is None:
            self._insight_generator = GeminiInsightGenerator(
                api_key=self.settings.GEMINI_API_KEY,
                retry=self._retry("gemini"),
                model=self.settings.GEMINI_MODEL,
                base_url=self.settings.GEMINI_BASE_URL,
                timeout=self.settings.GEMINI_TIMEOUT,
            )
        return self._insight_generator

    @property
    def password_hasher(self) -> IPasswordHasher:
        """Get password hasher."""
        if self._password_hasher is None:
            self._password_hasher = PBKDF2PasswordHasher(
                iterations=self.settings.PASSWORD_HASH_ITERATIONS
            )
        return self._password_hasher

    # Repository Getters (Session-scoped)

    def get_user_repository(self, session: AsyncSession) -> IUserRepository:
        """Get user repository bound to session."""
        return UserRepository(session)

    def get_preferences_repository(
        self, session: AsyncSession
    ) -> IInvestmentPreferencesRepository:
        """Get investment preferences repository bound to session."""
        return InvestmentPreferencesRepository(session)

    def get_wallet_repository(self, session: AsyncSession) -> IConnectedWalletRepository:
        """Get connected wallet repository bound to session."""
        return ConnectedWalletRepository(session)

    def get_analysis_repository(
        self, session: AsyncSession
    ) -> IWalletAnalysisRepository:
        """Get wallet analysis repository bound to session."""
        return WalletAnalysisRepository(session)


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()


def reset_container(container: Optional[DIContainer] = None) -> None:
    """Replace the global container (tests)."""
    global _container
    _container = container
