"""
SQLAlchemy models for Augure persistence.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from augure.domain.clock import utc_now
from augure.domain.entities.investment_preferences import PREFERENCE_FIELDS

# JSONB on PostgreSQL, plain JSON elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")


class UTCDateTime(TypeDecorator):
    """
    Timestamp stored in UTC and always loaded timezone-aware.

    SQLite keeps no offset, so values are normalised to naive UTC on the
    way in and tagged as UTC on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Base(DeclarativeBase):
    """Base class for all models."""


class UserModel(Base):
    """User database model - email/password account."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=utc_now, onupdate=utc_now
    )


class InvestmentPreferencesModel(Base):
    """Investment preferences database model - one row per user."""

    __tablename__ = "investment_preferences"
    __table_args__ = tuple(
        CheckConstraint(f"{name} BETWEEN 1 AND 10", name=f"valid_{name}")
        for name in PREFERENCE_FIELDS
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        index=True,
        nullable=False,
    )
    risk_aversion: Mapped[int] = mapped_column(Integer, nullable=False)
    volatility_tolerance: Mapped[int] = mapped_column(Integer, nullable=False)
    growth_focus: Mapped[int] = mapped_column(Integer, nullable=False)
    crypto_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    innovation_trust: Mapped[int] = mapped_column(Integer, nullable=False)
    impact_interest: Mapped[int] = mapped_column(Integer, nullable=False)
    diversification: Mapped[int] = mapped_column(Integer, nullable=False)
    holding_patience: Mapped[int] = mapped_column(Integer, nullable=False)
    monitoring_frequency: Mapped[int] = mapped_column(Integer, nullable=False)
    advice_openness: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=utc_now, onupdate=utc_now
    )


class ConnectedWalletModel(Base):
    """Connected wallet database model."""

    __tablename__ = "connected_wallets"
    __table_args__ = (
        UniqueConstraint("user_id", "wallet_address", name="uq_wallet_per_user"),
        CheckConstraint(
            "blockchain IN ('bitcoin', 'ethereum')", name="valid_wallet_blockchain"
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    wallet_address: Mapped[str] = mapped_column(String(100), nullable=False)
    blockchain: Mapped[str] = mapped_column(String(20), nullable=False)
    nickname: Mapped[str | None] = mapped_column(String(50))
    is_primary: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)


class WalletAnalysisModel(Base):
    """Wallet analysis database model - latest analysis per (user, wallet)."""

    __tablename__ = "wallet_analyses"
    __table_args__ = (
        UniqueConstraint("user_id", "wallet_address", name="uq_analysis_per_wallet"),
        CheckConstraint(
            "blockchain IN ('bitcoin', 'ethereum')", name="valid_analysis_blockchain"
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    wallet_address: Mapped[str] = mapped_column(String(100), nullable=False)
    blockchain: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    analysis_data: Mapped[dict[str, Any]] = mapped_column(JSONType, nullable=False)
    ai_insights: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=utc_now, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=utc_now, onupdate=utc_now
    )
