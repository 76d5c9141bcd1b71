"""Create initial schema: users, preferences, wallets, analyses

Revision ID: 3b1f0c2a9d41
Revises:
Create Date: 2026-10-17 09:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3b1f0c2a9d41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PREFERENCE_FIELDS = (
    'risk_aversion',
    'volatility_tolerance',
    'growth_focus',
    'crypto_experience',
    'innovation_trust',
    'impact_interest',
    'diversification',
    'holding_patience',
    'monitoring_frequency',
    'advice_openness',
)


def upgrade() -> None:
    """Upgrade schema with constraints and indexes."""

    # =================================================================
    # TABLE: users
    # =================================================================
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # =================================================================
    # TABLE: investment_preferences
    # =================================================================
    op.create_table(
        'investment_preferences',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        *[sa.Column(name, sa.Integer(), nullable=False) for name in PREFERENCE_FIELDS],
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        *[
            sa.CheckConstraint(f'{name} BETWEEN 1 AND 10', name=f'valid_{name}')
            for name in PREFERENCE_FIELDS
        ],
    )
    op.create_index(
        op.f('ix_investment_preferences_user_id'),
        'investment_preferences',
        ['user_id'],
        unique=True,
    )

    # =================================================================
    # TABLE: connected_wallets
    # =================================================================
    op.create_table(
        'connected_wallets',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('wallet_address', sa.String(length=100), nullable=False),
        sa.Column('blockchain', sa.String(length=20), nullable=False),
        sa.Column('nickname', sa.String(length=50), nullable=True),
        sa.Column('is_primary', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('user_id', 'wallet_address', name='uq_wallet_per_user'),
        sa.CheckConstraint(
            "blockchain IN ('bitcoin', 'ethereum')",
            name='valid_wallet_blockchain'
        ),
    )
    op.create_index(
        op.f('ix_connected_wallets_user_id'),
        'connected_wallets',
        ['user_id'],
        unique=False,
    )

    # =================================================================
    # TABLE: wallet_analyses
    # =================================================================
    op.create_table(
        'wallet_analyses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('wallet_address', sa.String(length=100), nullable=False),
        sa.Column('blockchain', sa.String(length=20), nullable=False),
        sa.Column(
            'analysis_data',
            sa.JSON().with_variant(postgresql.JSONB(), 'postgresql'),
            nullable=False,
        ),
        sa.Column('ai_insights', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.UniqueConstraint(
            'user_id', 'wallet_address', name='uq_analysis_per_wallet'
        ),
        sa.CheckConstraint(
            "blockchain IN ('bitcoin', 'ethereum')",
            name='valid_analysis_blockchain'
        ),
    )
    op.create_index(
        op.f('ix_wallet_analyses_user_id'), 'wallet_analyses', ['user_id'], unique=False
    )
    op.create_index(
        op.f('ix_wallet_analyses_blockchain'),
        'wallet_analyses',
        ['blockchain'],
        unique=False,
    )
    op.create_index(
        op.f('ix_wallet_analyses_created_at'),
        'wallet_analyses',
        ['created_at'],
        unique=False,
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('wallet_analyses')
    op.drop_table('connected_wallets')
    op.drop_table('investment_preferences')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
