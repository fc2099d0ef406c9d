"""create_staking_table

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 12:00:00.000000+00:00

"""
from alembic import op
import sqlalchemy as sa
from staking_tracker.database.types import EvmAddressType

# revision identifiers, used by Alembic.
revision = '3f1c9a7d2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table('staking',
    sa.Column('protocol_id', sa.String(length=100), nullable=False),
    sa.Column('token_address', EvmAddressType(), nullable=False),
    sa.Column('staking_address', EvmAddressType(), nullable=False),
    sa.Column('token_symbol', sa.String(length=20), nullable=False),
    sa.Column('project_name', sa.String(length=100), nullable=False),
    sa.Column('chain', sa.String(length=100), nullable=False),
    sa.Column('apy', sa.Integer(), nullable=False),
    sa.Column('tvl', sa.Float(), nullable=False),
    sa.Column('is_stablecoin', sa.Boolean(), nullable=False),
    sa.Column('categories', sa.JSON(), nullable=False),
    sa.Column('logo_url', sa.Text(), nullable=False),
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('token_address')
    )
    op.create_index('idx_staking_symbol', 'staking', ['token_symbol'], unique=False)
    op.create_index(op.f('ix_staking_protocol_id'), 'staking', ['protocol_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_staking_protocol_id'), table_name='staking')
    op.drop_index('idx_staking_symbol', table_name='staking')
    op.drop_table('staking')
