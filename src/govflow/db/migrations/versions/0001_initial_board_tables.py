"""initial organizations, proposals and board_configs tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'organizations',
        sa.Column('org_id', sa.String(128), primary_key=True),
        sa.Column('organization_name', sa.String(200), nullable=False),
        sa.Column('created_by', sa.String(320), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_organizations_created_by', 'organizations', ['created_by'])

    op.create_table(
        'proposals',
        sa.Column('proposal_id', sa.String(128), primary_key=True),
        sa.Column('organization_id', sa.String(128), sa.ForeignKey('organizations.org_id'), nullable=False),
        sa.Column('proposal_name', sa.String(300), nullable=False),
        sa.Column('proposal_type', sa.String(32), nullable=False),
        sa.Column('status', sa.String(64), nullable=True),
        sa.Column('current_phase', sa.String(64), nullable=True),
        sa.Column('custom_workflow_stage_id', sa.String(128), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_proposals_organization_id', 'proposals', ['organization_id'])

    op.create_table(
        'board_configs',
        sa.Column('config_id', sa.String(128), primary_key=True),
        sa.Column('organization_id', sa.String(128), sa.ForeignKey('organizations.org_id'), nullable=False),
        sa.Column('board_type', sa.String(50), nullable=False),
        sa.Column('board_name', sa.String(200), nullable=True),
        sa.Column('is_master_board', sa.Boolean(), nullable=False),
        sa.Column('schema_version', sa.String(32), nullable=True),
        sa.Column('applies_to_proposal_types', sa.JSON(), nullable=False),
        sa.Column('columns', sa.JSON(), nullable=False),
        sa.Column('collapsed_column_ids', sa.JSON(), nullable=True),
        sa.Column('swimlane_config', sa.JSON(), nullable=True),
        sa.Column('view_settings', sa.JSON(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('organization_id', 'board_type', name='uq_board_config_org_type'),
    )
    op.create_index('ix_board_configs_organization_id', 'board_configs', ['organization_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_board_configs_organization_id', table_name='board_configs')
    op.drop_table('board_configs')
    op.drop_index('ix_proposals_organization_id', table_name='proposals')
    op.drop_table('proposals')
    op.drop_index('ix_organizations_created_by', table_name='organizations')
    op.drop_table('organizations')
