"""workflow_templates table

Revision ID: 0002_workflow_templates
Revises: 0001_initial
Create Date: 2026-10-19 14:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0002_workflow_templates'
down_revision: Union[str, Sequence[str], None] = '0001_initial'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'workflow_templates',
        sa.Column('template_id', sa.String(128), primary_key=True),
        sa.Column('template_key', sa.String(50), nullable=False),
        sa.Column('template_type', sa.String(20), nullable=False),
        sa.Column('organization_id', sa.String(128), sa.ForeignKey('organizations.org_id'), nullable=True),
        sa.Column('template_name', sa.String(200), nullable=False),
        sa.Column('proposal_type_category', sa.String(32), nullable=False),
        sa.Column('board_type', sa.String(50), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('icon_emoji', sa.String(16), nullable=True),
        sa.Column('estimated_duration_days', sa.Integer(), nullable=True),
        sa.Column('workflow_config', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('usage_count', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('template_type', 'template_key', name='uq_workflow_template_type_key'),
    )
    op.create_index('ix_workflow_templates_organization_id', 'workflow_templates', ['organization_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_workflow_templates_organization_id', table_name='workflow_templates')
    op.drop_table('workflow_templates')
