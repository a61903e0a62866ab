"""Workflow template table: reusable column sets offered when creating boards."""

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from govflow.db.base import Base, TimestampMixin


class WorkflowTemplateRow(Base, TimestampMixin):
    __tablename__ = "workflow_templates"

    template_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    # Stable catalog key, e.g. RFP or QUICK_PROPOSAL
    template_key: Mapped[str] = mapped_column(String(50), nullable=False)
    template_type: Mapped[str] = mapped_column(String(20), nullable=False, default="system")
    # NULL for system templates, which are global
    organization_id: Mapped[str | None] = mapped_column(
        String(128), ForeignKey("organizations.org_id"), nullable=True, index=True
    )
    template_name: Mapped[str] = mapped_column(String(200), nullable=False)
    proposal_type_category: Mapped[str] = mapped_column(String(32), nullable=False)
    board_type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon_emoji: Mapped[str | None] = mapped_column(String(16), nullable=True)
    estimated_duration_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    workflow_config: Mapped[dict] = mapped_column(JSON, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    usage_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("template_type", "template_key", name="uq_workflow_template_type_key"),
    )
