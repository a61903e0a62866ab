"""Proposal table. Legacy status/phase columns are kept for audit."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from govflow.db.base import Base, TimestampMixin


class ProposalRow(Base, TimestampMixin):
    __tablename__ = "proposals"

    proposal_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    organization_id: Mapped[str] = mapped_column(
        String(128), ForeignKey("organizations.org_id"), nullable=False, index=True
    )
    proposal_name: Mapped[str] = mapped_column(String(300), nullable=False)
    proposal_type: Mapped[str] = mapped_column(String(32), nullable=False, default="RFP")
    status: Mapped[str | None] = mapped_column(String(64), nullable=True)
    current_phase: Mapped[str | None] = mapped_column(String(64), nullable=True)
    custom_workflow_stage_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
