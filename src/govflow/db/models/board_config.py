"""Board configuration table: per-org column schema snapshot plus view preferences."""

from sqlalchemy import JSON, Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from govflow.db.base import Base, TimestampMixin


class BoardConfigRow(Base, TimestampMixin):
    __tablename__ = "board_configs"

    config_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    organization_id: Mapped[str] = mapped_column(
        String(128), ForeignKey("organizations.org_id"), nullable=False, index=True
    )
    board_type: Mapped[str] = mapped_column(String(50), nullable=False, default="master")
    board_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_master_board: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    schema_version: Mapped[str | None] = mapped_column(String(32), nullable=True)
    applies_to_proposal_types: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    # List of WorkflowColumn dicts, copied at write time
    columns: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    collapsed_column_ids: Mapped[list | None] = mapped_column(JSON, nullable=True)
    swimlane_config: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    view_settings: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    __table_args__ = (
        UniqueConstraint("organization_id", "board_type", name="uq_board_config_org_type"),
    )
