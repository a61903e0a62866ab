"""Organization table for multi-tenancy."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from govflow.db.base import Base, TimestampMixin


class OrganizationRow(Base, TimestampMixin):
    __tablename__ = "organizations"

    org_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    organization_name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Owner identity (caller email); an owner may hold several organizations.
    created_by: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
