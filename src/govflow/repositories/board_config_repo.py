"""Board configuration repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.models.board_config import BoardConfigRow
from govflow.models.enums import BoardType
from govflow.repositories.base import BaseRepository


class BoardConfigRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, BoardConfigRow)

    async def get_by_org_and_type(
        self, organization_id: str, board_type: str
    ) -> BoardConfigRow | None:
        return await self.first_where(
            BoardConfigRow.organization_id == organization_id,
            BoardConfigRow.board_type == board_type,
        )

    async def get_master(self, organization_id: str) -> BoardConfigRow | None:
        return await self.get_by_org_and_type(organization_id, BoardType.MASTER)

    async def list_by_org(self, organization_id: str) -> list[BoardConfigRow]:
        return await self.list_where(
            BoardConfigRow.organization_id == organization_id,
            order_by=(BoardConfigRow.is_master_board.desc(), BoardConfigRow.created_at),
        )

    async def create_master(
        self,
        config_id: str,
        organization_id: str,
        columns: list[dict],
        schema_version: str,
        preferences: dict,
    ) -> BoardConfigRow:
        """Insert a new master board; never touches an existing one."""
        return await self.create(
            config_id=config_id,
            organization_id=organization_id,
            board_type=BoardType.MASTER.value,
            board_name="All Proposals",
            is_master_board=True,
            schema_version=schema_version,
            applies_to_proposal_types=[],
            columns=columns,
            **preferences,
        )

    async def upsert_master(
        self,
        config_id: str,
        organization_id: str,
        columns: list[dict],
        schema_version: str,
        defaults: dict,
    ) -> tuple[BoardConfigRow, bool]:
        """Overwrite the master board's columns, keeping stored view preferences.

        Preference fields that are absent on the existing row are filled from
        ``defaults``. Returns ``(row, created)``.
        """
        existing = await self.get_master(organization_id)
        if existing:
            existing.columns = columns
            existing.schema_version = schema_version
            existing.is_master_board = True
            for field, value in defaults.items():
                if getattr(existing, field) is None:
                    setattr(existing, field, value)
            await self.session.flush()
            return existing, False

        row = await self.create_master(
            config_id, organization_id, columns, schema_version, defaults
        )
        return row, True
