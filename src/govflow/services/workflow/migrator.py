"""Idempotent migration of an organization onto the canonical workflow schema.

The migration has two independent steps:

1. Overwrite (or create) the organization's master board with the canonical
   columns, keeping the user's view preferences.
2. Give every proposal of the organization a ``custom_workflow_stage_id``
   resolved from its legacy status/phase.

Nothing is transactional across steps or across proposals. Every write is
committed on its own and every failure is recorded in the returned
``MigrationResult`` instead of aborting the run, so re-running after a partial
failure is always safe.
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from govflow.errors.exceptions import (
    ConfigUpsertError,
    MigrationStepError,
    ProposalFetchError,
    ProposalUpdateError,
)
from govflow.models.migration import MigrationResults, ProposalOutcomeModel
from govflow.repositories.registry import EntityKind, get_repository
from govflow.services.id_generator import generate_id
from govflow.services.workflow.boards import default_preferences
from govflow.services.workflow.schema import (
    WORKFLOW_SCHEMA_VERSION,
    canonical_column_snapshot,
)
from govflow.services.workflow.stage_resolver import resolve_stage

logger = logging.getLogger(__name__)


@dataclass
class ProposalOutcome:
    proposal_id: str
    stage_id: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class MigrationResult:
    """Accumulates per-step and per-proposal outcomes of one migration run."""

    organization_id: str
    schema_version: str = WORKFLOW_SCHEMA_VERSION
    kanban_configs_updated: int = 0
    kanban_configs_created: int = 0
    outcomes: list[ProposalOutcome] = field(default_factory=list)
    failures: list[MigrationStepError] = field(default_factory=list)

    @property
    def proposals_migrated(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def errors(self) -> list[str]:
        return [str(failure) for failure in self.failures]

    @property
    def succeeded(self) -> bool:
        return not self.failures

    def record(self, failure: MigrationStepError) -> None:
        logger.warning("workflow_migration_step_failed: %s", failure)
        self.failures.append(failure)

    def to_results(self) -> MigrationResults:
        return MigrationResults(
            kanban_configs_updated=self.kanban_configs_updated,
            kanban_configs_created=self.kanban_configs_created,
            proposals_migrated=self.proposals_migrated,
            errors=self.errors,
            outcomes=[
                ProposalOutcomeModel(
                    proposal_id=o.proposal_id, stage_id=o.stage_id, error=o.error
                )
                for o in self.outcomes
            ],
        )


class WorkflowMigrator:
    """Upgrade one organization's board and proposals to the canonical schema."""

    def __init__(self, session: AsyncSession, boards=None, proposals=None):
        self.session = session
        self.boards = boards or get_repository(EntityKind.BOARD_CONFIG, session)
        self.proposals = proposals or get_repository(EntityKind.PROPOSAL, session)

    async def migrate(self, organization_id: str) -> MigrationResult:
        result = MigrationResult(organization_id=organization_id)
        logger.info(
            "Workflow migration started (org=%s, schema=%s)",
            organization_id,
            WORKFLOW_SCHEMA_VERSION,
        )

        await self._upsert_board(organization_id, result)
        await self._migrate_proposals(organization_id, result)

        logger.info(
            "Workflow migration finished (org=%s, configs=%d, proposals=%d, errors=%d)",
            organization_id,
            result.kanban_configs_updated,
            result.proposals_migrated,
            len(result.failures),
        )
        return result

    async def _upsert_board(self, organization_id: str, result: MigrationResult) -> None:
        try:
            _, created = await self.boards.upsert_master(
                config_id=generate_id("board_"),
                organization_id=organization_id,
                columns=canonical_column_snapshot(),
                schema_version=WORKFLOW_SCHEMA_VERSION,
                defaults=default_preferences(),
            )
            await self.session.commit()
        except Exception as exc:
            await self.session.rollback()
            result.record(ConfigUpsertError(str(exc)))
            return

        result.kanban_configs_updated += 1
        if created:
            result.kanban_configs_created += 1

    async def _migrate_proposals(self, organization_id: str, result: MigrationResult) -> None:
        try:
            snapshots = await self.proposals.list_snapshots(organization_id)
        except Exception as exc:
            await self.session.rollback()
            result.record(ProposalFetchError(str(exc)))
            return

        for snapshot in snapshots:
            stage_id = resolve_stage(snapshot.status, snapshot.current_phase)
            try:
                await self.proposals.set_workflow_stage(snapshot.proposal_id, stage_id)
                await self.session.commit()
            except Exception as exc:
                await self.session.rollback()
                failure = ProposalUpdateError(str(exc), subject=snapshot.proposal_id)
                result.record(failure)
                result.outcomes.append(
                    ProposalOutcome(snapshot.proposal_id, stage_id, error=str(failure))
                )
                continue
            result.outcomes.append(ProposalOutcome(snapshot.proposal_id, stage_id))
