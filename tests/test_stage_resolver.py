"""Tests for legacy status/phase to column resolution."""

from types import SimpleNamespace

import pytest

from govflow.services.workflow.stage_resolver import board_placement, resolve_stage


@pytest.mark.parametrize(
    "status,expected",
    [
        ("evaluating", "evaluate"),
        ("watch_list", "evaluate"),
        ("draft", "draft"),
        ("in_progress", "review"),
        ("client_review", "review"),
        ("submitted", "submitted"),
        ("won", "won"),
        ("client_accepted", "won"),
        ("lost", "lost"),
        ("client_rejected", "lost"),
        ("archived", "archived"),
    ],
)
def test_status_mapping(status, expected):
    assert resolve_stage(status, None) == expected


@pytest.mark.parametrize(
    "phase,expected",
    [
        ("phase1", "initiate"),
        ("phase2", "resources"),
        ("phase3", "solicit"),
        ("phase4", "evaluate"),
        ("phase5", "strategy"),
        ("phase6", "draft"),
        ("phase7", "price"),
        ("phase8", "final"),
        ("completed", "final"),
    ],
)
def test_phase_mapping(phase, expected):
    assert resolve_stage(None, phase) == expected


def test_terminal_status_wins_over_phase():
    assert resolve_stage("won", "phase3") == "won"


def test_rejected_status_wins_over_pricing_phase():
    assert resolve_stage("client_rejected", "phase7") == "lost"


def test_unknown_status_falls_through_to_phase():
    assert resolve_stage("on_hold", "phase5") == "strategy"


@pytest.mark.parametrize(
    "status,phase",
    [(None, None), ("", ""), ("unknown", "phase99"), (None, "not_a_phase")],
)
def test_unresolvable_values_fall_back_to_initiate(status, phase):
    assert resolve_stage(status, phase) == "initiate"


def test_board_placement_prefers_stored_stage():
    proposal = SimpleNamespace(status="won", current_phase="phase1", custom_workflow_stage_id="price")
    assert board_placement(proposal) == "price"


def test_board_placement_resolves_when_unset():
    proposal = SimpleNamespace(status=None, current_phase="phase2", custom_workflow_stage_id=None)
    assert board_placement(proposal) == "resources"
