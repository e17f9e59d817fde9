"""Tests for composition check evaluation."""
import pytest

from draftflow.exceptions import UnknownChampionError
from draftflow.models.champion import Slot
from draftflow.models.requirements import RequirementToggles
from draftflow.services.composition_checks import (
    INFORMATIONAL_TAG_CHECKS,
    compute_team_helpers,
    evaluate_composition_checks,
    score_node_from_checks,
    summarize_required,
)


def test_partial_team_reports_missing_requirements(champions_by_name):
    """Camille alone covers HardEngage and Top threat, nothing else."""
    result = evaluate_composition_checks({"Top": "Camille"}, champions_by_name)

    assert result.checks["HasHardEngage"].satisfied is True
    assert result.checks["HasFrontline"].satisfied is False
    assert result.checks["DamageMix"].satisfied is False
    assert result.checks["TopMustBeThreat"].satisfied is True
    assert result.missing_needs.needs_ap is True
    assert result.missing_needs.needs_ad is False
    assert result.missing_needs.tags == ("Frontline", "Waveclear", "PrimaryCarry")


def test_top_non_threat_warns_when_enforced(champions_by_name):
    result = evaluate_composition_checks(
        {"Top": "Ornn"}, champions_by_name, {"topMustBeThreat": True}
    )
    check = result.checks["TopMustBeThreat"]

    assert check.status == "warn"
    assert check.satisfied is False
    assert check.applicable is True
    assert check.reason == "Top must provide SideLaneThreat or DiveThreat."
    assert result.missing_needs.needs_top_threat is True


def test_top_threat_not_applicable_while_top_empty(champions_by_name):
    result = evaluate_composition_checks({"Mid": "Azir"}, champions_by_name)
    check = result.checks["TopMustBeThreat"]

    assert check.applicable is False
    assert check.satisfied is False
    assert check.reason == "Top slot is not filled yet."
    assert result.missing_needs.needs_top_threat is False


def test_toggles_only_change_required_flag(champions_by_name):
    """Disabled checks are still evaluated, just marked informational."""
    result = evaluate_composition_checks(
        {"Support": "Nami"},
        champions_by_name,
        {"requireDisengage": False, "requireHardEngage": False},
    )

    assert result.checks["HasDisengage"].required is False
    assert result.checks["HasDisengage"].satisfied is True
    assert result.checks["HasHardEngage"].required is False
    assert "HardEngage" not in result.missing_needs.tags


def test_informational_checks_never_required(champions_by_name):
    result = evaluate_composition_checks({"ADC": "Jinx"}, champions_by_name)
    for check_id in INFORMATIONAL_TAG_CHECKS:
        assert result.checks[check_id].required is False
    assert result.checks["HasSustainedDPS"].satisfied is True
    assert result.checks["HasSelfPeel"].satisfied is False


def test_mixed_damage_satisfies_both_sides(champions_by_name):
    result = evaluate_composition_checks({"ADC": "Kai'Sa"}, champions_by_name)

    assert result.checks["DamageMix"].satisfied is True
    assert result.checks["DamageMix"].has_ad is True
    assert result.checks["DamageMix"].has_ap is True
    assert result.missing_needs.needs_ad is False
    assert result.missing_needs.needs_ap is False


def test_damage_needs_only_when_required(champions_by_name):
    result = evaluate_composition_checks(
        {"Mid": "Azir"}, champions_by_name, RequirementToggles(require_damage_mix=False)
    )
    assert result.missing_needs.needs_ad is False
    assert result.checks["DamageMix"].required is False
    assert result.checks["DamageMix"].satisfied is False


def test_unknown_champion_is_fatal(champions_by_name):
    with pytest.raises(UnknownChampionError) as exc_info:
        evaluate_composition_checks({"Mid": "NotAChampion"}, champions_by_name)
    assert exc_info.value.champion_name == "NotAChampion"
    assert exc_info.value.slot == "Mid"
    assert isinstance(exc_info.value, KeyError)


def test_helpers_normalize_blank_slots(champions_by_name):
    helpers = compute_team_helpers({"Top": "  ", "Mid": " Azir ", "ADC": ""}, champions_by_name)

    assert set(helpers.normalized_team_state) == set(Slot)
    assert helpers.normalized_team_state[Slot.TOP] is None
    assert helpers.normalized_team_state[Slot.MID] == "Azir"
    assert [slot for slot, _ in helpers.selected_champions] == [Slot.MID]
    assert helpers.filled_tags["Waveclear"] == 1
    assert helpers.filled_tags["HardEngage"] == 0
    assert helpers.has_ap is True
    assert helpers.has_ad is False


def test_node_score_for_single_pick(champions_by_name):
    """Camille: 10 + 3*4 required, +5 top threat, +4 slot, +2*4 tags."""
    evaluation = evaluate_composition_checks({"Top": "Camille"}, champions_by_name)
    assert score_node_from_checks(evaluation) == 39


def test_node_score_empty_team(champions_by_name):
    """Five required checks at 3 points each and nothing else."""
    evaluation = evaluate_composition_checks({}, champions_by_name)
    assert score_node_from_checks(evaluation) == 15


def test_node_score_rewards_complete_comp(champions_by_name):
    evaluation = evaluate_composition_checks(
        {"Top": "Camille", "Jungle": "Sejuani", "Mid": "Azir", "ADC": "Jinx", "Support": "Nami"},
        champions_by_name,
    )
    summary = summarize_required(evaluation.checks)

    assert summary.required_gaps == 0
    assert summary.required_total == 6
    assert score_node_from_checks(evaluation) > 50


def test_evaluation_is_repeatable(champions_by_name):
    team = {"Mid": "Azir", "ADC": "Ashe"}
    assert evaluate_composition_checks(team, champions_by_name) == evaluate_composition_checks(
        team, champions_by_name
    )
