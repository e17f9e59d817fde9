"""Composition check evaluation for a (partial) team."""
from typing import Mapping, Optional

from draftflow.exceptions import UnknownChampionError
from draftflow.models.champion import BOOLEAN_TAGS, Champion, Slot, is_top_threat_champion
from draftflow.models.checks import (
    CheckEvaluation,
    CheckResult,
    MissingNeeds,
    RequiredSummary,
    TeamHelpers,
)
from draftflow.models.requirements import RequirementToggles
from draftflow.models.team import filled_slots, normalize_team_state

# Check id -> (tag, toggle field that makes it required)
TOGGLED_TAG_CHECKS: dict[str, tuple[str, str]] = {
    "HasHardEngage": ("HardEngage", "require_hard_engage"),
    "HasFrontline": ("Frontline", "require_frontline"),
    "HasWaveclear": ("Waveclear", "require_waveclear"),
    "HasDisengage": ("Disengage", "require_disengage"),
    "HasAntiTank": ("AntiTank", "require_anti_tank"),
    "HasPrimaryCarry": ("PrimaryCarry", "require_primary_carry"),
}

# Always evaluated, never required
INFORMATIONAL_TAG_CHECKS: dict[str, str] = {
    "HasSustainedDPS": "SustainedDPS",
    "HasTurretSiege": "TurretSiege",
    "HasSelfPeel": "SelfPeel",
    "HasUtilityCarry": "UtilityCarry",
}

DAMAGE_MIX_CHECK = "DamageMix"
TOP_THREAT_CHECK = "TopMustBeThreat"

# Node score components
REQUIRED_SATISFIED_POINTS = 10
REQUIRED_UNSATISFIED_POINTS = 3
TOP_THREAT_BONUS = 5
DAMAGE_MIX_BONUS = 5
FILLED_SLOT_POINTS = 4
DISTINCT_TAG_POINTS = 2


def compute_team_helpers(
    team_state: Optional[Mapping],
    champions_by_name: Mapping[str, Champion],
) -> TeamHelpers:
    """Derive tag counts and damage coverage from the filled slots.

    Raises:
        UnknownChampionError: If a slot names a champion missing from the catalog
    """
    normalized = normalize_team_state(team_state)
    filled_tags = {tag: 0 for tag in BOOLEAN_TAGS}
    selected: list[tuple[Slot, Champion]] = []
    has_ad = False
    has_ap = False

    for slot, champion_name in filled_slots(normalized):
        champion = champions_by_name.get(champion_name)
        if champion is None:
            raise UnknownChampionError(champion_name, slot.value)

        selected.append((slot, champion))
        has_ad = has_ad or champion.deals_ad
        has_ap = has_ap or champion.deals_ap
        for tag in BOOLEAN_TAGS:
            if champion.has_tag(tag):
                filled_tags[tag] += 1

    return TeamHelpers(
        normalized_team_state=normalized,
        selected_champions=selected,
        filled_tags=filled_tags,
        has_ad=has_ad,
        has_ap=has_ap,
    )


def _tag_check(check_id: str, tag: str, required: bool, helpers: TeamHelpers) -> CheckResult:
    satisfied = helpers.filled_tags.get(tag, 0) >= 1
    return CheckResult(
        id=check_id,
        required=required,
        satisfied=satisfied,
        reason=f"{tag} covered." if satisfied else f"{tag} not satisfied yet.",
        requirement_type="tag",
        requirement_tag=tag,
    )


def _damage_mix_check(required: bool, helpers: TeamHelpers) -> CheckResult:
    satisfied = helpers.has_ad and helpers.has_ap
    return CheckResult(
        id=DAMAGE_MIX_CHECK,
        required=required,
        satisfied=satisfied,
        reason=(
            "Team has both AD and AP damage types."
            if satisfied
            else "Team damage mix is missing AD or AP."
        ),
        requirement_type="damage_mix",
        has_ad=helpers.has_ad,
        has_ap=helpers.has_ap,
    )


def _top_threat_check(
    required: bool,
    helpers: TeamHelpers,
    champions_by_name: Mapping[str, Champion],
) -> CheckResult:
    top_name = helpers.normalized_team_state[Slot.TOP]
    if top_name is None:
        return CheckResult(
            id=TOP_THREAT_CHECK,
            required=required,
            satisfied=False,
            reason="Top slot is not filled yet.",
            requirement_type="top_threat",
            required_role=Slot.TOP,
            applicable=False,
        )

    satisfied = is_top_threat_champion(champions_by_name[top_name])
    return CheckResult(
        id=TOP_THREAT_CHECK,
        required=required,
        satisfied=satisfied,
        reason=(
            "Top provides SideLaneThreat or DiveThreat."
            if satisfied
            else "Top must provide SideLaneThreat or DiveThreat."
        ),
        requirement_type="top_threat",
        required_role=Slot.TOP,
        applicable=True,
    )


def _missing_needs(
    toggles: RequirementToggles,
    helpers: TeamHelpers,
    checks: dict[str, CheckResult],
) -> MissingNeeds:
    missing_tags = tuple(
        tag
        for check_id, (tag, _) in TOGGLED_TAG_CHECKS.items()
        if checks[check_id].required and not checks[check_id].satisfied
    )
    top_check = checks[TOP_THREAT_CHECK]
    return MissingNeeds(
        tags=missing_tags,
        needs_ad=toggles.require_damage_mix and not helpers.has_ad,
        needs_ap=toggles.require_damage_mix and not helpers.has_ap,
        needs_top_threat=(
            toggles.top_must_be_threat and bool(top_check.applicable) and not top_check.satisfied
        ),
    )


def evaluate_composition_checks(
    team_state: Optional[Mapping],
    champions_by_name: Mapping[str, Champion],
    toggles: Optional["RequirementToggles | Mapping[str, bool]"] = None,
) -> CheckEvaluation:
    """Evaluate every composition check for a team.

    Toggles only decide which checks are required; every check is evaluated
    regardless so disabled checks still report their state.

    Args:
        team_state: Slot -> champion name mapping (missing/blank = empty)
        champions_by_name: Champion catalog
        toggles: RequirementToggles or camelCase/snake_case overrides

    Returns:
        CheckEvaluation with toggles, helpers, checks and missing needs

    Raises:
        UnknownChampionError: If the team names a champion missing from the catalog
    """
    resolved = RequirementToggles.from_overrides(toggles)
    helpers = compute_team_helpers(team_state, champions_by_name)

    checks: dict[str, CheckResult] = {}
    for check_id, (tag, toggle_field) in TOGGLED_TAG_CHECKS.items():
        checks[check_id] = _tag_check(check_id, tag, getattr(resolved, toggle_field), helpers)
    for check_id, tag in INFORMATIONAL_TAG_CHECKS.items():
        checks[check_id] = _tag_check(check_id, tag, False, helpers)
    checks[DAMAGE_MIX_CHECK] = _damage_mix_check(resolved.require_damage_mix, helpers)
    checks[TOP_THREAT_CHECK] = _top_threat_check(
        resolved.top_must_be_threat, helpers, champions_by_name
    )

    return CheckEvaluation(
        toggles=resolved,
        helpers=helpers,
        checks=checks,
        missing_needs=_missing_needs(resolved, helpers, checks),
    )


def score_node_from_checks(evaluation: CheckEvaluation) -> int:
    """Score a team state from its check evaluation.

    Each required check (TopMustBeThreat excluded) adds 10 when satisfied
    and 3 otherwise. A satisfied, applicable TopMustBeThreat and a satisfied
    DamageMix each add 5 when required. Every filled slot adds 4 and every
    distinct tag present on the team adds 2.
    """
    score = 0
    for check_id, check in evaluation.checks.items():
        if not check.required or check_id == TOP_THREAT_CHECK:
            continue
        score += REQUIRED_SATISFIED_POINTS if check.satisfied else REQUIRED_UNSATISFIED_POINTS

    top_check = evaluation.checks[TOP_THREAT_CHECK]
    if top_check.required and top_check.applicable and top_check.satisfied:
        score += TOP_THREAT_BONUS

    damage_check = evaluation.checks[DAMAGE_MIX_CHECK]
    if damage_check.required and damage_check.satisfied:
        score += DAMAGE_MIX_BONUS

    score += FILLED_SLOT_POINTS * len(evaluation.helpers.selected_champions)
    score += DISTINCT_TAG_POINTS * evaluation.helpers.distinct_tag_count
    return score


def summarize_required(checks: Mapping[str, CheckResult]) -> RequiredSummary:
    """Count required checks and how many of them pass."""
    required = [check for check in checks.values() if check.required]
    return RequiredSummary(
        required_total=len(required),
        required_passed=sum(1 for check in required if check.satisfied),
    )
