"""Composition check result models."""

from dataclasses import dataclass, field
from typing import Literal, Optional

from draftflow.models.champion import Champion, Slot
from draftflow.models.requirements import RequirementToggles
from draftflow.models.team import TeamState

CheckStatus = Literal["good", "warn"]
RequirementType = Literal["tag", "damage_mix", "top_threat"]


@dataclass(frozen=True)
class CheckResult:
    """Verdict for one composition check."""

    id: str
    required: bool
    satisfied: bool
    reason: str
    requirement_type: RequirementType
    # Type-specific metadata
    requirement_tag: Optional[str] = None  # tag checks
    has_ad: Optional[bool] = None  # damage_mix
    has_ap: Optional[bool] = None  # damage_mix
    required_role: Optional[Slot] = None  # top_threat
    applicable: Optional[bool] = None  # top_threat, False while Top is empty

    @property
    def status(self) -> CheckStatus:
        return "good" if self.satisfied else "warn"

    def to_dict(self) -> dict:
        result = {
            "id": self.id,
            "required": self.required,
            "satisfied": self.satisfied,
            "status": self.status,
            "reason": self.reason,
            "requirementType": self.requirement_type,
        }
        if self.requirement_tag is not None:
            result["requirementTag"] = self.requirement_tag
        if self.has_ad is not None:
            result["hasAD"] = self.has_ad
            result["hasAP"] = self.has_ap
        if self.required_role is not None:
            result["requiredRole"] = self.required_role.value
            result["applicable"] = self.applicable
        return result


@dataclass(frozen=True)
class MissingNeeds:
    """What the team still needs to satisfy its required checks."""

    tags: tuple[str, ...] = ()
    needs_ad: bool = False
    needs_ap: bool = False
    needs_top_threat: bool = False

    def to_dict(self) -> dict:
        return {
            "tags": list(self.tags),
            "needsAD": self.needs_ad,
            "needsAP": self.needs_ap,
            "needsTopThreat": self.needs_top_threat,
        }


@dataclass(frozen=True)
class TeamHelpers:
    """Derived facts about the filled part of a team."""

    normalized_team_state: TeamState
    selected_champions: list[tuple[Slot, Champion]] = field(default_factory=list)
    filled_tags: dict[str, int] = field(default_factory=dict)
    has_ad: bool = False
    has_ap: bool = False

    @property
    def distinct_tag_count(self) -> int:
        return sum(1 for count in self.filled_tags.values() if count > 0)


@dataclass(frozen=True)
class CheckEvaluation:
    """Full output of the composition check evaluator."""

    toggles: RequirementToggles
    helpers: TeamHelpers
    checks: dict[str, CheckResult]
    missing_needs: MissingNeeds


@dataclass(frozen=True)
class RequiredSummary:
    """Counts of required checks and how many pass."""

    required_total: int
    required_passed: int

    @property
    def required_gaps(self) -> int:
        return self.required_total - self.required_passed

    def to_dict(self) -> dict:
        return {
            "requiredTotal": self.required_total,
            "requiredPassed": self.required_passed,
            "requiredGaps": self.required_gaps,
        }
