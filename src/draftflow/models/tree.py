"""Possibility tree models."""

from dataclasses import dataclass, field, fields
from typing import Optional

from pydantic import BaseModel, ValidationError, model_validator

from draftflow.config import RankGoal, Settings, get_settings
from draftflow.exceptions import TreeConfigError
from draftflow.models.champion import Slot
from draftflow.models.checks import CheckResult, MissingNeeds, RequiredSummary
from draftflow.models.team import TeamState

RANK_GOALS: tuple[str, ...] = ("candidate_score", "valid_end_states")


class TreeSearchParams(BaseModel):
    """Search bounds for one tree build, validated before recursion starts."""

    max_depth: int
    max_branch: int
    min_candidate_score: int
    rank_goal: RankGoal
    prune_unreachable_required: bool = True
    # Bounds copied from Settings
    max_depth_limit: int = 5
    max_branch_limit: int = 25
    max_min_candidate_score: int = 1000

    @model_validator(mode="after")
    def _check_bounds(self) -> "TreeSearchParams":
        if not 1 <= self.max_depth <= self.max_depth_limit:
            raise ValueError(
                f"max_depth must be between 1 and {self.max_depth_limit}, got {self.max_depth}"
            )
        if not 1 <= self.max_branch <= self.max_branch_limit:
            raise ValueError(
                f"max_branch must be between 1 and {self.max_branch_limit}, got {self.max_branch}"
            )
        if not 0 <= self.min_candidate_score <= self.max_min_candidate_score:
            raise ValueError(
                "min_candidate_score must be between 0 and "
                f"{self.max_min_candidate_score}, got {self.min_candidate_score}"
            )
        return self

    @classmethod
    def resolve(
        cls,
        settings: Optional[Settings] = None,
        *,
        max_depth: Optional[int] = None,
        max_branch: Optional[int] = None,
        min_candidate_score: Optional[int] = None,
        rank_goal: Optional[str] = None,
        prune_unreachable_required: Optional[bool] = None,
    ) -> "TreeSearchParams":
        """Fill omitted parameters from settings and validate ranges.

        Raises:
            TreeConfigError: If any parameter is out of range
        """
        settings = settings or get_settings()
        try:
            return cls(
                max_depth=settings.default_max_depth if max_depth is None else max_depth,
                max_branch=settings.default_max_branch if max_branch is None else max_branch,
                min_candidate_score=(
                    settings.default_min_candidate_score
                    if min_candidate_score is None
                    else min_candidate_score
                ),
                rank_goal=settings.default_rank_goal if rank_goal is None else rank_goal,
                prune_unreachable_required=(
                    settings.prune_unreachable_required
                    if prune_unreachable_required is None
                    else prune_unreachable_required
                ),
                max_depth_limit=settings.max_depth_limit,
                max_branch_limit=settings.max_branch_limit,
                max_min_candidate_score=settings.max_min_candidate_score,
            )
        except ValidationError as e:
            raise TreeConfigError(f"Invalid tree search parameters: {e}") from e


@dataclass(frozen=True)
class CandidateScore:
    """Incremental score of one candidate for one empty role."""

    score: int
    rationale: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoredCandidate:
    """A legal candidate for the role being expanded."""

    role: Slot
    champion_name: str
    score: int
    rationale: tuple[str, ...]
    passes_min_score: bool = True


@dataclass(frozen=True)
class CandidateGeneration:
    """Legal, scored candidates for the next role of a node."""

    role: Optional[Slot]
    candidates: list[ScoredCandidate] = field(default_factory=list)
    legal_count: int = 0
    pruned_low_score: int = 0
    filtered_top_threat: int = 0
    used_fallback: bool = False


@dataclass
class Viability:
    """Whether a node can still lead to a valid finished draft."""

    remaining_steps: int
    unreachable_required: list[str] = field(default_factory=list)
    is_draft_complete: bool = False
    is_terminal_valid: bool = False
    blocked_role: Optional[Slot] = None
    blocked_reason: Optional[str] = None  # "top_threat_filter", "no_eligible_champions_for_role"

    def to_dict(self) -> dict:
        result = {
            "remainingSteps": self.remaining_steps,
            "unreachableRequired": list(self.unreachable_required),
            "isDraftComplete": self.is_draft_complete,
            "isTerminalValid": self.is_terminal_valid,
        }
        if self.blocked_role is not None:
            result["blockedRole"] = self.blocked_role.value
            result["blockedReason"] = self.blocked_reason
        return result


@dataclass
class BranchPotential:
    """Terminal-valid leaves reachable under a node."""

    valid_leaf_count: int = 0
    best_leaf_score: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "validLeafCount": self.valid_leaf_count,
            "bestLeafScore": self.best_leaf_score,
        }


@dataclass
class GenerationStats:
    """Whole-tree counters, composed from each subtree's contribution."""

    nodes_visited: int = 0
    nodes_kept: int = 0
    pruned_unreachable: int = 0
    pruned_low_candidate_score: int = 0
    fallback_nodes: int = 0
    fallback_candidates_used: int = 0
    complete_draft_leaves: int = 0
    incomplete_draft_leaves: int = 0
    valid_leaves: int = 0
    incomplete_leaves: int = 0

    def merge(self, other: "GenerationStats") -> "GenerationStats":
        """Sum of two stats records."""
        return GenerationStats(**{
            f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)
        })

    def to_dict(self) -> dict[str, int]:
        return {
            "nodesVisited": self.nodes_visited,
            "nodesKept": self.nodes_kept,
            "prunedUnreachable": self.pruned_unreachable,
            "prunedLowCandidateScore": self.pruned_low_candidate_score,
            "fallbackNodes": self.fallback_nodes,
            "fallbackCandidatesUsed": self.fallback_candidates_used,
            "completeDraftLeaves": self.complete_draft_leaves,
            "incompleteDraftLeaves": self.incomplete_draft_leaves,
            "validLeaves": self.valid_leaves,
            "incompleteLeaves": self.incomplete_leaves,
        }


@dataclass
class TreeNode:
    """One team state in the possibility tree.

    Child nodes also carry the pick that produced them (``added_role``,
    ``added_champion``, ``candidate_score``, ``passes_min_score``,
    ``rationale``). Only the root carries ``generation_stats``.
    """

    depth: int
    team_slots: TeamState
    score: int
    checks: dict[str, CheckResult]
    missing_needs: MissingNeeds
    required_summary: RequiredSummary
    viability: Viability
    path_rationale: list[str] = field(default_factory=list)
    branch_potential: BranchPotential = field(default_factory=BranchPotential)
    children: list["TreeNode"] = field(default_factory=list)
    # Set on child nodes
    added_role: Optional[Slot] = None
    added_champion: Optional[str] = None
    candidate_score: Optional[int] = None
    passes_min_score: Optional[bool] = None
    rationale: list[str] = field(default_factory=list)
    # Set on the root only
    generation_stats: Optional[GenerationStats] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def to_dict(self) -> dict:
        """Render the tree in the camelCase shape the draft UI consumes."""
        result = {
            "depth": self.depth,
            "teamSlots": {
                slot.value: name for slot, name in self.team_slots.items()
            },
            "score": self.score,
            "checks": {check_id: check.to_dict() for check_id, check in self.checks.items()},
            "missingNeeds": self.missing_needs.to_dict(),
            "requiredSummary": self.required_summary.to_dict(),
            "viability": self.viability.to_dict(),
            "pathRationale": list(self.path_rationale),
            "branchPotential": self.branch_potential.to_dict(),
            "children": [child.to_dict() for child in self.children],
        }
        if self.added_champion is not None:
            result.update({
                "addedRole": self.added_role.value,
                "addedChampion": self.added_champion,
                "candidateScore": self.candidate_score,
                "passesMinScore": self.passes_min_score,
                "rationale": list(self.rationale),
            })
        if self.generation_stats is not None:
            result["generationStats"] = self.generation_stats.to_dict()
        return result
