"""Data models for the DraftFlow engine."""

from draftflow.models.champion import (
    BOOLEAN_TAGS,
    SLOTS,
    Champion,
    DamageType,
    Scaling,
    Slot,
    is_top_threat_champion,
)
from draftflow.models.team import (
    TeamState,
    empty_team_state,
    is_team_complete,
    normalize_team_state,
    picked_champion_names,
)
from draftflow.models.requirements import (
    DEFAULT_RECOMMENDATION_WEIGHTS,
    RecommendationWeights,
    RequirementToggles,
)
from draftflow.models.checks import (
    CheckEvaluation,
    CheckResult,
    MissingNeeds,
    RequiredSummary,
    TeamHelpers,
)
from draftflow.models.tree import (
    BranchPotential,
    CandidateScore,
    GenerationStats,
    TreeNode,
    TreeSearchParams,
    Viability,
)

__all__ = [
    "BOOLEAN_TAGS",
    "SLOTS",
    "Champion",
    "DamageType",
    "Scaling",
    "Slot",
    "is_top_threat_champion",
    "TeamState",
    "empty_team_state",
    "is_team_complete",
    "normalize_team_state",
    "picked_champion_names",
    "DEFAULT_RECOMMENDATION_WEIGHTS",
    "RecommendationWeights",
    "RequirementToggles",
    "CheckEvaluation",
    "CheckResult",
    "MissingNeeds",
    "RequiredSummary",
    "TeamHelpers",
    "BranchPotential",
    "CandidateScore",
    "GenerationStats",
    "TreeNode",
    "TreeSearchParams",
    "Viability",
]
