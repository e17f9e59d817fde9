"""DraftFlow: team composition checks and pick possibility trees."""

from draftflow.models import (
    Champion,
    RecommendationWeights,
    RequirementToggles,
    Slot,
    TreeNode,
)
from draftflow.services import (
    PossibilityTreeBuilder,
    evaluate_composition_checks,
    generate_possibility_tree,
)

__all__ = [
    "Champion",
    "RecommendationWeights",
    "RequirementToggles",
    "Slot",
    "TreeNode",
    "PossibilityTreeBuilder",
    "evaluate_composition_checks",
    "generate_possibility_tree",
]
