"""Draft engine services."""

from draftflow.services.composition_checks import (
    compute_team_helpers,
    evaluate_composition_checks,
    score_node_from_checks,
    summarize_required,
)
from draftflow.services.possibility_tree import (
    PossibilityTreeBuilder,
    generate_next_candidates,
    generate_possibility_tree,
)
from draftflow.services.reachability import evaluate_required_reachability

__all__ = [
    "compute_team_helpers",
    "evaluate_composition_checks",
    "score_node_from_checks",
    "summarize_required",
    "PossibilityTreeBuilder",
    "generate_next_candidates",
    "generate_possibility_tree",
    "evaluate_required_reachability",
]
