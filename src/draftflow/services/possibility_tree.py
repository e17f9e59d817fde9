"""Possibility tree builder: bounded search over future pick sequences."""
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from draftflow.config import Settings, get_settings
from draftflow.exceptions import TreeConfigError, UnknownTeamError
from draftflow.models.champion import Champion, Slot
from draftflow.models.checks import CheckEvaluation
from draftflow.models.requirements import RecommendationWeights, RequirementToggles
from draftflow.models.team import (
    TeamState,
    is_team_complete,
    normalize_team_state,
    picked_champion_names,
    with_pick,
)
from draftflow.models.tree import (
    BranchPotential,
    CandidateGeneration,
    GenerationStats,
    ScoredCandidate,
    TreeNode,
    TreeSearchParams,
    Viability,
)
from draftflow.services.composition_checks import (
    evaluate_composition_checks,
    score_node_from_checks,
    summarize_required,
)
from draftflow.services.reachability import (
    evaluate_required_reachability,
    is_legal_for_role,
    resolve_next_role,
)
from draftflow.services.role_pools import TeamPools, get_pool_for_role
from draftflow.services.scorers import CandidateScorer
from draftflow.utils.role_normalizer import normalize_role_order, normalize_slot

logger = logging.getLogger(__name__)

RANK_BY_CANDIDATE_SCORE = "candidate_score"
RANK_BY_VALID_END_STATES = "valid_end_states"


def normalize_exclusions(excluded_champions: Optional[Iterable[str]]) -> frozenset[str]:
    """Stripped, non-blank champion names to keep out of the tree."""
    return frozenset(
        name.strip()
        for name in excluded_champions or ()
        if isinstance(name, str) and name.strip()
    )


def generate_next_candidates(
    evaluation: CheckEvaluation,
    role: Slot,
    team_id: str,
    team_pools: TeamPools,
    champions_by_name: Mapping[str, Champion],
    excluded: frozenset[str],
    scorer: CandidateScorer,
    min_candidate_score: int,
) -> CandidateGeneration:
    """Legal candidates for ``role``, scored and ordered best first.

    Legal means: in the role's pool, in the catalog, not already picked, not
    excluded, and a threat when filling Top while TopMustBeThreat is required.
    Candidates under ``min_candidate_score`` are dropped unless that would
    drop every legal candidate; then all of them are kept with
    ``passes_min_score=False``.
    """
    picked = picked_champion_names(evaluation.helpers.normalized_team_state)
    seen: set[str] = set()
    legal: list[ScoredCandidate] = []
    filtered_top_threat = 0

    for champion_name in get_pool_for_role(team_pools, team_id, role):
        if champion_name in seen or champion_name in picked or champion_name in excluded:
            continue
        seen.add(champion_name)

        champion = champions_by_name.get(champion_name)
        if champion is None:
            continue
        if not is_legal_for_role(champion, role, evaluation):
            filtered_top_threat += 1
            continue

        result = scorer.score(champion, evaluation)
        legal.append(ScoredCandidate(
            role=role,
            champion_name=champion_name,
            score=result.score,
            rationale=result.rationale,
            passes_min_score=result.score >= min_candidate_score,
        ))

    passing = [c for c in legal if c.passes_min_score]
    used_fallback = not passing and bool(legal)
    candidates = legal if used_fallback else passing
    candidates.sort(key=lambda c: (-c.score, c.champion_name))

    return CandidateGeneration(
        role=role,
        candidates=candidates,
        legal_count=len(legal),
        pruned_low_score=len(legal) - len(passing) if passing else 0,
        filtered_top_threat=filtered_top_threat,
        used_fallback=used_fallback,
    )


def _rank_key(node: TreeNode, rank_goal: str) -> tuple:
    if rank_goal == RANK_BY_VALID_END_STATES:
        return (
            -node.branch_potential.valid_leaf_count,
            -(node.candidate_score or 0),
            node.added_champion or "",
        )
    return (-(node.candidate_score or 0), node.added_champion or "")


@dataclass(frozen=True)
class _BuildContext:
    """Inputs shared by every node of one build."""

    team_id: str
    preferred_role: Optional[Slot]
    role_order: tuple[Slot, ...]
    toggles: RequirementToggles
    excluded: frozenset[str]
    scorer: CandidateScorer
    params: TreeSearchParams


class PossibilityTreeBuilder:
    """Builds a bounded tree of future picks for a partial team.

    Each node evaluates its composition checks, prunes itself when a
    required check can no longer be reached, and otherwise expands the next
    role with the best legal candidates. Subtree statistics are returned
    alongside each node and merged by the parent, so identical inputs always
    produce an identical tree.
    """

    def __init__(
        self,
        champions_by_name: Mapping[str, Champion],
        team_pools: TeamPools,
        settings: Optional[Settings] = None,
    ):
        self.champions_by_name = champions_by_name
        self.team_pools = team_pools
        self.settings = settings or get_settings()

    def build(
        self,
        team_state: Optional[Mapping],
        team_id: str,
        *,
        next_role: Optional["Slot | str"] = None,
        role_order: Optional[Sequence["Slot | str"]] = None,
        toggles: Optional["RequirementToggles | Mapping[str, bool]"] = None,
        weights: Optional["RecommendationWeights | Mapping[str, float]"] = None,
        excluded_champions: Optional[Iterable[str]] = None,
        max_depth: Optional[int] = None,
        max_branch: Optional[int] = None,
        min_candidate_score: Optional[int] = None,
        rank_goal: Optional[str] = None,
        prune_unreachable_required: Optional[bool] = None,
    ) -> TreeNode:
        """Build the possibility tree rooted at ``team_state``.

        Args:
            team_state: Slot -> champion name mapping for the partial team
            team_id: Team whose role pools supply candidates
            next_role: Role to expand first while it is empty
            role_order: Expansion order; unmentioned roles follow in canonical order
            toggles: Requirement toggles or overrides
            weights: Tag weights or overrides for candidate scoring
            excluded_champions: Champions that may never be added
            max_depth: Number of picks to look ahead
            max_branch: Maximum children per node
            min_candidate_score: Candidate score floor
            rank_goal: "candidate_score" or "valid_end_states"
            prune_unreachable_required: Hard-prune nodes with unreachable required checks

        Returns:
            Root TreeNode carrying generation_stats

        Raises:
            TreeConfigError: If team_id is blank or a search parameter is out of range
            UnknownTeamError: If team_id has no role pools
            UnknownChampionError: If team_state names a champion missing from the catalog
        """
        if not isinstance(team_id, str) or not team_id.strip():
            raise TreeConfigError("team_id is required to generate a tree.")
        params = TreeSearchParams.resolve(
            self.settings,
            max_depth=max_depth,
            max_branch=max_branch,
            min_candidate_score=min_candidate_score,
            rank_goal=rank_goal,
            prune_unreachable_required=prune_unreachable_required,
        )
        if team_id not in self.team_pools:
            raise UnknownTeamError(team_id)

        context = _BuildContext(
            team_id=team_id,
            preferred_role=normalize_slot(next_role),
            role_order=tuple(normalize_role_order(role_order)),
            toggles=RequirementToggles.from_overrides(toggles),
            excluded=normalize_exclusions(excluded_champions),
            scorer=CandidateScorer(weights),
            params=params,
        )

        root, stats = self._build_node(context, normalize_team_state(team_state), 0, [])
        root.generation_stats = stats

        logger.info(
            f"Built possibility tree for team {team_id}: depth={params.max_depth} "
            f"branch={params.max_branch} visited={stats.nodes_visited} kept={stats.nodes_kept} "
            f"valid_leaves={stats.valid_leaves}"
        )
        return root

    def _build_node(
        self,
        context: _BuildContext,
        team_state: TeamState,
        depth: int,
        path_rationale: list[str],
    ) -> tuple[TreeNode, GenerationStats]:
        params = context.params
        stats = GenerationStats(nodes_visited=1, nodes_kept=1)

        evaluation = evaluate_composition_checks(team_state, self.champions_by_name, context.toggles)
        required_summary = summarize_required(evaluation.checks)
        complete = is_team_complete(team_state)
        remaining_steps = max(0, params.max_depth - depth)

        node = TreeNode(
            depth=depth,
            team_slots=evaluation.helpers.normalized_team_state,
            score=score_node_from_checks(evaluation),
            checks=evaluation.checks,
            missing_needs=evaluation.missing_needs,
            required_summary=required_summary,
            viability=Viability(
                remaining_steps=remaining_steps,
                is_draft_complete=complete,
                is_terminal_valid=complete and required_summary.required_gaps == 0,
            ),
            path_rationale=path_rationale,
        )

        if depth >= params.max_depth or complete:
            return node, self._finalize_leaf(node, stats)

        if params.prune_unreachable_required:
            reachability = evaluate_required_reachability(
                evaluation,
                context.team_id,
                self.team_pools,
                self.champions_by_name,
                context.excluded,
                remaining_steps,
                preferred_role=context.preferred_role,
                role_order=context.role_order,
            )
            if reachability.unreachable_required:
                logger.debug(
                    f"Pruned depth-{depth} node, unreachable: {reachability.unreachable_required}"
                )
                node.viability.unreachable_required = list(reachability.unreachable_required)
                stats.pruned_unreachable += 1
                return node, self._finalize_leaf(node, stats)

        role = resolve_next_role(team_state, context.preferred_role, context.role_order)
        generation = generate_next_candidates(
            evaluation,
            role,
            context.team_id,
            self.team_pools,
            self.champions_by_name,
            context.excluded,
            context.scorer,
            params.min_candidate_score,
        )
        stats.pruned_low_candidate_score += generation.pruned_low_score

        if not generation.candidates:
            node.viability.blocked_role = role
            node.viability.blocked_reason = (
                "top_threat_filter"
                if generation.filtered_top_threat > 0
                else "no_eligible_champions_for_role"
            )
            return node, self._finalize_leaf(node, stats)

        if generation.used_fallback:
            stats.fallback_nodes += 1
            logger.debug(
                f"No {role.value} candidate reached score floor {params.min_candidate_score}; "
                f"falling back to {generation.legal_count} legal candidates"
            )

        # Ranking by valid end states needs every candidate's subtree before truncating
        if params.rank_goal == RANK_BY_VALID_END_STATES:
            expanded = generation.candidates
        else:
            expanded = generation.candidates[: params.max_branch]

        built = [
            self._build_child(context, team_state, depth, path_rationale, candidate)
            for candidate in expanded
        ]
        built.sort(key=lambda pair: _rank_key(pair[0], params.rank_goal))
        kept, discarded = built[: params.max_branch], built[params.max_branch:]

        for child, child_stats in kept:
            stats = stats.merge(child_stats)
            if not child.passes_min_score:
                stats.fallback_candidates_used += 1
        for _, child_stats in discarded:
            stats.nodes_visited += child_stats.nodes_visited

        node.children = [child for child, _ in kept]
        node.branch_potential = BranchPotential(
            valid_leaf_count=sum(c.branch_potential.valid_leaf_count for c in node.children),
            best_leaf_score=max(
                (
                    c.branch_potential.best_leaf_score
                    for c in node.children
                    if c.branch_potential.best_leaf_score is not None
                ),
                default=None,
            ),
        )
        return node, stats

    def _build_child(
        self,
        context: _BuildContext,
        team_state: TeamState,
        depth: int,
        path_rationale: list[str],
        candidate: ScoredCandidate,
    ) -> tuple[TreeNode, GenerationStats]:
        name = candidate.champion_name
        child_path = [
            *path_rationale,
            f"{candidate.role.value} -> {name} (candidate score {candidate.score})",
            *(f"{name}: {reason}" for reason in candidate.rationale),
        ]
        if not candidate.passes_min_score:
            child_path.append(
                f"{name}: below candidate score floor "
                f"({candidate.score} < {context.params.min_candidate_score})"
            )

        child, child_stats = self._build_node(
            context, with_pick(team_state, candidate.role, name), depth + 1, child_path
        )
        child.added_role = candidate.role
        child.added_champion = name
        child.candidate_score = candidate.score
        child.passes_min_score = candidate.passes_min_score
        child.rationale = list(candidate.rationale)
        return child, child_stats

    @staticmethod
    def _finalize_leaf(node: TreeNode, stats: GenerationStats) -> GenerationStats:
        valid = node.viability.is_terminal_valid
        node.branch_potential = BranchPotential(
            valid_leaf_count=1 if valid else 0,
            best_leaf_score=node.score if valid else None,
        )
        if node.viability.is_draft_complete:
            stats.complete_draft_leaves += 1
        else:
            stats.incomplete_draft_leaves += 1
        if valid:
            stats.valid_leaves += 1
        else:
            stats.incomplete_leaves += 1
        return stats


def generate_possibility_tree(
    team_state: Optional[Mapping],
    team_id: str,
    team_pools: TeamPools,
    champions_by_name: Mapping[str, Champion],
    settings: Optional[Settings] = None,
    **options,
) -> TreeNode:
    """Build a possibility tree in one call. See ``PossibilityTreeBuilder.build``."""
    builder = PossibilityTreeBuilder(champions_by_name, team_pools, settings)
    return builder.build(team_state, team_id, **options)
