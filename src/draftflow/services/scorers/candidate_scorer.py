"""Incremental scoring of one candidate pick against the team's missing needs."""
from typing import Mapping, Optional

from draftflow.models.champion import Champion
from draftflow.models.checks import CheckEvaluation
from draftflow.models.requirements import RecommendationWeights
from draftflow.models.tree import CandidateScore


class CandidateScorer:
    """Scores a candidate by what it adds to the current composition.

    Points come from three independent rules:
    - Each missing required tag the candidate carries adds its weight
    - A missing damage side (AD or AP) the candidate covers adds a fixed bonus
    - A missing required tag whose weight is 0 still adds a small floor, so
      resolving a required check is never invisible to ranking

    The scorer does not rank; ordering and tie-breaks belong to the tree builder.
    """

    DAMAGE_MIX_BONUS = 6
    REQUIRED_CHECK_FLOOR = 1

    def __init__(self, weights: Optional["RecommendationWeights | Mapping[str, float]"] = None):
        self.weights = RecommendationWeights.from_overrides(weights)

    def score(self, champion: Champion, evaluation: CheckEvaluation) -> CandidateScore:
        """Score one candidate for one empty role.

        Args:
            champion: Candidate champion
            evaluation: Check evaluation of the team before this pick

        Returns:
            CandidateScore with a non-negative integer score and rationale lines
        """
        needs = evaluation.missing_needs
        score = 0
        rationale: list[str] = []

        for tag in needs.tags:
            if not champion.has_tag(tag):
                continue
            weight = int(self.weights.weight_for(tag))
            if weight > 0:
                score += weight
                rationale.append(f"adds {tag} (+{weight})")
            else:
                score += self.REQUIRED_CHECK_FLOOR
                rationale.append(
                    f"resolves required {tag} (required-check floor +{self.REQUIRED_CHECK_FLOOR})"
                )

        if needs.needs_ad and champion.deals_ad:
            score += self.DAMAGE_MIX_BONUS
            rationale.append(f"improves damage mix with AD (+{self.DAMAGE_MIX_BONUS})")

        if needs.needs_ap and champion.deals_ap:
            score += self.DAMAGE_MIX_BONUS
            rationale.append(f"improves damage mix with AP (+{self.DAMAGE_MIX_BONUS})")

        return CandidateScore(score=score, rationale=tuple(rationale))
