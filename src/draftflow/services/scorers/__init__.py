"""Core scoring components for the possibility tree."""
from draftflow.services.scorers.candidate_scorer import CandidateScorer

__all__ = [
    "CandidateScorer",
]
