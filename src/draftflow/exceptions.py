"""Errors raised by the draft engine.

Only caller contract violations are raised. Running out of legal picks is a
normal outcome and is represented in the tree, never as an exception.
"""

from typing import Optional


class DraftFlowError(Exception):
    """Base class for draft engine errors."""


class UnknownChampionError(DraftFlowError, KeyError):
    """A team state names a champion missing from the catalog."""

    def __init__(self, champion_name: str, slot: Optional[str] = None):
        self.champion_name = champion_name
        self.slot = slot
        super().__init__(champion_name)

    def __str__(self) -> str:
        return f"Unknown champion '{self.champion_name}' in team state for slot '{self.slot}'."


class UnknownTeamError(DraftFlowError, KeyError):
    """No role pools are registered for a team id."""

    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(team_id)

    def __str__(self) -> str:
        return f"Unknown team '{self.team_id}' in team pools."


class MissingRolePoolError(DraftFlowError, KeyError):
    """A team has pools registered but none for the requested role."""

    def __init__(self, team_id: str, role: str):
        self.team_id = team_id
        self.role = role
        super().__init__(role)

    def __str__(self) -> str:
        return f"No pool found for role '{self.role}' on team '{self.team_id}'."


class TreeConfigError(DraftFlowError, ValueError):
    """Search parameters are missing or outside their allowed range."""
