"""Team state helpers.

A team state maps every slot to a champion name or ``None`` (empty).
Champion records are never copied into the state; names are resolved
against the catalog when needed.
"""

from typing import Mapping, Optional

from draftflow.models.champion import SLOTS, Slot
from draftflow.utils import role_normalizer

TeamState = dict[Slot, Optional[str]]


def empty_team_state() -> TeamState:
    """A team state with every slot empty."""
    return {slot: None for slot in SLOTS}


def normalize_team_state(team_state: Optional[Mapping] = None) -> TeamState:
    """Normalize a raw team mapping to a five-slot team state.

    Keys may be ``Slot`` members or any role alias ("Top", "jng", "bot").
    Blank or whitespace-only values collapse to ``None``; names are stripped.
    """
    normalized = empty_team_state()
    for key, raw_value in (team_state or {}).items():
        slot = role_normalizer.normalize_slot(key)
        if slot is None:
            continue
        if isinstance(raw_value, str) and raw_value.strip():
            normalized[slot] = raw_value.strip()
    return normalized


def filled_slots(team_state: TeamState) -> list[tuple[Slot, str]]:
    """(slot, champion name) pairs for filled slots, in canonical order."""
    return [(slot, team_state[slot]) for slot in SLOTS if team_state.get(slot)]


def picked_champion_names(team_state: TeamState) -> set[str]:
    """Names of every champion already placed on the team."""
    return {name for _, name in filled_slots(team_state)}


def is_team_complete(team_state: TeamState) -> bool:
    """True when all five slots are filled."""
    return all(team_state.get(slot) for slot in SLOTS)


def with_pick(team_state: TeamState, slot: Slot, champion_name: str) -> TeamState:
    """Copy of the team state with one more pick."""
    updated = dict(team_state)
    updated[slot] = champion_name
    return updated
