"""Reachability of unmet required checks within the remaining search budget."""
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Optional, Sequence

from draftflow.models.champion import Champion, Slot, is_top_threat_champion
from draftflow.models.checks import CheckEvaluation
from draftflow.models.team import TeamState, picked_champion_names, with_pick
from draftflow.services.role_pools import TeamPools, get_pool_for_role
from draftflow.utils.role_normalizer import normalize_role_order, normalize_slot

ChampionPredicate = Callable[[Champion, Slot], bool]


@dataclass(frozen=True)
class Reachability:
    """Which unmet required checks some legal continuation could still satisfy."""

    remaining_roles: list[Slot] = field(default_factory=list)
    unmet_required: list[str] = field(default_factory=list)
    unreachable_required: list[str] = field(default_factory=list)


def resolve_next_role(
    team_state: TeamState,
    preferred_role: Optional["Slot | str"] = None,
    role_order: Optional[Sequence["Slot | str"]] = None,
) -> Optional[Slot]:
    """Next empty slot to expand: the preferred role if empty, else role order."""
    preferred = normalize_slot(preferred_role)
    if preferred is not None and team_state.get(preferred) is None:
        return preferred
    for slot in normalize_role_order(role_order):
        if team_state.get(slot) is None:
            return slot
    return None


def remaining_expansion_roles(
    team_state: TeamState,
    preferred_role: Optional["Slot | str"],
    role_order: Optional[Sequence["Slot | str"]],
    remaining_steps: int,
) -> list[Slot]:
    """Roles the builder would fill over the next ``remaining_steps`` picks."""
    roles: list[Slot] = []
    projected = dict(team_state)
    for step in range(remaining_steps):
        role = resolve_next_role(projected, preferred_role, role_order)
        if role is None:
            break
        roles.append(role)
        projected = with_pick(projected, role, f"__projected__{step}")
    return roles


def is_legal_for_role(champion: Champion, role: Slot, evaluation: CheckEvaluation) -> bool:
    """Hard legality beyond pool membership: Top must be a threat when required."""
    if role is Slot.TOP and evaluation.toggles.top_must_be_threat:
        return is_top_threat_champion(champion)
    return True


def _has_reachable_champion(
    roles: Iterable[Slot],
    team_pools: TeamPools,
    team_id: str,
    picked: set[str],
    excluded: set[str],
    champions_by_name: Mapping[str, Champion],
    predicate: ChampionPredicate,
) -> bool:
    for role in roles:
        for champion_name in get_pool_for_role(team_pools, team_id, role):
            if champion_name in picked or champion_name in excluded:
                continue
            champion = champions_by_name.get(champion_name)
            if champion is None:
                continue
            if predicate(champion, role):
                return True
    return False


def evaluate_required_reachability(
    evaluation: CheckEvaluation,
    team_id: str,
    team_pools: TeamPools,
    champions_by_name: Mapping[str, Champion],
    excluded: set[str],
    remaining_steps: int,
    preferred_role: Optional["Slot | str"] = None,
    role_order: Optional[Sequence["Slot | str"]] = None,
) -> Reachability:
    """Find unmet required checks that no legal continuation can satisfy.

    Only the roles the builder would actually expand within
    ``remaining_steps`` are considered. A check listed in
    ``unreachable_required`` can never be satisfied by any descendant.
    """
    team_state = evaluation.helpers.normalized_team_state
    unmet = [
        check_id
        for check_id, check in evaluation.checks.items()
        if check.required and not check.satisfied
    ]
    if not unmet:
        return Reachability(unmet_required=unmet)

    roles = remaining_expansion_roles(team_state, preferred_role, role_order, remaining_steps)
    picked = picked_champion_names(team_state)

    def reachable(predicate: ChampionPredicate, candidate_roles: Iterable[Slot] = roles) -> bool:
        return _has_reachable_champion(
            candidate_roles, team_pools, team_id, picked, excluded, champions_by_name,
            lambda champion, role: (
                is_legal_for_role(champion, role, evaluation) and predicate(champion, role)
            ),
        )

    unreachable: list[str] = []
    for check_id in unmet:
        check = evaluation.checks[check_id]

        if check.requirement_type == "tag":
            tag = check.requirement_tag
            ok = reachable(lambda champion, _role: champion.has_tag(tag))
        elif check.requirement_type == "damage_mix":
            needs = evaluation.missing_needs
            if needs.needs_ad and needs.needs_ap:
                mixed = reachable(lambda champion, _role: champion.deals_ad and champion.deals_ap)
                ok = mixed or (
                    len(roles) >= 2
                    and reachable(lambda champion, _role: champion.deals_ad)
                    and reachable(lambda champion, _role: champion.deals_ap)
                )
            elif needs.needs_ad:
                ok = reachable(lambda champion, _role: champion.deals_ad)
            elif needs.needs_ap:
                ok = reachable(lambda champion, _role: champion.deals_ap)
            else:
                ok = True
        elif check.requirement_type == "top_threat":
            top_role = check.required_role or Slot.TOP
            if team_state.get(top_role) is not None or top_role not in roles:
                ok = False
            else:
                ok = reachable(
                    lambda champion, _role: is_top_threat_champion(champion),
                    candidate_roles=[top_role],
                )
        else:
            ok = True

        if not ok:
            unreachable.append(check_id)

    return Reachability(
        remaining_roles=roles,
        unmet_required=unmet,
        unreachable_required=unreachable,
    )
