"""Read-only access to per-team role pools."""
from typing import Mapping, Sequence

from draftflow.exceptions import MissingRolePoolError, UnknownTeamError
from draftflow.models.champion import Slot

# team id -> role -> ordered champion names legal for that role on that team
TeamPools = Mapping[str, Mapping]


def get_pool_for_role(team_pools: TeamPools, team_id: str, role: Slot) -> Sequence[str]:
    """Ordered champion names legal for ``role`` on ``team_id``.

    Role keys may be ``Slot`` members or their string values.

    Raises:
        UnknownTeamError: If the team has no registered pools
        MissingRolePoolError: If the team has no pool for the role
    """
    pools_for_team = team_pools.get(team_id)
    if pools_for_team is None:
        raise UnknownTeamError(team_id)

    pool = pools_for_team.get(role)
    if pool is None:
        pool = pools_for_team.get(role.value)
    if pool is None:
        raise MissingRolePoolError(team_id, role.value)
    return pool
