"""Tests for role pool lookup."""
import pytest

from draftflow.exceptions import MissingRolePoolError, UnknownTeamError
from draftflow.models.champion import Slot
from draftflow.services.role_pools import get_pool_for_role


def test_pool_lookup_accepts_slot_or_string_keys():
    pools = {"T1": {Slot.TOP: ["Camille"], "Mid": ["Azir"]}}

    assert get_pool_for_role(pools, "T1", Slot.TOP) == ["Camille"]
    assert get_pool_for_role(pools, "T1", Slot.MID) == ["Azir"]


def test_unknown_team_raises():
    with pytest.raises(UnknownTeamError):
        get_pool_for_role({}, "T1", Slot.TOP)


def test_missing_role_pool_raises():
    with pytest.raises(MissingRolePoolError):
        get_pool_for_role({"T1": {"Top": ["Camille"]}}, "T1", Slot.SUPPORT)
