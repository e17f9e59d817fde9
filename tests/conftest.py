"""Shared champion catalog and team pools for engine tests."""
import pytest

from draftflow.models.champion import Champion, DamageType, Scaling, Slot


def make_champion(name, roles, damage_type, tags=(), scaling=Scaling.MID):
    """Build a champion with only the listed tags set."""
    return Champion(
        name=name,
        roles=frozenset(roles),
        damage_type=DamageType(damage_type),
        scaling=scaling,
        tags={tag: True for tag in tags},
    )


CATALOG = [
    # Top
    make_champion("Aatrox", [Slot.TOP], "AD", ["Frontline", "DiveThreat", "SustainedDPS"]),
    make_champion("Camille", [Slot.TOP], "AD", ["SideLaneThreat", "DiveThreat", "PickThreat", "HardEngage"]),
    make_champion("Gwen", [Slot.TOP], "AP", ["SideLaneThreat", "AntiTank", "SustainedDPS"], Scaling.LATE),
    make_champion("Ornn", [Slot.TOP], "AP", ["Frontline", "HardEngage", "FollowUpEngage"]),
    make_champion("Malphite", [Slot.TOP], "AP", ["Frontline", "HardEngage"]),
    # Jungle
    make_champion("Sejuani", [Slot.JUNGLE], "AD", ["HardEngage", "Frontline", "FollowUpEngage"]),
    make_champion("Hecarim", [Slot.JUNGLE], "AD", ["HardEngage", "DiveThreat"]),
    make_champion("Zac", [Slot.JUNGLE], "AP", ["HardEngage", "Frontline"]),
    make_champion("Amumu", [Slot.JUNGLE], "AP", ["HardEngage", "Frontline", "ZoneControl"]),
    make_champion("Viego", [Slot.JUNGLE], "AD", ["PrimaryCarry", "SustainedDPS"]),
    # Mid
    make_champion("Azir", [Slot.MID], "AP", ["Waveclear", "ZoneControl", "PrimaryCarry", "TurretSiege"], Scaling.LATE),
    make_champion("Orianna", [Slot.MID], "AP", ["Waveclear", "ZoneControl", "FollowUpEngage"]),
    make_champion("Syndra", [Slot.MID], "AP", ["Waveclear", "PickThreat", "Poke"]),
    # ADC
    make_champion("Ashe", [Slot.ADC], "AD", ["PickThreat", "UtilityCarry", "Poke"]),
    make_champion("Jinx", [Slot.ADC], "AD", ["PrimaryCarry", "Waveclear", "SustainedDPS", "TurretSiege"], Scaling.LATE),
    make_champion("Kai'Sa", [Slot.ADC], "Mixed", ["PrimaryCarry", "DiveThreat"]),
    # Support
    make_champion("Nami", [Slot.SUPPORT], "AP", ["Disengage", "UtilityCarry"]),
    make_champion("Leona", [Slot.SUPPORT], "AP", ["HardEngage", "Frontline"], Scaling.EARLY),
    make_champion("Janna", [Slot.SUPPORT], "AP", ["Disengage", "SelfPeel"]),
]

SHARED_POOLS = {
    "Jungle": ["Sejuani", "Hecarim", "Zac", "Amumu", "Viego"],
    "Mid": ["Azir", "Orianna", "Syndra"],
    "ADC": ["Ashe", "Jinx", "Kai'Sa"],
    "Support": ["Nami", "Leona", "Janna"],
}


@pytest.fixture
def champions_by_name():
    return {champion.name: champion for champion in CATALOG}


@pytest.fixture
def team_pools():
    """Role pools per team. NOTHREAT only has non-threat Top options."""
    return {
        "TTT": {"Top": ["Aatrox", "Camille", "Gwen", "Ornn", "Malphite"], **SHARED_POOLS},
        "NOTHREAT": {"Top": ["Ornn", "Malphite"], **SHARED_POOLS},
    }
