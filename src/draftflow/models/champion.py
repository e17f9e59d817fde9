"""Champion catalog vocabulary and records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class Slot(str, Enum):
    """The five role slots of a team composition."""

    TOP = "Top"
    JUNGLE = "Jungle"
    MID = "Mid"
    ADC = "ADC"
    SUPPORT = "Support"


class DamageType(str, Enum):
    """Primary damage profile of a champion."""

    AD = "AD"
    AP = "AP"
    MIXED = "Mixed"


class Scaling(str, Enum):
    """When a champion hits its power spike."""

    EARLY = "Early"
    MID = "Mid"
    LATE = "Late"


# Canonical slot order used for display and role expansion
SLOTS: tuple[Slot, ...] = (Slot.TOP, Slot.JUNGLE, Slot.MID, Slot.ADC, Slot.SUPPORT)

BOOLEAN_TAGS: tuple[str, ...] = (
    "HardEngage",
    "FollowUpEngage",
    "PickThreat",
    "Frontline",
    "Disengage",
    "Waveclear",
    "ZoneControl",
    "ObjectiveSecure",
    "AntiTank",
    "FrontToBackDPS",
    "DiveThreat",
    "SideLaneThreat",
    "Poke",
    "FogThreat",
    "EarlyPriority",
    "PrimaryCarry",
    "SustainedDPS",
    "TurretSiege",
    "SelfPeel",
    "UtilityCarry",
)

TOP_THREAT_TAGS: tuple[str, ...] = ("SideLaneThreat", "DiveThreat")


@dataclass(frozen=True)
class Champion:
    """A champion as supplied by the catalog provider."""

    name: str
    roles: frozenset[Slot]
    damage_type: DamageType
    scaling: Scaling
    tags: Mapping[str, bool] = field(default_factory=dict)

    def has_tag(self, tag: str) -> bool:
        """Whether the champion carries a tag. Missing tags count as False."""
        return bool(self.tags.get(tag, False))

    @property
    def deals_ad(self) -> bool:
        return self.damage_type in (DamageType.AD, DamageType.MIXED)

    @property
    def deals_ap(self) -> bool:
        return self.damage_type in (DamageType.AP, DamageType.MIXED)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Champion":
        """Build a champion from the catalog dict shape.

        Accepts both the camelCase keys of the catalog provider
        (``damageType``) and snake_case keys. Values are trusted; vocabulary
        validation happens upstream during ingestion.
        """
        damage_type = data.get("damageType", data.get("damage_type"))
        return cls(
            name=data["name"],
            roles=frozenset(Slot(role) for role in data.get("roles", ())),
            damage_type=DamageType(damage_type),
            scaling=Scaling(data.get("scaling", Scaling.MID.value)),
            tags={tag: bool(value) for tag, value in data.get("tags", {}).items()},
        )


def is_top_threat_champion(champion: Champion | None) -> bool:
    """A Top pick counts as a threat if it carries SideLaneThreat or DiveThreat."""
    if champion is None:
        return False
    return any(champion.has_tag(tag) for tag in TOP_THREAT_TAGS)
