"""Requirement toggles and recommendation weights."""

from dataclasses import asdict, dataclass, field, fields, replace
from types import MappingProxyType
from typing import Mapping, Optional

from draftflow.models.champion import BOOLEAN_TAGS

# camelCase keys used by callers of the draft API -> dataclass field names
TOGGLE_KEYS: dict[str, str] = {
    "requireHardEngage": "require_hard_engage",
    "requireFrontline": "require_frontline",
    "requireWaveclear": "require_waveclear",
    "requireDamageMix": "require_damage_mix",
    "requireAntiTank": "require_anti_tank",
    "requireDisengage": "require_disengage",
    "requirePrimaryCarry": "require_primary_carry",
    "topMustBeThreat": "top_must_be_threat",
}


@dataclass(frozen=True)
class RequirementToggles:
    """Which composition checks are required rather than informational."""

    require_hard_engage: bool = True
    require_frontline: bool = True
    require_waveclear: bool = True
    require_damage_mix: bool = True
    require_anti_tank: bool = False
    require_disengage: bool = False
    require_primary_carry: bool = True
    top_must_be_threat: bool = True

    @classmethod
    def from_overrides(
        cls, overrides: Optional["Mapping[str, bool] | RequirementToggles"] = None
    ) -> "RequirementToggles":
        """Merge overrides over the defaults.

        Accepts camelCase or snake_case keys. Unknown keys are ignored.
        """
        if isinstance(overrides, RequirementToggles):
            return overrides
        if not overrides:
            return cls()

        field_names = {f.name for f in fields(cls)}
        values = {}
        for key, value in overrides.items():
            name = TOGGLE_KEYS.get(key, key)
            if name in field_names:
                values[name] = bool(value)
        return replace(cls(), **values)

    def to_dict(self) -> dict[str, bool]:
        """camelCase view matching the draft API."""
        values = asdict(self)
        return {key: values[name] for key, name in TOGGLE_KEYS.items()}


# Points a candidate earns for supplying a missing required tag
DEFAULT_RECOMMENDATION_WEIGHTS: Mapping[str, int] = MappingProxyType({
    "HardEngage": 10,
    "Frontline": 8,
    "Waveclear": 8,
    "Disengage": 6,
    "AntiTank": 5,
    "ZoneControl": 5,
    "PickThreat": 4,
    "DiveThreat": 4,
    "SideLaneThreat": 4,
    "Poke": 3,
    "FogThreat": 3,
    "FollowUpEngage": 3,
    "FrontToBackDPS": 3,
    "EarlyPriority": 2,
    "ObjectiveSecure": 0,
    "PrimaryCarry": 0,
    "SustainedDPS": 0,
    "TurretSiege": 0,
    "SelfPeel": 0,
    "UtilityCarry": 0,
})


@dataclass(frozen=True)
class RecommendationWeights:
    """Per-tag weights used by the candidate scorer.

    Every one of the 20 tags has an entry; overrides are merged over
    ``DEFAULT_RECOMMENDATION_WEIGHTS``.
    """

    values: Mapping[str, int] = field(
        default_factory=lambda: dict(DEFAULT_RECOMMENDATION_WEIGHTS)
    )

    @classmethod
    def from_overrides(
        cls, overrides: Optional["Mapping[str, float] | RecommendationWeights"] = None
    ) -> "RecommendationWeights":
        """Merge overrides over the default weights.

        Weights must be non-negative whole numbers; ``2.0`` is accepted as 2.

        Raises:
            ValueError: If a weight is negative or fractional
        """
        if isinstance(overrides, RecommendationWeights):
            return overrides

        merged = dict(DEFAULT_RECOMMENDATION_WEIGHTS)
        for tag, weight in (overrides or {}).items():
            if weight is None:
                continue
            if weight < 0:
                raise ValueError(f"Weight for {tag} must be non-negative, got {weight}")
            if weight != int(weight):
                raise ValueError(f"Weight for {tag} must be a whole number, got {weight}")
            merged[tag] = int(weight)
        return cls(values=merged)

    def weight_for(self, tag: str) -> int:
        """Configured weight for a tag, falling back to the default table."""
        if tag in self.values:
            return self.values[tag]
        return DEFAULT_RECOMMENDATION_WEIGHTS.get(tag, 0)

    def to_dict(self) -> dict[str, int]:
        return {tag: self.weight_for(tag) for tag in BOOLEAN_TAGS}
