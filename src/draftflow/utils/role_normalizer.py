"""Centralized role normalization utility.

All role normalization in the codebase should use this module to ensure
consistency. The canonical format is the ``Slot`` enum:
Top, Jungle, Mid, ADC, Support.
"""

from typing import Iterable, Optional

from draftflow.models.champion import SLOTS, Slot

# Comprehensive mapping from any known role format (lowercased) to a slot
ROLE_ALIASES: dict[str, Slot] = {
    # Top lane variations
    "top": Slot.TOP,
    "top laner": Slot.TOP,
    "toplane": Slot.TOP,

    # Jungle variations
    "jungle": Slot.JUNGLE,
    "jungler": Slot.JUNGLE,
    "jng": Slot.JUNGLE,
    "jg": Slot.JUNGLE,

    # Mid lane variations
    "mid": Slot.MID,
    "middle": Slot.MID,
    "mid laner": Slot.MID,
    "midlane": Slot.MID,

    # Bot/ADC variations - all normalize to ADC
    "adc": Slot.ADC,
    "bot": Slot.ADC,
    "bottom": Slot.ADC,
    "ad carry": Slot.ADC,
    "marksman": Slot.ADC,

    # Support variations
    "support": Slot.SUPPORT,
    "sup": Slot.SUPPORT,
    "supp": Slot.SUPPORT,
}


def normalize_slot(role: Optional[str | Slot]) -> Optional[Slot]:
    """Normalize a role string to its slot.

    Args:
        role: Role in any known format (e.g., "JNG", "jungle", "ADC", "bot")

    Returns:
        Matching Slot, or None if the role is unknown or None

    Examples:
        >>> normalize_slot("JNG")
        <Slot.JUNGLE: 'Jungle'>
        >>> normalize_slot("bot")
        <Slot.ADC: 'ADC'>
        >>> normalize_slot(None)
    """
    if role is None:
        return None
    if isinstance(role, Slot):
        return role
    if not isinstance(role, str):
        return None
    return ROLE_ALIASES.get(role.strip().lower())


def normalize_slot_strict(role: str | Slot) -> Slot:
    """Normalize a role, raising ValueError if unknown."""
    normalized = normalize_slot(role)
    if normalized is None:
        raise ValueError(f"Unknown role: {role}")
    return normalized


def is_valid_slot(role: Optional[str | Slot]) -> bool:
    """Check if a role can be normalized to a slot."""
    return normalize_slot(role) is not None


def normalize_role_order(role_order: Optional[Iterable[str | Slot]] = None) -> list[Slot]:
    """Resolve a caller-supplied role order to a full slot order.

    Unknown and repeated roles are dropped. Any slot the caller did not
    mention is appended in canonical order, so the result always holds all
    five slots exactly once.
    """
    order: list[Slot] = []
    for role in role_order or ():
        slot = normalize_slot(role)
        if slot is None or slot in order:
            continue
        order.append(slot)

    for slot in SLOTS:
        if slot not in order:
            order.append(slot)
    return order
