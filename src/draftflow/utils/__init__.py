"""Utility modules for draftflow."""

from draftflow.utils.role_normalizer import (
    ROLE_ALIASES,
    is_valid_slot,
    normalize_role_order,
    normalize_slot,
    normalize_slot_strict,
)

__all__ = [
    "ROLE_ALIASES",
    "is_valid_slot",
    "normalize_role_order",
    "normalize_slot",
    "normalize_slot_strict",
]
