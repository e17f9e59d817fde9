"""Helpers for walking and filtering a built possibility tree."""
from dataclasses import dataclass
from typing import Optional

from draftflow.models.tree import TreeNode

ROOT_NODE_ID = "0"


@dataclass(frozen=True)
class FlatNode:
    """A tree node with its dotted path id (e.g. "0.2.1")."""

    id: str
    parent_id: Optional[str]
    depth: int
    node: TreeNode


def get_parent_node_id(node_id: str = ROOT_NODE_ID) -> Optional[str]:
    """Parent of a dotted node id; None for the root."""
    if node_id == ROOT_NODE_ID:
        return None
    parent = node_id.rsplit(".", 1)[0]
    return parent if parent != node_id else ROOT_NODE_ID


def flatten_tree(root: TreeNode) -> list[FlatNode]:
    """Depth-first, pre-order list of every node with dotted ids."""
    flat: list[FlatNode] = []

    def visit(node: TreeNode, node_id: str, parent_id: Optional[str], depth: int) -> None:
        flat.append(FlatNode(id=node_id, parent_id=parent_id, depth=depth, node=node))
        for index, child in enumerate(node.children):
            visit(child, f"{node_id}.{index}", node_id, depth + 1)

    visit(root, ROOT_NODE_ID, None, 0)
    return flat


def node_matches_search(node: TreeNode, query: str = "") -> bool:
    """Case-insensitive match against the added pick and every filled slot."""
    normalized = query.strip().lower()
    if not normalized:
        return True

    parts = [
        node.added_role.value if node.added_role else "",
        node.added_champion or "",
        *(name or "" for name in node.team_slots.values()),
    ]
    return normalized in " ".join(parts).lower()


def node_passes_filters(
    node: TreeNode,
    min_score: int = 0,
    query: str = "",
    valid_leaves_only: bool = False,
) -> bool:
    """Whether a node should be shown under the given filters.

    With ``valid_leaves_only`` a node passes if it is terminal-valid itself
    or has at least one terminal-valid leaf below it.
    """
    if valid_leaves_only and not (
        node.viability.is_terminal_valid or node.branch_potential.valid_leaf_count > 0
    ):
        return False
    return node.score >= min_score and node_matches_search(node, query)


def best_valid_path(root: TreeNode) -> list[str]:
    """Champions picked along the branch with the most valid end states.

    Ties go to the higher best leaf score, then to the earlier child.
    Stops at the first node with no valid leaves below it.
    """
    path: list[str] = []
    node = root
    while node.children:
        candidates = [c for c in node.children if c.branch_potential.valid_leaf_count > 0]
        if not candidates:
            break
        node = min(
            candidates,
            key=lambda c: (
                -c.branch_potential.valid_leaf_count,
                -(c.branch_potential.best_leaf_score or 0),
            ),
        )
        path.append(node.added_champion)
    return path
