"""Tests for tree walking and filtering helpers."""
import pytest

from draftflow.services.possibility_tree import generate_possibility_tree
from draftflow.utils.tree_navigation import (
    best_valid_path,
    flatten_tree,
    get_parent_node_id,
    node_matches_search,
    node_passes_filters,
)


@pytest.fixture
def tree(champions_by_name, team_pools):
    return generate_possibility_tree(
        {"Mid": "Azir", "ADC": "Jinx", "Support": "Nami"},
        "TTT",
        team_pools,
        champions_by_name,
        max_depth=2,
        max_branch=3,
    )


def test_parent_node_ids():
    assert get_parent_node_id("0") is None
    assert get_parent_node_id("0.2") == "0"
    assert get_parent_node_id("0.2.1") == "0.2"


def test_flatten_tree_ids(tree):
    flat = flatten_tree(tree)

    assert flat[0].id == "0"
    assert flat[0].parent_id is None
    assert len(flat) == tree.generation_stats.nodes_kept
    for entry in flat[1:]:
        assert entry.parent_id == get_parent_node_id(entry.id)
        assert entry.depth == entry.node.depth


def test_search_matches_added_pick_and_slots(tree):
    child = tree.children[0]

    assert node_matches_search(child, child.added_champion.upper())
    assert node_matches_search(child, "azir")
    assert node_matches_search(child, "")
    assert not node_matches_search(child, "teemo")


def test_filters(tree):
    assert node_passes_filters(tree, min_score=0)
    assert not node_passes_filters(tree, min_score=tree.score + 1)
    assert node_passes_filters(tree, valid_leaves_only=True) == (
        tree.branch_potential.valid_leaf_count > 0
    )


def test_best_valid_path_reaches_valid_leaf(tree):
    path = best_valid_path(tree)

    assert len(path) == 2
    node = tree
    for champion in path:
        node = next(child for child in node.children if child.added_champion == champion)
    assert node.viability.is_terminal_valid is True
