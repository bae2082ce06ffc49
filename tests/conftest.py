import pytest

from gametree.tree.builder import TreeSpec, build_tree


@pytest.fixture
def pruning_spec():
    """MAX root over C1 = MIN[3, 5] and C2 = MIN[2, 9]."""
    return TreeSpec(
        root_maximizing=True,
        internal_count=3,
        leaf_values=[3, 5, 2, 9],
        children={2: [5, 6], 1: [3, 4], 0: [1, 2]},
    )


@pytest.fixture
def pruning_tree(pruning_spec):
    return build_tree(pruning_spec)


@pytest.fixture
def shared_leaf_tree():
    """Leaf 3 (value 7) is a child of both internal nodes 1 and 2."""
    spec = TreeSpec(
        internal_count=3,
        leaf_values=[7, 1, 4],
        children={2: [3, 5], 1: [3, 4], 0: [1, 2]},
    )
    return build_tree(spec)

