# ================================================================================
# Tests for TreeBuilder, build_tree and TreeSpec loading
# ================================================================================

import json

import pytest

from gametree.config import SearchParameters
from gametree.errors import InvalidChildReference, InvalidTreeSpecification
from gametree.search import evaluate_tree
from gametree.tree.builder import TreeBuilder, TreeSpec, build_tree
from gametree.tree.node import Internal, Leaf


class TestBuildTree:
    def test_single_leaf_root(self):
        """I=0, L=1 is a legal tree whose root is the leaf itself."""
        tree = build_tree(TreeSpec(internal_count=0, leaf_values=[42]))
        assert isinstance(tree.root, Leaf)
        assert tree.root.value == 42

    @pytest.mark.parametrize("root_maximizing", [True, False])
    def test_single_leaf_evaluates_to_value(self, root_maximizing):
        spec = TreeSpec(
            root_maximizing=root_maximizing, internal_count=0, leaf_values=[42]
        )
        assert evaluate_tree(build_tree(spec)) == 42

    def test_children_are_linked_in_order(self, pruning_tree):
        n = pruning_tree.nodes
        assert isinstance(n[0], Internal)
        assert n[0].children == (n[1], n[2])
        assert n[1].children == (n[3], n[4])
        assert [leaf.value for leaf in n[2].children] == [2, 9]

    def test_shared_child(self, shared_leaf_tree):
        n = shared_leaf_tree.nodes
        assert n[1].children[0] is n[2].children[0]

    def test_dangling_reference_rejected(self):
        """Node 0 referencing index 5 when only 0..4 exist."""
        spec = TreeSpec(
            internal_count=2,
            leaf_values=[1, 2, 3],
            children={1: [2, 3], 0: [1, 5]},
        )
        with pytest.raises(InvalidChildReference) as exc_info:
            build_tree(spec)
        err = exc_info.value
        assert (err.node, err.slot, err.child) == (0, 1, 5)
        assert err.reason == InvalidChildReference.OUT_OF_RANGE

    def test_forward_reference_rejected(self):
        spec = TreeSpec(
            internal_count=2,
            leaf_values=[1, 2],
            children={1: [0, 2], 0: [1, 3]},
        )
        with pytest.raises(InvalidChildReference) as exc_info:
            build_tree(spec)
        assert exc_info.value.reason == InvalidChildReference.NOT_BUILT

    def test_self_reference_rejected(self):
        spec = TreeSpec(
            internal_count=1,
            leaf_values=[1],
            children={0: [1, 0]},
        )
        with pytest.raises(InvalidChildReference) as exc_info:
            build_tree(spec)
        assert exc_info.value.reason == InvalidChildReference.SELF_REFERENCE

    def test_zero_children_rejected(self):
        spec = TreeSpec(internal_count=1, leaf_values=[1], children={0: []})
        with pytest.raises(InvalidTreeSpecification):
            build_tree(spec)

    def test_too_many_nodes(self):
        spec = TreeSpec(internal_count=0, leaf_values=[1, 2, 3])
        with pytest.raises(InvalidTreeSpecification):
            build_tree(spec, max_nodes=2)

    def test_orphans_allowed(self):
        tree = build_tree(TreeSpec(internal_count=0, leaf_values=[5, 6, 7]))
        assert tree.root.value == 5
        assert tree.orphans() == [1, 2]


class TestTreeBuilder:
    def test_negative_counts(self):
        with pytest.raises(InvalidTreeSpecification):
            TreeBuilder(-1, 2)
        with pytest.raises(InvalidTreeSpecification):
            TreeBuilder(1, -2)

    def test_empty_tree(self):
        with pytest.raises(InvalidTreeSpecification):
            TreeBuilder(0, 0)

    def test_internal_nodes_without_leaves(self):
        """No child id could ever be valid, so the counts are rejected up front."""
        with pytest.raises(InvalidTreeSpecification) as exc_info:
            TreeBuilder(2, 0)
        assert "at least one leaf" in str(exc_info.value)

    def test_default_node_limit_matches_config(self):
        assert TreeBuilder(0, 1).size == 1
        with pytest.raises(InvalidTreeSpecification):
            TreeBuilder(SearchParameters().max_nodes, 1)

    def test_leaf_count_mismatch(self):
        builder = TreeBuilder(1, 2)
        with pytest.raises(InvalidTreeSpecification):
            builder.add_leaves([1])

    def test_check_child_is_scoped_to_one_slot(self):
        """A rejected slot leaves the builder usable for a retry."""
        builder = TreeBuilder(2, 2)
        builder.add_leaves([4, 8])
        assert builder.pending() == 1

        with pytest.raises(InvalidChildReference) as exc_info:
            builder.check_child(1, 0, 0)
        assert exc_info.value.slot == 0
        assert builder.check_child(1, 0, 2) is builder.nodes[2]

        builder.add_internal(1, [2, 3])
        assert builder.pending() == 0
        builder.add_internal(0, [1])
        assert builder.pending() is None

        tree = builder.finish(root_maximizing=False)
        # MIN root over a single MAX child of [4, 8]
        assert evaluate_tree(tree) == 8

    def test_internal_nodes_in_decreasing_order(self):
        builder = TreeBuilder(2, 1)
        builder.add_leaves([1])
        with pytest.raises(InvalidTreeSpecification):
            builder.add_internal(0, [2])

    def test_leaves_first(self):
        builder = TreeBuilder(1, 1)
        with pytest.raises(InvalidTreeSpecification):
            builder.add_internal(0, [1])

    def test_finish_incomplete(self):
        builder = TreeBuilder(1, 1)
        builder.add_leaves([1])
        with pytest.raises(InvalidTreeSpecification):
            builder.finish()


class TestTreeSpec:
    def test_missing_child_list(self):
        with pytest.raises(InvalidTreeSpecification):
            TreeSpec.from_dict(
                {"internal_count": 2, "leaf_values": [1], "children": {"1": [2]}}
            )

    def test_unknown_child_list(self):
        with pytest.raises(InvalidTreeSpecification):
            TreeSpec.from_dict(
                {"internal_count": 1, "leaf_values": [1], "children": {"0": [1], "3": [1]}}
            )

    def test_negative_internal_count(self):
        with pytest.raises(InvalidTreeSpecification):
            TreeSpec.from_dict({"internal_count": -1, "leaf_values": [1]})

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "tree.json"
        path.write_text(
            json.dumps(
                {
                    "root_maximizing": True,
                    "internal_count": 3,
                    "leaf_values": [3, 5, 2, 9],
                    "children": {"2": [5, 6], "1": [3, 4], "0": [1, 2]},
                }
            )
        )
        spec = TreeSpec.from_json_file(path)
        assert spec.leaf_count == 4
        assert spec.children[0] == [1, 2]
        assert evaluate_tree(build_tree(spec)) == 3

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "tree.json"
        path.write_text("{not json")
        with pytest.raises(InvalidTreeSpecification) as exc_info:
            TreeSpec.from_json_file(path)
        assert "not valid JSON" in str(exc_info.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TreeSpec.from_json_file(tmp_path / "missing.json")
