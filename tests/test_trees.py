import pytest

from contestkit.trees import max_ancestor_drop


def test_single_node_has_no_drop():
    assert max_ancestor_drop([7], [-1]) == 0


def test_decreasing_chain():
    assert max_ancestor_drop([5, 3, 1], [-1, 1, 2]) == 4


def test_increasing_chain_has_no_drop():
    assert max_ancestor_drop([1, 2, 3, 4], [-1, 1, 2, 3]) == 0


def test_drop_only_along_ancestry():
    # Node 3 is a sibling of node 2, so node 2's large value does not count for it.
    costs = [1, 100, 0]
    parents = [-1, 1, 1]
    result = max_ancestor_drop(costs, parents)
    assert result == costs[0] - costs[2]


def test_result_never_negative():
    costs = [3, 9, 4, 8, 2]
    parents = [-1, 1, 1, 2, 3]
    assert max_ancestor_drop(costs, parents) >= 0


def test_root_need_not_be_first():
    assert max_ancestor_drop([1, 10], [2, -1]) == 9


def test_missing_root_is_rejected():
    with pytest.raises(ValueError):
        max_ancestor_drop([1, 2], [2, 1])


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        max_ancestor_drop([1, 2], [-1])


def test_unknown_parent_is_rejected():
    with pytest.raises(ValueError):
        max_ancestor_drop([1, 2], [-1, 5])