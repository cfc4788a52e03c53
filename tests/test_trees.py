from algocollection.trees import TreeNode, postorder


def _sample():
    return TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))


def test_postorder_of_sample_tree():
    assert postorder(_sample()) == [4, 5, 2, 3, 1]


def test_empty_tree():
    assert postorder(None) == []


def test_single_node():
    assert postorder(TreeNode("x")) == ["x"]


def test_root_comes_last_and_all_nodes_visited():
    result = postorder(_sample())
    assert result[-1] == 1
    assert sorted(result) == [1, 2, 3, 4, 5]


def test_left_only_chain_is_bottom_up():
    tree = TreeNode(3, TreeNode(2, TreeNode(1)))
    assert postorder(tree) == [1, 2, 3]