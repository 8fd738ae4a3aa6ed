import pytest

from atspikit.role import Role
from atspikit.tree import SINGLE_LINE, A11yNode, CharSet

ASCII = CharSet(horizontal="-", vertical="|", connector="+", end_connector="`")


def _count(node):
    return 1 + sum(_count(child) for child in node.children)


def _sample():
    return A11yNode(
        Role.FRAME,
        [
            A11yNode(Role.PANEL, [A11yNode(Role.BUTTON)]),
            A11yNode(Role.LABEL),
        ],
    )


def test_single_node_renders_one_line():
    assert str(A11yNode(Role.FRAME)) == "── frame\n"


def test_missing_role_renders_as_error():
    assert A11yNode(None).render(SINGLE_LINE).endswith(" error\n")


def test_render_with_custom_style():
    expected = "-- frame\n+-- panel\n|   `-- button\n`-- label\n"
    assert _sample().render(ASCII) == expected


def test_str_uses_single_line_style():
    tree = _sample()
    assert str(tree) == tree.render(SINGLE_LINE)


def test_one_line_per_node():
    tree = _sample()
    assert len(tree.render(ASCII).splitlines()) == _count(tree)


def test_last_branch_indent_uses_spaces():
    tree = A11yNode(Role.FRAME, [A11yNode(Role.PANEL, [A11yNode(Role.BUTTON)])])
    lines = tree.render(ASCII).splitlines()
    assert lines[2].startswith("    " + ASCII.end_connector)
    assert lines[1].startswith(ASCII.end_connector)


def test_fold_depth_first_order():
    # Nodes in the order a depth-first walk records them; children are placeholders.
    nodes = [
        A11yNode(Role.FRAME, [A11yNode(Role.PANEL), A11yNode(Role.LABEL)]),
        A11yNode(Role.LABEL),
        A11yNode(Role.PANEL, [A11yNode(Role.BUTTON)]),
        A11yNode(Role.BUTTON),
    ]
    assert A11yNode.fold(nodes) == _sample()


def test_fold_does_not_modify_input():
    root = A11yNode(Role.FRAME, [A11yNode(None)])
    nodes = [root, A11yNode(Role.LABEL)]
    A11yNode.fold(nodes)
    assert root.children == [A11yNode(None)]


def test_fold_single_leaf():
    leaf = A11yNode(Role.WINDOW)
    assert A11yNode.fold([leaf]) == leaf


def test_fold_empty_raises():
    with pytest.raises(ValueError):
        A11yNode.fold([])