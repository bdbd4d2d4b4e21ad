from family_tree.tree import NodeRegistry


def test_get_or_create_returns_same_node():
    reg = NodeRegistry()

    first = reg.get_or_create("A")
    again = reg.get_or_create("A")

    assert first is again
    assert len(reg) == 1
    assert "A" in reg
    assert reg.get("A") is first


def test_first_created_node_becomes_root():
    reg = NodeRegistry()
    assert reg.root is None

    a = reg.get_or_create("A")
    reg.get_or_create("B")

    assert reg.root is a


def test_add_child_does_not_touch_root():
    reg = NodeRegistry()
    child = reg.get_or_create("Child")
    parent = reg.get_or_create("Parent")

    reg.add_child(parent, child)

    assert reg.root is child
    assert child.parent is parent


def test_recompute_root_picks_earliest_parentless_node():
    reg = NodeRegistry()
    child = reg.get_or_create("Child")
    parent = reg.get_or_create("Parent")
    other = reg.get_or_create("Other")
    reg.add_child(parent, child)

    assert reg.recompute_root() is parent
    assert reg.root is parent
    assert reg.parentless() == [parent, other]


def test_iteration_follows_creation_order():
    reg = NodeRegistry()
    for name in ["C", "A", "B"]:
        reg.get_or_create(name)

    assert [n.name for n in reg] == ["C", "A", "B"]
