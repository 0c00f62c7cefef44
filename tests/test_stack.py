import pytest
from hypothesis import given, strategies as st

from ftkit.stack import Stack, StackNode


def is_equal(a, b):
    return a == b


def build(*contents):
    stack = Stack()
    for content in contents:
        stack.push(StackNode(content))
    return stack


def bottom_up(stack):
    out = []
    node = stack.bottom
    while node is not None:
        out.append(node.content)
        node = node.next
    return out


def test_source_scenario():
    nbrs = list(range(16))
    stack = Stack()
    stack2 = Stack()
    stack.push(StackNode(nbrs[3]))
    stack.push(StackNode(nbrs[2]))
    stack.push(StackNode(nbrs[2]))
    assert stack.push_unique(StackNode(nbrs[3]), is_equal) is False
    stack.push(StackNode(nbrs[2]))
    stack.push(StackNode(nbrs[3]))
    stack.push(StackNode(nbrs[3]))
    stack.push(StackNode(nbrs[9]))
    assert stack.push_unique(StackNode(nbrs[3]), is_equal) is False
    assert stack.push_unique(StackNode(nbrs[9]), is_equal) is False
    assert list(stack) == [9, 3, 3, 2, 2, 2, 3]

    assert stack.includes(nbrs[8], is_equal) is False
    assert stack.includes(nbrs[2], is_equal) is True

    for _ in range(3):
        assert stack.transfer_top(stack2) is True
    assert list(stack2) == [3, 3, 9]
    assert list(stack) == [2, 2, 2, 3]

    for _ in range(3):
        stack.push(stack2.pop())
    assert list(stack) == [9, 3, 3, 2, 2, 2, 3]
    assert len(stack2) == 0

    deleted = []
    stack.destroy(deleted.append)
    stack2.destroy(deleted.append)
    assert deleted == [9, 3, 3, 2, 2, 2, 3]
    assert len(stack) == 0
    assert stack.top is None and stack.bottom is None


def test_push_unique_accepts_new_content():
    stack = build(1, 2)
    assert stack.push_unique(StackNode(5), is_equal) is True
    assert list(stack) == [5, 2, 1]


def test_pop_returns_top_and_clears_links():
    stack = build("a", "b")
    node = stack.pop()
    assert node.content == "b"
    assert node.next is None and node.prev is None
    assert list(stack) == ["a"]
    assert stack.top.next is None


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_push_none_raises():
    with pytest.raises(TypeError):
        Stack().push(None)


def test_swap_first_node():
    stack = build(1, 2, 3)
    assert stack.swap_first_node() is True
    assert list(stack) == [2, 3, 1]
    assert len(stack) == 3


def test_swap_needs_two_nodes():
    stack = build(1)
    assert stack.swap_first_node() is False
    assert list(stack) == [1]


def test_rotate_moves_top_to_bottom():
    stack = build(1, 2, 3)
    assert stack.rotate(False) is True
    assert list(stack) == [2, 1, 3]
    assert bottom_up(stack) == [3, 1, 2]
    assert len(stack) == 3


def test_reverse_rotate_moves_bottom_to_top():
    stack = build(1, 2, 3)
    assert stack.rotate(True) is True
    assert list(stack) == [1, 3, 2]
    assert bottom_up(stack) == [2, 3, 1]


def test_rotate_needs_two_nodes():
    assert Stack().rotate(False) is False
    assert build(7).rotate(True) is False


def test_transfer_from_empty_stack():
    other = build(1)
    assert Stack().transfer_top(other) is False
    assert list(other) == [1]


def test_detach_middle_node():
    stack = build(1, 2, 3)
    middle = stack.top.prev
    assert stack.detach_node(middle) is middle
    assert list(stack) == [3, 1]
    assert bottom_up(stack) == [1, 3]
    assert len(stack) == 2


def test_detach_none_raises():
    with pytest.raises(TypeError):
        build(1).detach_node(None)


def test_includes_on_empty_stack():
    assert Stack().includes(1, is_equal) is False


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_includes_finds_every_position(size):
    stack = build(*range(size))
    assert all(stack.includes(value, is_equal) for value in range(size))
    assert stack.includes(size, is_equal) is False


def test_destroy_without_delete_empties():
    stack = build(1, 2)
    stack.destroy(None)
    assert len(stack) == 0
    assert list(stack) == []


@given(st.lists(st.integers()))
def test_iteration_is_reverse_of_push_order(values):
    stack = build(*values)
    assert list(stack) == values[::-1]
    assert bottom_up(stack) == values
    assert len(stack) == len(values)


@given(st.lists(st.integers(), min_size=2))
def test_rotate_round_trip(values):
    stack = build(*values)
    stack.rotate(False)
    stack.rotate(True)
    assert bottom_up(stack) == values


@given(st.lists(st.integers(), min_size=2))
def test_swap_twice_restores(values):
    stack = build(*values)
    stack.swap_first_node()
    stack.swap_first_node()
    assert bottom_up(stack) == values