import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoset.linked_list import (
    ListNode,
    detect_cycle,
    from_values,
    get_intersection_node,
    has_cycle,
    is_palindrome_list,
    middle_node,
    remove_nth_from_end,
    reverse_list,
    rotate_right,
    to_values,
)

int_lists = st.lists(st.integers(), max_size=30)
nonempty_int_lists = st.lists(st.integers(), min_size=1, max_size=30)


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def _with_cycle(values, pos):
    head = from_values(values)
    nodes = _nodes(head)
    nodes[-1].next = nodes[pos]
    return head, nodes[pos]


@given(int_lists)
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_values_give_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_iter_yields_values():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert list(head) == [1, 2, 3]


def test_nodes_compare_by_identity():
    first, second = ListNode(1), ListNode(1)
    assert (first == second) is False
    assert (first == first) is True
    assert len({first, second}) == 2


@given(int_lists)
def test_acyclic_has_no_cycle(values):
    head = from_values(values)
    assert has_cycle(head) is False
    assert detect_cycle(head) is None


@given(nonempty_int_lists, st.data())
def test_cycle_found(values, data):
    pos = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    head, entry = _with_cycle(values, pos)
    assert has_cycle(head) is True
    assert detect_cycle(head) is entry


def test_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True
    assert detect_cycle(node) is node


@given(int_lists, int_lists, nonempty_int_lists)
def test_intersection_found(a_values, b_values, shared_values):
    shared = from_values(shared_values)
    head_a = from_values(a_values)
    head_b = from_values(b_values)
    if head_a is None:
        head_a = shared
    else:
        _nodes(head_a)[-1].next = shared
    if head_b is None:
        head_b = shared
    else:
        _nodes(head_b)[-1].next = shared
    assert get_intersection_node(head_a, head_b) is shared


def test_no_intersection_with_equal_values():
    assert get_intersection_node(from_values([1, 2, 3]), from_values([1, 2, 3])) is None
    assert get_intersection_node(None, from_values([1])) is None


def test_remove_nth_from_end_middle():
    assert to_values(remove_nth_from_end(from_values([1, 2, 3, 4, 5]), 2)) == [1, 2, 3, 5]


def test_remove_only_node():
    assert remove_nth_from_end(from_values([1]), 1) is None


def test_remove_head_when_n_is_length_or_more():
    assert to_values(remove_nth_from_end(from_values([7, 8]), 2)) == [8]
    assert to_values(remove_nth_from_end(from_values([7, 8]), 9)) == [8]


@given(nonempty_int_lists, st.data())
def test_remove_shortens_by_one(values, data):
    n = data.draw(st.integers(min_value=1, max_value=len(values)))
    result = to_values(remove_nth_from_end(from_values(values), n))
    assert len(result) == len(values) - 1
    assert result == values[: len(values) - n] + values[len(values) - n + 1 :]


def test_remove_errors():
    with pytest.raises(ValueError):
        remove_nth_from_end(None, 1)
    with pytest.raises(ValueError):
        remove_nth_from_end(from_values([1, 2]), 0)


@given(int_lists)
def test_reverse(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


@given(int_lists)
def test_reverse_twice_is_identity(values):
    assert to_values(reverse_list(reverse_list(from_values(values)))) == values


@given(int_lists)
def test_mirrored_list_is_palindrome(values):
    assert is_palindrome_list(from_values(values + values[::-1])) is True
    assert is_palindrome_list(from_values(values + [0] + values[::-1])) is True


def test_not_palindrome():
    assert is_palindrome_list(from_values([1, 2])) is False
    assert is_palindrome_list(None) is True


def test_rotate_right_example():
    assert to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 2)) == [4, 5, 1, 2, 3]


@given(nonempty_int_lists, st.integers(min_value=0, max_value=100))
def test_rotate_back_restores(values, k):
    n = len(values)
    rotated = rotate_right(from_values(values), k)
    restored = rotate_right(rotated, n - k % n)
    assert to_values(restored) == values


@given(nonempty_int_lists)
def test_rotate_by_length_is_identity(values):
    assert to_values(rotate_right(from_values(values), len(values))) == values


def test_rotate_negative_and_empty():
    assert to_values(rotate_right(from_values([1, 2, 3]), -1)) == [1, 2, 3]
    assert rotate_right(None, 3) is None


def test_middle_odd_and_even():
    assert middle_node(from_values([1, 2, 3, 4, 5])).val == 3
    assert middle_node(from_values([1, 2, 3, 4, 5, 6])).val == 4


@given(nonempty_int_lists)
def test_middle_splits_list(values):
    tail = to_values(middle_node(from_values(values)))
    assert len(tail) == len(values) - len(values) // 2
    assert tail == values[len(values) - len(tail) :]


def test_middle_of_empty_raises():
    with pytest.raises(ValueError):
        middle_node(None)