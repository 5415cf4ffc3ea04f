import pytest

from algopractice.linked import (
    detect_cycle,
    get_intersection_node,
    remove_elements,
    remove_nth_from_end,
    reverse_list,
    swap_pairs,
)
from algopractice.nodes import ListNode, build_list, list_values


def _nodes(head):
    out = []
    while head is not None:
        out.append(head)
        head = head.next
    return out


def test_detect_cycle_finds_entry():
    node1, node2, node3, node4 = (ListNode(v) for v in (1, 2, 3, 4))
    node1.next = node2
    node2.next = node3
    node3.next = node4
    node4.next = node2
    assert detect_cycle(node1) is node2


def test_detect_cycle_self_loop_at_head():
    node = ListNode(7)
    node.next = node
    assert detect_cycle(node) is node


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_detect_cycle_acyclic(values):
    assert detect_cycle(build_list(values)) is None


def test_intersection_found():
    shared = build_list([4, 5, 6])
    head_a = build_list([1, 2, 3])
    _nodes(head_a)[-1].next = shared
    head_b = build_list([7, 4])
    _nodes(head_b)[-1].next = shared
    assert get_intersection_node(head_a, head_b) is shared
    assert get_intersection_node(head_b, head_a) is shared


def test_intersection_absent():
    head_a = build_list([1, 2, 3])
    head_b = build_list([1, 2, 3])
    assert get_intersection_node(head_a, head_b) is None


def test_intersection_same_head():
    head = build_list([1, 2])
    assert get_intersection_node(head, head) is head


def test_intersection_with_empty():
    assert get_intersection_node(None, build_list([1])) is None


def test_remove_elements_source_example():
    head = remove_elements(build_list([1, 2, 6, 3, 4, 5, 6]), 6)
    assert list_values(head) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "values, val",
    [([7, 7, 7], 7), ([], 1), ([1, 2, 3], 9), ([2, 1, 2, 1], 2)],
)
def test_remove_elements_invariants(values, val):
    result = list_values(remove_elements(build_list(values), val))
    assert val not in result
    assert len(result) == len(values) - values.count(val)
    remaining = iter(values)
    assert all(any(v == r for v in remaining) for r in result)


def test_remove_nth_from_end_source_example():
    head = remove_nth_from_end(build_list([1, 2, 3, 4, 5]), 2)
    assert list_values(head) == [1, 2, 3, 5]


@pytest.mark.parametrize("n", [1, 3, 5])
def test_remove_nth_from_end_drops_one(n):
    values = [10, 20, 30, 40, 50]
    result = list_values(remove_nth_from_end(build_list(values), n))
    assert len(result) == len(values) - 1
    assert values[len(values) - n] not in result


def test_remove_only_node():
    assert remove_nth_from_end(build_list([1]), 1) is None


@pytest.mark.parametrize("n", [0, -1, 4])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2, 3]), n)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5], [3, 3, 1]])
def test_reverse_list(values):
    head = build_list(values)
    originals = _nodes(head)
    reversed_head = reverse_list(head)
    assert list_values(reversed_head) == values[::-1]
    assert _nodes(reversed_head) == originals[::-1]


def test_reverse_twice_is_identity():
    values = [5, 1, 4, 2]
    assert list_values(reverse_list(reverse_list(build_list(values)))) == values


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4]])
def test_swap_pairs_twice_restores(values):
    once = swap_pairs(build_list(values))
    assert sorted(list_values(once)) == sorted(values)
    assert list_values(swap_pairs(once)) == values


def test_swap_pairs_odd_tail_stays():
    result = list_values(swap_pairs(build_list([1, 2, 3, 4, 5])))
    assert result[-1] == 5
    assert result[:2] == [2, 1]