import pytest

from dailyalgos.linked_list import (
    ListNode,
    from_values,
    has_cycle,
    intersection_node,
    list_length,
    merge_two_lists,
    middle_node,
    remove_loop,
    reverse_list,
    to_values,
)


def _nodes(head):
    result = []
    while head is not None:
        result.append(head)
        head = head.next
    return result


def _with_loop(values, loop_to):
    head = from_values(values)
    nodes = _nodes(head)
    nodes[-1].next = nodes[loop_to]
    return head


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5], [5, 5, -1]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


def test_iteration_yields_values():
    values = [3, 7, 8, 10]
    assert list(from_values(values)) == values


def test_list_length():
    values = [1, 2, 3, 4]
    assert list_length(from_values(values)) == len(values)
    assert list_length(None) == 0


def test_node_construction_and_identity():
    tail = ListNode(9)
    node = ListNode(4, tail)
    assert node.val == 4
    assert node.next is tail
    assert tail.next is None
    assert (ListNode(1) == ListNode(1)) is False
    assert node == node


def test_has_cycle_source_example():
    assert has_cycle(_with_loop([1, 2, 3, 4, 5], 1)) is True


def test_has_cycle_without_cycle():
    assert has_cycle(from_values([1, 2, 3, 4, 5])) is False


def test_has_cycle_empty_and_single():
    assert has_cycle(None) is False
    assert has_cycle(ListNode(1)) is False


def test_has_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


def test_intersection_source_example():
    common = from_values([8, 10])
    head_a = ListNode(3, ListNode(7, common))
    head_b = ListNode(99, ListNode(1, common))
    result = intersection_node(head_a, head_b)
    assert result is common
    assert result.val == 8


def test_intersection_different_lengths():
    common = from_values([4, 5])
    head_a = ListNode(1, common)
    head_b = ListNode(9, ListNode(8, ListNode(7, common)))
    assert intersection_node(head_a, head_b) is common


def test_intersection_none():
    assert intersection_node(from_values([1, 2]), from_values([1, 2])) is None
    assert intersection_node(None, from_values([1])) is None


def test_reverse_list():
    values = [1, 2, 3, 4, 5]
    assert to_values(reverse_list(from_values(values))) == values[::-1]


def test_reverse_list_reuses_nodes():
    head = from_values([1, 2, 3])
    original = _nodes(head)
    reversed_head = reverse_list(head)
    assert _nodes(reversed_head) == original[::-1]


def test_reverse_empty():
    assert reverse_list(None) is None


def test_merge_source_example():
    a = [1, 2, 4]
    b = [1, 3, 4]
    merged = merge_two_lists(from_values(a), from_values(b))
    assert to_values(merged) == sorted(a + b)


def test_merge_tie_takes_second_list_first():
    first = from_values([1, 2])
    second = from_values([1, 3])
    merged = merge_two_lists(first, second)
    assert merged is second


def test_merge_splices_existing_nodes():
    first = from_values([2, 6, 9])
    second = from_values([1, 5, 10, 12])
    expected_ids = {id(n) for n in _nodes(first) + _nodes(second)}
    merged = merge_two_lists(first, second)
    assert {id(n) for n in _nodes(merged)} == expected_ids


def test_merge_with_empty():
    single = from_values([3, 4])
    assert merge_two_lists(None, single) is single
    assert merge_two_lists(single, None) is single
    assert merge_two_lists(None, None) is None


def test_remove_loop_loop_in_middle():
    values = [1, 2, 3, 4, 5]
    head = _with_loop(values, 2)
    assert remove_loop(head) is True
    assert to_values(head) == values


def test_remove_loop_loop_to_second():
    values = [1, 2, 3, 4]
    head = _with_loop(values, 1)
    assert remove_loop(head) is True
    assert has_cycle(head) is False
    assert to_values(head) == values


def test_remove_loop_loop_to_head():
    values = [1, 2, 3, 4]
    head = _with_loop(values, 0)
    assert remove_loop(head) is True
    assert to_values(head) == values


def test_remove_loop_self_loop():
    node = ListNode(7)
    node.next = node
    assert remove_loop(node) is True
    assert node.next is None


def test_remove_loop_without_loop():
    values = [1, 2, 3]
    head = from_values(values)
    assert remove_loop(head) is False
    assert to_values(head) == values
    assert remove_loop(None) is False


def test_middle_odd_length():
    head = from_values([1, 2, 3, 4, 5])
    nodes = _nodes(head)
    assert middle_node(head) is nodes[len(nodes) // 2]


def test_middle_even_length_takes_second():
    head = from_values([1, 2, 3, 4, 5, 6])
    nodes = _nodes(head)
    assert middle_node(head) is nodes[len(nodes) // 2]


def test_middle_empty():
    assert middle_node(None) is None