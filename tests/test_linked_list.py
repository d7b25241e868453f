import pytest

from contestkit.linked_list import (
    Node,
    delete_last,
    display,
    from_iterable,
    front_back_split,
    has_cycle,
    is_palindrome,
    merge_sort,
    middle,
    pairwise_swap,
    sorted_merge,
    to_list,
)


def test_round_trip():
    values = [3, 1, 4, 1, 5]
    assert to_list(from_iterable(values)) == values


def test_empty_list_is_none():
    assert from_iterable([]) is None
    assert to_list(None) == []


def test_display_source_example():
    head = from_iterable([1, 2, 3, 4, 5, 4, 4])
    assert display(head) == "1 --> 2 --> 3 --> 4 --> 5 --> 4 --> 4 --> NULL"


def test_display_empty():
    assert display(None) == "NULL"


def test_delete_last_source_example():
    head = delete_last(from_iterable([1, 2, 3, 4, 5, 4, 4]), 4)
    assert to_list(head) == [1, 2, 3, 4, 5, 4]


def test_delete_last_head_only_occurrence():
    head = delete_last(from_iterable([7, 1, 2]), 7)
    assert to_list(head) == [1, 2]


def test_delete_last_missing_value_keeps_list():
    head = from_iterable([1, 2, 3])
    assert delete_last(head, 9) is head
    assert to_list(head) == [1, 2, 3]


def test_has_cycle_source_example():
    head = from_iterable([10, 15, 4, 20])
    head.next.next.next.next = head
    assert has_cycle(head) is True


def test_has_cycle_false_for_plain_list():
    assert has_cycle(from_iterable([10, 15, 4, 20])) is False
    assert has_cycle(None) is False


def test_is_palindrome_source_example():
    assert is_palindrome(from_iterable([1, 2, 3, 2, 1])) is True


def test_is_palindrome_false():
    assert is_palindrome(from_iterable([1, 2, 3])) is False


def test_front_back_split_odd_length_front_takes_extra():
    front, back = front_back_split(from_iterable([1, 2, 3, 4, 5]))
    assert to_list(front) == [1, 2, 3]
    assert to_list(back) == [4, 5]


def test_front_back_split_single_node():
    front, back = front_back_split(from_iterable([1]))
    assert to_list(front) == [1]
    assert back is None


def test_sorted_merge_source_example():
    merged = sorted_merge(from_iterable([5, 10, 15]), from_iterable([2, 3, 20]))
    assert to_list(merged) == [2, 3, 5, 10, 15, 20]


def test_sorted_merge_ties_take_first_list():
    a, b = Node(1), Node(1)
    merged = sorted_merge(a, b)
    assert merged is a
    assert merged.next is b


def test_sorted_merge_with_empty():
    b = from_iterable([1, 2])
    assert sorted_merge(None, b) is b


def test_merge_sort_source_example():
    head = merge_sort(from_iterable([2, 3, 20, 5, 10, 15]))
    assert to_list(head) == sorted([2, 3, 20, 5, 10, 15])


def test_merge_sort_keeps_nodes():
    head = from_iterable([4, 2, 9, 2, 7])
    original = {id(n) for n in [head, head.next, head.next.next]}
    result = merge_sort(head)
    ids = set()
    node = result
    while node is not None:
        ids.add(id(node))
        node = node.next
    assert original <= ids
    assert to_list(result) == sorted([4, 2, 9, 2, 7])


def test_middle_source_example():
    assert middle(from_iterable([1, 2, 3, 4, 5])).data == 3


def test_middle_even_length_takes_second():
    assert middle(from_iterable([1, 2, 3, 4])).data == 3


def test_middle_empty():
    assert middle(None) is None


def test_pairwise_swap_source_example():
    head = pairwise_swap(from_iterable([1, 2, 3, 4, 5]))
    assert to_list(head) == [2, 1, 4, 3, 5]


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5, 6]])
def test_pairwise_swap_twice_restores(values):
    head = from_iterable(values)
    assert to_list(pairwise_swap(pairwise_swap(head))) == values