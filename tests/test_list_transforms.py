import pytest

from nodeworks.linked import LinkedList
from nodeworks.list_transforms import (
    add_numbers,
    max_twin_sum,
    remove_all_duplicated,
    remove_duplicates,
    remove_nodes_with_greater_right,
    rotate_right,
    segregate_even_odd,
    sort_list,
    split_into_parts,
    swap_pairs,
    union_and_intersection,
)


def node_ids(lst):
    ids = set()
    node = lst.head
    while node is not None:
        ids.add(id(node))
        node = node.next
    return ids


# rotate_right


def test_rotate_right_example():
    lst = LinkedList([1, 2, 3, 4, 5])
    rotate_right(lst, 2)
    assert list(lst) == [4, 5, 1, 2, 3]


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_rotate_then_complement_restores(k):
    values = [10, 20, 30, 40, 50]
    lst = LinkedList(values)
    rotate_right(lst, k)
    assert list(lst) != values
    rotate_right(lst, len(values) - k)
    assert list(lst) == values


@pytest.mark.parametrize("k", [3, 6])
def test_rotate_by_multiple_of_length_is_identity(k):
    lst = LinkedList([0, 1, 2])
    rotate_right(lst, k)
    assert list(lst) == [0, 1, 2]


def test_rotate_more_than_length_wraps():
    a = LinkedList([0, 1, 2])
    b = LinkedList([0, 1, 2])
    rotate_right(a, 4)
    rotate_right(b, 1)
    assert list(a) == list(b)
    assert list(a)[0] == 2


@pytest.mark.parametrize("k", [0, -2])
def test_rotate_non_positive_is_noop(k):
    lst = LinkedList([1, 2, 3])
    rotate_right(lst, k)
    assert list(lst) == [1, 2, 3]


def test_rotate_keeps_nodes():
    lst = LinkedList([1, 2, 3, 4])
    before = node_ids(lst)
    rotate_right(lst, 3)
    assert node_ids(lst) == before
    assert len(lst) == 4


# segregate_even_odd


def test_segregate_example():
    lst = LinkedList([6, 4, 2, 9, 8, 15, 17])
    segregate_even_odd(lst)
    assert list(lst) == [8, 2, 4, 6, 9, 15, 17]


def test_segregate_keeps_odd_order_and_values():
    values = [3, 4, 7, 10, 5, 12]
    lst = LinkedList(values)
    segregate_even_odd(lst)
    result = list(lst)
    assert sorted(result) == sorted(values)
    assert [v for v in result if v % 2] == [v for v in values if v % 2]
    assert all(v % 2 == 0 for v in result[:3])
    assert result[3] == values[0]


def test_segregate_empty():
    lst = LinkedList()
    segregate_even_odd(lst)
    assert list(lst) == []


# sort_list


@pytest.mark.parametrize(
    "values",
    [
        [4, 6, 5, 7, 1, 2, 3],
        [5, 3, 4, 2, 1, 9, 8, 7, 6, 10],
        [2, 2, 1, 1],
        [1],
        [],
    ],
)
def test_sort_list_sorts(values):
    lst = LinkedList(values)
    sort_list(lst)
    assert list(lst) == sorted(values)


def test_sort_list_keeps_nodes():
    lst = LinkedList([3, 1, 2])
    before = node_ids(lst)
    sort_list(lst)
    assert node_ids(lst) == before


# split_into_parts


def test_split_extra_nodes_go_to_last_part():
    values = list(range(10, 0, -1))
    parts = split_into_parts(LinkedList(values), 3)
    assert [len(p) for p in parts] == [3, 3, 4]
    assert [v for p in parts for v in p] == values


def test_split_more_parts_than_nodes():
    parts = split_into_parts(LinkedList([3, 2, 1]), 5)
    assert [list(p) for p in parts] == [[3], [2], [1], [], []]


def test_split_even_division():
    values = [1, 3, 1, 4, 1, 4, 3, 1]
    parts = split_into_parts(LinkedList(values), 4)
    assert len(parts) == 4
    assert all(len(p) == len(values) // 4 for p in parts)
    assert [v for p in parts for v in p] == values


def test_split_leaves_first_part_in_source():
    lst = LinkedList([2, 1, 1, 1, 1])
    parts = split_into_parts(lst, 2)
    assert list(lst) == list(parts[0])
    assert len(parts[1]) + len(parts[0]) == 5


def test_split_empty_list():
    parts = split_into_parts(LinkedList(), 2)
    assert [list(p) for p in parts] == [[], []]


def test_split_rejects_zero_parts():
    with pytest.raises(ValueError):
        split_into_parts(LinkedList([1, 2]), 0)


# add_numbers


def test_add_numbers_example():
    result = add_numbers(LinkedList([5, 3, 3, 4, 2]), LinkedList([4, 6, 5]))
    assert list(result) == [5, 3, 8, 0, 7]


@pytest.mark.parametrize(
    "a, b",
    [([1, 2, 3], [4, 5, 6]), ([9, 9], [1]), ([7], [8]), ([1, 0, 0, 0], [9, 9, 9])],
)
def test_add_numbers_matches_integer_sum_in_width(a, b):
    result = list(add_numbers(LinkedList(a), LinkedList(b)))
    width = max(len(a), len(b))
    number = lambda digits: int("".join(map(str, digits)))
    assert len(result) == width
    assert number(result) == (number(a) + number(b)) % 10**width


def test_add_numbers_is_commutative():
    a, b = [4, 0, 7], [9, 3]
    assert list(add_numbers(LinkedList(a), LinkedList(b))) == list(
        add_numbers(LinkedList(b), LinkedList(a))
    )


def test_add_numbers_discards_final_carry():
    assert list(add_numbers(LinkedList([9]), LinkedList([1]))) == [0]


def test_add_numbers_leaves_inputs_alone():
    first, second = LinkedList([1, 2]), LinkedList([3])
    add_numbers(first, second)
    assert list(first) == [1, 2]
    assert list(second) == [3]


def test_add_numbers_rejects_empty():
    with pytest.raises(ValueError):
        add_numbers(LinkedList(), LinkedList([1]))


# swap_pairs


@pytest.mark.parametrize("n", [3, 5, 6])
def test_swap_pairs_swaps_neighbours(n):
    values = list(range(1, n + 1))
    lst = LinkedList(values)
    swap_pairs(lst)
    result = list(lst)
    pairs = n // 2
    assert result[0 : 2 * pairs : 2] == values[1::2][:pairs]
    assert result[1 : 2 * pairs : 2] == values[0::2][:pairs]
    if n % 2:
        assert result[-1] == values[-1]


def test_swap_pairs_twice_restores():
    values = [1, 2, 3, 4, 5, 6]
    lst = LinkedList(values)
    swap_pairs(lst)
    swap_pairs(lst)
    assert list(lst) == values


def test_swap_pairs_single_node():
    lst = LinkedList([7])
    swap_pairs(lst)
    assert list(lst) == [7]


# union_and_intersection


def test_union_and_intersection_example():
    union, inter = union_and_intersection(
        LinkedList([20, 4, 15, 10]), LinkedList([10, 2, 4, 8])
    )
    assert (list(union), list(inter)) == ([8, 2, 15, 20, 10, 4], [10, 4])


def test_union_and_intersection_sets():
    a, b = [1, 5, 9, 3], [3, 7, 1]
    union, inter = union_and_intersection(LinkedList(a), LinkedList(b))
    assert set(union) == set(a) | set(b)
    assert set(inter) == set(a) & set(b)
    assert len(list(union)) == len(set(union))


def test_union_and_intersection_disjoint():
    a, b = [1, 2], [3, 4]
    first, second = LinkedList(a), LinkedList(b)
    union, inter = union_and_intersection(first, second)
    assert list(inter) == []
    assert sorted(union) == sorted(a + b)
    assert list(first) == a
    assert list(second) == b


# max_twin_sum


def test_max_twin_sum_example():
    assert max_twin_sum(LinkedList([3, 10, 11, 8, 3, 3, 7, 3])) == 17


def test_max_twin_sum_is_symmetric():
    values = [5, 4, 2, 1, 9, 0]
    assert max_twin_sum(LinkedList(values)) == max_twin_sum(LinkedList(values[::-1]))


@pytest.mark.parametrize("values", [[], [7]])
def test_max_twin_sum_short_list(values):
    assert max_twin_sum(LinkedList(values)) == -1


def test_max_twin_sum_odd_length_raises():
    with pytest.raises(ValueError):
        max_twin_sum(LinkedList([1, 2, 3]))


# remove_nodes_with_greater_right


def test_remove_nodes_example():
    lst = LinkedList([5, 2, 13, 3, 8])
    remove_nodes_with_greater_right(lst)
    assert list(lst) == [13, 8]


def test_remove_nodes_increasing_keeps_last():
    values = [1, 2, 3, 4, 5]
    lst = LinkedList(values)
    remove_nodes_with_greater_right(lst)
    assert list(lst) == values[-1:]


@pytest.mark.parametrize(
    "values", [[10, 9, 8, 7, 6, 5], [1, 1, 1, 1, 1, 1], [5, 5, 3]]
)
def test_remove_nodes_unchanged(values):
    lst = LinkedList(values)
    remove_nodes_with_greater_right(lst)
    assert list(lst) == values


def test_remove_nodes_result_shape():
    values = [4, 9, 2, 7, 7, 1, 6, 3]
    lst = LinkedList(values)
    remove_nodes_with_greater_right(lst)
    result = list(lst)
    assert result[-1] == values[-1]
    assert all(a > b for a, b in zip(result[1:], result[2:]))
    remaining = iter(values)
    assert all(v in remaining for v in result)


# remove_all_duplicated


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3, 3, 4, 4, 5],
        [1, 1, 1, 2, 3],
        [1, 2, 2, 2, 2, 2, 3, 4, 4, 5],
        [1, 1, 2, 2, 3],
        [1, 2, 3],
    ],
)
def test_remove_all_duplicated(values):
    lst = LinkedList(values)
    remove_all_duplicated(lst)
    assert list(lst) == [v for v in values if values.count(v) == 1]


def test_remove_all_duplicated_empties_uniform_list():
    lst = LinkedList([4, 4, 4, 4])
    remove_all_duplicated(lst)
    assert list(lst) == []
    assert lst.head is None


# remove_duplicates


def test_remove_duplicates_keeps_first_occurrences():
    values = [6, 5, 3, 3, 2, 1, 1, 2, 1, 1]
    lst = LinkedList(values)
    remove_duplicates(lst)
    assert list(lst) == list(dict.fromkeys(values))


def test_remove_duplicates_unique_list_unchanged():
    values = [3, 1, 2]
    lst = LinkedList(values)
    before = node_ids(lst)
    remove_duplicates(lst)
    assert list(lst) == values
    assert node_ids(lst) == before