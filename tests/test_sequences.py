from funckit import (
    Function, Predicate, Comparator,
    map_with, filter_by, flat_map, compact_map, reduce_with,
    sorted_by, sort_by, map_optional,
)


def test_map_with_function():
    assert map_with(Function(lambda x: x + 1), [1, 2, 3]) == [2, 3, 4]


def test_builtin_map_accepts_function():
    assert list(map(Function(str), [1, 2])) == ["1", "2"]


def test_filter_by_predicate():
    assert filter_by(Predicate.is_greater_than(1), [0, 1, 2, 3]) == [2, 3]


def test_flat_map():
    repeat = Function(lambda x: [x] * x)
    assert flat_map(repeat, [1, 2, 3]) == [1, 2, 2, 3, 3, 3]


def test_compact_map_drops_none():
    parse = Function(lambda s: int(s) if s.isdigit() else None)
    assert compact_map(parse, ["1", "x", "3", ""]) == [1, 3]


def test_reduce_with_tuple_reducer():
    add = Function(lambda pair: pair[0] + pair[1])
    assert reduce_with(0, add, [1, 2, 3, 4]) == 10
    assert reduce_with("", Function(lambda pair: pair[0] + pair[1]), "abc") == "abc"


def test_sorted_by_returns_new_list():
    numbers = [3, 1, 2]
    assert sorted_by(numbers, Comparator.reverse_order()) == [3, 2, 1]
    assert numbers == [3, 1, 2]


def test_sort_by_in_place_is_stable():
    words = ["bb", "a", "cc", "d"]
    sort_by(words, Comparator.comparing(len))
    assert words == ["a", "d", "bb", "cc"]


def test_sort_by_accepts_plain_comparison():
    numbers = [2, 3, 1]
    sort_by(numbers, lambda lhs, rhs: Comparator.natural_order().compare(rhs, lhs))
    assert numbers == [3, 2, 1]


def test_map_optional():
    assert map_optional(None, Function(lambda x: x + 1)) is None
    assert map_optional(1, Function(lambda x: x + 1)) == 2
    assert map_optional(1, Function(lambda x: None)) is None
