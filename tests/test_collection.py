from kungfu import Some

from lazylist import (
    EMPTY,
    map,
    of_list,
    sort,
    stable_sort,
    take,
    to_list,
    unfold,
    unique,
    unique_eq,
)


def test_unique_keeps_first_occurrence():
    assert to_list(unique(of_list([3, 1, 3, 2, 1]))) == [3, 1, 2]
    assert to_list(unique(EMPTY)) == []


def test_unique_with_comparator():
    words = of_list(["Apple", "apple", "Bob", "BOB", "cat"])

    def compare_folded(a, b):
        a, b = a.lower(), b.lower()
        return (a > b) - (a < b)

    assert to_list(unique(words, compare_folded)) == ["Apple", "Bob", "cat"]


def test_unique_is_lazy_on_infinite_lists():
    mod_three = unfold(0, lambda n: Some((n % 3, n + 1)))
    assert to_list(take(unique(mod_three), 3)) == [0, 1, 2]


def test_unique_uses_fresh_state_per_call():
    ll = of_list([1, 1, 2])
    assert to_list(unique(ll)) == [1, 2]
    assert to_list(unique(ll)) == [1, 2]


def test_unique_tests_each_element_once():
    calls = []

    def compare(a, b):
        calls.append((a, b))
        return (a > b) - (a < b)

    deduped = unique(of_list([2, 1, 2]), compare)
    assert to_list(deduped) == [2, 1]
    seen = len(calls)
    assert to_list(deduped) == [2, 1]
    assert len(calls) == seen


def test_unique_eq():
    pairs = of_list([(1, "a"), (2, "b"), (1, "c")])
    assert to_list(unique_eq(pairs, lambda x, y: x[0] == y[0])) == [(1, "a"), (2, "b")]
    assert to_list(unique_eq(of_list([[1], [1], [2]]))) == [[1], [2]]


def test_unique_eq_on_unhashable_unorderable_values():
    a, b = {"k": 1}, {"k": 1}
    assert to_list(unique_eq(of_list([a, b]))) == [a]


def test_sort():
    assert to_list(sort(of_list([3, 1, 2]))) == [1, 2, 3]
    assert to_list(sort(of_list([3, 1, 2]), lambda a, b: b - a)) == [3, 2, 1]
    assert to_list(sort(EMPTY)) == []


def test_stable_sort_keeps_order_of_equals():
    items = of_list([(1, "b"), (0, "x"), (1, "a"), (0, "y")])
    by_key = stable_sort(items, lambda p, q: p[0] - q[0])
    assert to_list(by_key) == [(0, "x"), (0, "y"), (1, "b"), (1, "a")]


def test_sort_materialises_input():
    calls = []
    ll = map(of_list([2, 1]), lambda x: calls.append(x) or x)
    sort(ll)
    assert calls == [2, 1]
