from kungfu import Some

from lazylist import (
    EMPTY,
    DifferentListSizeError,
    EmptyListError,
    InvalidIndexError,
    LazyList,
    append,
    at,
    combine,
    concat,
    cons,
    drop,
    drop_while,
    eager_append,
    equal,
    eternity,
    exists2,
    flatten,
    fold_left2,
    fold_right2,
    for_all2,
    hd,
    iterate2,
    last,
    length,
    map,
    map2,
    of_list,
    range_inclusive,
    remove,
    remove_all,
    remove_if,
    rev,
    rev_append,
    rev_of_list,
    split_at,
    take,
    take_while,
    tl,
    to_list,
    uncombine,
    unfold,
    would_at_fail,
)

from pytest import raises


def failing():
    def boom():
        raise RuntimeError("lazy cell")
    return LazyList(boom)


def naturals():
    return unfold(0, lambda n: Some((n, n + 1)))


# Positional access

def test_length_and_ends():
    ll = of_list([4, 5, 6])
    assert length(ll) == 3
    assert length(EMPTY) == 0
    assert hd(ll) == 4
    assert last(ll) == 6
    assert to_list(tl(ll)) == [5, 6]
    with raises(EmptyListError):
        hd(EMPTY)
    with raises(EmptyListError):
        last(EMPTY)
    with raises(EmptyListError):
        tl(EMPTY)


def test_at():
    ll = of_list("abc")
    assert at(ll, 0) == "a"
    assert at(ll, 2) == "c"
    with raises(InvalidIndexError) as info:
        at(ll, 3)
    assert info.value.index == 3
    with raises(InvalidIndexError):
        at(ll, -1)
    assert at(naturals(), 1000) == 1000


def test_would_at_fail():
    ll = of_list([1, 2])
    assert not would_at_fail(ll, 0)
    assert not would_at_fail(ll, 1)
    assert would_at_fail(ll, 2)
    assert would_at_fail(ll, -1)
    assert not would_at_fail(naturals(), 50)


# Append & concat

def test_append():
    assert to_list(append(of_list([1, 2]), of_list([3, 4]))) == [1, 2, 3, 4]
    assert to_list(append(EMPTY, of_list([1]))) == [1]
    assert to_list(append(of_list([1]), EMPTY)) == [1]


def test_append_does_not_force_either_side_on_construction():
    append(failing(), EMPTY)
    assert hd(append(cons(()), failing())) == ()


def test_append_forces_second_only_after_first_is_exhausted():
    ll = append(of_list([1, 2]), failing())
    assert to_list(take(ll, 2)) == [1, 2]
    with raises(RuntimeError):
        to_list(ll)


def test_append_infinite_first():
    ll = append(naturals(), failing())
    assert to_list(take(ll, 3)) == [0, 1, 2]


def test_eager_append_shares_second_list():
    second = of_list([3])
    ll = eager_append(of_list([1, 2]), second)
    assert ll.is_forced
    assert not second.is_forced
    assert to_list(ll) == [1, 2, 3]


def test_concat():
    lists = of_list([of_list(x) for x in [[1, 2], [3], [4, 5], [], [6], [], []]])
    assert to_list(concat(lists)) == [1, 2, 3, 4, 5, 6]
    assert to_list(concat(EMPTY)) == []


def test_concat_forces_inner_lists_on_demand():
    concat(cons(failing(), EMPTY))
    ll = concat(of_list([of_list([1]), failing()]))
    assert hd(ll) == 1
    with raises(RuntimeError):
        to_list(ll)


def test_concat_of_infinite_outer_list():
    rows = map(naturals(), lambda n: of_list([n, n]))
    assert to_list(take(concat(rows), 5)) == [0, 0, 1, 1, 2]


def test_concat_skips_many_empty_inner_lists():
    lists = append(map(range_inclusive(1, 20_000), lambda _: EMPTY), of_list([of_list([7])]))
    assert to_list(concat(lists)) == [7]


def test_flatten():
    assert to_list(flatten([of_list([1]), EMPTY, of_list([2, 3])])) == [1, 2, 3]
    assert to_list(flatten([])) == []
    flatten([of_list([1]), failing()])


# Reverse

def test_rev():
    assert to_list(rev(of_list([1, 2, 3]))) == [3, 2, 1]
    assert to_list(rev(EMPTY)) == []
    assert to_list(rev_of_list([1, 2, 3])) == [3, 2, 1]
    assert to_list(rev_append(of_list([2, 1]), of_list([3]))) == [1, 2, 3]


# Take / drop / split

def test_take():
    assert to_list(take(range_inclusive(1, 5), 2)) == [1, 2]
    assert to_list(take(range_inclusive(1, 2), 5)) == [1, 2]
    assert to_list(take(range_inclusive(1, 5), 0)) == []
    take(failing(), 0).force()
    with raises(InvalidIndexError):
        take(EMPTY, -1)


def test_drop():
    assert to_list(drop(range_inclusive(1, 5), 2)) == [3, 4, 5]
    assert to_list(drop(range_inclusive(1, 5), 5)) == []
    with raises(InvalidIndexError) as info:
        drop(range_inclusive(1, 5), 10)
    assert info.value.index == 10
    with raises(InvalidIndexError):
        drop(EMPTY, -1)


def test_take_drop_complementarity():
    ll = of_list([1, 2, 3, 4, 5])
    for n in range(length(ll) + 1):
        assert to_list(take(ll, n)) + to_list(drop(ll, n)) == to_list(ll)


def test_split_at():
    prefix, rest = split_at(range_inclusive(1, 5), 2)
    assert to_list(prefix) == [1, 2]
    assert to_list(rest) == [3, 4, 5]


def test_split_at_remainder_independent_of_prefix():
    prefix, rest = split_at(range_inclusive(1, 5), 3)
    del prefix
    assert to_list(rest) == [4, 5]


def test_split_at_is_lazy_and_reports_short_lists_on_force():
    prefix, rest = split_at(range_inclusive(1, 2), 4)
    assert to_list(prefix) == [1, 2]
    with raises(InvalidIndexError):
        rest.force()
    with raises(InvalidIndexError):
        split_at(EMPTY, -2)
    split_at(failing(), 3)


def test_take_while_and_drop_while():
    assert to_list(take_while(naturals(), lambda x: x < 3)) == [0, 1, 2]
    assert to_list(drop_while(of_list([1, 2, 5, 1]), lambda x: x < 3)) == [5, 1]
    assert to_list(drop_while(of_list([1, 2]), lambda x: x < 3)) == []
    assert to_list(take_while(of_list([5, 1]), lambda x: x < 3)) == []


def test_remove():
    assert to_list(remove(of_list([1, 2, 1]), 1)) == [2, 1]
    assert to_list(remove(of_list([1, 2]), 3)) == [1, 2]
    assert to_list(remove_if(of_list([1, 2, 3]), lambda x: x > 1)) == [1, 3]
    assert to_list(remove_all(of_list([1, 2, 1, 3]), 1)) == [2, 3]


def test_remove_if_is_lazy():
    assert to_list(take(remove_if(naturals(), lambda x: x == 1), 3)) == [0, 2, 3]


# Two-list family

def test_map2():
    ll = map2(of_list([1, 2]), of_list([10, 20]), lambda a, b: a + b)
    assert to_list(ll) == [11, 22]


def test_map2_mismatch_detected_incrementally():
    ll = map2(of_list([1, 2, 3]), of_list([1]), lambda a, b: a + b)
    assert hd(ll) == 2
    with raises(DifferentListSizeError) as info:
        to_list(ll)
    assert info.value.operation == "map2"


def test_map2_mismatch_iff_lengths_differ():
    for n1 in range(4):
        for n2 in range(4):
            ll = map2(range_inclusive(1, n1), range_inclusive(1, n2), lambda a, b: (a, b))
            if n1 == n2:
                assert length(ll) == n1
            else:
                with raises(DifferentListSizeError):
                    length(ll)


def test_zip_family_against_unbounded_list():
    with raises(DifferentListSizeError):
        iterate2(of_list([1, 2]), naturals(), lambda a, b: None)
    with raises(DifferentListSizeError):
        fold_left2(naturals(), of_list([1]), lambda acc, a, b: acc, initial=0)


def test_iterate2_and_folds():
    pairs = []
    iterate2(of_list("ab"), of_list([1, 2]), lambda a, b: pairs.append((a, b)))
    assert pairs == [("a", 1), ("b", 2)]
    assert fold_left2(of_list([1, 2]), of_list([3, 4]), lambda acc, a, b: acc + a * b, initial=0) == 11
    assert fold_right2(of_list("ab"), of_list("xy"), lambda a, b, acc: a + b + acc, initial="") == "axby"


def test_fold_right2_mismatch_raises_before_any_call():
    calls = []
    with raises(DifferentListSizeError):
        fold_right2(of_list([1, 2]), of_list([1]), lambda a, b, acc: calls.append(a), initial=None)
    assert calls == []


def test_for_all2_and_exists2():
    assert for_all2(of_list([1, 2]), of_list([1, 2]), lambda a, b: a == b)
    assert not for_all2(of_list([1, 2]), of_list([0, 2]), lambda a, b: a == b)
    assert exists2(of_list([1, 2]), of_list([0, 2]), lambda a, b: a == b)
    assert not exists2(of_list([1]), of_list([0]), lambda a, b: a == b)
    with raises(DifferentListSizeError) as info:
        for_all2(of_list([1]), of_list([1, 2]), lambda a, b: True)
    assert info.value.operation == "for_all2"
    with raises(DifferentListSizeError):
        exists2(of_list([1]), EMPTY, lambda a, b: True)


def test_combine_and_uncombine():
    pairs = combine(of_list([1, 2]), of_list("ab"))
    assert to_list(pairs) == [(1, "a"), (2, "b")]
    with raises(DifferentListSizeError):
        to_list(combine(of_list([1]), EMPTY))
    left, right = uncombine(pairs)
    assert to_list(right) == ["a", "b"]
    assert to_list(left) == [1, 2]


def test_uncombine_shares_source():
    calls = []
    source = map(of_list([(1, "a"), (2, "b")]), lambda p: calls.append(p) or p)
    left, right = uncombine(source)
    assert to_list(left) == [1, 2]
    assert to_list(right) == ["a", "b"]
    assert len(calls) == 2


def test_equal():
    assert equal(range_inclusive(0, 2), range_inclusive(0, 2))
    assert not equal(range_inclusive(0, 2), range_inclusive(0, 3))
    assert not equal(range_inclusive(0, 3), range_inclusive(0, 2))
    assert not equal(of_list([1, 2]), of_list([1, 3]))
    nested = of_list([of_list([0, 1, 2])])
    assert equal(nested, of_list([of_list([0, 1, 2])]), equal)
    assert not equal(nested, of_list([of_list([0, 42, 2])]), equal)
    assert not equal(eternity(), EMPTY)
