import copy
import io

from kungfu import Nothing, Some

from lazylist import (
    EMPTY,
    CharStream,
    cursor,
    eager_of_list,
    map,
    of_array,
    of_char_stream,
    of_iterator,
    of_list,
    take,
    to_array,
    to_char_stream,
    to_iterator,
    to_list,
    unfold,
)


def test_round_trip():
    for items in [[], [1], [1, 2, 3], list("hello"), [None, None]]:
        assert to_list(of_list(items)) == items
        assert to_list(eager_of_list(items)) == items


def test_of_list_is_lazy_and_eager_of_list_is_not():
    ll = of_list([1, 2, 3])
    assert not ll.is_forced
    eager = eager_of_list([1, 2, 3])
    assert eager.is_forced
    assert eager.force().tail.is_forced


def test_arrays():
    assert to_array(of_array((1, 2, 3))) == (1, 2, 3)
    assert to_array(EMPTY) == ()
    assert of_array((1,)).is_forced


def test_of_iterator_pulls_on_demand():
    pulled = []

    def source():
        for i in range(5):
            pulled.append(i)
            yield i

    ll = of_iterator(source())
    assert pulled == []
    assert to_list(take(ll, 2)) == [0, 1]
    assert pulled == [0, 1]
    assert to_list(ll) == [0, 1, 2, 3, 4]
    assert to_list(ll) == [0, 1, 2, 3, 4]


def test_of_iterator_keeps_none_elements():
    assert to_list(of_iterator(iter([None, 0, None]))) == [None, 0, None]


def test_to_iterator():
    it = to_iterator(of_list([1, 2]))
    assert next(it) == 1
    assert list(it) == [2]


def test_cursor_walks_and_peeks():
    c = cursor(of_list([1, 2, 3]))
    assert c.has_next()
    assert c.peek().unwrap() == 1
    assert next(c) == 1
    assert list(c) == [2, 3]
    assert not c.has_next()
    assert isinstance(c.peek(), Nothing)


def test_cursor_clone_is_independent():
    c = cursor(of_list("abcd"))
    next(c)
    twin = c.clone()
    assert next(c) == "b"
    assert next(c) == "c"
    assert next(twin) == "b"
    assert list(twin) == ["c", "d"]
    assert next(c) == "d"
    assert copy.copy(c) is not c


def test_cursor_clone_shares_memoised_nodes():
    calls = []
    ll = map(of_list([1, 2, 3]), lambda x: calls.append(x) or x)
    c = cursor(ll)
    twin = c.clone()
    assert list(c) == [1, 2, 3]
    assert list(twin) == [1, 2, 3]
    assert calls == [1, 2, 3]


def test_cursor_count_does_not_move():
    c = cursor(of_list([1, 2, 3]))
    next(c)
    assert c.count() == 2
    assert next(c) == 2
    assert to_list(c.remaining) == [3]


def test_cursor_over_infinite_list():
    c = cursor(unfold(0, lambda n: Some((n, n + 1))))
    assert [next(c) for _ in range(3)] == [0, 1, 2]
    assert c.peek().unwrap() == 3


def test_of_char_stream_reads_one_char_per_force():
    stream = io.StringIO("hello")
    ll = of_char_stream(stream)
    assert stream.tell() == 0
    assert to_list(take(ll, 2)) == ["h", "e"]
    assert stream.read() == "llo"


def test_of_char_stream_full():
    assert "".join(of_char_stream(io.StringIO("abc"))) == "abc"
    assert to_list(of_char_stream(io.StringIO(""))) == []


def test_to_char_stream():
    stream = to_char_stream(of_list("ab\ncd"))
    assert isinstance(stream, CharStream)
    assert isinstance(stream, io.TextIOBase)
    assert stream.readable()
    assert stream.read(0) == ""
    assert stream.read(1) == "a"
    assert stream.readline() == "b\n"
    assert stream.read() == "cd"
    assert stream.read() == ""


def test_to_char_stream_forces_only_what_is_read():
    ll = of_list("xyz")
    stream = to_char_stream(ll)
    assert stream.read(1) == "x"
    assert ll.is_forced
    assert not ll.force().tail.is_forced


def test_char_stream_lines():
    stream = to_char_stream(of_list("one\ntwo\n"))
    assert list(stream) == ["one\n", "two\n"]
