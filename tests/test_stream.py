from kungfu import Nothing

from seqkit import HashMap, Stream, Vector


def counting_from(start, counter):
    """Infinite stream start, start+1, ... counting each forced step."""
    return Stream.iterate(start, lambda i: counter.bump(i + 1))


class TestConstruction:
    def test_empty_is_singleton(self):
        assert Stream.empty() is Stream.empty()
        assert Stream.empty().is_empty()

    def test_cons_does_not_force_tail(self, counter):
        s = Stream.cons(1, lambda: counter.bump(Stream.of(2, 3)))
        assert counter.calls == 0
        assert s.head().unwrap() == 1
        assert s.to_list() == [1, 2, 3]
        assert counter.calls == 1

    def test_of_and_of_iterable(self):
        assert Stream.of(1, 2, 3).to_list() == [1, 2, 3]
        assert Stream.of_iterable(range(4)).to_list() == [0, 1, 2, 3]
        assert Stream.of_iterable([]).is_empty()

    def test_of_iterable_pulls_on_demand(self, counter):
        def source():
            for i in range(100):
                counter.bump(i)
                yield i

        s = Stream.of_iterable(source())
        assert counter.calls == 1
        assert s.take(3).to_list() == [0, 1, 2]
        assert counter.calls == 3
        # memoized: a second traversal pulls nothing new
        assert s.take(3).to_list() == [0, 1, 2]
        assert counter.calls == 3

    def test_continually(self):
        values = iter("abc")
        assert Stream.continually(lambda: next(values)).take(3).to_list() == ["a", "b", "c"]


class TestInfiniteStreams:
    def test_take_on_counting_stream(self):
        assert Stream.iterate(0, lambda i: i + 1).take(5).to_list() == [0, 1, 2, 3, 4]

    def test_take_forcing_is_bounded(self, counter):
        taken = counting_from(0, counter).take(3)
        assert taken.to_list() == [0, 1, 2]
        assert counter.calls <= 3

    def test_map_filter_stay_lazy(self, counter):
        evens = counting_from(0, counter).map(lambda i: i * 10).filter(lambda i: i % 20 == 0)
        assert evens.take(3).to_list() == [0, 20, 40]
        assert counter.calls <= 5

    def test_drop_forces_only_prefix(self, counter):
        s = counting_from(0, counter).drop(10)
        assert s.head().unwrap() == 10
        assert counter.calls == 10

    def test_zip_forces_in_lockstep(self, counter):
        other = Counter2()
        zipped = counting_from(0, counter).zip(Stream.iterate("a", other.next_letter))
        assert zipped.take(3).to_list() == [(0, "a"), (1, "b"), (2, "c")]
        assert counter.calls <= 2
        assert other.calls <= 2

    def test_zip_stops_at_shorter(self):
        assert Stream.of(1, 2, 3).zip(["x", "y"]).to_list() == [(1, "x"), (2, "y")]

    def test_take_while_drop_while(self):
        naturals = Stream.iterate(1, lambda i: i + 1)
        assert naturals.take_while(lambda i: i < 4).to_list() == [1, 2, 3]
        assert naturals.drop_while(lambda i: i < 4).head().unwrap() == 4

    def test_flat_map(self):
        s = Stream.iterate(1, lambda i: i + 1).flat_map(lambda i: [i] * i)
        assert s.take(6).to_list() == [1, 2, 2, 3, 3, 3]

    def test_cycle(self):
        assert Stream.of(1, 2).cycle().take(5).to_list() == [1, 2, 1, 2, 1]

    def test_append_all_is_lazy(self, counter):
        s = Stream.of(1).append_all(counter.bump([2, 3]) for _ in range(1))
        assert counter.calls == 0
        assert s.head().unwrap() == 1
        assert s.to_list() == [1, [2, 3]]

    def test_str_shows_realised_prefix_only(self):
        s = Stream.iterate(0, lambda i: i + 1)
        assert str(s) == "Stream(0, ?)"
        s.take(3).to_list()
        assert str(s) == "Stream(0, 1, 2, ?)"
        assert str(Stream.of("a", "b")) == "Stream('a', 'b')"


class TestFiniteOperations:
    def test_queries(self):
        s = Stream.of(3, 1, 2)
        assert s.length() == 3
        assert s.last().unwrap() == 2
        assert s.contains(1)
        assert not s.contains(9)
        assert s.find(lambda x: x < 3).unwrap() == 1
        assert isinstance(s.find(lambda x: x > 3), Nothing)
        assert s.any_match(lambda x: x == 2)
        assert s.all_match(lambda x: x > 0)

    def test_head_tail_on_empty(self):
        assert isinstance(Stream.empty().head(), Nothing)
        assert isinstance(Stream.empty().tail(), Nothing)
        assert isinstance(Stream.empty().last(), Nothing)

    def test_single(self, counter):
        assert Stream.of(1).single().unwrap() == 1
        assert isinstance(Stream.of(1, 2).single(), Nothing)
        assert isinstance(Stream.empty().single(), Nothing)
        assert isinstance(counting_from(0, counter).single(), Nothing)
        assert counter.calls == 1

    def test_group_by(self):
        groups = Stream.of(1, 2, 3, 4).group_by(lambda x: x % 2)
        assert groups == HashMap.empty().put(1, Stream.of(1, 3)).put(0, Stream.of(2, 4))

    def test_sort_by_is_stable(self):
        pairs = Stream.of(("b", 1), ("a", 2), ("b", 0), ("a", 1))
        ordered = pairs.sort_by(lambda x, y: (x[0] > y[0]) - (x[0] < y[0]))
        assert ordered.to_list() == [("a", 2), ("a", 1), ("b", 1), ("b", 0)]

    def test_reverse_prepend_append(self):
        assert Stream.of(1, 2).reverse().to_list() == [2, 1]
        assert Stream.of(2).prepend(1).append(3).to_list() == [1, 2, 3]

    def test_fold_left(self):
        assert Stream.of(1, 2, 3).fold_left("", lambda acc, x: acc + str(x)) == "123"

    def test_to_vector(self):
        assert Stream.of(1, 2).to_vector() == Vector.of(1, 2)


class TestStreamValue:
    def test_structural_equality(self):
        assert Stream.of(1, 2) == Stream.of_iterable([1, 2])
        assert Stream.of(1, 2) != Stream.of(1, 2, 3)
        assert Stream.of(1, 2) != Vector.of(1, 2)
        assert not Stream.of(1).equals(None)

    def test_hash_matches_equality(self):
        assert hash(Stream.of(1, 2)) == hash(Stream.of_iterable(range(1, 3)))

    def test_usable_as_dict_key(self):
        index = {Stream.of("a"): 1}
        assert index[Stream.of_iterable("a")] == 1


class Counter2:
    def __init__(self) -> None:
        self.calls = 0

    def next_letter(self, letter: str) -> str:
        self.calls += 1
        return chr(ord(letter) + 1)
