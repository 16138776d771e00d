import random
from collections import namedtuple

from seqkit import Stream, Vector, pluck, plucker, shuffle

Point = namedtuple("Point", "x y")


class TestPluck:
    def test_mapping_key(self):
        assert pluck(Vector.of({"a": 1}, {"a": 2}), "a") == Vector.of(1, 2)

    def test_sequence_index(self):
        assert Vector.of((1, 2), [3, 4]).pluck(1) == Vector.of(2, 4)

    def test_attribute(self):
        assert Stream.of(Point(1, 2), Point(3, 4)).pluck("y").to_list() == [2, 4]

    def test_plucker_is_a_selector(self):
        assert plucker("x")(Point(5, 6)) == 5


class TestShuffle:
    def test_is_permutation(self):
        items = list(range(20))
        result = shuffle(list(items), rng=random.Random(7))
        assert sorted(result) == items

    def test_reproducible_with_seed(self):
        first = Vector.of(*range(10)).shuffle(rng=random.Random(3))
        second = Vector.of(*range(10)).shuffle(rng=random.Random(3))
        assert first == second

    def test_empty_and_single(self):
        assert shuffle([]) == []
        assert shuffle([1]) == [1]

    def test_stream_shuffle(self):
        result = Stream.of(1, 2, 3).shuffle(rng=random.Random(0))
        assert sorted(result.to_list()) == [1, 2, 3]
