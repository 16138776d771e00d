import pytest
from kungfu import Nothing

from sample_data import MyClass
from seqkit import Collection, ContractViolationError, HashMap, HashSet, Seq, Stream, Vector


class TestCapabilities:
    @pytest.mark.parametrize("coll", [Vector.of(1), HashSet.of(1), Stream.of(1)])
    def test_collection_protocol(self, coll):
        assert isinstance(coll, Collection)

    @pytest.mark.parametrize("coll", [Vector.of(1), Stream.of(1)])
    def test_seq_protocol(self, coll):
        assert isinstance(coll, Seq)

    def test_hash_set_is_not_a_seq(self):
        assert not isinstance(HashSet.of(1), Seq)


class TestVector:
    def test_construction(self):
        assert Vector.of(1, 2).to_list() == [1, 2]
        assert Vector.of_iterable(range(3)) == Vector.of(0, 1, 2)
        assert Vector.empty().is_empty()
        assert len(Vector.of(1, 2, 3)) == 3

    def test_persistent_updates(self):
        base = Vector.of(2)
        assert base.append(3) == Vector.of(2, 3)
        assert base.prepend(1) == Vector.of(1, 2)
        assert base.append_all([3, 4]) == Vector.of(2, 3, 4)
        assert base == Vector.of(2)

    def test_get_head_last(self):
        v = Vector.of("a", "b")
        assert v.get(1).unwrap() == "b"
        assert isinstance(v.get(2), Nothing)
        assert isinstance(v.get(-1), Nothing)
        assert v.head().unwrap() == "a"
        assert v.last().unwrap() == "b"
        assert isinstance(Vector.empty().last(), Nothing)

    def test_single(self):
        assert Vector.of(1).single().unwrap() == 1
        assert isinstance(Vector.of(1, 2).single(), Nothing)
        assert isinstance(Vector.empty().single(), Nothing)

    def test_transformations(self):
        v = Vector.of(1, 2, 3, 4)
        assert v.filter(lambda x: x % 2 == 0) == Vector.of(2, 4)
        assert v.map(str) == Vector.of("1", "2", "3", "4")
        assert v.flat_map(lambda x: [x, x]).take(4) == Vector.of(1, 1, 2, 2)
        assert v.fold_left(0, lambda acc, x: acc + x) == 10
        assert v.take(2) == Vector.of(1, 2)
        assert v.drop(3) == Vector.of(4)
        assert v.take(-1).is_empty()
        assert v.reverse() == Vector.of(4, 3, 2, 1)

    def test_group_by(self):
        groups = Vector.of("apple", "avocado", "banana").group_by(lambda s: s[0])
        assert groups.get("a").unwrap() == Vector.of("apple", "avocado")
        assert groups.get("b").unwrap() == Vector.of("banana")

    def test_group_by_unhashable_key(self):
        with pytest.raises(ContractViolationError):
            Vector.of(1).group_by(lambda x: [x])

    def test_zip_with_infinite_stream(self):
        zipped = Vector.of("a", "b").zip(Stream.iterate(0, lambda i: i + 1))
        assert zipped == Vector.of(("a", 0), ("b", 1))

    def test_queries(self):
        v = Vector.of(MyClass("a", 1), None)
        assert v.contains(MyClass("a", 1))
        assert v.contains(None)
        assert v.any_match(lambda x: x is None)
        assert not v.all_match(lambda x: x is None)
        assert v.find(lambda x: x is not None).unwrap() == MyClass("a", 1)

    def test_to_stream(self):
        assert Vector.of(1, 2).to_stream() == Stream.of(1, 2)


class TestHashSet:
    def test_dedup_and_order(self):
        s = HashSet.of(3, 1, 3, 2)
        assert s.to_list() == [3, 1, 2]
        assert len(s) == 3

    def test_add_remove(self):
        s = HashSet.of(1)
        assert s.add(1) is s
        assert s.add(2) == HashSet.of(2, 1)
        assert s.remove(1).is_empty()
        assert s.remove(5) is s

    def test_unhashable_element(self):
        with pytest.raises(ContractViolationError):
            HashSet.of([1])
        with pytest.raises(ContractViolationError):
            HashSet.empty().add({})

    def test_unhashable_lookup(self):
        s = HashSet.of(1)
        with pytest.raises(ContractViolationError):
            s.contains([1])
        with pytest.raises(ContractViolationError):
            s.remove({})
        with pytest.raises(ContractViolationError):
            [1] in s

    def test_collection_operations(self):
        s = HashSet.of(1, 2, 3, 4)
        assert s.filter(lambda x: x > 2) == HashSet.of(3, 4)
        assert s.map(lambda x: x % 2) == HashSet.of(0, 1)
        assert s.fold_left(0, lambda acc, x: acc + x) == 10
        assert s.take(2) == HashSet.of(1, 2)
        assert s.drop(3) == HashSet.of(4)
        assert s.group_by(lambda x: x % 2).get(0).unwrap() == HashSet.of(2, 4)
        assert s.remove_all([1, 2]) == HashSet.of(3, 4)
        assert HashSet.of(1).is_subset_of(s)

    def test_equality_ignores_order(self):
        assert HashSet.of(1, 2) == HashSet.of(2, 1)
        assert hash(HashSet.of(1, 2)) == hash(HashSet.of(2, 1))


class TestHashMap:
    def test_put_overwrites(self):
        assert HashMap.empty().put(5, "test").put(5, "test1") == HashMap.empty().put(5, "test1")

    def test_put_custom_keys(self):
        m = (
            HashMap.empty()
            .put(MyClass("a", 1), "test")
            .put(MyClass("a", 1), "test1")
            .put(MyClass("a", 2), "test1")
        )
        expected = HashMap.empty().put(MyClass("a", 1), "test1").put(MyClass("a", 2), "test1")
        assert m == expected

    def test_put_with_merge(self):
        m = HashMap.empty().put(5, "test").put_with_merge(5, "a", lambda a, b: a + b)
        assert m == HashMap.empty().put(5, "testa")
        assert HashMap.empty().put_with_merge(1, "x", lambda a, b: a + b).get(1).unwrap() == "x"

    def test_equality(self):
        assert HashMap.empty() == HashMap.empty()
        assert HashMap.empty().put(1, "t") != HashMap.empty()
        assert HashMap.empty() != HashMap.empty().put(1, "t")

    def test_get(self):
        m = HashMap.empty().put("key1", 6)
        assert m.get("key1").unwrap() == 6
        assert isinstance(m.get("key2"), Nothing)

    def test_transformations(self):
        m = HashMap.of_mapping({"a": 1, "b": 2})
        assert m.map_values(lambda v: v * 10) == HashMap.of_mapping({"a": 10, "b": 20})
        assert m.filter(lambda k, v: v > 1) == HashMap.of_mapping({"b": 2})
        assert m.map(lambda k, v: (v, k)) == HashMap.of_mapping({1: "a", 2: "b"})
        assert m.any_match(lambda k, v: k == "b")
        assert m.all_match(lambda k, v: v > 0)
        assert m.keys() == Vector.of("a", "b")
        assert m.values() == Vector.of(1, 2)
        assert m.remove("a").to_dict() == {"b": 2}
        assert m.contains_key("a") and "a" in m
        assert m.fold_left(0, lambda acc, kv: acc + kv[1]) == 3

    def test_single(self):
        assert HashMap.of_mapping({"a": 1}).single().unwrap() == ("a", 1)
        assert isinstance(HashMap.empty().single(), Nothing)

    def test_unhashable_key(self):
        with pytest.raises(ContractViolationError):
            HashMap.empty().put([1], 1)

    @pytest.mark.parametrize("lookup", ["get", "contains_key", "remove"])
    def test_unhashable_lookup(self, lookup):
        m = HashMap.of_mapping({"a": 1})
        with pytest.raises(ContractViolationError) as info:
            getattr(m, lookup)([1])
        assert info.value.context == f"HashMap.{lookup}"
