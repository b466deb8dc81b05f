"""Tests for the SentinelArray container."""

import pytest

from sentinel_array import ABSENT, AbsentValueError, SentinelArray, SequenceConfig
from sentinel_array.core.sequence import scan_length


class TestScanLength:
    """Sentinel-driven length derivation over raw mappings."""

    def test_counts_contiguous_prefix(self):
        assert scan_length({1: "a", 2: "b", 3: "c"}) == 3

    def test_empty_mapping(self):
        assert scan_length({}) == 0

    def test_hole_truncates(self):
        # slot 3 is missing, so 4 and 5 are not part of the sequence
        assert scan_length({1: "a", 2: "b", 4: "d", 5: "e"}) == 2

    def test_none_value_counts_as_absent(self):
        assert scan_length({1: "a", 2: None, 3: "c"}) == 1

    def test_zero_base(self):
        assert scan_length({0: "a", 1: "b"}, base=0) == 2
        assert scan_length({0: "a", 1: "b"}) == 1


class TestSentinelArray:
    """Python protocol surface of the container."""

    def test_iterable_constructor(self, abc_sequence):
        assert len(abc_sequence) == 3
        assert abc_sequence.to_list() == ["a", "b", "c"]

    def test_one_based_indexing(self, abc_sequence):
        assert abc_sequence[1] == "a"
        assert abc_sequence[3] == "c"

    def test_getitem_outside_live_range(self, abc_sequence):
        with pytest.raises(IndexError, match="outside live range"):
            abc_sequence[0]
        with pytest.raises(IndexError):
            abc_sequence[4]

    def test_get_returns_absent_past_end(self, abc_sequence):
        assert abc_sequence.get(4) is ABSENT
        assert abc_sequence.get(2) == "b"

    def test_rejects_none_elements(self):
        with pytest.raises(AbsentValueError, match="absence sentinel"):
            SentinelArray([1, None, 3])

    def test_falsy_values_are_elements(self):
        seq = SentinelArray([0, False, "", []])
        assert len(seq) == 4

    def test_equality(self, abc_sequence):
        assert abc_sequence == ["a", "b", "c"]
        assert abc_sequence == ("a", "b", "c")
        assert abc_sequence == SentinelArray("abc")
        assert abc_sequence != ["a", "b"]

    def test_equality_respects_base(self):
        zero = SentinelArray("abc", config=SequenceConfig(base=0))
        assert zero != SentinelArray("abc")

    def test_to_dict_uses_live_indices(self, abc_sequence):
        assert abc_sequence.to_dict() == {1: "a", 2: "b", 3: "c"}

    def test_zero_based_config(self):
        seq = SentinelArray("xy", config=SequenceConfig(base=0))
        assert seq.to_dict() == {0: "x", 1: "y"}
        assert list(seq.indices()) == [0, 1]
        assert seq.last_index == 1

    def test_empty_last_index(self):
        seq = SentinelArray()
        assert seq.last_index == 0
        assert not seq.contains_index(1)

    def test_copy_is_independent(self, abc_sequence):
        clone = abc_sequence.copy()
        assert clone == abc_sequence
        assert clone is not abc_sequence
        clone.push("d")
        assert len(abc_sequence) == 3

    def test_from_mapping_keeps_prefix_only(self):
        seq = SentinelArray.from_mapping({1: 10, 2: 20, 4: 40})
        assert seq.to_list() == [10, 20]
        assert seq.get(4) is ABSENT

    def test_repr(self):
        assert repr(SentinelArray([1, 2])) == "SentinelArray([1, 2], base=1)"


class TestStructuralMutators:
    """Shift primitives the operations delegate to."""

    def test_push_rejects_absent(self, abc_sequence):
        with pytest.raises(AbsentValueError):
            abc_sequence.push(None)
        assert len(abc_sequence) == 3

    def test_insert_at_shifts_up(self, abc_sequence):
        abc_sequence.insert_at(2, "z")
        assert abc_sequence.to_dict() == {1: "a", 2: "z", 3: "b", 4: "c"}
        assert abc_sequence.get(5) is ABSENT

    def test_remove_at_closes_gap(self, abc_sequence):
        assert abc_sequence.remove_at(1) == "a"
        assert abc_sequence.to_dict() == {1: "b", 2: "c"}
        assert abc_sequence.get(3) is ABSENT

    @pytest.mark.parametrize("index", [0, 4])
    def test_non_live_index_raises(self, abc_sequence, index):
        with pytest.raises(IndexError, match="outside live range"):
            abc_sequence.insert_at(index, "z")
        with pytest.raises(IndexError):
            abc_sequence.remove_at(index)
        assert abc_sequence == ["a", "b", "c"]
