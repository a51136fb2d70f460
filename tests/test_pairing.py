"""Tests for create_pair() and create_pairs()."""

import pytest

from dropcount import Observer, TrackedHandle, create_pair, create_pairs


def counts(observers):
    return [o.count() for o in observers]


class TestCreatePair:
    def test_types(self):
        handle, observer = create_pair()
        assert isinstance(handle, TrackedHandle)
        assert isinstance(observer, Observer)

    def test_pairs_are_independent(self):
        h1, o1 = create_pair()
        h2, o2 = create_pair()
        del h1
        assert o1.count() == 1
        assert o2.count() == 0


class TestCreatePairs:
    def test_lengths(self):
        handles, observers = create_pairs(5)
        assert len(handles) == 5
        assert len(observers) == 5
        assert isinstance(handles, list)
        assert isinstance(observers, list)

    def test_all_start_at_zero(self):
        handles, observers = create_pairs(5)
        assert counts(observers) == [0] * 5
        assert [h.count() for h in handles] == [0] * 5

    def test_zero(self):
        handles, observers = create_pairs(0)
        assert handles == []
        assert observers == []

    def test_drop_all(self):
        handles, observers = create_pairs(5)
        del handles
        assert counts(observers) == [1] * 5

    def test_index_alignment(self):
        handles, observers = create_pairs(5)
        for i in range(5):
            handles[i] = None
            assert observers[i].count() == 1
            assert counts(observers[i + 1:]) == [0] * (4 - i)

    def test_subrange_with_clones(self):
        handles, observers = create_pairs(5)
        before = observers[4].clone()
        del handles[1:3]
        after = observers[4].clone()
        assert counts(observers) == [0, 1, 1, 0, 0]
        assert before.count() == 0
        assert after.count() == 0

    def test_accepts_index_types(self):
        class Count:
            def __index__(self):
                return 3

        handles, observers = create_pairs(Count())
        assert len(handles) == 3
        assert len(observers) == 3

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            create_pairs(-1)

    @pytest.mark.parametrize("bad", ["3", 2.0, None, True])
    def test_non_int_rejected(self, bad):
        with pytest.raises(TypeError):
            create_pairs(bad)
