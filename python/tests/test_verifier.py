"""
Tests for the correctness phase.
"""

import pytest

from sortbench._schema import LengthSpec
from sortbench.errors import MismatchError
from sortbench.sorters import REFERENCE, as_sorter
from sortbench.stream import RandomStream
from sortbench.verifier import first_difference, verify_length, verify_trial


class FixedStream:
    """Stand-in stream that always yields the same values."""

    def __init__(self, values):
        self.values = values
        self.calls = 0

    def draw(self, count):
        self.calls += 1
        assert count == len(self.values)
        return list(self.values)


def descending(values):
    values.sort(reverse=True)


def truncating(values):
    values.sort()
    del values[-1]


def sorted_in_place(values):
    values[:] = sorted(values)


class TestFirstDifference:
    """first_difference locates the first differing index."""

    def test_equal(self):
        """Equal buffers have no difference."""
        assert first_difference([1, 2], [1, 2]) is None

    def test_value_difference(self):
        """Differing values report index, expected and got."""
        mm = first_difference([1, 5, 3], [1, 2, 3])
        assert (mm.index, mm.expected, mm.got) == (1, 2, 5)

    def test_length_difference(self):
        """A shorter buffer differs at its end."""
        mm = first_difference([1, 2], [1, 2, 3])
        assert (mm.index, mm.expected, mm.got) == (2, 3, None)


class TestVerifyTrial:
    """One trial: same input to both sorters, outputs compared."""

    def test_descending_candidate_caught(self):
        """Descending sort of [3,1,4,1,5] mismatches at index 0."""
        stream = FixedStream([3, 1, 4, 1, 5])
        with pytest.raises(MismatchError) as exc:
            verify_trial(LengthSpec(5, 1), 0, as_sorter(descending), REFERENCE, stream)
        mm = exc.value.mismatch
        assert (mm.size, mm.trial, mm.index) == (5, 0, 0)
        assert (mm.expected, mm.got) == (1, 5)
        assert "length=5 trial=0" in str(exc.value)

    def test_correct_candidate_silent(self):
        """A correct candidate passes and draws once."""
        stream = FixedStream([3, 1, 4, 1, 5])
        verify_trial(LengthSpec(5, 1), 0, as_sorter(sorted_in_place), REFERENCE, stream)
        assert stream.calls == 1

    def test_length_change_is_mismatch(self):
        """Dropping an element is a mismatch."""
        stream = FixedStream([2, 1])
        with pytest.raises(MismatchError):
            verify_trial(LengthSpec(2, 1), 0, as_sorter(truncating), REFERENCE, stream)

    def test_both_buffers_get_identical_input(self):
        """Candidate and reference see the same drawn values."""
        seen = []

        def spy(values):
            seen.append(list(values))
            values.sort()

        verify_trial(LengthSpec(4, 1), 0, as_sorter(spy), as_sorter(spy), RandomStream(9))
        assert seen[0] == seen[1]
        assert seen[0] == RandomStream(9).draw(4)


class TestVerifyLength:
    """All trials of one length."""

    def test_draws_size_times_iterations(self):
        """Each trial draws one sample of size values."""
        stream = RandomStream(1)
        assert verify_length(LengthSpec(10, 7), REFERENCE, REFERENCE, stream) == 7
        assert stream.drawn == 70

    def test_singletons_never_mismatch(self):
        """Even a descending sort is a no-op on one element."""
        assert verify_length(LengthSpec(1, 1000), as_sorter(descending), REFERENCE, RandomStream()) == 1000

    def test_zero_iterations(self):
        """Zero trials draw nothing."""
        stream = RandomStream()
        assert verify_length(LengthSpec(100, 0), as_sorter(descending), REFERENCE, stream) == 0
        assert stream.drawn == 0

    def test_mismatch_reports_trial_index(self):
        """The failing trial index is reported."""
        calls = {"n": 0}

        def breaks_on_third(values):
            calls["n"] += 1
            values.sort(reverse=calls["n"] == 3)

        with pytest.raises(MismatchError) as exc:
            verify_length(LengthSpec(50, 10), as_sorter(breaks_on_third), REFERENCE, RandomStream())
        assert exc.value.mismatch.trial == 2
