"""
Tests for the timing phase.
"""

from sortbench._schema import LengthSpec
from sortbench.sorters import REFERENCE, as_sorter
from sortbench.stream import RandomStream
from sortbench.timing import time_length, time_sorter


class TestTimeSorter:
    """Summed nanosecond cost over all trials."""

    def test_counts_trials_and_time(self):
        """Trials, size, variant and integer total are recorded."""
        m = time_sorter(LengthSpec(100, 20), REFERENCE, RandomStream(), "reference")
        assert m.trials == 20
        assert m.size == 100
        assert m.variant == "reference"
        assert isinstance(m.total_ns, int)
        assert m.total_ns >= 0
        assert m.mean_ns == m.total_ns / 20

    def test_zero_iterations(self):
        """Zero trials give zero totals and draw nothing."""
        stream = RandomStream()
        m = time_sorter(LengthSpec(1000, 0), REFERENCE, stream, "candidate")
        assert (m.trials, m.total_ns, m.mean_ns) == (0, 0, 0.0)
        assert stream.drawn == 0

    def test_fresh_sample_each_trial(self):
        """Each trial sorts the next values from the stream."""
        seen = []

        def spy(values):
            seen.append(list(values))
            values.sort()

        time_sorter(LengthSpec(3, 4), as_sorter(spy), RandomStream(2), "candidate")
        assert seen == [RandomStream(2).draw(12)[i:i + 3] for i in range(0, 12, 3)]

    def test_fill_not_timed(self):
        """Large fills with a no-op sort stay far below the fill cost."""
        def noop(values):
            pass

        m = time_sorter(LengthSpec(200_000, 3), as_sorter(noop), RandomStream(), "candidate")
        assert m.total_ns < 5_000_000


class TestTimeLength:
    """Candidate first, then reference, on disjoint data."""

    def test_order_and_disjoint_data(self):
        """Candidate trials run first, each phase on fresh values."""
        order = []

        def tagged(tag):
            def fn(values):
                order.append((tag, list(values)))
                values.sort()
            return fn

        cand, ref = time_length(LengthSpec(2, 2), as_sorter(tagged("c")), as_sorter(tagged("r")), RandomStream(4))
        assert [t for t, _ in order] == ["c", "c", "r", "r"]
        expected = RandomStream(4).draw(8)
        assert [v for _, v in order] == [expected[0:2], expected[2:4], expected[4:6], expected[6:8]]
        assert cand.variant == "candidate"
        assert ref.variant == "reference"
