"""Tests for scatter aggregation."""

from surveylens.analysis.correlation.algorithms import aggregate_scatter
from surveylens.analysis.correlation.models import PairedSample, ScatterPoint


class TestAggregateScatter:
    """Tests for aggregate_scatter."""

    def test_groups_identical_coordinates(self):
        """Repeated answer pairs collapse into one counted point."""
        sample = PairedSample(x=(1, 2, 1, 7, 1), y=(3, 4, 3, 7, 5))

        points = aggregate_scatter(sample)

        assert set(points) == {
            ScatterPoint(x=1, y=3, count=2),
            ScatterPoint(x=1, y=5, count=1),
            ScatterPoint(x=2, y=4, count=1),
            ScatterPoint(x=7, y=7, count=1),
        }

    def test_counts_sum_to_sample_size(self):
        sample = PairedSample(x=(4, 4, 4, 2, 2, 6), y=(1, 1, 1, 1, 1, 6))

        points = aggregate_scatter(sample)

        assert sum(p.count for p in points) == sample.size

    def test_coordinates_distinct(self):
        sample = PairedSample(x=(3, 3, 3), y=(3, 3, 3))

        points = aggregate_scatter(sample)

        assert points == (ScatterPoint(x=3, y=3, count=3),)

    def test_empty_sample(self):
        assert aggregate_scatter(PairedSample(x=(), y=())) == ()

    def test_deterministic_order(self):
        """Points come back sorted by (x, y)."""
        sample = PairedSample(x=(5, 1, 5, 1), y=(2, 6, 1, 6))

        points = aggregate_scatter(sample)

        assert [(p.x, p.y) for p in points] == [(1, 6), (5, 1), (5, 2)]
