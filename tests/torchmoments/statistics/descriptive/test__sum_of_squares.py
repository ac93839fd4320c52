"""Tests for sums of squares in torchmoments.statistics.descriptive."""

import torch

from torchmoments.statistics.descriptive import (
    central_moment,
    sum_of_squares,
    sum_of_squares_deviations,
)


class TestSumOfSquares:
    """Tests for sum_of_squares."""

    def test_known_value(self):
        """1 + 4 + 9 = 14."""
        torch.testing.assert_close(
            sum_of_squares([1.0, 2.0, 3.0]), torch.tensor(14.0)
        )

    def test_negative_values(self):
        torch.testing.assert_close(
            sum_of_squares([-1.0, -2.0, 3.0]), torch.tensor(14.0)
        )

    def test_dim(self):
        x = torch.tensor([[1.0, 2.0], [3.0, 4.0]])
        torch.testing.assert_close(
            sum_of_squares(x, dim=0), torch.tensor([10.0, 20.0])
        )

    def test_empty(self):
        assert sum_of_squares([]) is None


class TestSumOfSquaresDeviations:
    """Tests for sum_of_squares_deviations."""

    def test_known_value(self):
        """Deviations from mean 2 are -1, 0, 1."""
        torch.testing.assert_close(
            sum_of_squares_deviations([1.0, 2.0, 3.0]), torch.tensor(2.0)
        )

    def test_shift_invariant(self):
        x = torch.randn(20, dtype=torch.float64)
        torch.testing.assert_close(
            sum_of_squares_deviations(x + 100.0), sum_of_squares_deviations(x)
        )

    def test_relationship_to_central_moment(self):
        """SS = n * m2."""
        x = torch.randn(25, dtype=torch.float64)
        torch.testing.assert_close(
            sum_of_squares_deviations(x), central_moment(x, 2) * 25
        )

    def test_keepdim(self):
        x = torch.randn(4, 5)
        assert sum_of_squares_deviations(x, dim=1, keepdim=True).shape == (
            4,
            1,
        )

    def test_empty(self):
        assert sum_of_squares_deviations(torch.empty(0)) is None
