"""Tests for standard errors in torchmoments.statistics.descriptive."""

import math

import pytest
import torch

from torchmoments.statistics.descriptive import (
    sek,
    sem,
    ses,
    standard_error_of_kurtosis,
    standard_error_of_skewness,
    standard_error_of_the_mean,
)


class TestStandardErrorOfSkewness:
    """Tests for standard_error_of_skewness."""

    def test_known_value(self):
        """sqrt(6 * 20 * 19 / (18 * 21 * 23))."""
        result = standard_error_of_skewness(20, dtype=torch.float64)
        expected = math.sqrt(6 * 20 * 19 / (18 * 21 * 23))
        assert abs(result.item() - expected) < 1e-12

    def test_default_dtype(self):
        assert standard_error_of_skewness(20).dtype == torch.get_default_dtype()

    def test_alias(self):
        assert ses is standard_error_of_skewness

    def test_decreases_with_sample_size(self):
        """Larger samples give smaller standard errors."""
        n = torch.arange(10, 200, dtype=torch.float64)
        result = standard_error_of_skewness(n)
        assert torch.all(result[1:] < result[:-1])

    def test_tensor_sample_sizes(self):
        """Integer tensors are evaluated elementwise."""
        n = torch.tensor([10, 20, 30])
        result = standard_error_of_skewness(n)
        assert result.shape == (3,)
        for i, size in enumerate([10, 20, 30]):
            torch.testing.assert_close(
                result[i], standard_error_of_skewness(size)
            )

    @pytest.mark.parametrize("n", [2, -1, -3])
    def test_singular_sample_sizes(self, n):
        """Zero denominators warn and propagate inf or NaN."""
        with pytest.warns(RuntimeWarning, match="standard_error_of_skewness"):
            result = standard_error_of_skewness(n)
        assert not torch.isfinite(result)

    @pytest.mark.parametrize("n", [2.5, "20", True])
    def test_invalid_sample_size_type(self, n):
        with pytest.raises(TypeError):
            standard_error_of_skewness(n)


class TestStandardErrorOfKurtosis:
    """Tests for standard_error_of_kurtosis."""

    def test_known_value(self):
        """2 * SES * sqrt((n**2 - 1) / ((n - 3)(n + 5)))."""
        result = standard_error_of_kurtosis(20, dtype=torch.float64)
        expected = (
            2
            * math.sqrt(6 * 20 * 19 / (18 * 21 * 23))
            * math.sqrt(399 / (17 * 25))
        )
        assert abs(result.item() - expected) < 1e-12

    def test_alias(self):
        assert sek is standard_error_of_kurtosis

    def test_ratio_to_ses(self):
        """SEK / SES tends to 2 from below for n > 7."""
        n = torch.arange(10, 100, dtype=torch.float64)
        ratio = standard_error_of_kurtosis(n) / standard_error_of_skewness(n)
        assert torch.all(ratio < 2)

        ratio = standard_error_of_kurtosis(
            10000, dtype=torch.float64
        ) / standard_error_of_skewness(10000, dtype=torch.float64)
        assert abs(ratio.item() - 2) < 1e-3

    @pytest.mark.parametrize("n", [3, -5])
    def test_singular_sample_sizes(self, n):
        """Zero denominators warn and propagate inf or NaN."""
        with pytest.warns(RuntimeWarning, match="standard_error_of_kurtosis"):
            result = standard_error_of_kurtosis(n)
        assert not torch.isfinite(result)

    def test_inherits_skewness_singularity(self):
        with pytest.warns(RuntimeWarning, match="standard_error_of_skewness"):
            result = standard_error_of_kurtosis(2)
        assert not torch.isfinite(result)


class TestStandardErrorOfTheMean:
    """Tests for standard_error_of_the_mean."""

    def test_known_value(self):
        """s = sqrt(32 / 7), n = 8."""
        x = torch.tensor(
            [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0], dtype=torch.float64
        )
        expected = math.sqrt(32.0 / 7.0) / math.sqrt(8.0)
        assert abs(standard_error_of_the_mean(x).item() - expected) < 1e-12
        assert abs(standard_error_of_the_mean(x).item() - 0.7559) < 1e-4

    def test_alias(self):
        assert sem is standard_error_of_the_mean

    def test_matches_scipy(self):
        """Matches scipy.stats.sem (ddof=1)."""
        scipy_stats = pytest.importorskip("scipy.stats")

        torch.manual_seed(42)
        x = torch.randn(30, dtype=torch.float64)
        expected = scipy_stats.sem(x.numpy())
        assert abs(sem(x).item() - expected) < 1e-12

    def test_dim(self):
        x = torch.randn(3, 12, dtype=torch.float64)
        result = sem(x, dim=1)
        assert result.shape == (3,)
        torch.testing.assert_close(result[2], sem(x[2]))

    def test_empty_dim_tuple(self):
        """``dim=()`` reduces over every element, like ``dim=None``."""
        x = torch.tensor([1.0, 2.0, 3.0, 4.0, 10.0], dtype=torch.float64)
        torch.testing.assert_close(sem(x, dim=()), sem(x, dim=None))
        assert abs(sem(x, dim=()).item() - math.sqrt(12.5 / 5.0)) < 1e-12

        y = torch.randn(4, 6, dtype=torch.float64)
        torch.testing.assert_close(
            sem(y, dim=(), keepdim=True), sem(y, dim=None, keepdim=True)
        )

    def test_empty(self):
        """Empty sample warns and returns NaN."""
        with pytest.warns(RuntimeWarning, match="standard_error_of_the_mean"):
            result = standard_error_of_the_mean([])
        assert result.shape == ()
        assert torch.isnan(result)

    def test_empty_keepdim(self):
        with pytest.warns(RuntimeWarning):
            result = sem(torch.empty(3, 0), dim=1, keepdim=True)
        assert result.shape == (3, 1)
        assert torch.all(torch.isnan(result))
