"""
Testes unitários para core/statistics.py

Cada primitiva é testada com:
1. Casos conhecidos (valores calculados manualmente)
2. Casos degenerados (vazio, constante, missings)
3. Comparação com scipy onde aplicável

Execução: python -m pytest tests/test_statistics.py -v
"""

import numpy as np
import pandas as pd
import pytest
import sys
sys.path.insert(0, '.')

from core.statistics import (
    boxplot_outliers,
    count_outliers,
    fivenum,
    missing_rate,
    outlier_rate,
    sample_skewness,
)


class TestFivenum:
    """Testes para o resumo de cinco números de Tukey."""

    def test_even_length(self):
        # Charneiras = medianas de [1,2,3] e [4,5,6]
        result = fivenum([1, 2, 3, 4, 5, 6])
        assert np.allclose(result, [1.0, 2.0, 3.5, 5.0, 6.0])

    def test_odd_length(self):
        # Charneiras incluem a mediana: [1,2,3] e [3,4,5]
        result = fivenum([5, 3, 1, 4, 2])
        assert np.allclose(result, [1.0, 2.0, 3.0, 4.0, 5.0])

    def test_hinges_differ_from_interpolated_quartiles(self):
        """Hinges de [1..8]: 2.5 e 6.5 (quantis do numpy dão 2.75 e 6.25)."""
        result = fivenum(np.arange(1, 9))
        assert result[1] == 2.5
        assert result[3] == 6.5

    def test_ignores_missing(self):
        result = fivenum([1, np.nan, 2, 3, None])
        assert np.allclose(result, [1.0, 1.5, 2.0, 2.5, 3.0])

    def test_single_value(self):
        assert np.allclose(fivenum([7.0]), [7.0] * 5)

    def test_empty_returns_nan(self):
        result = fivenum([])
        assert len(result) == 5
        assert np.isnan(result).all()


class TestBoxplotOutliers:
    """Testes para a regra do box-plot."""

    def test_single_extreme_value(self):
        outliers = boxplot_outliers([1, 1, 1, 1, 100])
        assert list(outliers) == [100.0]

    def test_no_outliers_in_uniform_sequence(self):
        assert len(boxplot_outliers(np.arange(1, 21))) == 0

    def test_both_tails(self):
        values = [-50, 10, 11, 12, 13, 14, 15, 16, 80]
        outliers = boxplot_outliers(values)
        assert list(outliers) == [-50.0, 80.0]

    def test_value_on_fence_not_outlier(self):
        # Hinges 2 e 4, IQR = 2 -> cerca superior = 7
        values = [1, 2, 3, 4, 7]
        assert len(boxplot_outliers(values)) == 0

    def test_ignores_missing(self):
        outliers = boxplot_outliers(pd.Series([1, 1, np.nan, 1, 1, 100]))
        assert list(outliers) == [100.0]

    def test_all_missing(self):
        assert len(boxplot_outliers([np.nan, np.nan])) == 0

    def test_zero_coef_disables(self):
        assert len(boxplot_outliers([1, 1, 1, 1, 100], coef=0)) == 0

    def test_larger_coef_flags_fewer(self):
        values = [1, 2, 3, 4, 5, 6, 7, 8, 9, 20, 40]
        assert count_outliers(values, coef=3.0) <= count_outliers(values, coef=1.5)

    def test_negative_coef_raises(self):
        with pytest.raises(ValueError, match="coef"):
            boxplot_outliers([1, 2, 3], coef=-1)


class TestRates:
    """Testes para as taxas de missings e outliers."""

    def test_missing_rate_known_value(self):
        assert missing_rate([1, 2, 3, np.nan, 5]) == pytest.approx(20.0)

    def test_missing_rate_complete(self):
        assert missing_rate([1, 2, 3]) == 0.0

    def test_missing_rate_all_missing(self):
        assert missing_rate([np.nan, None, np.nan]) == 100.0

    def test_missing_rate_strings(self):
        assert missing_rate(pd.Series(['a', None, 'b', None])) == 50.0

    def test_missing_rate_empty_is_nan(self):
        assert np.isnan(missing_rate(pd.Series([], dtype=float)))

    def test_outlier_rate_known_value(self):
        assert outlier_rate([1, 1, 1, 1, 100]) == pytest.approx(20.0)

    def test_outlier_rate_denominator_includes_missing(self):
        values = pd.Series([1, 1, 1, 1, 100, np.nan])
        assert outlier_rate(values) == pytest.approx(100 / 6)

    def test_outlier_rate_empty_is_nan(self):
        assert np.isnan(outlier_rate(pd.Series([], dtype=float)))


class TestSampleSkewness:
    """Testes para a skewness de Fisher-Pearson."""

    def test_symmetric_is_zero(self):
        assert abs(sample_skewness([1.0, 2.0, 3.0, 4.0, 5.0])) < 1e-10

    def test_known_value(self):
        # Desvios: [-1, -1, 2] -> m2 = 2, m3 = 2 -> g1 = 2 / 2^1.5
        expected = 2 / 2 ** 1.5
        assert abs(sample_skewness([1.0, 1.0, 4.0]) - expected) < 1e-10

    def test_sign(self):
        assert sample_skewness([1, 1, 1, 2, 10]) > 0
        assert sample_skewness([-10, -2, -1, -1, -1]) < 0

    def test_matches_scipy(self):
        """Deve corresponder a scipy.stats.skew(bias=True)."""
        from scipy.stats import skew
        rng = np.random.RandomState(42)
        values = rng.exponential(size=200)
        assert abs(sample_skewness(values) - skew(values, bias=True)) < 1e-10

    def test_missing_gives_nan(self):
        assert np.isnan(sample_skewness([1.0, 2.0, np.nan, 10.0]))

    def test_constant_gives_nan(self):
        assert np.isnan(sample_skewness([3.0, 3.0, 3.0]))

    def test_single_value_gives_nan(self):
        assert np.isnan(sample_skewness([3.0]))

    def test_empty_gives_nan(self):
        assert np.isnan(sample_skewness([]))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
