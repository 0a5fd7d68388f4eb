"""
Primitivas estatísticas por coluna usadas nos diagnósticos.

Outliers seguem a regra do box-plot (cercas de Tukey): valores abaixo de
Q1 - coef*IQR ou acima de Q3 + coef*IQR, com os quartis dados pelas
charneiras (hinges) de Tukey do resumo de cinco números.

Skewness é o coeficiente de Fisher-Pearson (g1, enviesado):
    g1 = m3 / m2^(3/2)

Todas as funções:
- Aceitam qualquer sequência 1D (numpy array, Series, lista)
- Devolvem NaN em casos degenerados em vez de levantar erro
"""

import warnings

import numpy as np
import pandas as pd
from scipy import stats


OUTLIER_COEF = 1.5


def _valid_values(values) -> np.ndarray:
    """Valores não-missing como array float."""
    series = pd.Series(values)
    return series.dropna().to_numpy(dtype=np.float64)


def fivenum(values) -> np.ndarray:
    """
    Resumo de cinco números de Tukey (mínimo, charneiras, mediana, máximo).

    As charneiras são as medianas de cada metade dos dados ordenados
    (incluindo a mediana quando n é ímpar), não os quantis interpolados.

    Args:
        values: Valores da coluna (missings são ignorados)

    Returns:
        Array com 5 valores. Todos NaN se não houver valores válidos.

    Exemplo:
        >>> fivenum([1, 2, 3, 4, 5, 6])
        array([1. , 2. , 3.5, 5. , 6. ])
    """
    x = np.sort(_valid_values(values))
    n = len(x)

    if n == 0:
        return np.full(5, np.nan)

    n4 = np.floor((n + 3) / 2) / 2
    # Profundidades 1-based de cada estatística
    depths = np.array([1, n4, (n + 1) / 2, n + 1 - n4, n]) - 1

    lower = x[np.floor(depths).astype(int)]
    upper = x[np.ceil(depths).astype(int)]

    return 0.5 * (lower + upper)


def boxplot_outliers(values, coef: float = OUTLIER_COEF) -> np.ndarray:
    """
    Valores que caem fora das cercas do box-plot.

    Args:
        values: Valores da coluna (missings são ignorados)
        coef: Múltiplo do IQR que define as cercas. 0 desliga a detecção.

    Returns:
        Array com os valores outliers, pela ordem original

    Raises:
        ValueError: Se coef é negativo
    """
    if coef < 0:
        raise ValueError(f"coef deve ser >= 0, recebido: {coef}")

    x = _valid_values(values)
    if len(x) == 0 or coef == 0:
        return np.array([], dtype=np.float64)

    summary = fivenum(x)
    iqr = summary[3] - summary[1]

    mask = (x < summary[1] - coef * iqr) | (x > summary[3] + coef * iqr)

    return x[mask]


def count_outliers(values, coef: float = OUTLIER_COEF) -> int:
    """Número de outliers (regra do box-plot)."""
    return int(len(boxplot_outliers(values, coef=coef)))


def _percentage(count: int, total: int) -> float:
    """100 * count / total, NaN para total = 0."""
    if total == 0:
        return np.nan
    return float(count / total * 100)


def missing_rate(values) -> float:
    """
    Percentagem de valores em falta.

    Args:
        values: Valores da coluna

    Returns:
        Percentagem entre 0 e 100. NaN se a coluna não tem valores.
    """
    series = pd.Series(values)
    return _percentage(int(series.isna().sum()), len(series))


def outlier_rate(values, coef: float = OUTLIER_COEF) -> float:
    """
    Percentagem de outliers.

    O denominador é o comprimento total da coluna, incluindo missings.

    Returns:
        Percentagem entre 0 e 100. NaN se a coluna não tem valores.
    """
    return _percentage(count_outliers(values, coef=coef), len(values))


def sample_skewness(values) -> float:
    """
    Skewness de Fisher-Pearson (g1, sem correcção de enviesamento).

    Missings não são removidos: uma coluna com qualquer valor em falta tem
    skewness indefinida.

    Args:
        values: Valores da coluna

    Returns:
        Skewness (float). NaN se há missings, menos de 2 valores,
        ou a coluna é constante.
    """
    series = pd.Series(values)

    if len(series) < 2 or series.isna().any():
        return np.nan

    x = series.to_numpy(dtype=np.float64)

    # Variância nula: m3 / m2^(3/2) = 0/0
    if np.ptp(x) == 0:
        return np.nan

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        value = stats.skew(x, bias=True)

    return float(value)
