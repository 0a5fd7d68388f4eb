"""
Diagnósticos de qualidade por coluna.

Funções de selecção de colunas para uma camada de relatório:
- get_class: classe efectiva de cada coluna
- find_class: colunas de um grupo de classes (numérico, categórico)
- find_na: colunas com valores em falta (ou taxa de missings)
- find_outliers: colunas numéricas com outliers (ou taxa de outliers)
- find_skewness: colunas numéricas assimétricas (ou valor da skewness)

Todas são configurações de ColumnScanner. Com index=True devolvem posições
0-based (compatíveis com DataFrame.iloc); com index=False devolvem nomes.

Exemplo:
    >>> df = pd.DataFrame({'A': [1, 2, 3, np.nan, 5], 'B': list('xyzwv')})
    >>> find_na(df)
    [0]
    >>> find_na(df, rate=True)
    A    20.0
    B     0.0
    dtype: float64
"""

import numbers
from typing import List, Optional, Union

import numpy as np
import pandas as pd

from core.scanner import ColumnScanner, InvalidArgument, ResultShape, validate_table
from core.statistics import count_outliers, missing_rate, outlier_rate, sample_skewness
from preprocessing.type_detection import (
    CLASS_GROUPS,
    ColumnClass,
    ColumnDescriptor,
    describe_columns,
    print_class_report,
)


DEFAULT_SKEWNESS_THRESHOLD = 0.5
RATE_DECIMALS = 3


def _selection_shape(index: bool) -> ResultShape:
    return ResultShape.POSITIONS if index else ResultShape.NAMES


def _numeric_only(column: ColumnDescriptor) -> bool:
    # Só "numeric": inteiros ficam de fora
    return column.effective_class is ColumnClass.NUMERIC


def _check_threshold(thres) -> None:
    if thres is None:
        return
    if (isinstance(thres, bool) or not isinstance(thres, numbers.Real)
            or np.isnan(thres) or thres < 0):
        raise InvalidArgument(f"thres deve ser um número >= 0 ou None, recebido: {thres!r}")


def _is_skewed(thres: float):
    def keep(skewness: float) -> bool:
        return not np.isnan(skewness) and abs(skewness) >= thres
    return keep


# =============================================================================
# CLASSES
# =============================================================================

def get_class(data: pd.DataFrame,
              columns: Optional[List[ColumnDescriptor]] = None) -> pd.DataFrame:
    """
    Classe efectiva de cada coluna.

    Args:
        data: DataFrame
        columns: Descritores já calculados para data (opcional)

    Returns:
        DataFrame com uma linha por coluna, pela ordem da tabela:
            - variable: nome da coluna
            - class: classe efectiva ('numeric', 'integer', 'factor', ...)

    Raises:
        InvalidArgument: Se data não é um DataFrame
    """
    scanner = ColumnScanner(statistic=lambda values, column: column.effective_class.value)
    classes = scanner.scan(data, ResultShape.VALUES, columns=columns)

    return pd.DataFrame({
        'variable': classes.index.to_list(),
        'class': classes.to_list(),
    })


def find_class(data: pd.DataFrame, type: str, index: bool = True,
               columns: Optional[List[ColumnDescriptor]] = None) -> Union[List[int], List[str]]:
    """
    Colunas cuja classe efectiva pertence a um grupo.

    Args:
        data: DataFrame
        type: Grupo de classes:
            - "numerical": integer e numeric
            - "categorical": factor e ordered
            - "categorical2": factor, ordered e character
        index: True devolve posições, False devolve nomes
        columns: Descritores já calculados para data (opcional)

    Returns:
        Posições (ordem crescente) ou nomes das colunas

    Raises:
        InvalidArgument: Se data não é um DataFrame ou type é desconhecido
    """
    validate_table(data)

    if not isinstance(type, str) or type not in CLASS_GROUPS:
        raise InvalidArgument(
            f"type inválido: {type!r}. Usar {', '.join(repr(k) for k in CLASS_GROUPS)}."
        )

    accepted = CLASS_GROUPS[type]
    scanner = ColumnScanner(
        statistic=lambda values, column: True,
        column_filter=lambda column: column.effective_class in accepted
    )
    return scanner.scan(data, _selection_shape(index), columns=columns)


# =============================================================================
# MISSINGS
# =============================================================================

def find_na(data: pd.DataFrame, index: bool = True, rate: bool = False,
            columns: Optional[List[ColumnDescriptor]] = None) -> Union[List[int], List[str], pd.Series]:
    """
    Colunas com valores em falta.

    Args:
        data: DataFrame
        index: True devolve posições, False devolve nomes (ignorado se rate)
        rate: Se True, devolve a percentagem de missings de TODAS as colunas
        columns: Descritores já calculados para data (opcional)

    Returns:
        - rate=False: posições/nomes das colunas com pelo menos 1 missing
        - rate=True: Series {nome: % missing} arredondada a 3 casas.
          Colunas vazias dão NaN.
    """
    if rate:
        scanner = ColumnScanner(
            statistic=lambda values, column: missing_rate(values),
            decimals=RATE_DECIMALS
        )
        return scanner.scan(data, ResultShape.VALUES, columns=columns)

    scanner = ColumnScanner(statistic=lambda values, column: bool(values.isna().any()))
    return scanner.scan(data, _selection_shape(index), columns=columns)


# =============================================================================
# OUTLIERS
# =============================================================================

def find_outliers(data: pd.DataFrame, index: bool = True, rate: bool = False,
                  columns: Optional[List[ColumnDescriptor]] = None) -> Union[List[int], List[str], pd.Series]:
    """
    Colunas numéricas com outliers (regra do box-plot, 1.5 x IQR).

    Só são consideradas colunas de classe 'numeric' (inteiros excluídos).

    Args:
        data: DataFrame
        index: True devolve posições, False devolve nomes (ignorado se rate)
        rate: Se True, devolve a percentagem de outliers por coluna numérica
        columns: Descritores já calculados para data (opcional)

    Returns:
        - rate=False: posições/nomes das colunas com pelo menos 1 outlier
        - rate=True: Series {nome: % outliers} arredondada a 3 casas.
          O denominador inclui os missings.
    """
    if rate:
        scanner = ColumnScanner(
            statistic=lambda values, column: outlier_rate(values),
            column_filter=_numeric_only,
            decimals=RATE_DECIMALS
        )
        return scanner.scan(data, ResultShape.VALUES, columns=columns)

    scanner = ColumnScanner(
        statistic=lambda values, column: count_outliers(values),
        column_filter=_numeric_only,
        keep=lambda n_outliers: n_outliers > 0
    )
    return scanner.scan(data, _selection_shape(index), columns=columns)


# =============================================================================
# SKEWNESS
# =============================================================================

def find_skewness(data: pd.DataFrame, index: bool = True, value: bool = False,
                  thres: Optional[float] = None,
                  columns: Optional[List[ColumnDescriptor]] = None) -> Union[List[int], List[str], pd.Series]:
    """
    Colunas numéricas assimétricas.

    Só são consideradas colunas de classe 'numeric'. Colunas com missings,
    constantes ou com menos de 2 valores têm skewness indefinida (NaN).

    Args:
        data: DataFrame
        index: True devolve posições, False devolve nomes (ignorado se value)
        value: Se True, devolve a skewness de cada coluna numérica
        thres: Limiar de |skewness|.
            - value=False: None equivale a 0.5
            - value=True: None não filtra; caso contrário mantém só
              |skewness| >= thres (NaN removidos)
        columns: Descritores já calculados para data (opcional)

    Returns:
        - value=False: posições/nomes das colunas com |skewness| >= limiar
        - value=True: Series {nome: skewness} arredondada a 3 casas

    Raises:
        InvalidArgument: Se thres não é um número >= 0
    """
    _check_threshold(thres)

    if value:
        scanner = ColumnScanner(
            statistic=lambda values, column: sample_skewness(values),
            column_filter=_numeric_only,
            keep=_is_skewed(thres if thres is not None else 0.0),
            decimals=RATE_DECIMALS
        )
        return scanner.scan(data, ResultShape.VALUES, columns=columns,
                            filter_values=thres is not None)

    if thres is None:
        thres = DEFAULT_SKEWNESS_THRESHOLD

    scanner = ColumnScanner(
        statistic=lambda values, column: sample_skewness(values),
        column_filter=_numeric_only,
        keep=_is_skewed(thres)
    )
    return scanner.scan(data, _selection_shape(index), columns=columns)


# =============================================================================
# CLASSE PRINCIPAL: TableDiagnostics
# =============================================================================

class TableDiagnostics:
    """
    Diagnósticos sobre uma tabela fixa.

    Os descritores das colunas são calculados uma vez na construção e
    reutilizados por todos os métodos. A tabela não deve ser modificada
    enquanto o objecto estiver em uso.
    """

    def __init__(self, data: pd.DataFrame, verbose: bool = False):
        """
        Inicializa os diagnósticos.

        Args:
            data: DataFrame a analisar
            verbose: Imprimir o relatório de classes detectadas

        Raises:
            InvalidArgument: Se data não é um DataFrame válido
        """
        self.data = validate_table(data)
        self.columns = describe_columns(data)
        self.verbose = verbose

        if self.verbose:
            print(f"\nTabela: {data.shape[0]} linhas x {data.shape[1]} colunas")
            print_class_report(self.columns)

    def get_class(self) -> pd.DataFrame:
        return get_class(self.data, columns=self.columns)

    def find_class(self, type: str, index: bool = True):
        return find_class(self.data, type, index=index, columns=self.columns)

    def find_na(self, index: bool = True, rate: bool = False):
        return find_na(self.data, index=index, rate=rate, columns=self.columns)

    def find_outliers(self, index: bool = True, rate: bool = False):
        return find_outliers(self.data, index=index, rate=rate, columns=self.columns)

    def find_skewness(self, index: bool = True, value: bool = False,
                      thres: Optional[float] = None):
        return find_skewness(self.data, index=index, value=value, thres=thres,
                             columns=self.columns)
