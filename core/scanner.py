"""
Varrimento genérico de colunas.

Todos os diagnósticos (get_class, find_class, find_na, find_outliers,
find_skewness) são configurações do mesmo procedimento:

1. Validar a tabela e calcular os descritores das colunas (uma vez)
2. Filtrar as colunas candidatas (ex: só numéricas)
3. Calcular uma estatística por coluna candidata, pela ordem da tabela
4. Moldar o resultado: posições, nomes, ou valores por nome

O varrimento nunca modifica a tabela de entrada.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union

import numpy as np
import pandas as pd

from preprocessing.type_detection import ColumnDescriptor, describe_columns


class InvalidArgument(ValueError):
    """Argumento inválido (tabela não suportada, selector desconhecido, ...)."""


class ResultShape(Enum):
    """Forma do resultado de um varrimento."""
    POSITIONS = "positions"
    NAMES = "names"
    VALUES = "values"


def _all_columns(column: ColumnDescriptor) -> bool:
    return True


def _is_selected(value: Any) -> bool:
    """Verdadeiro para valores não-nulos e não-NaN."""
    if value is None or pd.isna(value):
        return False
    return bool(value)


def validate_table(data: Any) -> pd.DataFrame:
    """
    Verifica que data é um DataFrame com nomes de colunas únicos.

    Raises:
        InvalidArgument: Se data não é um DataFrame ou tem colunas repetidas
    """
    if not isinstance(data, pd.DataFrame):
        raise InvalidArgument(
            f"data deve ser um pandas DataFrame, recebido: {type(data).__name__}"
        )

    if data.columns.has_duplicates:
        duplicated = data.columns[data.columns.duplicated()].unique().tolist()
        raise InvalidArgument(f"Nomes de colunas repetidos: {duplicated}")

    return data


@dataclass(frozen=True)
class ColumnScanner:
    """
    Configuração de um varrimento de colunas.

    Attributes:
        statistic: Função (valores, descritor) -> escalar, por coluna candidata
        column_filter: Selecciona as colunas candidatas a partir do descritor
        keep: Predicado aplicado à estatística para seleccionar colunas
        decimals: Casas decimais dos valores devolvidos (None = sem arredondar)
    """
    statistic: Callable[[pd.Series, ColumnDescriptor], Any]
    column_filter: Callable[[ColumnDescriptor], bool] = _all_columns
    keep: Callable[[Any], bool] = _is_selected
    decimals: Optional[int] = None

    def candidates(self, data: pd.DataFrame,
                   columns: Optional[List[ColumnDescriptor]] = None) -> List[ColumnDescriptor]:
        """Descritores das colunas que passam o filtro, pela ordem da tabela."""
        validate_table(data)

        if columns is None:
            columns = describe_columns(data)

        return [column for column in columns if self.column_filter(column)]

    def scan(self, data: pd.DataFrame,
             shape: ResultShape = ResultShape.POSITIONS,
             columns: Optional[List[ColumnDescriptor]] = None,
             filter_values: bool = False) -> Union[List[int], List[str], pd.Series]:
        """
        Executa o varrimento.

        Args:
            data: DataFrame a analisar
            shape: POSITIONS / NAMES (colunas seleccionadas por keep) ou
                VALUES (estatística de cada coluna candidata)
            columns: Descritores já calculados para data (opcional)
            filter_values: Em VALUES, aplica keep aos valores arredondados

        Returns:
            Lista de posições (0-based), lista de nomes, ou Series
            {nome: valor} pela ordem da tabela

        Raises:
            InvalidArgument: Se data não é um DataFrame válido
        """
        candidates = self.candidates(data, columns)

        values = [
            self.statistic(data.iloc[:, column.position], column)
            for column in candidates
        ]

        if shape is ResultShape.VALUES:
            result = pd.Series(
                values,
                index=[column.name for column in candidates],
                dtype=np.float64 if self.decimals is not None else object
            )
            if self.decimals is not None:
                result = result.round(self.decimals)
            if filter_values:
                mask = np.array([self.keep(value) for value in result], dtype=bool)
                result = result[mask]
            return result

        selected = [column for column, value in zip(candidates, values) if self.keep(value)]

        if shape is ResultShape.NAMES:
            return [column.name for column in selected]
        return [column.position for column in selected]
