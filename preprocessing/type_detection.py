"""
Detecção da classe efectiva das colunas de um DataFrame.

A classe efectiva é a etiqueta de tipo principal de cada coluna, calculada
uma única vez a partir do dtype e partilhada por todos os diagnósticos, para
que a filtragem por classe e a análise dependente da classe concordem sobre
o que é "numérico".

Classes suportadas:
- NUMERIC: floats (numpy ou Float64)
- INTEGER: inteiros (numpy ou Int64)
- LOGICAL: booleanos
- FACTOR: categórico sem ordem
- ORDERED: categórico com ordem
- CHARACTER: texto
- DATETIME: datas, durações e períodos
- OTHER: tudo o resto (object com valores mistos, complexos, ...)
"""

import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List

import pandas as pd


class ColumnClass(Enum):
    """Classes efectivas de uma coluna."""
    NUMERIC = "numeric"
    INTEGER = "integer"
    LOGICAL = "logical"
    FACTOR = "factor"
    ORDERED = "ordered"
    CHARACTER = "character"
    DATETIME = "datetime"
    OTHER = "other"


# Selectores de find_class -> classes aceites
CLASS_GROUPS: Dict[str, FrozenSet[ColumnClass]] = {
    'numerical': frozenset({ColumnClass.INTEGER, ColumnClass.NUMERIC}),
    'categorical': frozenset({ColumnClass.FACTOR, ColumnClass.ORDERED}),
    'categorical2': frozenset({ColumnClass.FACTOR, ColumnClass.ORDERED,
                               ColumnClass.CHARACTER}),
}


@dataclass(frozen=True)
class ColumnDescriptor:
    """Informação sobre uma coluna (posição 0-based, como em iloc)."""
    name: str
    position: int
    effective_class: ColumnClass

    def __repr__(self):
        return f"ColumnDescriptor({self.position}: {self.name} <{self.effective_class.value}>)"


def _object_class(values: pd.Series) -> ColumnClass:
    """Classifica colunas object pelo conteúdo (ignora missings)."""
    inferred = pd.api.types.infer_dtype(values, skipna=True)

    if inferred in ('string', 'empty'):
        return ColumnClass.CHARACTER
    if inferred == 'boolean':
        return ColumnClass.LOGICAL

    if inferred.startswith('mixed'):
        warnings.warn(
            f"Coluna '{values.name}' tem valores de tipos mistos ({inferred}); "
            f"classificada como '{ColumnClass.OTHER.value}'.",
            UserWarning
        )
    return ColumnClass.OTHER


def effective_class(values: pd.Series) -> ColumnClass:
    """
    Detecta a classe efectiva de uma coluna.

    Args:
        values: Coluna (pandas Series)

    Returns:
        ColumnClass correspondente ao dtype da coluna
    """
    dtype = values.dtype

    # Categóricos primeiro: o dtype das categorias não interessa
    if isinstance(dtype, pd.CategoricalDtype):
        return ColumnClass.ORDERED if dtype.ordered else ColumnClass.FACTOR

    if pd.api.types.is_bool_dtype(dtype):
        return ColumnClass.LOGICAL

    if pd.api.types.is_integer_dtype(dtype):
        return ColumnClass.INTEGER

    if pd.api.types.is_float_dtype(dtype):
        return ColumnClass.NUMERIC

    if (pd.api.types.is_datetime64_any_dtype(dtype)
            or pd.api.types.is_timedelta64_dtype(dtype)
            or isinstance(dtype, pd.PeriodDtype)):
        return ColumnClass.DATETIME

    if pd.api.types.is_object_dtype(dtype):
        return _object_class(values)

    if pd.api.types.is_string_dtype(dtype):
        return ColumnClass.CHARACTER

    return ColumnClass.OTHER


def describe_columns(data: pd.DataFrame) -> List[ColumnDescriptor]:
    """
    Calcula os descritores de todas as colunas, pela ordem da tabela.

    Args:
        data: DataFrame

    Returns:
        Lista de ColumnDescriptor (uma entrada por coluna)
    """
    return [
        ColumnDescriptor(
            name=name,
            position=position,
            effective_class=effective_class(data.iloc[:, position])
        )
        for position, name in enumerate(data.columns)
    ]


def get_class_summary(columns: List[ColumnDescriptor]) -> Dict[str, List[str]]:
    """
    Agrupa colunas por classe.

    Returns:
        Dicionário {classe: [lista de nomes]}
    """
    summary = {c.value: [] for c in ColumnClass}

    for column in columns:
        summary[column.effective_class.value].append(column.name)

    # Remover classes vazias
    return {k: v for k, v in summary.items() if v}


def print_class_report(columns: List[ColumnDescriptor]) -> None:
    """Imprime relatório das classes detectadas."""
    print("=" * 50)
    print("RELATÓRIO DE CLASSES DAS COLUNAS")
    print("=" * 50)

    summary = get_class_summary(columns)

    for class_name, names in summary.items():
        print(f"\n{class_name.upper()} ({len(names)} colunas):")
        for name in names:
            print(f"  • {name}")

    print("\n" + "=" * 50)
