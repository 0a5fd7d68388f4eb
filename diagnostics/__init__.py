# colscan - diagnósticos de qualidade por coluna
# Selecção de colunas por classe, missings, outliers e skewness

from .finders import (
    get_class,
    find_class,
    find_na,
    find_outliers,
    find_skewness,
    TableDiagnostics,
)
from core.scanner import InvalidArgument

__all__ = [
    'get_class',
    'find_class',
    'find_na',
    'find_outliers',
    'find_skewness',
    'TableDiagnostics',
    'InvalidArgument',
]
