# colscan - detecção de classes das colunas

from .type_detection import ColumnClass, ColumnDescriptor, describe_columns, effective_class
