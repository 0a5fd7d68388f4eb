# colscan - núcleo
# Varrimento genérico de colunas e primitivas estatísticas

from .scanner import ColumnScanner, ResultShape, InvalidArgument, validate_table
from .statistics import fivenum, boxplot_outliers, sample_skewness
