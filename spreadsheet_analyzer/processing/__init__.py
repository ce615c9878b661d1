"""Processing helpers for classification, statistics, and chart aggregation."""

from .charts import aggregate_chart
from .classify import (
    ColumnClassifier,
    FullScanClassifier,
    QuickClassifier,
    build_classifier,
    classify_column,
    list_columns,
    profile_columns,
)
from .parsers import load_dataset, parse_rows
from .stats import compute_categorical_stats, compute_column_stats, compute_numeric_stats
from .summary import (
    default_analysis_column,
    default_chart_fields,
    summarize_dataset,
    toggle_y_field,
)

__all__ = [
    "ColumnClassifier",
    "FullScanClassifier",
    "QuickClassifier",
    "aggregate_chart",
    "build_classifier",
    "classify_column",
    "compute_categorical_stats",
    "compute_column_stats",
    "compute_numeric_stats",
    "default_analysis_column",
    "default_chart_fields",
    "list_columns",
    "load_dataset",
    "parse_rows",
    "profile_columns",
    "summarize_dataset",
    "toggle_y_field",
]
