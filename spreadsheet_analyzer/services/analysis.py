"""Analysis service layer running the processing helpers with configured strategies."""

from collections.abc import Sequence

from spreadsheet_analyzer.core.config import Settings, settings
from spreadsheet_analyzer.core.logging import bind_context, get_logger
from spreadsheet_analyzer.core.schemas import (
    ChartKind,
    ChartSeries,
    ColumnAnalysis,
    Dataset,
    DatasetSummary,
)
from spreadsheet_analyzer.processing import (
    ColumnClassifier,
    aggregate_chart,
    build_classifier,
    classify_column,
    compute_column_stats,
    summarize_dataset,
)

logger = get_logger(__name__)


def configured_classifier(config: Settings | None = None) -> ColumnClassifier:
    """Build the column classifier selected in settings."""
    config = config or settings
    return build_classifier(config.analysis_classifier, config.analysis_sample_size)


def profile_dataset(dataset: Dataset, config: Settings | None = None) -> DatasetSummary | None:
    """Return the dataset overview, or None when it holds no rows."""
    bind_context(dataset_name=dataset.name)
    summary = summarize_dataset(dataset.rows, configured_classifier(config))
    if summary is None:
        logger.info("analysis.profile.empty_dataset")
        return None

    logger.info(
        "analysis.profile.completed",
        row_count=summary.row_count,
        column_count=summary.column_count,
        numeric_column_count=summary.numeric_column_count,
    )
    return summary


def analyze_column(
    dataset: Dataset,
    column: str,
    config: Settings | None = None,
) -> ColumnAnalysis:
    """Classify one column and compute its statistics."""
    config = config or settings
    bind_context(dataset_name=dataset.name)
    kind = classify_column(dataset.rows, column, configured_classifier(config))
    statistics = compute_column_stats(
        dataset.rows,
        column,
        kind,
        top_k=config.analysis_top_values,
    )

    if statistics is None:
        logger.info("analysis.column.unavailable", column=column, kind=kind.value)
    else:
        logger.info(
            "analysis.column.completed",
            column=column,
            kind=kind.value,
            count=statistics.count,
            empty_count=statistics.empty_count,
        )
    return ColumnAnalysis(
        dataset_name=dataset.name,
        column=column,
        kind=kind,
        statistics=statistics,
    )


def build_chart(
    dataset: Dataset,
    x_field: str | None,
    y_fields: Sequence[str],
    kind: ChartKind | str = ChartKind.bar,
) -> ChartSeries:
    """Aggregate dataset rows into a chart series and log any notices."""
    bind_context(dataset_name=dataset.name)
    series = aggregate_chart(dataset.rows, x_field, y_fields, kind)

    for notice in series.notices:
        logger.warning("analysis.chart.notice", chart_kind=series.kind.value, notice=notice)

    logger.info(
        "analysis.chart.completed",
        chart_kind=series.kind.value,
        x_field=x_field,
        y_fields=series.y_fields,
        group_count=len(series.rows),
    )
    return series
