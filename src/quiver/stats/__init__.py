"""Statistics engine and chart data shaping."""

from quiver.stats.reductions import (
    sum,
    product,
    cumulative_sum,
    cumulative_product,
    min,
    max,
    argmin,
    argmax,
    mean,
    median,
    variance,
    std,
    outlier_mask,
    mean_vector,
)
from quiver.stats.charts import (
    AggregationMethod,
    HistogramBin,
    Quartiles,
    rolling_mean,
    diff,
    percent_change,
    histogram,
    percentile,
    quartiles,
    percentile_rank,
    percentile_ranks,
    scaled,
    as_percentages,
    standardized,
    group_by,
    grouped_data,
    downsample,
    stacked_cumulative,
    stacked_percentage,
    correlation_matrix,
    heatmap_data,
)

__all__ = [
    "sum",
    "product",
    "cumulative_sum",
    "cumulative_product",
    "min",
    "max",
    "argmin",
    "argmax",
    "mean",
    "median",
    "variance",
    "std",
    "outlier_mask",
    "mean_vector",
    "AggregationMethod",
    "HistogramBin",
    "Quartiles",
    "rolling_mean",
    "diff",
    "percent_change",
    "histogram",
    "percentile",
    "quartiles",
    "percentile_rank",
    "percentile_ranks",
    "scaled",
    "as_percentages",
    "standardized",
    "group_by",
    "grouped_data",
    "downsample",
    "stacked_cumulative",
    "stacked_percentage",
    "correlation_matrix",
    "heatmap_data",
]
