"""Configuration types with construction-time invariant enforcement."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StatsConfig:
    """
    Immutable defaults for the statistics engine.

    Invariants enforced at construction:
    - ddof >= 0
    - outlier_threshold >= 0
    """

    ddof: int = 0
    outlier_threshold: float = 2.0

    def __post_init__(self) -> None:
        if self.ddof < 0:
            raise ValueError(f"ddof must be non-negative, got {self.ddof}")
        if self.outlier_threshold < 0:
            raise ValueError(
                f"outlier_threshold must be non-negative, got {self.outlier_threshold}"
            )


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """
    Ranking defaults for the semantic layer.

    Invariants enforced at construction:
    - top_k >= 0
    - -1 <= duplicate_threshold <= 1 (cosine similarity range)
    """

    top_k: int = 5
    duplicate_threshold: float = 0.95

    def __post_init__(self) -> None:
        if self.top_k < 0:
            raise ValueError(f"top_k must be non-negative, got {self.top_k}")
        if not -1.0 <= self.duplicate_threshold <= 1.0:
            raise ValueError(
                f"duplicate_threshold must be within [-1, 1], got {self.duplicate_threshold}"
            )


@dataclass(frozen=True, slots=True)
class HistogramConfig:
    """Binning for distribution helpers."""

    bins: int = 10

    def __post_init__(self) -> None:
        if self.bins <= 0:
            raise ValueError(f"bins must be positive, got {self.bins}")


DEFAULT_STATS_CONFIG = StatsConfig()

DEFAULT_SEARCH_CONFIG = SearchConfig()

DEFAULT_HISTOGRAM_CONFIG = HistogramConfig()
