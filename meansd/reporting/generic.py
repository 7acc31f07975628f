"""
meansd.reporting.generic
========================

Formatting helpers and polars report frames for exercise results.

- `format_p_value`, `significance_stars`: the p-value labels the widgets draw
- `histogram_frame`: one row per bin
- `summary_frame`: one row per dataset summary
- `results_frame`: one row per test result

Examples
--------
>>> format_p_value(0.0004), format_p_value(0.0812)
('< 0.001', '0.081')
>>> significance_stars(0.004)
'**'
>>> from meansd.stats.common.histogram import HistogramBinner
>>> frame = histogram_frame(HistogramBinner(0.0, 4.0, 2).bin([1.0, 3.0, 3.5]))
>>> frame["count"].to_list()
[1, 2]
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

import polars as pl

from meansd.core.model import Histogram, Summary, TestResult
from meansd.runtime.experiment_template import AnalysisResult

P_VALUE_FLOOR = 0.001
SIGNIFICANCE_LEVELS = ((0.001, "***"), (0.01, "**"), (0.05, "*"))

HISTOGRAM_SCHEMA = {
    "bin": pl.Int64,
    "left": pl.Float64,
    "right": pl.Float64,
    "center": pl.Float64,
    "count": pl.Int64,
}


def format_p_value(p_value: float) -> str:
    """``"< 0.001"`` for very small p-values, otherwise three decimals."""
    if p_value < P_VALUE_FLOOR:
        return "< 0.001"
    return f"{p_value:.3f}"


def significance_stars(p_value: float) -> str:
    """``***`` below 0.001, ``**`` below 0.01, ``*`` below 0.05, else empty."""
    for level, stars in SIGNIFICANCE_LEVELS:
        if p_value < level:
            return stars
    return ""


def histogram_frame(histogram: Histogram) -> pl.DataFrame:
    """Return one row per bin: bin, left, right, center, count."""
    edges = histogram.edges()
    return pl.DataFrame(
        {
            "bin": list(range(histogram.bin_count)),
            "left": list(edges[:-1]),
            "right": list(edges[1:]),
            "center": list(histogram.centers()),
            "count": list(histogram.counts),
        },
        schema=HISTOGRAM_SCHEMA,
    )


def summary_frame(summaries: Mapping[str, Summary]) -> pl.DataFrame:
    """Return one row per named summary."""
    return pl.DataFrame(
        {
            "dataset": list(summaries.keys()),
            "n": [s.n for s in summaries.values()],
            "mean": [s.mean for s in summaries.values()],
            "population_sd": [s.population_sd for s in summaries.values()],
            "sample_sd": [s.sample_sd for s in summaries.values()],
        },
        schema={
            "dataset": pl.Utf8,
            "n": pl.Int64,
            "mean": pl.Float64,
            "population_sd": pl.Float64,
            "sample_sd": pl.Float64,
        },
    )


def results_frame(results: Mapping[str, TestResult]) -> pl.DataFrame:
    """Return one row per named test result, with display labels."""
    rows = [
        {
            "name": name,
            **r.to_payload(),
            "formatted": format_p_value(r.p_value),
            "stars": significance_stars(r.p_value),
        }
        for name, r in results.items()
    ]
    return pl.DataFrame(
        rows,
        schema={
            "name": pl.Utf8,
            "test": pl.Utf8,
            "statistic": pl.Float64,
            "secondary": pl.Float64,
            "p_value": pl.Float64,
            "formatted": pl.Utf8,
            "stars": pl.Utf8,
        },
    )


@dataclass
class ExerciseReporter:
    """
    Tabular view of one `AnalysisResult`.

    Each method returns a polars DataFrame; nothing is printed or written.
    """

    result: AnalysisResult

    def histograms(self) -> pl.DataFrame:
        """All histograms stacked, with a ``name`` column."""
        frames = [
            histogram_frame(h).with_columns(pl.lit(name).alias("name"))
            for name, h in self.result.histograms.items()
        ]
        if not frames:
            return pl.DataFrame(schema={**HISTOGRAM_SCHEMA, "name": pl.Utf8})
        return pl.concat(frames, how="vertical")

    def summaries(self) -> pl.DataFrame:
        return summary_frame(self.result.summaries)

    def tests(self) -> pl.DataFrame:
        return results_frame(self.result.tests)

    def overview(self) -> Mapping[str, Any]:
        """Headline numbers of the result as plain Python values."""
        return {
            "exercise_id": self.result.exercise_id,
            "batch_number": self.result.batch_number,
            "total_sample_size": self.result.total_sample_size,
            "p_values": {
                name: format_p_value(r.p_value) for name, r in self.result.tests.items()
            },
        }
