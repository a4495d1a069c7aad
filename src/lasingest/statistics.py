"""
Depth-range queries and per-curve statistics over parsed data rows.

The parser stores null sentinels as-is; filtering them out happens here.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Optional

import numpy as np

from lasingest.parsers import DataRow, row_depth

logger = logging.getLogger(__name__)

# Rows returned by a depth query unless the caller asks otherwise
DEFAULT_QUERY_LIMIT = 10000


@dataclass
class CurveStatistics:
    """Summary statistics of one curve's valid samples."""

    count: int
    min: float
    max: float
    mean: float
    median: float
    std_dev: float
    p25: float
    p75: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict."""
        return asdict(self)


def _in_range(depth: Optional[float], start_depth: Optional[float], end_depth: Optional[float]) -> bool:
    if depth is None:
        return False
    if start_depth is not None and depth < start_depth:
        return False
    if end_depth is not None and depth > end_depth:
        return False
    return True


def filter_by_depth(
    rows: Iterable[DataRow],
    start_depth: Optional[float] = None,
    end_depth: Optional[float] = None,
    curves: Optional[list[str]] = None,
    limit: Optional[int] = DEFAULT_QUERY_LIMIT,
) -> list[dict[str, Any]]:
    """
    Select rows within a depth range, ordered by depth.

    Args:
        rows: Parsed data rows
        start_depth: Lower bound (inclusive), or None for no lower bound
        end_depth: Upper bound (inclusive), or None for no upper bound
        curves: If given, keep only these curves (absent curves are left out)
        limit: Maximum number of rows to return, or None for all rows

    Returns:
        List of {"depth": ..., <curve>: ...} dicts
    """
    selected = []
    for row in rows:
        depth = row_depth(row)
        if not _in_range(depth, start_depth, end_depth):
            continue
        if curves:
            point = {"depth": depth}
            for name in curves:
                if name in row:
                    point[name] = row[name]
        else:
            point = {"depth": depth, **row}
        selected.append(point)

    selected.sort(key=lambda point: point["depth"])
    if limit is not None:
        selected = selected[:limit]
    return selected


def _percentile(sorted_values: np.ndarray, fraction: float) -> float:
    """Value at index floor(n * fraction) of an ascending array."""
    return float(sorted_values[int(len(sorted_values) * fraction)])


def compute_curve_statistics(
    rows: Iterable[DataRow],
    curves: list[str],
    null_value: Optional[float] = None,
    start_depth: Optional[float] = None,
    end_depth: Optional[float] = None,
) -> dict[str, Optional[CurveStatistics]]:
    """
    Compute summary statistics for each requested curve.

    Missing values, unreadable values and the null sentinel are excluded.
    Median and quartiles are the sorted sample at index floor(n * q);
    the standard deviation is the population one.

    Args:
        rows: Parsed data rows
        curves: Curve mnemonics to summarize
        null_value: Null sentinel of the well (e.g. -999.25)
        start_depth: Optional lower depth bound (inclusive)
        end_depth: Optional upper depth bound (inclusive)

    Returns:
        Curve mnemonic -> CurveStatistics, or None when a curve has no
        valid samples
    """
    rows = list(rows)
    if start_depth is not None or end_depth is not None:
        rows = [r for r in rows if _in_range(row_depth(r), start_depth, end_depth)]

    statistics: dict[str, Optional[CurveStatistics]] = {}
    for name in curves:
        values = [
            row[name]
            for row in rows
            if row.get(name) is not None and row[name] != null_value
        ]
        if not values:
            logger.debug(f"No valid samples for curve {name}")
            statistics[name] = None
            continue

        array = np.sort(np.asarray(values, dtype=float))
        statistics[name] = CurveStatistics(
            count=int(array.size),
            min=float(array[0]),
            max=float(array[-1]),
            mean=float(np.mean(array)),
            median=_percentile(array, 0.5),
            std_dev=float(np.std(array)),
            p25=_percentile(array, 0.25),
            p75=_percentile(array, 0.75),
        )

    return statistics
