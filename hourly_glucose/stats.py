import math

import numpy as np

from .errors import EmptyInputError


def nearest_rank_percentile(values, q):
    """Return the sample whose rank is nearest to ``q/100 * (n - 1)``.

    Unlike ``np.percentile`` with linear interpolation, the result is always
    one of the input values.  Half ranks round up.
    """
    ordered = np.sort(np.asarray(values, dtype=float))
    if ordered.size == 0:
        raise EmptyInputError("Cannot take a percentile of an empty sample")
    rank = q / 100 * (ordered.size - 1)
    return float(ordered[int(math.floor(rank + 0.5))])


def build_hourly_stats(df, cfg):
    """Pool readings by hour of day across all dates and summarize each hour.

    Returns a DataFrame with columns ``hour, count, mean, p5, p25, p75, p95``
    sorted by ``hour``.  Hours without readings are absent.

    Raises ``EmptyInputError`` when *df* has no rows.
    """
    if df.empty:
        raise EmptyInputError("No valid glucose readings to aggregate.")

    df_work = df.copy()
    df_work["hour"] = df_work[cfg["TIMESTAMP_COLUMN"]].dt.hour

    grouped = df_work.groupby("hour")[cfg["GLUCOSE_COLUMN"]]

    result = grouped.agg(
        count="count",
        mean="mean",
        p5=lambda x: nearest_rank_percentile(x, 5),
        p25=lambda x: nearest_rank_percentile(x, 25),
        p75=lambda x: nearest_rank_percentile(x, 75),
        p95=lambda x: nearest_rank_percentile(x, 95),
    ).reset_index()

    result["hour"] = result["hour"].astype(int)
    result["mean"] = result["mean"].astype(float)

    return result.sort_values("hour").reset_index(drop=True)
