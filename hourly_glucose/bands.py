import math

from .errors import NoDataError

AXIS_INTERVAL = 25
AXIS_HEADROOM = 50


def axis_ceiling(max_value):
    """Top of the y axis for a chart whose highest point is *max_value*.

    Adds a fixed headroom and snaps back to the gridline interval, so an
    exact multiple of the interval keeps the full headroom (200 -> 250)
    while 180 gives 225.
    """
    return (max_value + AXIS_HEADROOM) - math.fmod(max_value, AXIS_INTERVAL)


def build_bands(stats):
    """Derive the chart series from the hourly statistics.

    Each percentile band is described by a ``floor`` (lower percentile) and a
    ``width`` (upper minus lower) so it can be drawn as a stacked area.
    Widths are not clamped: a degenerate hour may produce a negative width.

    Raises ``NoDataError`` when *stats* has no rows.
    """
    if stats.empty:
        raise NoDataError("No hourly statistics available to plot.")

    p5 = stats["p5"].astype(float).tolist()
    p25 = stats["p25"].astype(float).tolist()
    p75 = stats["p75"].astype(float).tolist()
    p95 = stats["p95"].astype(float).tolist()

    return {
        "hours": [str(int(h)) for h in stats["hour"]],
        "mean": stats["mean"].astype(float).tolist(),
        "p5": p5,
        "p25": p25,
        "p75": p75,
        "p95": p95,
        "floor_5_95": list(p5),
        "width_5_95": [high - low for low, high in zip(p5, p95)],
        "floor_25_75": list(p25),
        "width_25_75": [high - low for low, high in zip(p25, p75)],
        "y_axis_max": axis_ceiling(max(p95)),
    }
