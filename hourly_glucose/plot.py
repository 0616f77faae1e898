import numpy as np
import matplotlib.pyplot as plt
from matplotlib.ticker import MultipleLocator

from .bands import AXIS_INTERVAL

DPI = 100

# (series key, legend label, line color)
PERCENTILE_LINES = [
    ("p5", "5th Percentile", "#d33"),
    ("p95", "95th Percentile", "#833"),
    ("p25", "25th Percentile", "#33d"),
    ("p75", "75th Percentile", "#338"),
]


def _fill_band(ax, x, floor, width, color, alpha):
    """Draw a band as the area between *floor* and *floor* + *width*."""
    floor = np.asarray(floor, dtype=float)
    top = floor + np.asarray(width, dtype=float)
    ax.fill_between(x, floor, top, color=color, alpha=alpha, linewidth=0)


def generate_hourly_plot(bands, cfg, *, output_path=None, verbose=False, show=False, close=False):
    """Render the hourly glucose chart and return it.

    Args:
        bands: Series dict from :func:`build_bands`.
        cfg: Configuration dict from :func:`build_config`; supplies the
            ``WIDTH`` and ``HEIGHT`` of the image in pixels.
        output_path: If given, save the figure as PNG to this path.
        verbose: Print where the figure was saved.
        show: If ``True`` call ``plt.show()`` after building the figure.
        close: If ``True`` close the figure after building it.

    Returns:
        matplotlib.figure.Figure: The completed chart.
    """
    fig = plt.figure(
        figsize=(cfg["WIDTH"] / DPI, cfg["HEIGHT"] / DPI), dpi=DPI, facecolor="white"
    )
    ax = fig.add_subplot(1, 1, 1)
    ax.set_facecolor("white")

    x = np.arange(len(bands["hours"]))

    # Envelopes first so the percentile lines sit on top
    _fill_band(ax, x, bands["floor_5_95"], bands["width_5_95"], "#ddd", 0.5)
    _fill_band(ax, x, bands["floor_25_75"], bands["width_25_75"], "#ccc", 0.65)

    for key, label, color in PERCENTILE_LINES:
        ax.plot(x, bands[key], color=color, linewidth=1.5, label=label)
    ax.plot(x, bands["mean"], color="#4d4", linewidth=2, label="Mean Glucose")

    ax.set_title("Hourly Mean Glucose Levels", fontsize=14)
    ax.set_xlabel("Hour of the Day", fontsize=12)
    ax.set_ylabel("Glucose Value (mg/dL)", fontsize=12)

    ax.set_xticks(x)
    ax.set_xticklabels(bands["hours"])
    if len(x) > 1:
        ax.set_xlim(x[0], x[-1])

    ax.set_ylim(0, bands["y_axis_max"])
    ax.yaxis.set_major_locator(MultipleLocator(AXIS_INTERVAL))
    ax.grid(True, axis="y", alpha=0.3)

    fig.legend(loc="lower center", ncol=5, frameon=False, fontsize=10)
    fig.subplots_adjust(left=0.07, right=0.97, top=0.92, bottom=0.16)

    metadata = {
        "Title": "Hourly Mean Glucose Levels",
        "Description": "Hourly glucose mean with 5-95 and 25-75 percentile bands",
        "Software": "hourly-glucose",
    }

    if output_path:
        fig.savefig(output_path, dpi=DPI, facecolor="white", metadata=metadata)
        if verbose:
            print(f"Plot saved to: {output_path}")
    if show:
        plt.show()
    if close:
        plt.close(fig)
    return fig
