"""Public library API for the hourly glucose chart.

Example::

    import matplotlib
    matplotlib.use("Agg")  # use non-interactive backend when no display is available

    from hourly_glucose import generate_chart

    fig = generate_chart("dexcom_export.csv", output="glucose_levels.png")
"""

import argparse

from .bands import build_bands
from .cli import apply_config_file
from .config import GLUCOSE_COLUMN, TIMESTAMP_COLUMN, build_config
from .data import load_readings
from .export import export_hourly_stats
from .plot import generate_hourly_plot
from .report import print_hourly_summary
from .stats import build_hourly_stats


def generate_chart(
    input_file,
    output="glucose_levels.png",
    timestamp_column=TIMESTAMP_COLUMN,
    glucose_column=GLUCOSE_COLUMN,
    width=1400,
    height=800,
    verbose=False,
    export="",
    config=None,
    show=False,
    close=False,
):
    """Run the full pipeline and return the matplotlib Figure.

    This function mirrors every option available in the CLI (except
    ``--version``): loading and cleaning the export, hourly aggregation,
    band building, plot generation, optional summary and optional export.

    Args:
        input_file (str): Path to the CGM CSV export.
        output (str | None): Output PNG filename.  ``None`` or ``""`` skips
            saving.  Default: ``"glucose_levels.png"``.
        timestamp_column (str): Header of the timestamp column.
        glucose_column (str): Header of the glucose value column.
        width (int): Image width in pixels. Default: 1400.
        height (int): Image height in pixels. Default: 800.
        verbose (bool): Print progress and the hourly summary table.
        export (str): Export hourly statistics to a ``.csv`` or ``.json``
            path.  Empty string disables export. Default: ``""``.
        config (str | None): Path to a JSON configuration file whose keys
            override the matching arguments. Default: ``None``.
        show (bool): Call ``plt.show()`` after building the figure.
        close (bool): Close the figure after building it.

    Returns:
        matplotlib.figure.Figure: The completed chart.

    Raises:
        SchemaError: A required column is missing from the export.
        EmptyInputError: No valid readings remain after cleaning.
    """
    args = argparse.Namespace(
        input_file=input_file,
        output=output,
        timestamp_column=timestamp_column,
        glucose_column=glucose_column,
        width=width,
        height=height,
        verbose=verbose,
        export=export,
        config=config,
    )
    if config:
        apply_config_file(args, config)

    cfg = build_config(args)
    df = load_readings(args.input_file, cfg, verbose=args.verbose)
    stats = build_hourly_stats(df, cfg)
    bands = build_bands(stats)

    fig = generate_hourly_plot(
        bands,
        cfg,
        output_path=args.output,
        verbose=args.verbose,
        show=show,
        close=close,
    )

    if args.verbose:
        print_hourly_summary(stats, bands)
    if args.export:
        export_hourly_stats(stats, args.export, verbose=args.verbose)

    return fig
