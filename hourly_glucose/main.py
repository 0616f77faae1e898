import sys

from .bands import build_bands
from .cli import parse_args
from .config import build_config
from .data import load_readings
from .export import export_hourly_stats
from .plot import generate_hourly_plot
from .report import print_hourly_summary
from .stats import build_hourly_stats


def run(args):
    cfg = build_config(args)
    df = load_readings(args.input_file, cfg, verbose=args.verbose)
    stats = build_hourly_stats(df, cfg)
    bands = build_bands(stats)
    generate_hourly_plot(bands, cfg, output_path=args.output, close=True)
    print(f"Plot has been saved as {args.output}")
    if args.verbose:
        print_hourly_summary(stats, bands)
    if args.export:
        export_hourly_stats(stats, args.export, verbose=args.verbose)
    return stats


def main(argv=None):
    args = parse_args(argv)
    try:
        run(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
