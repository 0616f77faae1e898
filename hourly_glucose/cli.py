import argparse
import json
from importlib.metadata import PackageNotFoundError, version

from .config import GLUCOSE_COLUMN, TIMESTAMP_COLUMN

try:
    __version__ = version("hourly-glucose")
except PackageNotFoundError:
    __version__ = "1.0.0"


def build_parser():
    """Construct and return the ArgumentParser for the hourly glucose chart."""
    parser = argparse.ArgumentParser(
        description="Chart hourly glucose mean and percentile bands from a CGM CSV export"
    )
    parser.add_argument("input_file", help="Path to the CGM CSV export")
    parser.add_argument(
        "--output",
        "-o",
        default="glucose_levels.png",
        help="Output PNG filename (default: glucose_levels.png)",
    )
    parser.add_argument(
        "--timestamp-column",
        default=TIMESTAMP_COLUMN,
        help=f"Header of the timestamp column (default: '{TIMESTAMP_COLUMN}')",
    )
    parser.add_argument(
        "--glucose-column",
        default=GLUCOSE_COLUMN,
        help=f"Header of the glucose value column (default: '{GLUCOSE_COLUMN}')",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=1400,
        help="Image width in pixels (default: 1400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=800,
        help="Image height in pixels (default: 800)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print progress and the hourly summary table",
    )
    parser.add_argument(
        "--export",
        "-e",
        default="",
        help="Export hourly statistics to file. Use .csv or .json extension (e.g. hourly.json)",
    )
    parser.add_argument("--config", "-c", help="Configuration file with parameters")

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def apply_config_file(args, config_path):
    """Override attributes of *args* with matching keys from a JSON file."""
    with open(config_path) as f:
        overrides = json.load(f)
    for key, value in overrides.items():
        if hasattr(args, key):
            setattr(args, key, value)
    if args.verbose:
        print(f"Loaded configuration from {config_path}")
    return args


def parse_args(argv=None):
    """Parse command-line arguments and apply any config file overrides."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        try:
            apply_config_file(args, args.config)
        except (OSError, json.JSONDecodeError) as e:
            parser.error(f"could not load config file {args.config}: {e}")

    return args
