TIMESTAMP_COLUMN = "Timestamp (YYYY-MM-DDThh:mm:ss)"
GLUCOSE_COLUMN = "Glucose Value (mg/dL)"


def build_config(args):
    """Return a dict of all column/chart constants derived from parsed args.

    Raises ``ValueError`` if the supplied values violate basic invariants.
    """
    timestamp_column = args.timestamp_column
    glucose_column = args.glucose_column
    width = args.width
    height = args.height

    if not timestamp_column or not glucose_column:
        raise ValueError("Column names must not be empty")
    if timestamp_column == glucose_column:
        raise ValueError(
            f"Timestamp and glucose columns must differ, got '{timestamp_column}' for both"
        )
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if height <= 0:
        raise ValueError(f"height must be positive, got {height}")

    return {
        "TIMESTAMP_COLUMN": timestamp_column,
        "GLUCOSE_COLUMN": glucose_column,
        "TIMESTAMP_FORMAT": "%Y-%m-%dT%H:%M:%S",
        "LOW_TOKEN": "Low",
        "LOW_VALUE": 30,  # Device reports "Low" below its measurable floor
        "WIDTH": width,
        "HEIGHT": height,
    }
