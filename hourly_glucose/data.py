import pandas as pd

from .errors import SchemaError

# Signed integer, nothing else ("90.5", " 90" and "" do not qualify).
_INTEGER_PATTERN = r"[+-]?\d+"
_INT32_MAX = 2**31 - 1


def read_export(input_file):
    """Read a CGM CSV export keeping every cell as the raw string.

    Empty cells stay as ``""`` so the cleaning rules, not pandas' NA
    inference, decide what is missing.  Reader errors propagate unchanged.
    """
    return pd.read_csv(input_file, dtype=str, keep_default_na=False)


def _normalize_glucose(raw, cfg):
    """Map the raw glucose strings to a nullable integer series."""
    is_integer = raw.str.fullmatch(_INTEGER_PATTERN).fillna(False).astype(bool)
    numeric = pd.to_numeric(raw.where(is_integer), errors="coerce").astype("float64")
    # Readings beyond a 32-bit integer do not parse
    numeric = numeric.where(numeric.abs() <= _INT32_MAX)

    glucose = numeric.astype("Int64").mask(raw == cfg["LOW_TOKEN"], cfg["LOW_VALUE"])

    # Negative readings are sensor-error sentinels
    return glucose.mask((glucose < 0).fillna(False))


def _parse_timestamps(raw, cfg):
    parsed = pd.to_datetime(raw, format=cfg["TIMESTAMP_FORMAT"], errors="coerce")
    return parsed.astype("datetime64[ms]")


def clean_readings(df, cfg):
    """Project, normalize and filter raw export rows.

    Returns a DataFrame with exactly the timestamp and glucose columns, where
    every row has a parsed timestamp and a non-negative integer glucose value.
    Rows are kept in their original relative order.

    Raises ``SchemaError`` if either required column is absent.
    """
    ts_col = cfg["TIMESTAMP_COLUMN"]
    glucose_col = cfg["GLUCOSE_COLUMN"]

    missing = [col for col in (ts_col, glucose_col) if col not in df.columns]
    if missing:
        raise SchemaError(
            "Missing required columns: " + ", ".join(f"'{col}'" for col in missing)
        )

    cleaned = pd.DataFrame(
        {
            ts_col: _parse_timestamps(df[ts_col], cfg),
            glucose_col: _normalize_glucose(df[glucose_col], cfg),
        }
    )
    cleaned = cleaned.dropna(subset=[ts_col, glucose_col]).reset_index(drop=True)
    cleaned[glucose_col] = cleaned[glucose_col].astype("int64")
    return cleaned


def load_readings(input_file, cfg, verbose=False):
    """Load a CSV export and return the cleaned readings DataFrame."""
    if verbose:
        print(f"Loading data from: {input_file}")

    df = read_export(input_file)
    if verbose:
        print(f"Successfully loaded {len(df)} rows from {input_file}")

    cleaned = clean_readings(df, cfg)
    if verbose:
        dropped = len(df) - len(cleaned)
        print(f"Kept {len(cleaned)} valid readings ({dropped} rows dropped)")
    return cleaned
