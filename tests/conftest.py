import matplotlib

matplotlib.use("Agg")

import pandas as pd  # noqa: E402
import pytest  # noqa: E402

TS = "Timestamp (YYYY-MM-DDThh:mm:ss)"
GLUCOSE = "Glucose Value (mg/dL)"


@pytest.fixture
def cfg():
    """Default config matching build_config defaults."""
    return {
        "TIMESTAMP_COLUMN": TS,
        "GLUCOSE_COLUMN": GLUCOSE,
        "TIMESTAMP_FORMAT": "%Y-%m-%dT%H:%M:%S",
        "LOW_TOKEN": "Low",
        "LOW_VALUE": 30,
        "WIDTH": 1400,
        "HEIGHT": 800,
    }


@pytest.fixture
def raw_df():
    """Export-shaped rows, all strings, including device header rows and bad values."""
    return pd.DataFrame({
        "Index": ["1", "2", "3", "4", "5", "6", "7", "8", "9"],
        TS: [
            "",                      # device info row
            "2024-01-01T08:00:00",
            "2024-01-01T08:05:00",
            "2024-01-01T09:00:00",
            "2024-01-02T08:10:00",
            "2024-01-02T09:30:00",
            "not-a-date",
            "2024-01-02T10:00:00",
            "2024-01-02T10:05:00",
        ],
        "Event Type": ["Device", "EGV", "EGV", "EGV", "EGV", "EGV", "EGV", "EGV", "EGV"],
        GLUCOSE: ["", "Low", "90", "120", "150", "-1", "100", "abc", "0"],
    })


@pytest.fixture
def week_df():
    """7 days of 5-minute export rows with a daily sinusoidal pattern."""
    import numpy as np

    rng = pd.date_range("2024-01-01", periods=2016, freq="5min")
    t = np.arange(len(rng))
    glucose = np.round(120 + 50 * np.sin(2 * np.pi * t / (24 * 12))).astype(int)
    values = [str(v) for v in glucose]
    values[300:310] = ["Low"] * 10
    return pd.DataFrame({
        TS: rng.strftime("%Y-%m-%dT%H:%M:%S"),
        GLUCOSE: values,
    })


@pytest.fixture
def export_csv(tmp_path, week_df):
    """Write the week_df fixture to a temporary CSV export."""
    path = tmp_path / "export.csv"
    week_df.to_csv(path, index=False)
    return str(path)
