import json


def export_hourly_stats(stats, export_path, verbose=False):
    """Export the hourly statistics table to a .json or .csv file."""
    export_data = [
        {
            "hour": int(row["hour"]),
            "count": int(row["count"]),
            "mean": round(float(row["mean"]), 1),
            "p5": float(row["p5"]),
            "p25": float(row["p25"]),
            "p75": float(row["p75"]),
            "p95": float(row["p95"]),
        }
        for row in stats.to_dict("records")
    ]

    if export_path.endswith(".json"):
        with open(export_path, "w") as f:
            json.dump(export_data, f, indent=2)
    elif export_path.endswith(".csv"):
        stats.to_csv(export_path, index=False)
    else:
        print(f"Warning: Unrecognized export format for '{export_path}'. Use .json or .csv")
        return
    if verbose:
        print(f"Hourly statistics exported to: {export_path}")
