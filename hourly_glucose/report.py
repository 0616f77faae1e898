def print_hourly_summary(stats, bands):
    """Print the hourly statistics table to stdout."""
    print("\n" + "=" * 60)
    print("HOURLY GLUCOSE SUMMARY (mg/dL)")
    print("=" * 60)
    print(f"{'Hour':>4} {'n':>6} {'Mean':>8} {'P5':>7} {'P25':>7} {'P75':>7} {'P95':>7}")
    print("-" * 60)
    for row in stats.to_dict("records"):
        print(
            f"{row['hour']:>4d} {row['count']:>6d} {row['mean']:>8.1f} "
            f"{row['p5']:>7.0f} {row['p25']:>7.0f} {row['p75']:>7.0f} {row['p95']:>7.0f}"
        )
    print("-" * 60)
    print(f"Hours with data: {len(stats)} of 24")
    print(f"Readings: {int(stats['count'].sum())}")
    print(f"Y axis ceiling: {bands['y_axis_max']:g}")

    if len(stats) < 24:
        missing = sorted(set(range(24)) - set(stats["hour"]))
        print(f"Warning: No readings for hour(s) {', '.join(map(str, missing))}.")
