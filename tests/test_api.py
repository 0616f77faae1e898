"""Tests for the public generate_chart() API."""

import json
import os

import matplotlib.figure
import pytest

from hourly_glucose import EmptyInputError, SchemaError, generate_chart

from conftest import GLUCOSE, TS


def test_generate_chart_returns_figure(export_csv, tmp_path):
    fig = generate_chart(export_csv, output=str(tmp_path / "out.png"), close=True)
    assert isinstance(fig, matplotlib.figure.Figure)


def test_generate_chart_saves_png(export_csv, tmp_path):
    out = str(tmp_path / "out.png")
    generate_chart(export_csv, output=out, close=True)
    assert os.path.exists(out)


def test_generate_chart_skips_saving_without_output(export_csv, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    generate_chart(export_csv, output=None, close=True)
    assert not (tmp_path / "glucose_levels.png").exists()


def test_generate_chart_default_output_in_cwd(export_csv, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    generate_chart(export_csv, close=True)
    assert (tmp_path / "glucose_levels.png").exists()


def test_generate_chart_no_show_by_default(export_csv, tmp_path, monkeypatch):
    import matplotlib.pyplot as plt

    show_called = []
    monkeypatch.setattr(plt, "show", lambda: show_called.append(True))
    generate_chart(export_csv, output=str(tmp_path / "out.png"), close=True)
    assert show_called == []


def test_generate_chart_export_json(export_csv, tmp_path):
    export_path = str(tmp_path / "hourly.json")
    generate_chart(export_csv, output=None, export=export_path, close=True)
    with open(export_path) as f:
        data = json.load(f)
    assert [row["hour"] for row in data] == list(range(24))


def test_generate_chart_with_config_override(tmp_path):
    csv_path = tmp_path / "renamed.csv"
    csv_path.write_text("Time,BG\n2024-01-01T08:00:00,100\n2024-01-01T08:05:00,Low\n")
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text(json.dumps({"timestamp_column": "Time", "glucose_column": "BG"}))
    export_path = str(tmp_path / "hourly.json")
    generate_chart(
        str(csv_path), output=None, config=str(cfg_path), export=export_path, close=True
    )
    with open(export_path) as f:
        data = json.load(f)
    assert data[0]["hour"] == 8
    assert data[0]["mean"] == 65.0


def test_generate_chart_missing_column(tmp_path):
    csv_path = tmp_path / "bad.csv"
    csv_path.write_text(f"{TS},Other\n2024-01-01T08:00:00,100\n")
    with pytest.raises(SchemaError):
        generate_chart(str(csv_path), output=None, close=True)


def test_generate_chart_no_valid_rows(tmp_path):
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text(f"{TS},{GLUCOSE}\n,\nbad,-4\n")
    with pytest.raises(EmptyInputError):
        generate_chart(str(csv_path), output=None, close=True)
