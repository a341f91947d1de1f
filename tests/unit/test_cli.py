"""Unit tests for the command-line interface."""

import pandas as pd
from typer.testing import CliRunner

from rainharvest.cli import app, format_summary

runner = CliRunner()

BASE_ARGS = ["assess", "Mumbai", "--roof-area", "100", "--land-area", "200", "--seed", "1"]


def test_assess_prints_summary():
    result = runner.invoke(app, BASE_ARGS)

    assert result.exit_code == 0
    assert "Feasibility:     excellent (90%)" in result.output
    assert "Coastal Alluvial" in result.output
    assert "Warning:         Saltwater intrusion risk in coastal areas" in result.output


def test_assess_writes_pdf_and_csv(tmp_path):
    pdf_path = tmp_path / "report.pdf"
    csv_path = tmp_path / "report.csv"

    result = runner.invoke(app, [*BASE_ARGS, "--pdf", str(pdf_path), "--csv", str(csv_path)])

    assert result.exit_code == 0
    assert pdf_path.read_bytes().startswith(b"%PDF-")
    assert pd.read_csv(csv_path).loc[0, "district"] == "Mumbai"


def test_assess_with_options():
    result = runner.invoke(
        app,
        [*BASE_ARGS, "--roof-type", "metal", "--soil-type", "clay", "--dwellers", "6"],
    )

    assert result.exit_code == 0
    assert "Storage Tank" in result.output


def test_empty_address_fails():
    result = runner.invoke(app, ["assess", "  ", "--roof-area", "100", "--land-area", "200"])

    assert result.exit_code == 1
    assert "Address is required" in result.output


def test_invalid_roof_area_fails():
    result = runner.invoke(app, ["assess", "Pune", "--roof-area", "0", "--land-area", "200"])

    assert result.exit_code == 1
    assert "Invalid property details" in result.output


def test_roof_below_form_minimum_fails():
    result = runner.invoke(app, ["assess", "Pune", "--roof-area", "0.5", "--land-area", "200"])

    assert result.exit_code == 1
    assert "'roof_area' must be at least 10" in result.output


def test_negative_seed_fails_cleanly():
    result = runner.invoke(app, [*BASE_ARGS[:-1], "-1"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert isinstance(result.exception, SystemExit)


def test_unknown_roof_type_is_a_usage_error():
    result = runner.invoke(app, [*BASE_ARGS, "--roof-type", "glass"])

    assert result.exit_code == 2


def test_format_summary(mumbai_report):
    summary = format_summary(mumbai_report)

    assert "Mumbai (Mumbai)" in summary
    assert "Annual harvest:  216,155 litres" in summary
    assert "INR 18,000" in summary
