"""Command-line feasibility assessment.

Usage:
    rainharvest assess Mumbai --roof-area 100 --land-area 200
    rainharvest assess "Nashik" --roof-area 150 --land-area 300 --seed 42 \\
        --pdf reports/nashik.pdf --csv reports/nashik.csv
    rainharvest assess --help
"""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from rainharvest.config import EstimatorConfig
from rainharvest.errors import ConfigurationError, InvalidInputError
from rainharvest.models.domain import FeasibilityReport, PropertyAttributes
from rainharvest.models.enums import BuildingType, RoofType, SoilType
from rainharvest.models.request import AssessmentRequest
from rainharvest.orchestrator import FeasibilityOrchestrator
from rainharvest.outputs import CSVOutputStrategy, PDFOutputStrategy

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Rainwater harvesting feasibility calculator")


@app.callback()
def main():
    """Rainwater harvesting feasibility calculator."""


def format_summary(report: FeasibilityReport) -> str:
    """Render a short plain-text summary of a report for the terminal."""
    result = report.result
    economics = result.economics
    dimensions = result.recommendation.dimensions
    payback = (
        f"{economics.payback_period:.1f} years"
        if economics.payback_period is not None
        else "not recoverable"
    )

    lines = [
        f"Location:        {report.location.address} ({report.location.district}) "
        f"{report.location.latitude:.4f}, {report.location.longitude:.4f}",
        f"Rainfall:        {report.rainfall.annual_rainfall:g} mm/year "
        f"({report.rainfall.prediction.trend.value}) - {report.rainfall.source}",
        f"Aquifer:         {report.aquifer.aquifer_name} "
        f"[{report.aquifer.suitability.rainwater_harvesting.value}]",
        f"Feasibility:     {result.feasibility.status.value} ({result.feasibility.score}%)",
        f"Annual harvest:  {result.potential.annual_harvest:,} litres",
        f"Structure:       {result.recommendation.primary_structure.value} "
        f"{dimensions.length}m x {dimensions.width}m x {dimensions.depth}m "
        f"({dimensions.capacity:,} litres)",
        f"Cost:            INR {economics.total_cost:,}, payback {payback}",
    ]
    for warning in report.aquifer.warnings:
        lines.append(f"Warning:         {warning}")
    return "\n".join(lines)


@app.command()
def assess(
    address: str = typer.Argument(..., help="Address or city name of the property"),
    roof_area: float = typer.Option(..., "--roof-area", help="Roof area in square metres"),
    land_area: float = typer.Option(..., "--land-area", help="Land area in square metres"),
    roof_type: RoofType = typer.Option(RoofType.CONCRETE, "--roof-type", help="Roof material"),
    soil_type: SoilType = typer.Option(SoilType.LOAMY, "--soil-type", help="Soil type"),
    building_type: BuildingType = typer.Option(
        BuildingType.RESIDENTIAL, "--building-type", help="Building category"
    ),
    dwellers: int = typer.Option(4, "--dwellers", help="Number of residents"),
    name: str = typer.Option("", "--name", help="Owner or property name"),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed for reproducible estimates (overrides EST_SEED)"
    ),
    pdf: Path | None = typer.Option(None, "--pdf", help="Write the PDF report to this path"),
    csv: Path | None = typer.Option(None, "--csv", help="Write the CSV row to this path"),
):
    """Assess rainwater harvesting feasibility for one property."""
    try:
        property_attributes = PropertyAttributes(
            name=name,
            dwellers=dwellers,
            roof_area=roof_area,
            roof_type=roof_type,
            soil_type=soil_type,
            land_area=land_area,
            building_type=building_type,
        )
    except ValidationError as e:
        typer.echo(f"Invalid property details: {e}", err=True)
        raise typer.Exit(1) from e

    try:
        estimator_config = EstimatorConfig(seed=seed) if seed is not None else EstimatorConfig()
        orchestrator = FeasibilityOrchestrator.from_config(estimator_config)
        report = orchestrator.assess(
            AssessmentRequest(address=address, property=property_attributes)
        )
    except (InvalidInputError, ConfigurationError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(format_summary(report))

    if pdf is not None:
        PDFOutputStrategy().write([report], pdf)
        typer.echo(f"PDF report written to {pdf}")
    if csv is not None:
        CSVOutputStrategy().write([report], csv)
        typer.echo(f"CSV written to {csv}")


if __name__ == "__main__":
    app()
