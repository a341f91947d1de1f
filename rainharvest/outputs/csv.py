"""CSV output strategy for feasibility reports.

Flattens each report into one row so batches of assessments can be compared
in a spreadsheet. Column names follow the field names of the domain models.
"""

from pathlib import Path

import pandas as pd

from rainharvest.models.domain import FeasibilityReport


class CSVOutputStrategy:
    """Writes feasibility reports to CSV, one row per report.

    The CSV columns represent:
    - Location (address, district, coordinates)
    - Property attributes (roof, soil, land)
    - Rainfall and aquifer summary (annual rainfall, trend, suitability)
    - Harvesting result (feasibility, potential, structure, economics, environment)
    """

    def write(self, reports: list[FeasibilityReport], output_path: Path) -> Path:
        """Write feasibility reports to a CSV file.

        Args:
            reports: Feasibility reports to serialize
            output_path: Path where CSV file should be written

        Returns:
            Path to the written CSV file

        Raises:
            IOError: If writing fails
            ValueError: If reports list is empty
        """
        if not reports:
            raise ValueError("Cannot write CSV: reports list is empty")

        df = self.to_dataframe(reports)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)

        return output_path

    def to_dataframe(self, reports: list[FeasibilityReport]) -> pd.DataFrame:
        """Build the DataFrame with explicit column order."""
        rows = [self._report_to_row(report) for report in reports]
        df = pd.DataFrame(rows)
        return df[self._get_column_order()]

    def _report_to_row(self, report: FeasibilityReport) -> dict:
        """Convert a single FeasibilityReport to a CSV row dictionary."""
        result = report.result
        dimensions = result.recommendation.dimensions

        return {
            # Location
            "address": report.location.address,
            "district": report.location.district,
            "latitude": report.location.latitude,
            "longitude": report.location.longitude,
            # Property
            "name": report.property.name,
            "dwellers": report.property.dwellers,
            "roof_area": report.property.roof_area,
            "roof_type": report.property.roof_type.value,
            "soil_type": report.property.soil_type.value,
            "land_area": report.property.land_area,
            "building_type": report.property.building_type.value,
            # Upstream profiles
            "annual_rainfall": report.rainfall.annual_rainfall,
            "rainfall_trend": report.rainfall.prediction.trend.value,
            "rainfall_source": report.rainfall.source,
            "aquifer_name": report.aquifer.aquifer_name,
            "suitability": report.aquifer.suitability.rainwater_harvesting.value,
            # Feasibility
            "feasibility_score": result.feasibility.score,
            "feasibility_status": result.feasibility.status.value,
            # Potential
            "annual_harvest": result.potential.annual_harvest,
            "monthly_average": result.potential.monthly_average,
            "daily_average": result.potential.daily_average,
            "peak_month_harvest": result.potential.peak_month_harvest,
            "efficiency": result.potential.efficiency,
            # Structure
            "primary_structure": result.recommendation.primary_structure.value,
            "length": dimensions.length,
            "width": dimensions.width,
            "depth": dimensions.depth,
            "capacity": dimensions.capacity,
            # Economics (payback is empty when the cost is never recovered)
            "total_cost": result.economics.total_cost,
            "annual_savings": result.economics.annual_savings,
            "payback_period": result.economics.payback_period,
            "roi": result.economics.roi,
            # Environmental
            "carbon_reduction": result.environmental.carbon_reduction,
            "groundwater_recharge": result.environmental.groundwater_recharge,
            "flood_reduction": result.environmental.flood_reduction,
        }

    def _get_column_order(self) -> list[str]:
        """Get the CSV column order.

        Returns:
            List of column names in the correct order
        """
        return [
            # Location (4 columns)
            "address",
            "district",
            "latitude",
            "longitude",
            # Property (7 columns)
            "name",
            "dwellers",
            "roof_area",
            "roof_type",
            "soil_type",
            "land_area",
            "building_type",
            # Upstream profiles (5 columns)
            "annual_rainfall",
            "rainfall_trend",
            "rainfall_source",
            "aquifer_name",
            "suitability",
            # Feasibility (2 columns)
            "feasibility_score",
            "feasibility_status",
            # Potential (5 columns)
            "annual_harvest",
            "monthly_average",
            "daily_average",
            "peak_month_harvest",
            "efficiency",
            # Structure (5 columns)
            "primary_structure",
            "length",
            "width",
            "depth",
            "capacity",
            # Economics (4 columns)
            "total_cost",
            "annual_savings",
            "payback_period",
            "roi",
            # Environmental (3 columns)
            "carbon_reduction",
            "groundwater_recharge",
            "flood_reduction",
        ]
