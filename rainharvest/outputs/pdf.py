"""PDF output strategy for feasibility reports.

Renders the exportable analysis document: location, property, feasibility
(with a coloured status badge), harvesting potential, recommended structure,
economics and environmental impact, followed by a fixed footer citing the
data sources and design standard. One page per report.
"""

import logging
import re
from pathlib import Path

from fpdf import FPDF, XPos, YPos

from rainharvest.models.domain import FeasibilityReport

logger = logging.getLogger(__name__)

TITLE = "RAINWATER HARVESTING ANALYSIS REPORT"
DATA_SOURCES_NOTE = "Data sources: IMD, CGWB, NAQUIM | Calculations based on IS 15797:2008 standards"
GENERATOR_NOTE = "Generated by the Rainwater Harvesting Feasibility Calculator"

PRIMARY_RGB = (37, 99, 235)
FOOTER_FILL_RGB = (248, 250, 252)
FOOTER_TEXT_RGB = (100, 116, 139)

# Status badge colours by score (green / amber / red)
GOOD_SCORE_THRESHOLD = 70
FAIR_SCORE_THRESHOLD = 50
GOOD_RGB = (5, 150, 105)
FAIR_RGB = (245, 158, 11)
POOR_RGB = (239, 68, 68)


def status_colour(score: int) -> tuple[int, int, int]:
    """Badge colour for a feasibility score."""
    if score >= GOOD_SCORE_THRESHOLD:
        return GOOD_RGB
    if score >= FAIR_SCORE_THRESHOLD:
        return FAIR_RGB
    return POOR_RGB


def _latin1(text: str) -> str:
    """Core PDF fonts only cover latin-1; replace anything else."""
    return text.encode("latin-1", "replace").decode("latin-1")


def _amount(value: float) -> str:
    return f"{value:,.0f}"


class ReportPDF(FPDF):
    """A4 report document with the shared header band and footer."""

    def __init__(self, generated_on: str = ""):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.generated_on = generated_on
        self.set_auto_page_break(auto=True, margin=35)

    def header(self):
        self.set_fill_color(*PRIMARY_RGB)
        self.rect(0, 0, self.w, 30, style="F")
        self.set_text_color(255, 255, 255)
        self.set_font("Helvetica", "B", 18)
        self.set_y(10)
        self.cell(0, 10, TITLE, new_x=XPos.LMARGIN, new_y=YPos.NEXT, align="C")
        self.set_text_color(0, 0, 0)
        self.set_y(40)

    def footer(self):
        self.set_fill_color(*FOOTER_FILL_RGB)
        self.rect(0, self.h - 30, self.w, 30, style="F")
        self.set_text_color(*FOOTER_TEXT_RGB)
        self.set_font("Helvetica", "", 8)
        self.set_y(-25)
        self.cell(0, 5, GENERATOR_NOTE, new_x=XPos.LMARGIN, new_y=YPos.NEXT, align="C")
        self.cell(
            0,
            5,
            f"Report generated on: {self.generated_on}",
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
            align="C",
        )
        self.cell(0, 5, DATA_SOURCES_NOTE, new_x=XPos.LMARGIN, new_y=YPos.NEXT, align="C")
        self.set_text_color(0, 0, 0)

    def section_title(self, title: str):
        self.set_font("Helvetica", "B", 14)
        self.set_text_color(*PRIMARY_RGB)
        self.cell(0, 9, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(0, 0, 0)

    def write_lines(self, lines: list[str]):
        self.set_font("Helvetica", "", 10)
        for line in lines:
            self.multi_cell(0, 5, _latin1(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(4)

    def status_badge(self, status: str, score: int):
        self.set_fill_color(*status_colour(score))
        self.set_text_color(255, 255, 255)
        self.set_font("Helvetica", "B", 12)
        self.cell(50, 10, status.upper(), fill=True, align="C")
        self.set_text_color(0, 0, 0)
        self.set_font("Helvetica", "", 10)
        self.cell(0, 10, f"  Score: {score}%", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(2)


class PDFOutputStrategy:
    """Writes feasibility reports to a PDF document."""

    def write(self, reports: list[FeasibilityReport], output_path: Path) -> Path:
        """Write feasibility reports to a PDF file, one page each.

        Raises:
            ValueError: If reports list is empty
        """
        if not reports:
            raise ValueError("Cannot write PDF: reports list is empty")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.render(reports))
        logger.info(f"Wrote {len(reports)} report page(s) to {output_path}")

        return output_path

    def render(self, reports: list[FeasibilityReport]) -> bytes:
        """Render reports to PDF bytes."""
        if not reports:
            raise ValueError("Cannot render PDF: reports list is empty")

        pdf = ReportPDF(generated_on=reports[0].generated_at.strftime("%d/%m/%Y"))
        for report in reports:
            pdf.generated_on = report.generated_at.strftime("%d/%m/%Y")
            pdf.add_page()
            self._render_report(pdf, report)

        return bytes(pdf.output())

    def _render_report(self, pdf: ReportPDF, report: FeasibilityReport) -> None:
        location = report.location
        prop = report.property
        result = report.result
        potential = result.potential
        dimensions = result.recommendation.dimensions
        economics = result.economics
        environmental = result.environmental

        pdf.section_title("LOCATION DETAILS")
        pdf.write_lines(
            [
                f"Address: {location.address}",
                f"Coordinates: {location.latitude:.4f} N, {location.longitude:.4f} E",
                f"District: {location.district}",
            ]
        )

        pdf.section_title("PROPERTY INFORMATION")
        pdf.write_lines(
            [
                f"Owner: {prop.name or 'Not provided'}",
                f"Residents: {prop.dwellers} people",
                f"Roof Area: {prop.roof_area:g} sq.m ({prop.roof_type.value})",
                f"Soil Type: {prop.soil_type.value}",
                f"Land Area: {prop.land_area:g} sq.m ({prop.building_type.value})",
            ]
        )

        pdf.section_title("FEASIBILITY ASSESSMENT")
        pdf.status_badge(result.feasibility.status.value, result.feasibility.score)
        pdf.write_lines([f"Assessment: {'; '.join(result.feasibility.reasons)}"])

        pdf.section_title("HARVESTING POTENTIAL")
        pdf.write_lines(
            [
                f"Annual Harvest Potential: {_amount(potential.annual_harvest)} liters",
                f"Monthly Average: {_amount(potential.monthly_average)} liters",
                f"Peak Month Harvest: {_amount(potential.peak_month_harvest)} liters",
                f"System Efficiency: {potential.efficiency}%",
            ]
        )

        pdf.section_title("RECOMMENDED STRUCTURE")
        pdf.write_lines(
            [
                f"Structure Type: {result.recommendation.primary_structure.value}",
                f"Capacity: {_amount(dimensions.capacity)} liters",
                f"Dimensions: {dimensions.length}m x {dimensions.width}m x {dimensions.depth}m",
                f"Components: {', '.join(result.recommendation.secondary_structures)}",
            ]
        )

        payback = (
            f"{economics.payback_period:.1f} years"
            if economics.payback_period is not None
            else "Not recoverable"
        )
        cost_per_litre = (
            f"INR {economics.cost_per_litre:.2f}" if economics.cost_per_litre is not None else "n/a"
        )
        pdf.section_title("ECONOMIC ANALYSIS")
        pdf.write_lines(
            [
                f"Total Implementation Cost: INR {_amount(economics.total_cost)}",
                f"Cost Per Liter: {cost_per_litre}",
                f"Payback Period: {payback}",
                f"Annual Water Bill Savings: INR {_amount(economics.annual_savings)}",
            ]
        )

        pdf.section_title("ENVIRONMENTAL IMPACT")
        pdf.write_lines(
            [
                f"Annual CO2 Reduction: {environmental.carbon_reduction} kg",
                f"Groundwater Recharge: {_amount(environmental.groundwater_recharge)} L/year",
                f"Flood Runoff Reduction: {environmental.flood_reduction}%",
            ]
        )


def report_filename(report: FeasibilityReport) -> str:
    """Download filename, e.g. RWH_Analysis_Sharma_Residence_2026-10-17.pdf."""
    name = re.sub(r"[^A-Za-z0-9_-]", "", "_".join(report.property.name.split())) or "Property"
    return f"RWH_Analysis_{name}_{report.generated_at.date().isoformat()}.pdf"
