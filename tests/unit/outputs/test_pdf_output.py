"""Unit tests for PDF output strategy."""

import pytest

from rainharvest.outputs import PDFOutputStrategy, report_filename
from rainharvest.outputs.pdf import FAIR_RGB, GOOD_RGB, POOR_RGB, status_colour
from tests.utils import make_property


@pytest.fixture
def strategy():
    return PDFOutputStrategy()


def test_render_returns_pdf_bytes(strategy, mumbai_report):
    content = strategy.render([mumbai_report])

    assert isinstance(content, bytes)
    assert content.startswith(b"%PDF-")


def test_write_creates_file(strategy, mumbai_report, tmp_path):
    output_path = tmp_path / "out" / "report.pdf"

    result = strategy.write([mumbai_report, mumbai_report], output_path)

    assert result == output_path
    assert output_path.read_bytes().startswith(b"%PDF-")


def test_non_latin_text_is_replaced(strategy, mumbai_report):
    report = mumbai_report.model_copy(
        update={"property": make_property(name="ಶರ್ಮಾ ನಿವಾಸ", additional_info="₹ budget")}
    )

    assert strategy.render([report]).startswith(b"%PDF-")


def test_unrecoverable_economics_render(strategy, mumbai_report):
    result = mumbai_report.result
    economics = result.economics.model_copy(
        update={"payback_period": None, "recoverable": False, "cost_per_litre": None}
    )
    report = mumbai_report.model_copy(
        update={"result": result.model_copy(update={"economics": economics})}
    )

    assert strategy.render([report]).startswith(b"%PDF-")


def test_empty_reports_rejected(strategy, tmp_path):
    with pytest.raises(ValueError, match="empty"):
        strategy.write([], tmp_path / "report.pdf")


@pytest.mark.parametrize(
    "score,expected",
    [(95, GOOD_RGB), (70, GOOD_RGB), (69, FAIR_RGB), (50, FAIR_RGB), (49, POOR_RGB)],
)
def test_status_colour(score, expected):
    assert status_colour(score) == expected


def test_report_filename(mumbai_report):
    assert report_filename(mumbai_report) == "RWH_Analysis_Sharma_Residence_2026-10-17.pdf"


def test_report_filename_without_usable_name(mumbai_report):
    report = mumbai_report.model_copy(update={"property": make_property(name="ಶರ್ಮಾ")})

    assert report_filename(report) == "RWH_Analysis_Property_2026-10-17.pdf"
