"""Output strategies for feasibility reports."""

from rainharvest.outputs.base import OutputStrategy
from rainharvest.outputs.csv import CSVOutputStrategy
from rainharvest.outputs.pdf import PDFOutputStrategy, report_filename

__all__ = ["OutputStrategy", "CSVOutputStrategy", "PDFOutputStrategy", "report_filename"]
