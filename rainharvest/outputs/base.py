"""Base output strategy interface for feasibility reports."""

from pathlib import Path
from typing import Protocol

from rainharvest.models.domain import FeasibilityReport


class OutputStrategy(Protocol):
    """Protocol for output strategies that serialize feasibility reports.

    Output strategies turn domain models into file formats (CSV, PDF) for
    different consumers. The orchestrator only produces reports; the caller
    decides when and where to write them.
    """

    def write(self, reports: list[FeasibilityReport], output_path: Path) -> Path:
        """Write feasibility reports to a file.

        Args:
            reports: Feasibility reports to serialize
            output_path: Path where the output file should be written

        Returns:
            Path to the written output file

        Raises:
            IOError: If writing fails
            ValueError: If reports cannot be serialized
        """
        ...
