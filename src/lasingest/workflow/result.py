"""
Assembly result dataclass.

Holds the output of turning a parsed LAS file into well records.
"""

from dataclasses import dataclass, field
from typing import Optional

from lasingest.models import Well, WellDataPoint


@dataclass
class AssemblyResult:
    """
    Result of assembling a parsed LAS file into storable records.

    Attributes:
        well: The parent well record
        data_points: One record per data row that carries a depth
        source_file: Path to the source LAS file
        warnings: Non-fatal issues encountered
        errors: Fatal issues that prevented assembly
    """

    well: Optional[Well] = None
    data_points: list[WellDataPoint] = field(default_factory=list)

    source_file: Optional[str] = None

    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """Check if the well and its data were assembled."""
        return self.well is not None and len(self.data_points) > 0

    @property
    def has_errors(self) -> bool:
        """Check if there were any errors."""
        return len(self.errors) > 0

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = ["Assembly Summary:"]

        if self.well:
            well = self.well
            lines.append(f"  Well: {well.well_name}")
            lines.append(f"    Company: {well.company or 'Unknown'}")
            lines.append(f"    Depth: {well.start_depth} - {well.stop_depth} (step {well.step})")
            lines.append(f"    Curves: {len(well.curves)}")
            lines.append(f"    Data points: {len(self.data_points)}")
        else:
            lines.append("  Well: Not assembled")

        if self.warnings:
            lines.append(f"\nWarnings ({len(self.warnings)}):")
            for w in self.warnings[:5]:  # Limit to first 5
                lines.append(f"  - {w}")

        if self.errors:
            lines.append(f"\nErrors ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  - {e}")

        return "\n".join(lines)
