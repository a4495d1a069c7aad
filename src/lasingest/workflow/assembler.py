"""
Well assembler.

Turns a ParseResult into a Well record and its depth samples, the shape
the persistence layer stores.
"""

import logging
import uuid
from typing import Optional

from dateutil import parser as date_parser

from lasingest.models import Curve, Well, WellDataPoint
from lasingest.parsers import ParseResult, WellMetadata, row_depth

from .result import AssemblyResult

logger = logging.getLogger(__name__)


class WellAssembler:
    """
    Assembles parsed LAS content into schema-ready well records.

    Workflow:
    1. Reject structurally empty input (no curves, no data rows)
    2. Build the Well from the derived metadata and curve catalog
    3. Build one WellDataPoint per row, keyed by its depth curve

    Example:
        assembler = WellAssembler()
        result = assembler.assemble(parser.parse("well.las"), source_file="well.las")

        if result.is_complete:
            print(f"{result.well.well_name}: {len(result.data_points)} samples")
    """

    def assemble(self, parsed: ParseResult, source_file: Optional[str] = None) -> AssemblyResult:
        """
        Assemble well records from a parse result.

        Args:
            parsed: Output of LASParser
            source_file: Optional path of the LAS file, kept on the Well

        Returns:
            AssemblyResult with the well, its data points and any issues
        """
        result = AssemblyResult(source_file=source_file)

        if not parsed.curves:
            result.errors.append("No curve definitions found in ~CURVE section")
        if not parsed.data:
            result.errors.append("No data rows found in ~ASCII section")
        if result.has_errors:
            return result

        metadata = parsed.metadata()
        result.well = self._build_well(parsed, metadata, source_file, result.warnings)
        result.data_points = self._build_data_points(parsed, result.well.id, result.warnings)

        logger.info(
            f"Assembled well '{result.well.well_name}' with "
            f"{len(result.well.curves)} curves and {len(result.data_points)} data points"
        )
        return result

    def _build_well(
        self,
        parsed: ParseResult,
        metadata: WellMetadata,
        source_file: Optional[str],
        warnings: list[str],
    ) -> Well:
        """Build the parent Well record."""
        if not metadata.name:
            warnings.append("Well name (WELL) not found, using 'Unknown'")

        date_analyzed = None
        if metadata.date_analyzed:
            try:
                date_analyzed = date_parser.parse(metadata.date_analyzed)
            except (ValueError, OverflowError):
                warnings.append(f"Could not parse DATE: {metadata.date_analyzed}")

        return Well(
            id=str(uuid.uuid4()),
            well_name=metadata.name or "Unknown",
            company=metadata.company,
            field=metadata.field,
            location=metadata.location,
            country=metadata.country,
            state=metadata.state,
            uwi=metadata.uwi,
            api=metadata.api,
            start_depth=metadata.start_depth,
            stop_depth=metadata.stop_depth,
            step=metadata.step,
            null_value=metadata.null_value,
            date_analyzed=date_analyzed,
            source_file=source_file,
            curves=[
                Curve(mnemonic=c.mnemonic, unit=c.unit, description=c.description)
                for c in parsed.curves
            ],
            metadata={
                "version": parsed.version,
                "total_data_points": len(parsed.data),
            },
        )

    def _build_data_points(
        self, parsed: ParseResult, well_id: Optional[str], warnings: list[str]
    ) -> list[WellDataPoint]:
        """Build one data point per row that carries a depth."""
        points = []
        skipped = 0

        for row in parsed.data:
            depth = row_depth(row)
            if depth is None:
                skipped += 1
                continue
            points.append(WellDataPoint(well_id=well_id, depth=depth, measurements=row))

        if skipped:
            warnings.append(f"{skipped} data row(s) without a depth value were skipped")
            logger.warning(f"Skipped {skipped} data rows without depth")

        return points
