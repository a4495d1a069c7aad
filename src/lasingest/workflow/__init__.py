"""
Workflow module for well assembly.

Module structure:
- result.py: AssemblyResult dataclass
- assembler.py: WellAssembler, ParseResult -> Well + WellDataPoint records
"""

from pathlib import Path

from .assembler import WellAssembler
from .result import AssemblyResult

__all__ = [
    "AssemblyResult",
    "WellAssembler",
    "assemble_from_file",
]


def assemble_from_file(las_path: str | Path) -> AssemblyResult:
    """
    Convenience function to parse and assemble a LAS file in one step.

    Args:
        las_path: Path to the .las file

    Returns:
        AssemblyResult with assembled records

    Example:
        result = assemble_from_file("/data/wells/15_9-F-11.las")

        if result.is_complete:
            print(f"Assembled {len(result.data_points)} samples")
    """
    from lasingest.parsers import LASParser

    parsed = LASParser().parse(las_path)
    return WellAssembler().assemble(parsed, source_file=str(las_path))
