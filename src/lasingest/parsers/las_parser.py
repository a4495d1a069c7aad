"""
Parser for LAS (Log ASCII Standard) well-log files.

Splits the file into sections, extracts version, well information and
curve definitions from the header sections, and tokenizes the ASCII data
block into depth-indexed rows aligned to the curve list.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from lasingest.enums import Section
from lasingest.parsers.metadata import WellMetadata, extract_well_metadata
from lasingest.parsers.values import camel_case, parse_float

logger = logging.getLogger(__name__)

# Upload limit carried over from the ingestion service (100 MB)
MAX_FILE_SIZE = 100 * 1024 * 1024

DEFAULT_UNIT = "UNKN"

# Mnemonics that carry the depth of a row, in precedence order
DEPTH_MNEMONICS = ("Depth", "DEPT", "depth")

# A data row maps curve mnemonic -> value (None for an unparseable token)
DataRow = dict[str, Optional[float]]


@dataclass
class CurveDefinition:
    """A single curve (measurement channel) from the ~CURVE section."""

    mnemonic: str
    unit: str = DEFAULT_UNIT
    description: str = ""


@dataclass
class WellInfoEntry:
    """A single line of the ~WELL section."""

    value: str
    description: str
    mnemonic: str


@dataclass
class ParseResult:
    """
    Complete parsed content of a LAS file.

    Each call to LASParser.parse_content builds its own instance; nothing is
    shared between parses.
    """

    version: Optional[str] = None
    well_info: dict[str, WellInfoEntry] = field(default_factory=dict)
    curves: list[CurveDefinition] = field(default_factory=list)
    data: list[DataRow] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when no curves or no data rows were found."""
        return not self.curves or not self.data

    def curve_names(self) -> list[str]:
        """Curve mnemonics in column order."""
        return [curve.mnemonic for curve in self.curves]

    def metadata(self) -> WellMetadata:
        """Derived well metadata view."""
        return extract_well_metadata(self.well_info)

    def data_by_depth_range(
        self,
        start_depth: float,
        end_depth: float,
        curve_names: Optional[list[str]] = None,
    ) -> list[DataRow]:
        """
        Get rows whose depth lies within [start_depth, end_depth].

        Args:
            start_depth: Lower bound (inclusive)
            end_depth: Upper bound (inclusive)
            curve_names: If given, each row is reduced to its depth plus
                these curves (curves absent from a row are left out)

        Returns:
            Matching rows in file order
        """
        selected = []
        for row in self.data:
            depth = row_depth(row)
            if depth is None or not start_depth <= depth <= end_depth:
                continue
            if curve_names:
                reduced: DataRow = {"Depth": depth}
                for name in curve_names:
                    if name in row:
                        reduced[name] = row[name]
                selected.append(reduced)
            else:
                selected.append(row)
        return selected


class LASParser:
    """
    Parser for LAS 1.2 / 2.0 ASCII well-log files.

    The parser is lenient: malformed lines are skipped rather than rejected,
    and callers decide whether a (possibly empty) result is acceptable.

    Usage:
        parser = LASParser()
        result = parser.parse("/path/to/well.las")

        print(f"{len(result.curves)} curves, {len(result.data)} rows")
        print(result.metadata().start_depth)
    """

    def parse(self, file_path: str | Path) -> ParseResult:
        """
        Parse a LAS file from disk.

        Args:
            file_path: Path to the .las file

        Returns:
            ParseResult with header information and data rows

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file exceeds MAX_FILE_SIZE
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "rb") as f:
            raw = f.read()

        return self.parse_bytes(raw)

    def parse_bytes(self, raw: bytes) -> ParseResult:
        """
        Parse raw LAS file bytes (UTF-8, invalid bytes replaced).

        Raises:
            ValueError: If the payload exceeds MAX_FILE_SIZE
        """
        return self.parse_content(read_las_text(raw))

    def parse_content(self, content: str) -> ParseResult:
        """
        Parse LAS content from a string.

        Args:
            content: Full text of the LAS file

        Returns:
            ParseResult with header information and data rows
        """
        lines = content.split("\n")
        result = ParseResult()
        section: Optional[Section] = None

        for index, raw_line in enumerate(lines):
            line = raw_line.strip()

            if not line or line.startswith("#"):
                continue

            if line.startswith("~"):
                section = detect_section(line)
                logger.debug(f"Line {index + 1}: entering section {section}")
                if section == Section.DATA:
                    self._parse_data(lines[index + 1 :], result)
                    break
                continue

            self._parse_header_line(section, line, result)

        logger.info(
            f"Parsed LAS content: version={result.version}, "
            f"{len(result.curves)} curves, {len(result.data)} rows"
        )
        return result

    def _parse_header_line(
        self, section: Optional[Section], line: str, result: ParseResult
    ) -> None:
        """Fold one header line into the result for the current section."""
        if section == Section.VERSION:
            version = parse_version_line(line)
            if version is not None and result.version is None:
                result.version = version
        elif section == Section.WELL:
            entry = parse_well_line(line)
            if entry is not None:
                result.well_info[camel_case(entry.mnemonic)] = entry
            else:
                logger.debug(f"Skipping malformed well line: {line!r}")
        elif section == Section.CURVE:
            curve = parse_curve_line(line)
            if curve is not None:
                result.curves.append(curve)
            else:
                logger.debug(f"Skipping malformed curve line: {line!r}")

    def _parse_data(self, lines: list[str], result: ParseResult) -> None:
        """Tokenize every line after the ~ASCII header."""
        for line in lines:
            row = parse_data_line(line, result.curves)
            if row is not None:
                result.data.append(row)


def read_las_text(raw: bytes) -> str:
    """
    Decode raw LAS bytes to text.

    Args:
        raw: File contents

    Returns:
        Decoded text (invalid UTF-8 sequences become U+FFFD)

    Raises:
        ValueError: If the payload exceeds MAX_FILE_SIZE
    """
    if len(raw) > MAX_FILE_SIZE:
        raise ValueError(
            f"LAS file is {len(raw)} bytes, larger than the {MAX_FILE_SIZE} byte limit"
        )
    return raw.decode("utf-8", errors="replace")


def detect_section(line: str) -> Optional[Section]:
    """
    Detect which section a `~` header line opens.

    Matching is a case-insensitive substring test in fixed priority order,
    so "~Well Information" is WELL and "~A DEPTH DATA" is DATA.

    Args:
        line: A header line

    Returns:
        The Section, or None for unrecognised sections
    """
    lower = line.lower()
    if "version" in lower:
        return Section.VERSION
    if "well" in lower:
        return Section.WELL
    if "curve" in lower:
        return Section.CURVE
    if "parameter" in lower:
        return Section.PARAMETER
    if "ascii" in lower or "data" in lower:
        return Section.DATA
    return None


VERSION_PATTERN = re.compile(r"VERS\.?\s+([0-9.]+)", re.IGNORECASE)


def parse_version_line(line: str) -> Optional[str]:
    """Extract the version number from a ~VERSION line, if any."""
    match = VERSION_PATTERN.search(line)
    if match:
        return match.group(1)
    return None


def _split_description(line: str) -> Optional[tuple[str, str]]:
    """Split `MNEM.UNIT VALUE : DESCRIPTION` at the first colon."""
    parts = line.split(":")
    if len(parts) < 2:
        return None
    return parts[0].strip(), ":".join(parts[1:]).strip()


def parse_well_line(line: str) -> Optional[WellInfoEntry]:
    """
    Parse a ~WELL line of the form `MNEM.UNIT VALUE : DESCRIPTION`.

    The mnemonic is the first token up to its first `.`, and the value is
    the last token before the colon. Tokens in between (e.g. a unit
    separated by whitespace) are dropped.

    Returns:
        WellInfoEntry, or None if the line has no colon or fewer than two
        tokens before it
    """
    split = _split_description(line)
    if split is None:
        return None
    left, description = split

    tokens = left.split()
    if len(tokens) < 2:
        return None

    mnemonic = tokens[0].split(".")[0]
    return WellInfoEntry(value=tokens[-1], description=description, mnemonic=mnemonic)


def parse_curve_line(line: str) -> Optional[CurveDefinition]:
    """
    Parse a ~CURVE line of the form `MNEM.UNIT API_CODE : DESCRIPTION`.

    Returns:
        CurveDefinition, or None if the line has no colon or the mnemonic is
        empty or starts with `#`
    """
    split = _split_description(line)
    if split is None:
        return None
    left, description = split

    tokens = left.split()
    if not tokens:
        return None

    mnemonic, _, unit = tokens[0].partition(".")
    unit = unit.split(".")[0]
    if not mnemonic or mnemonic.startswith("#"):
        return None

    return CurveDefinition(mnemonic=mnemonic, unit=unit or DEFAULT_UNIT, description=description)


def parse_data_line(line: str, curves: list[CurveDefinition]) -> Optional[DataRow]:
    """
    Tokenize one line of the ~ASCII section into a row.

    Curve i receives the value of token i. Curves beyond the last token are
    left out of the row; tokens beyond the last curve are ignored.

    Args:
        line: Raw data line
        curves: Curve definitions in column order

    Returns:
        DataRow, or None for blank, comment and `~` lines
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or stripped.startswith("~"):
        return None

    values = [parse_float(token) for token in stripped.split()]
    return {curve.mnemonic: value for curve, value in zip(curves, values)}


def row_depth(row: DataRow) -> Optional[float]:
    """Get the depth of a row from the first depth mnemonic it carries."""
    for mnemonic in DEPTH_MNEMONICS:
        value = row.get(mnemonic)
        if value is not None:
            return value
    return None
