"""
Validation utilities for well ingestion.

The parser accepts anything it can partially read; these checks decide
whether an assembled well is fit to store.
"""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Optional

from lasingest.models import Well
from lasingest.workflow import AssemblyResult

logger = logging.getLogger(__name__)


@dataclass
class ValidationIssue:
    """A single validation issue."""

    field: str
    message: str
    severity: str  # "error", "warning", "info"
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Result of validating an assembled well."""

    is_valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == "warning"]

    def add_error(self, field: str, message: str, value: Any = None) -> None:
        """Add an error issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="error", value=value)
        )
        self.is_valid = False

    def add_warning(self, field: str, message: str, value: Any = None) -> None:
        """Add a warning issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="warning", value=value)
        )

    def add_info(self, field: str, message: str, value: Any = None) -> None:
        """Add an info issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="info", value=value)
        )


class DataValidator:
    """
    Validates an assembled well before it is stored.

    Validation levels:
    1. Structure - curves and data points present
    2. Depth header - STRT < STOP and STEP > 0, all finite
    3. Data quality - sample count vs. declared depth range (optional)

    Usage:
        validator = DataValidator()
        result = validator.validate(assembly_result)

        if not result.is_valid:
            for issue in result.errors:
                print(f"ERROR: {issue.field}: {issue.message}")
    """

    def __init__(self, check_quality: bool = True):
        """
        Initialize the validator.

        Args:
            check_quality: Whether to run data quality checks
        """
        self.check_quality = check_quality

    def validate(self, assembly: AssemblyResult) -> ValidationResult:
        """
        Validate an assembly result.

        Args:
            assembly: The assembly result to validate

        Returns:
            ValidationResult with issues found
        """
        result = ValidationResult(is_valid=True)

        for error in assembly.errors:
            result.add_error("assembly", error)

        for warning in assembly.warnings:
            result.add_warning("assembly", warning)

        if assembly.well is None:
            if not assembly.errors:
                result.add_error("well", "No well record assembled")
            return result

        self._validate_well(assembly.well, result)

        if not assembly.data_points:
            result.add_error("data_points", "No data points with a depth value")

        if self.check_quality:
            self._validate_data_quality(assembly, result)

        logger.debug(f"Validation finished with {len(result.issues)} issue(s)")
        return result

    def _validate_well(self, well: Well, result: ValidationResult) -> None:
        """Validate the Well header fields."""
        if not well.curves:
            result.add_error("well.curves", "Well has no curves")

        duplicates = [m for m, n in Counter(well.curve_names).items() if n > 1]
        if duplicates:
            result.add_warning(
                "well.curves",
                f"Duplicate curve mnemonics: {', '.join(duplicates)}",
                duplicates,
            )

        known = True
        for name in ("start_depth", "stop_depth", "step"):
            value = getattr(well, name)
            if not math.isfinite(value):
                result.add_error(f"well.{name}", f"{name} is missing or not a finite number", value)
                known = False

        if known:
            if well.start_depth >= well.stop_depth:
                result.add_error(
                    "well.start_depth",
                    f"Start depth ({well.start_depth}) must be less than "
                    f"stop depth ({well.stop_depth})",
                    well.start_depth,
                )
            if well.step <= 0:
                result.add_error("well.step", f"Step must be positive, found {well.step}", well.step)

        if well.well_name == "Unknown":
            result.add_warning("well.well_name", "Well name is unknown")

        if not well.metadata.get("version"):
            result.add_warning("well.metadata.version", "LAS version not found")

    def _validate_data_quality(self, assembly: AssemblyResult, result: ValidationResult) -> None:
        """Compare the number of samples with the declared depth range."""
        well = assembly.well
        if not all(math.isfinite(v) for v in (well.start_depth, well.stop_depth, well.step)):
            return
        if well.step <= 0 or well.start_depth >= well.stop_depth:
            return

        # STEP can be small enough for the quotient to overflow
        steps = (well.stop_depth - well.start_depth) / well.step
        if not math.isfinite(steps):
            return

        expected = round(steps) + 1
        actual = len(assembly.data_points)
        if actual != expected:
            result.add_warning(
                "data_points",
                f"Found {actual} data points, header depth range implies {expected}",
                actual,
            )


def validate_assembly(assembly: AssemblyResult, check_quality: bool = True) -> ValidationResult:
    """
    Convenience function to validate an assembly result.

    Args:
        assembly: The assembly result to validate
        check_quality: Whether to run data quality checks

    Returns:
        ValidationResult with issues found
    """
    validator = DataValidator(check_quality=check_quality)
    return validator.validate(assembly)
