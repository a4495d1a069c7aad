"""
Main CLI entry point for las-ingest using Click.

Usage:
    las-ingest parse FILE [--json] [--rows N]
    las-ingest detect FILE [--json]
    las-ingest validate FILE [--json]
    las-ingest ingest FILE --output DIR [--format parquet|json] [--dry-run]
    las-ingest stats FILE --curve GR [--start D] [--end D] [--json]
    las-ingest query FILE [--curve GR] [--start D] [--end D] [--limit N]
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from lasingest.parsers import LASParser, ParseResult
from lasingest.statistics import DEFAULT_QUERY_LIMIT, compute_curve_statistics, filter_by_depth
from lasingest.tools import detect_file
from lasingest.validation import DataValidator
from lasingest.workflow import AssemblyResult, WellAssembler
from lasingest.writers import (
    DEFAULT_BATCH_SIZE,
    serialize_value,
    write_assembly_to_json,
    write_assembly_to_parquet,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class Config:
    """Shared configuration for CLI commands."""

    def __init__(self) -> None:
        self.verbose = False
        self.debug = False


pass_config = click.make_pass_decorator(Config, ensure=True)


def _parse_file(file: str) -> ParseResult:
    """Parse a LAS file, converting failures to ClickException."""
    logging.getLogger("parse").info(f"Parsing LAS file: {file}")
    try:
        return LASParser().parse(file)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Error parsing LAS file: {e}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.version_option(version="0.1.0", prog_name="las-ingest")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """LAS well-log parsing and ingestion."""
    ctx.ensure_object(Config)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    setup_logging(verbose=verbose, debug=debug)


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--rows", "-n", type=int, default=5, show_default=True, help="Data rows to show")
@pass_config
def parse(config: Config, file: str, as_json: bool, rows: int) -> None:
    """Parse a LAS file and print its header and first rows.

    Example:
        las-ingest parse 15_9-F-11.las --rows 10
    """
    result = _parse_file(file)
    metadata = result.metadata()

    if as_json:
        output = {
            "version": result.version,
            "well_info": {
                key: {"value": e.value, "description": e.description, "mnemonic": e.mnemonic}
                for key, e in result.well_info.items()
            },
            "metadata": {
                name: serialize_value(value) for name, value in vars(metadata).items()
            },
            "curves": [
                {"mnemonic": c.mnemonic, "unit": c.unit, "description": c.description}
                for c in result.curves
            ],
            "total_rows": len(result.data),
            "data": [
                {k: serialize_value(v) for k, v in row.items()} for row in result.data[:rows]
            ],
        }
        click.echo(json.dumps(output, indent=2))
        return

    click.echo(f"Version: {result.version or 'Not found'}")
    click.echo(f"Well: {metadata.name or 'Unknown'}")
    click.echo(f"Company: {metadata.company or 'Unknown'}")
    click.echo(f"Depth: {metadata.start_depth} - {metadata.stop_depth} (step {metadata.step})")
    click.echo(f"Null value: {metadata.null_value}")
    click.echo(f"\nCurves ({len(result.curves)}):")
    for curve in result.curves:
        click.echo(f"  {curve.mnemonic:<10} {curve.unit:<8} {curve.description}")
    click.echo(f"\nData rows: {len(result.data)}")
    for row in result.data[:rows]:
        click.echo("  " + "  ".join(f"{k}={v}" for k, v in row.items()))


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def detect(config: Config, file: str, as_json: bool) -> None:
    """Detect whether a file is LAS and list its sections.

    Example:
        las-ingest detect 15_9-F-11.las
    """
    info = detect_file(Path(file))

    if as_json:
        output = {
            "path": info.path,
            "filename": info.filename,
            "file_type": info.file_type.value,
            "size_bytes": info.size_bytes,
            "sections": [s.value for s in info.sections],
        }
        click.echo(json.dumps(output, indent=2))
    else:
        click.echo(f"File: {info.filename}")
        click.echo(f"Path: {info.path}")
        click.echo(f"Type: {info.file_type.value}")
        click.echo(f"Size: {info.size_bytes} bytes")
        sections = ", ".join(s.value for s in info.sections)
        click.echo(f"Sections: {sections or 'None found'}")


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def validate(config: Config, file: str, as_json: bool) -> None:
    """Validate a LAS file without writing.

    Parses and assembles the file, then checks that it has curves and
    data, and a usable depth header (STRT < STOP, STEP > 0).

    Example:
        las-ingest validate 15_9-F-11.las
    """
    logger = logging.getLogger("validate")

    parsed = _parse_file(file)

    logger.info("Assembling well...")
    result = WellAssembler().assemble(parsed, source_file=file)

    logger.info("Validating...")
    validation = DataValidator().validate(result)

    if as_json:
        output = {
            "is_valid": validation.is_valid,
            "errors": [
                {"field": i.field, "message": i.message, "severity": i.severity}
                for i in validation.errors
            ],
            "warnings": [
                {"field": i.field, "message": i.message, "severity": i.severity}
                for i in validation.warnings
            ],
            "assembly": {
                "has_well": result.well is not None,
                "data_points": len(result.data_points),
            },
        }
        click.echo(json.dumps(output, indent=2))
    else:
        status = (
            click.style("PASSED", fg="green")
            if validation.is_valid
            else click.style("FAILED", fg="red")
        )
        click.echo(f"Validation: {status}")
        click.echo()

        if validation.errors:
            click.echo(click.style("Errors:", fg="red"))
            for issue in validation.errors:
                click.echo(f"  ✗ {issue.field}: {issue.message}")

        if validation.warnings:
            click.echo(click.style("Warnings:", fg="yellow"))
            for issue in validation.warnings:
                click.echo(f"  ⚠ {issue.field}: {issue.message}")

        click.echo()
        click.echo(result.summary())

    if not validation.is_valid:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output directory",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["parquet", "json"]),
    default="parquet",
    show_default=True,
    help="Output file format",
)
@click.option(
    "--batch-size",
    type=int,
    default=DEFAULT_BATCH_SIZE,
    show_default=True,
    help="Data points per Parquet row group",
)
@click.option("--skip-validation", is_flag=True, help="Skip validation step")
@click.option("--dry-run", is_flag=True, help="Parse and validate but don't write output")
@click.option("--json", "as_json", is_flag=True, help="Output result as JSON")
@pass_config
def ingest(
    config: Config,
    file: str,
    output: str,
    output_format: str,
    batch_size: int,
    skip_validation: bool,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Ingest a LAS file and write well records.

    Parse, assemble, validate, and write the well and its depth samples.

    Example:
        las-ingest ingest 15_9-F-11.las --output ./lakehouse/
    """
    logger = logging.getLogger("ingest")

    parsed = _parse_file(file)

    logger.info("Assembling well...")
    result = WellAssembler().assemble(parsed, source_file=file)

    if result.has_errors:
        click.echo(click.style("Assembly errors:", fg="red"), err=True)
        for error in result.errors:
            click.echo(f"  - {error}", err=True)
        sys.exit(1)

    if not skip_validation:
        logger.info("Validating assembly...")
        validation = DataValidator().validate(result)

        if not validation.is_valid:
            click.echo(click.style("Validation failed:", fg="red"), err=True)
            for issue in validation.issues:
                click.echo(f"  [{issue.severity}] {issue.field}: {issue.message}", err=True)
            sys.exit(1)

        for issue in validation.warnings:
            click.echo(
                click.style(f"Warning: {issue.field}: {issue.message}", fg="yellow"),
                err=True,
            )

    if as_json:
        _print_assembly_summary_json(result)
    else:
        click.echo(result.summary())

    if dry_run:
        logger.info("Dry run - skipping output")
        click.echo(click.style("\nDry run - no files written", fg="cyan"))
        return

    logger.info(f"Writing to: {output}")
    output_path = Path(output)
    output_path.mkdir(parents=True, exist_ok=True)

    try:
        if output_format == "json":
            paths = write_assembly_to_json(result, output_path)
        else:
            paths = write_assembly_to_parquet(result, output_path, batch_size=batch_size)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Error writing output: {e}")

    click.echo(click.style("\nOutput files:", fg="green"))
    for table_name, path in paths.items():
        click.echo(f"  {table_name}: {path}")


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option(
    "--curve",
    "-c",
    "curves",
    multiple=True,
    help="Curve mnemonic (can be specified multiple times; default: all)",
)
@click.option("--start", "start_depth", type=float, help="Start depth (inclusive)")
@click.option("--end", "end_depth", type=float, help="End depth (inclusive)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def stats(
    config: Config,
    file: str,
    curves: tuple[str, ...],
    start_depth: Optional[float],
    end_depth: Optional[float],
    as_json: bool,
) -> None:
    """Summary statistics for curves, ignoring null values.

    Example:
        las-ingest stats 15_9-F-11.las -c GR -c RHOB --start 1000 --end 2000
    """
    parsed = _parse_file(file)
    if not parsed.curves:
        raise click.ClickException("No curves found in file")

    names = list(curves) if curves else parsed.curve_names()
    unknown = [name for name in names if name not in parsed.curve_names()]
    if unknown:
        raise click.ClickException(f"Unknown curve(s): {', '.join(unknown)}")

    statistics = compute_curve_statistics(
        parsed.data,
        names,
        null_value=parsed.metadata().null_value,
        start_depth=start_depth,
        end_depth=end_depth,
    )

    if as_json:
        output = {
            "start_depth": start_depth,
            "end_depth": end_depth,
            "statistics": {
                name: {k: serialize_value(v) for k, v in s.to_dict().items()} if s else None
                for name, s in statistics.items()
            },
        }
        click.echo(json.dumps(output, indent=2))
        return

    for name, s in statistics.items():
        if s is None:
            click.echo(f"{name}: no valid samples")
            continue
        click.echo(
            f"{name}: n={s.count} min={s.min:.4g} max={s.max:.4g} mean={s.mean:.4g} "
            f"median={s.median:.4g} std={s.std_dev:.4g} p25={s.p25:.4g} p75={s.p75:.4g}"
        )


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option(
    "--curve",
    "-c",
    "curves",
    multiple=True,
    help="Curve mnemonic (can be specified multiple times; default: all)",
)
@click.option("--start", "start_depth", type=float, help="Start depth (inclusive)")
@click.option("--end", "end_depth", type=float, help="End depth (inclusive)")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=DEFAULT_QUERY_LIMIT,
    show_default=True,
    help="Maximum number of rows",
)
@pass_config
def query(
    config: Config,
    file: str,
    curves: tuple[str, ...],
    start_depth: Optional[float],
    end_depth: Optional[float],
    limit: int,
) -> None:
    """Print data rows within a depth range as JSON, ordered by depth.

    Example:
        las-ingest query 15_9-F-11.las -c GR --start 1000 --end 1010
    """
    parsed = _parse_file(file)

    unknown = [name for name in curves if name not in parsed.curve_names()]
    if unknown:
        raise click.ClickException(f"Unknown curve(s): {', '.join(unknown)}")

    rows = filter_by_depth(
        parsed.data,
        start_depth=start_depth,
        end_depth=end_depth,
        curves=list(curves) or None,
        limit=limit,
    )
    output = {
        "count": len(rows),
        "rows": [{k: serialize_value(v) for k, v in row.items()} for row in rows],
    }
    click.echo(json.dumps(output, indent=2))


def _print_assembly_summary_json(result: AssemblyResult) -> None:
    """Print assembly summary as JSON."""
    output: dict = {"well": None, "data_points": len(result.data_points)}
    if result.well:
        well = result.well
        output["well"] = {
            "id": well.id,
            "well_name": well.well_name,
            "start_depth": serialize_value(well.start_depth),
            "stop_depth": serialize_value(well.stop_depth),
            "step": serialize_value(well.step),
            "curves": well.curve_names,
        }
    output["warnings"] = result.warnings
    click.echo(json.dumps(output, indent=2))


def app(args: Optional[list[str]] = None) -> int:
    """
    Main application entry point (for testing).

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    try:
        cli(args, standalone_mode=False)
        return 0
    except click.ClickException as e:
        e.show()
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
