"""
Tests for the CLI module.
"""

import json

import pyarrow.parquet as pq
import pytest

from lasingest.cli.main import app


@pytest.fixture
def no_step_las_file(tmp_path, sample_las_content):
    """LAS file whose well section has no STEP entry."""
    path = tmp_path / "nostep.las"
    path.write_text(sample_las_content.replace("STEP.ft  1.0   : step\n", ""))
    return path


class TestCLIParse:
    """Tests for the parse command."""

    def test_parse(self, sample_las_file, capsys):
        result = app(["parse", str(sample_las_file)])
        assert result == 0

        out = capsys.readouterr().out
        assert "Well: WELLX" in out
        assert "Data rows: 3" in out

    def test_parse_json(self, sample_las_file, capsys):
        result = app(["parse", "--json", "--rows", "1", str(sample_las_file)])
        assert result == 0

        output = json.loads(capsys.readouterr().out)
        assert output["version"] == "2.0"
        assert output["well_info"]["well"]["value"] == "WELLX"
        assert output["metadata"]["start_depth"] == 100.0
        assert [c["unit"] for c in output["curves"]] == ["ft", "api"]
        assert output["total_rows"] == 3
        assert output["data"] == [{"DEPT": 100.0, "GR": 50.2}]

    def test_parse_json_unknown_step(self, no_step_las_file, capsys):
        assert app(["parse", "--json", str(no_step_las_file)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["metadata"]["step"] is None

    def test_parse_nonexistent_file(self):
        assert app(["parse", "/nonexistent/well.las"]) == 1


class TestCLIDetect:
    """Tests for the detect command."""

    def test_detect(self, sample_las_file, capsys):
        assert app(["detect", str(sample_las_file)]) == 0
        assert "Type: las" in capsys.readouterr().out

    def test_detect_json_output(self, full_las_file, capsys):
        assert app(["detect", "--json", str(full_las_file)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["file_type"] == "las"
        assert output["sections"] == ["version", "well", "curve", "parameter", "data"]

    def test_detect_nonexistent_file(self):
        assert app(["detect", "/nonexistent/file.las"]) == 1


class TestCLIValidate:
    """Tests for the validate command."""

    def test_validate_valid_file(self, sample_las_file, capsys):
        assert app(["validate", str(sample_las_file)]) == 0
        assert "PASSED" in capsys.readouterr().out

    def test_validate_invalid_file(self, no_step_las_file, capsys):
        assert app(["validate", "--json", str(no_step_las_file)]) == 1

        output = json.loads(capsys.readouterr().out)
        assert output["is_valid"] is False
        assert "well.step" in [e["field"] for e in output["errors"]]


class TestCLIIngest:
    """Tests for the ingest command."""

    def test_ingest_parquet(self, tmp_path, full_las_file):
        output_dir = tmp_path / "out"
        result = app(["ingest", str(full_las_file), "-o", str(output_dir), "--batch-size", "2"])
        assert result == 0

        well_files = list((output_dir / "wells").glob("*.parquet"))
        data_files = list((output_dir / "well_data").glob("**/*.parquet"))
        assert len(well_files) == 1
        assert len(data_files) == 1
        assert pq.ParquetFile(str(data_files[0])).num_row_groups == 2

    def test_ingest_json(self, tmp_path, sample_las_file):
        output_dir = tmp_path / "out"
        result = app(["ingest", str(sample_las_file), "-o", str(output_dir), "--format", "json"])
        assert result == 0

        well = json.loads((output_dir / "well.json").read_text())
        assert well["well_name"] == "WELLX"
        assert len(json.loads((output_dir / "well_data.json").read_text())) == 3

    def test_ingest_dry_run(self, tmp_path, sample_las_file, capsys):
        output_dir = tmp_path / "out"
        result = app(["ingest", str(sample_las_file), "-o", str(output_dir), "--dry-run"])
        assert result == 0
        assert "Dry run" in capsys.readouterr().out
        assert not output_dir.exists()

    def test_ingest_invalid_file(self, tmp_path, no_step_las_file):
        output_dir = tmp_path / "out"
        assert app(["ingest", str(no_step_las_file), "-o", str(output_dir)]) == 1
        assert not output_dir.exists()

        result = app(["ingest", str(no_step_las_file), "-o", str(output_dir), "--skip-validation"])
        assert result == 0
        assert (output_dir / "wells").exists()

    def test_ingest_without_data(self, tmp_path):
        las_file = tmp_path / "header_only.las"
        las_file.write_text("~VERSION\nVERS. 2.0 : v\n~CURVE\nDEPT.ft : depth\n")
        assert app(["ingest", str(las_file), "-o", str(tmp_path / "out")]) == 1


class TestCLIStats:
    """Tests for the stats command."""

    def test_stats_json(self, sample_las_file, capsys):
        assert app(["stats", "--json", "-c", "GR", str(sample_las_file)]) == 0

        output = json.loads(capsys.readouterr().out)
        gr = output["statistics"]["GR"]
        assert gr["count"] == 2
        assert gr["mean"] == pytest.approx(51.15)

    def test_stats_all_curves(self, sample_las_file, capsys):
        assert app(["stats", str(sample_las_file), "--start", "101"]) == 0

        out = capsys.readouterr().out
        assert "DEPT: n=2" in out
        assert "GR: n=1" in out

    def test_stats_unknown_curve(self, sample_las_file):
        assert app(["stats", "-c", "RHOB", str(sample_las_file)]) == 1


class TestCLIQuery:
    """Tests for the query command."""

    def test_query_depth_range(self, sample_las_file, capsys):
        result = app(["query", str(sample_las_file), "-c", "GR", "--start", "101", "--end", "102"])
        assert result == 0

        output = json.loads(capsys.readouterr().out)
        assert output["count"] == 2
        assert output["rows"] == [{"depth": 101.0, "GR": 52.1}, {"depth": 102.0, "GR": -999.25}]

    def test_query_limit(self, sample_las_file, capsys):
        assert app(["query", str(sample_las_file), "--limit", "1"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["rows"] == [{"depth": 100.0, "DEPT": 100.0, "GR": 50.2}]

    def test_query_overflowing_value(self, tmp_path, sample_las_content, capsys):
        las_file = tmp_path / "overflow.las"
        las_file.write_text(sample_las_content.replace("101.0  52.1", "101.0  1e999"))
        assert app(["query", str(las_file), "-c", "GR"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["rows"][1] == {"depth": 101.0, "GR": None}

    def test_query_unknown_curve(self, sample_las_file):
        assert app(["query", "-c", "RHOB", str(sample_las_file)]) == 1

    def test_query_invalid_limit(self, sample_las_file):
        assert app(["query", "--limit", "0", str(sample_las_file)]) == 1


class TestCLIHelp:
    """Tests for CLI help output."""

    def test_main_help(self):
        assert app(["--help"]) == 0

    def test_ingest_help(self):
        assert app(["ingest", "--help"]) == 0
