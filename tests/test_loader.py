"""
Tests for ma_dashboard/data/loader.py

Verifies raw-string CSV parsing, empty-line skipping, load failures, the
concurrent two-file load, and the diagnostics it records.
"""
import io

import pytest

from ma_dashboard.config import DashboardConfig
from ma_dashboard.data.loader import (
    REQUIRED_COLUMNS,
    DataLoadError,
    clear_cache,
    load_data,
    missing_columns,
    parse_csv,
    read_sources,
)


# ── parse_csv ─────────────────────────────────────────────────────────────────

class TestParseCsv:
    def test_values_stay_raw_strings(self, main_csv):
        rows = parse_csv(main_csv)
        assert rows["enrollment"].tolist() == ["1,000", "*", "300"]
        assert rows["report_period"].iloc[0] == "2024-01-31"

    def test_empty_lines_skipped(self, main_csv):
        assert len(parse_csv(main_csv)) == 3

    def test_blank_cells_are_empty_strings(self, main_csv):
        rows = parse_csv(main_csv)
        assert rows["parent_org"].tolist() == ["Humana Inc.", "", "Humana Inc."]

    def test_short_rows_padded(self):
        rows = parse_csv(io.StringIO("state,county,enrollment\nArizona,Pima\n"))
        assert rows.to_dict("records") == [{"state": "Arizona", "county": "Pima", "enrollment": ""}]

    def test_na_tokens_not_coerced(self):
        rows = parse_csv(io.StringIO("state,parent_org\nArizona,NA\n"))
        assert rows["parent_org"].tolist() == ["NA"]

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.csv"
        with pytest.raises(DataLoadError) as excinfo:
            parse_csv(str(missing))
        assert excinfo.value.source == str(missing)
        assert "not found" in str(excinfo.value)

    def test_empty_file(self, write_csv):
        with pytest.raises(DataLoadError):
            parse_csv(write_csv("empty.csv", ""))


class TestMissingColumns:
    def test_all_present(self, main_csv):
        assert missing_columns(parse_csv(main_csv)) == []

    def test_reports_missing(self):
        rows = parse_csv(io.StringIO("state,county\nArizona,Pima\n"))
        assert missing_columns(rows) == [c for c in REQUIRED_COLUMNS if c not in ("state", "county")]


# ── read_sources ──────────────────────────────────────────────────────────────

class TestReadSources:
    def test_loads_both_files(self, main_csv, kpi_csv):
        data = read_sources(main_csv, kpi_csv)
        assert len(data.main_rows) == 3
        assert len(data.kpi_rows) == 2

    def test_diagnostics(self, main_csv, kpi_csv):
        diagnostics = read_sources(main_csv, kpi_csv).diagnostics
        assert diagnostics["main_row_count"] == 3
        assert diagnostics["kpi_row_count"] == 2
        assert diagnostics["unparsed_enrollment_rows"] == 1
        assert diagnostics["blank_parent_org_rows"] == 1
        assert diagnostics["main_source"] == main_csv
        assert diagnostics["kpi_source"] == kpi_csv

    def test_kpi_failure_fails_whole_load(self, main_csv, tmp_path):
        with pytest.raises(DataLoadError):
            read_sources(main_csv, str(tmp_path / "missing_kpis.csv"))

    def test_main_failure_fails_whole_load(self, kpi_csv, tmp_path):
        with pytest.raises(DataLoadError):
            read_sources(str(tmp_path / "missing_main.csv"), kpi_csv)

    def test_missing_required_column(self, write_csv, kpi_csv):
        main = write_csv("bad_main.csv", "state,county,report_period\nArizona,Pima,2024-01-01\n")
        with pytest.raises(DataLoadError) as excinfo:
            read_sources(main, kpi_csv)
        assert "enrollment" in str(excinfo.value)


# ── load_data ─────────────────────────────────────────────────────────────────

class TestLoadData:
    def test_reads_configured_directory(self, main_csv, kpi_csv, tmp_path):
        clear_cache()
        config = DashboardConfig(data_dir=str(tmp_path))
        data = load_data(config)
        assert len(data.main_rows) == 3
        assert data.diagnostics["kpi_source"] == kpi_csv

    def test_missing_directory_raises(self, tmp_path):
        clear_cache()
        config = DashboardConfig(data_dir=str(tmp_path / "absent"))
        with pytest.raises(DataLoadError):
            load_data(config)
