"""Quick validation script for the processed enrollment CSV.

Run with `python scripts/validate_dataset.py [path]` to ensure the ETL output
carries the columns the dashboard reads and that enrollment values parse.
Defaults to the configured main file.
"""

from __future__ import annotations

import sys

from ma_dashboard.config import load_config
from ma_dashboard.data.aggregation import monthly_series
from ma_dashboard.data.enrichment import count_unparsed_enrollment
from ma_dashboard.data.loader import DataLoadError, missing_columns, parse_csv


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    source = argv[0] if argv else load_config().main_source

    try:
        rows = parse_csv(source)
    except DataLoadError as exc:
        raise SystemExit(str(exc))

    missing = missing_columns(rows)
    if missing:
        raise SystemExit(f"Missing required columns: {missing}")
    if rows.empty:
        raise SystemExit(f"No rows in {source}")

    unparsed = count_unparsed_enrollment(rows)
    series = monthly_series(rows)
    print(
        f"Dataset validation passed. Rows: {len(rows)}, months: {len(series)}, "
        f"unparsed enrollment: {unparsed}"
    )


if __name__ == "__main__":
    main()
