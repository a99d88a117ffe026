"""
Pytest fixtures for the enrollment dashboard tests.

Provides small in-memory enrollment tables and helpers that write them to
temporary CSV files for the loader tests.
"""

from pathlib import Path

import pandas as pd
import pytest

MAIN_HEADER = "state,county,parent_org,org_name,report_period,enrollment"


def _row(state, county, parent, org, period, enrollment):
    return {
        "state": state,
        "county": county,
        "parent_org": parent,
        "org_name": org,
        "report_period": period,
        "enrollment": enrollment,
    }


@pytest.fixture
def enrollment_rows() -> pd.DataFrame:
    """Two Arizona counties over three months, plus one Nevada county."""
    rows = []
    for period, (humana, ucare, blank) in {
        "2024-01-31": ("1,000", "500", "20"),
        "2024-02-29": ("1,100", "450", "30"),
        "2024-03-31": ("1,200", "700", "n/a"),
    }.items():
        rows.append(_row("Arizona", "Maricopa", "Humana Inc.", "Humana Plan A", period, humana))
        rows.append(_row("Arizona", "Maricopa", "UnitedHealth Group", "AARP Medicare", period, ucare))
        rows.append(_row("Arizona", "Maricopa", "", "Local Health Plan", period, blank))
        rows.append(_row("Arizona", "Pima", "Humana Inc.", "Humana Plan B", period, "300"))
    rows.append(_row("Nevada", "Clark", "Aetna", "Aetna MA", "2024-03-31", "900"))
    return pd.DataFrame(rows)


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write text to a CSV under tmp_path and return its path as a string."""

    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def main_csv(write_csv) -> str:
    return write_csv(
        "ma_scc_latest.csv",
        "\n".join(
            [
                MAIN_HEADER,
                'Arizona,Maricopa,Humana Inc.,Humana Plan A,2024-01-31,"1,000"',
                "",
                "Arizona,Maricopa,,Local Health Plan,2024-01-31,*",
                "Arizona,Pima,Humana Inc.,Humana Plan B,2024-01-31,300",
                "",
            ]
        ),
    )


@pytest.fixture
def kpi_csv(write_csv) -> str:
    return write_csv(
        "ma_scc_kpis_county.csv",
        "state,county,report_period,enrollment_total\n"
        "Arizona,Maricopa,2024-01,1000\n"
        "Arizona,Pima,2024-01,300\n",
    )
