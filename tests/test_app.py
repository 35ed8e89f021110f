import datetime as dt
from pathlib import Path

from streamlit.testing.v1 import AppTest

from app import _previous_weeks, _week_days

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_week_days_span_monday_to_sunday():
    df = _week_days(dt.date(2025, 12, 31))
    assert len(df) == 7
    assert df["date"].iloc[0] == dt.date(2025, 12, 29)
    assert df["date"].iloc[-1] == dt.date(2026, 1, 4)
    assert df["day"].iloc[0] == "Monday"
    assert set(df["isoWeek"].tolist()) == {1}
    assert set(df["isoYear"].tolist()) == {2026}


def test_previous_weeks():
    df = _previous_weeks(dt.date(2024, 1, 10), 3)
    assert df["label"].tolist() == ["2024-W01", "2023-W52", "2023-W51"]
    assert df["weekStart"].iloc[0] == dt.date(2024, 1, 1)
    assert df["weekEnd"].iloc[0] == dt.date(2024, 1, 7)


def test_page_renders_without_session_config(tmp_path, clean_env):
    clean_env.setenv("DATA_DIR", str(tmp_path / "data"))
    at = AppTest.from_file(str(PROJECT_ROOT / "app.py")).run(timeout=30)
    assert not at.exception
    assert "app_config" not in at.session_state
    menu_files = at.dataframe[1].value
    assert menu_files["restaurant"].tolist() == ["Gira", "Luna", "Sole", "Espace", "Turbolama", "Freibank"]
