import datetime as dt

import pandas as pd
import streamlit as st
from streamlit.logger import get_logger

from utils.config import load_config
from utils.time import (
    add_week_columns,
    iso_week_end,
    iso_week_start,
    iso_week_year,
    menu_filename,
    today_local,
    week_label,
    week_number,
)

logger = get_logger(__name__)


def _week_days(selected: dt.date) -> pd.DataFrame:
    monday = iso_week_start(selected).date()
    days = [monday + dt.timedelta(days=offset) for offset in range(7)]
    df = pd.DataFrame({"date": days, "day": [d.strftime("%A") for d in days]})
    return add_week_columns(df)


def _previous_weeks(selected: dt.date, count: int) -> pd.DataFrame:
    rows = []
    for back in range(1, count + 1):
        d = selected - dt.timedelta(weeks=back)
        rows.append(
            {
                "label": week_label(d),
                "weekStart": iso_week_start(d).date(),
                "weekEnd": iso_week_end(d).date(),
            }
        )
    return pd.DataFrame(rows)


def main():
    st.set_page_config(page_title="Weekly Menu Week", layout="wide")
    cfg = load_config()
    st.title("Weekly Menu Week")
    st.caption("ISO-8601 week of a date and the matching weekly menu files.")

    selected = st.date_input("Date", value=today_local())
    logger.debug("Selected date: %s", selected)

    col_week, col_year, col_label = st.columns(3)
    col_week.metric("Week", week_number(selected))
    col_year.metric("ISO year", iso_week_year(selected))
    col_label.metric("Label", week_label(selected))

    start = iso_week_start(selected)
    end = iso_week_end(selected)
    st.write(f"{start.date().isoformat()} → {end.date().isoformat()}")
    st.dataframe(_week_days(selected), hide_index=True)

    st.subheader("Menu files")
    if not cfg.restaurants:
        st.warning("No restaurants configured. Set MENU_RESTAURANTS in .env.")
    else:
        files = []
        for restaurant in cfg.restaurants:
            name = menu_filename(restaurant, selected)
            files.append({"restaurant": restaurant, "file": name, "exists": (cfg.menus_dir / name).exists()})
        st.dataframe(pd.DataFrame(files), hide_index=True)

    if cfg.week_history:
        st.subheader("Previous weeks")
        st.dataframe(_previous_weeks(selected, cfg.week_history), hide_index=True)

    with st.expander("Environment", expanded=False):
        st.write(
            {
                "DATA_DIR": str(cfg.data_dir),
                "MENU_RESTAURANTS": ", ".join(cfg.restaurants),
                "WEEK_HISTORY": cfg.week_history,
            }
        )


if __name__ == "__main__":
    main()
