from datetime import date

from debrief_app.core.window import current_date, lookback_days, since_date


def test_lookback_days_for_each_weekday():
    # 2024-09-02 is a Monday
    week = {date(2024, 9, 2 + offset): expected for offset, expected in enumerate([3, 1, 1, 1, 1, 1, 1])}
    assert {d.strftime("%A"): lookback_days(d) for d in week} == {
        "Monday": 3,
        "Tuesday": 1,
        "Wednesday": 1,
        "Thursday": 1,
        "Friday": 1,
        "Saturday": 1,
        "Sunday": 1,
    }
    for d, expected in week.items():
        assert lookback_days(d) == expected


def test_since_date_crosses_month_boundary():
    assert since_date(date(2024, 9, 2), 3) == "2024-08-30"
    assert since_date(date(2024, 9, 4), 1) == "2024-09-03"


def test_current_date_is_a_date():
    assert isinstance(current_date("UTC"), date)
