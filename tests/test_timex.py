# tests/test_timex.py
from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

# Module under test
from stdx.timex import distance as D
from stdx.utils.load_config import ConfigTypeError, clear_config_cache, temp_data_dir

UTC = timezone.utc
BASE = datetime(2020, 1, 1, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _fresh_words(monkeypatch):
    """Use the packaged wording table unless a test overrides STDX_DATA_DIR."""
    monkeypatch.delenv("STDX_DATA_DIR", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


def _after(**kw) -> datetime:
    return BASE + timedelta(**kw)


# ─────────────────────────────────────────────────────────────────────────────
# Minutes to months
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "delta,expected",
    [
        (timedelta(seconds=0), "less than a minute"),
        (timedelta(seconds=59), "less than a minute"),
        (timedelta(seconds=60), "1 minute"),
        (timedelta(seconds=119), "1 minute"),
        (timedelta(minutes=2), "2 minutes"),
        (timedelta(minutes=45), "45 minutes"),
        (timedelta(minutes=46), "about an hour"),
        (timedelta(minutes=90), "about an hour"),
        (timedelta(minutes=91), "about an hour"),
        (timedelta(hours=3), "about 3 hours"),
        (timedelta(hours=24), "about 24 hours"),
        (timedelta(minutes=1441), "about a day"),
        (timedelta(days=2), "about 2 days"),
        (timedelta(days=30), "about 30 days"),
        (timedelta(days=31), "about a month"),
        (timedelta(days=60), "about 2 months"),
        (timedelta(days=61), "2 months"),
        (timedelta(days=365), "12 months"),
    ],
)
def test_distance_up_to_a_year(delta, expected):
    assert D.distance_of_time_in_words(BASE, BASE + delta) == expected


# ─────────────────────────────────────────────────────────────────────────────
# Years, with leap days taken out
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "start,end,expected",
    [
        (datetime(2010, 1, 1), datetime(2012, 1, 1), "about 2 years"),
        (datetime(2010, 1, 1), datetime(2011, 6, 1), "over 1 year"),
        (datetime(2010, 1, 1), datetime(2011, 11, 1), "almost 2 years"),
        (datetime(2011, 3, 1), datetime(2013, 3, 1), "about 2 years"),
        (datetime(2000, 1, 1), datetime(2010, 1, 1), "about 10 years"),
    ],
)
def test_distance_in_years(start, end, expected):
    start, end = start.replace(tzinfo=UTC), end.replace(tzinfo=UTC)
    assert D.distance_of_time_in_words(start, end) == expected


def test_distance_is_order_insensitive():
    later = _after(hours=5)
    assert D.distance_of_time_in_words(later, BASE) == D.distance_of_time_in_words(BASE, later)


def test_distance_rejects_mixed_naive_and_aware():
    with pytest.raises(TypeError):
        D.distance_of_time_in_words(BASE, datetime(2020, 1, 2))


# ─────────────────────────────────────────────────────────────────────────────
# Seconds breakdown
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "less than 5 seconds"),
        (4, "less than 5 seconds"),
        (5, "less than 10 seconds"),
        (15, "less than 20 seconds"),
        (25, "half a minute"),
        (39, "half a minute"),
        (45, "less than a minute"),
        (60, "1 minute"),
        (119, "1 minute"),
    ],
)
def test_distance_with_seconds(seconds, expected):
    assert D.distance_of_time_in_words(BASE, _after(seconds=seconds), include_seconds=True) == expected


def test_include_seconds_ignored_past_two_minutes():
    assert D.distance_of_time_in_words(BASE, _after(minutes=3), True) == "3 minutes"


# ─────────────────────────────────────────────────────────────────────────────
# time_ago_in_words
# ─────────────────────────────────────────────────────────────────────────────

def test_time_ago_in_words_with_fixed_now():
    assert D.time_ago_in_words(BASE, now=_after(hours=2)) == "about 2 hours"


def test_time_ago_in_words_defaults_to_now():
    just_now = datetime.now(UTC) - timedelta(seconds=1)
    assert D.time_ago_in_words(just_now) == "less than a minute"


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("year,leap", [(2000, True), (1900, False), (2024, True), (2023, False)])
def test_is_leap_year(year, leap):
    assert D.is_leap_year(year) is leap


def test_within_is_strict():
    end = _after(days=1)
    assert D.within(_after(hours=1), BASE, end)
    assert not D.within(BASE, BASE, end)
    assert not D.within(end, BASE, end)


# ─────────────────────────────────────────────────────────────────────────────
# Wording table
# ─────────────────────────────────────────────────────────────────────────────

def test_wording_comes_from_data_dir(tmp_path):
    words = {key: {"one": f"{key}:1", "other": f"{key}:{{count}}"} for key in D.WORD_KEYS}
    words["half_a_minute"] = "une demi-minute"
    (tmp_path / "time_words.json").write_text(json.dumps(words), encoding="utf-8")

    with temp_data_dir(tmp_path):
        assert D.distance_of_time_in_words(BASE, _after(hours=3)) == "about_x_hours:3"
        assert D.distance_of_time_in_words(BASE, _after(seconds=30), True) == "une demi-minute"


def test_incomplete_wording_table_raises(tmp_path):
    (tmp_path / "time_words.json").write_text('{"x_minutes": "n"}', encoding="utf-8")
    with temp_data_dir(tmp_path):
        with pytest.raises(ConfigTypeError, match="missing keys"):
            D.distance_of_time_in_words(BASE, _after(minutes=5))


def test_generic_data_dir_does_not_hide_packaged_wording(tmp_path, monkeypatch):
    # an unrelated app's data dir with no time_words.json in it
    (tmp_path / "settings.json").write_text("{}", encoding="utf-8")
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    assert D.distance_of_time_in_words(BASE, _after(hours=3)) == "about 3 hours"


def test_stdx_data_dir_overrides_wording_even_with_data_dir_set(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", "/nonexistent/app/data")
    words = {key: {"one": f"{key}:1", "other": f"{key}:{{count}}"} for key in D.WORD_KEYS}
    (tmp_path / "time_words.json").write_text(json.dumps(words), encoding="utf-8")
    with temp_data_dir(tmp_path):
        assert D.distance_of_time_in_words(BASE, _after(hours=3)) == "about_x_hours:3"
