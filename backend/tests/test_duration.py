from datetime import date, datetime

from storefront.engine.duration import nights


def test_nights_counts_days_between_dates():
    assert nights(date(2025, 3, 1), date(2025, 3, 4)) == 3


def test_nights_defaults_to_one_when_dates_missing():
    assert nights(None, None) == 1
    assert nights(date(2025, 3, 1), None) == 1
    assert nights(None, date(2025, 3, 4)) == 1


def test_nights_defaults_to_one_when_checkout_not_after_checkin():
    assert nights(date(2025, 3, 4), date(2025, 3, 4)) == 1
    assert nights(date(2025, 3, 4), date(2025, 3, 1)) == 1


def test_nights_rounds_partial_days_up():
    assert nights(datetime(2025, 3, 1, 14), datetime(2025, 3, 3, 11)) == 2
    assert nights(datetime(2025, 3, 1, 10), datetime(2025, 3, 1, 18)) == 1
