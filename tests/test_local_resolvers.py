from datetime import datetime, timedelta, timezone

from games.resolvers import format_release_date, resolve_genre_names, resolve_platform_names
from games.tables import PLATFORM_NAMES


def test_platform_names_keep_input_order():
    assert resolve_platform_names([8, 6]) == "PlayStation 2, PC (Microsoft Windows)"
    assert resolve_platform_names([6, 8]) == "PC (Microsoft Windows), PlayStation 2"


def test_platform_names_drop_unknown_ids():
    assert 999999 not in PLATFORM_NAMES
    assert resolve_platform_names([999999, 8]) == "PlayStation 2"


def test_platform_names_absent_for_empty_input():
    assert resolve_platform_names([]) is None
    assert resolve_platform_names(None) is None
    assert resolve_platform_names([999999]) is None


def test_genre_names_keep_input_order():
    assert resolve_genre_names([31, 12]) == "Adventure, Role-playing (RPG)"
    assert resolve_genre_names([12, 424242, 5]) == "Role-playing (RPG), Shooter"
    assert resolve_genre_names(None) is None


def test_release_date_is_unpadded_month_day_year():
    assert format_release_date(1577836800, timezone.utc) == "1/1/2020"
    assert format_release_date(1607040000, timezone.utc) == "12/4/2020"


def test_release_date_follows_time_zone():
    # 2020-01-01T00:00Z is still New Year's Eve five hours west
    assert format_release_date(1577836800, timezone(timedelta(hours=-5))) == "12/31/2019"


def test_release_date_defaults_to_host_local_time():
    local = datetime.fromtimestamp(1600000000)
    assert format_release_date(1600000000) == f"{local.month}/{local.day}/{local.year}"


def test_release_date_absent_without_timestamp():
    assert format_release_date(None) is None
