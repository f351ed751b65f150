from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from core.utils.time import DateWindow, parse_timestamp, resolve_window

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


class TestResolveWindow:
    @pytest.mark.parametrize(("token", "days"), [("3d", 3), ("7d", 7), ("30d", 30)])
    def test_known_tokens(self, token: str, days: int) -> None:
        window = resolve_window(token, NOW)

        assert window.to_date == NOW
        assert window.from_date == NOW - timedelta(days=days)

    @pytest.mark.parametrize("token", ["1y", "", "7D", "banana", None])
    def test_unknown_tokens_fall_back_to_thirty_days(self, token: str | None) -> None:
        window = resolve_window(token, NOW)

        assert window.from_date == NOW - timedelta(days=30)
        assert window.to_date == NOW

    def test_window_bounds_are_inclusive(self) -> None:
        window = DateWindow(from_date=NOW - timedelta(days=1), to_date=NOW)

        assert window.contains(NOW)
        assert window.contains(NOW - timedelta(days=1))
        assert not window.contains(NOW + timedelta(microseconds=1))


class TestParseTimestamp:
    def test_zulu_suffix(self) -> None:
        assert parse_timestamp("2026-10-15T09:00:00.000Z") == datetime(
            2026, 10, 15, 9, 0, tzinfo=timezone.utc
        )

    def test_offset_is_normalized_to_utc(self) -> None:
        assert parse_timestamp("2026-10-15T11:00:00+02:00") == datetime(
            2026, 10, 15, 9, 0, tzinfo=timezone.utc
        )

    def test_naive_value_is_treated_as_utc(self) -> None:
        assert parse_timestamp("2026-10-15T09:00:00") == datetime(
            2026, 10, 15, 9, 0, tzinfo=timezone.utc
        )

    def test_date_only(self) -> None:
        assert parse_timestamp("2026-10-15") == datetime(2026, 10, 15, tzinfo=timezone.utc)

    def test_epoch_milliseconds(self) -> None:
        assert parse_timestamp(Decimal("0")) == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert parse_timestamp(86_400_000) == datetime(1970, 1, 2, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["yesterday", "", "   ", None, True, {"a": 1}])
    def test_unparseable_values(self, value: object) -> None:
        assert parse_timestamp(value) is None
