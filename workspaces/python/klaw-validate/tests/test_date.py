"""Tests for the date processors."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest
from klaw_validate import OptionsError, Reason, as_date, is_date, maybe_as_date, maybe_date
from klaw_validate.checks.date import to_date
from tests.helpers import expect_issue, expect_success, expect_value

NEW_YEAR = datetime(2024, 1, 1, tzinfo=UTC)


class TestToDate:
    """Tests for the date converter."""

    def test_datetime_passes(self):
        """datetimes convert to themselves."""
        assert to_date(NEW_YEAR) is NEW_YEAR

    def test_date_is_midnight(self):
        """dates convert to midnight."""
        assert to_date(date(2024, 1, 1)) == datetime(2024, 1, 1)

    def test_iso_text(self):
        """ISO-8601 text converts."""
        assert to_date(' 2024-01-01T00:00:00+00:00 ') == NEW_YEAR
        assert to_date('2024-01-01') == datetime(2024, 1, 1)

    def test_epoch_seconds_are_utc(self):
        """Numbers are epoch seconds in UTC."""
        assert to_date(1704067200) == NEW_YEAR
        assert to_date(1704067200.5) == NEW_YEAR + timedelta(seconds=0.5)

    @pytest.mark.parametrize('value', ['', 'yesterday', '2024-13-01', True, None, [], float('nan'), 10**20])
    def test_rejects(self, value):
        """Everything else has no conversion."""
        assert to_date(value) is None


class TestDateProcessors:
    """Tests for the four date processors."""

    def test_is_date(self):
        """Only datetimes pass the strict processor."""
        expect_success(is_date(), NEW_YEAR)
        issue = expect_issue(is_date(), '2024-01-01', Reason.INCORRECT_TYPE)
        assert issue.context == {'expected_type': 'date'}
        expect_issue(is_date(), date(2024, 1, 1), Reason.INCORRECT_TYPE)

    def test_maybe_date(self):
        """None is absent."""
        expect_value(maybe_date(), None, None)
        expect_success(maybe_date(), NEW_YEAR)

    def test_as_date(self):
        """Text and epoch numbers convert."""
        expect_value(as_date(), '2024-01-01T00:00:00Z', NEW_YEAR)
        expect_value(as_date(), 1704067200, NEW_YEAR)
        expect_issue(as_date(), 'soon', Reason.NO_CONVERSION)
        expect_value(as_date(default=NEW_YEAR), 'soon', NEW_YEAR)

    def test_maybe_as_date(self):
        """Unconvertible input is masked unless strict."""
        expect_value(maybe_as_date(), 'soon', None)
        expect_issue(maybe_as_date(strict_parsing=True), 'soon', Reason.NO_CONVERSION)


class TestDateBounds:
    """Tests for min and max."""

    def test_min(self):
        """Earlier values fail with min."""
        issue = expect_issue(is_date(min=NEW_YEAR), NEW_YEAR - timedelta(days=1), Reason.MIN)
        assert issue.context == {'min': NEW_YEAR}

    def test_max(self):
        """Later values fail with max."""
        expect_issue(as_date(max=NEW_YEAR), '2024-01-02', Reason.MAX)
        expect_success(is_date(max=NEW_YEAR), NEW_YEAR)

    def test_naive_values_compare_as_utc(self):
        """Naive and aware values compare without raising."""
        expect_success(is_date(min=NEW_YEAR), datetime(2024, 1, 1, 0, 0, 1))
        east = timezone(timedelta(hours=2))
        expect_issue(is_date(min=NEW_YEAR), datetime(2024, 1, 1, 1, 0, tzinfo=east), Reason.MIN)

    def test_min_after_max(self):
        """min cannot be later than max."""
        with pytest.raises(OptionsError, match='later'):
            is_date(min=NEW_YEAR, max=NEW_YEAR - timedelta(days=1))

    def test_bound_type(self):
        """Bounds must be datetimes."""
        with pytest.raises(OptionsError):
            is_date(min=5)
