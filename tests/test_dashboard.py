"""
Tests for dashboard filters, sorting and summary stats
"""
from datetime import date, datetime
from types import SimpleNamespace
import pytest
from scholarmatch.models import ScholarshipType
from scholarmatch.services.dashboard import (
    dashboard_stats,
    filter_matches,
    parse_amount,
    parse_deadline,
    sort_matches,
)

TODAY = date(2025, 3, 10)


def _match(score, amount="$1,000", deadline="2025-12-31", type=ScholarshipType.MERIT_BASED, created_at=None):
    scholarship = SimpleNamespace(amount=amount, deadline=deadline, type=type)
    return SimpleNamespace(match_score=score, scholarship=scholarship, created_at=created_at)


class TestParsing:

    @pytest.mark.parametrize("text,expected", [
        ("$10,000", 10000),
        ("₹16,50,000", 1650000),
        ("Up to $2,500 per year", 2500),
        ("Full tuition", 0),
        ("", 0),
        (None, 0),
    ])
    def test_parse_amount(self, text, expected):
        assert parse_amount(text) == expected

    def test_parse_deadline(self):
        assert parse_deadline("2025-04-01") == date(2025, 4, 1)
        assert parse_deadline("2025-04-01T00:00:00Z") == date(2025, 4, 1)
        assert parse_deadline("Rolling") is None
        assert parse_deadline(None) is None


class TestFilterMatches:

    def test_filter_by_type(self):
        merit = _match(80)
        need = _match(70, type=ScholarshipType.NEED_BASED)
        assert filter_matches([merit, need], scholarship_type="need-based") == [need]

    def test_filter_by_min_amount(self):
        small, large = _match(80, amount="$500"), _match(70, amount="$20,000")
        assert filter_matches([small, large], min_amount=1000) == [large]

    def test_filter_by_deadline_window(self):
        soon = _match(80, deadline="2025-03-20")
        later = _match(70, deadline="2025-06-01")
        past = _match(60, deadline="2025-03-01")
        rolling = _match(90, deadline="Rolling")
        result = filter_matches([soon, later, past, rolling], deadline_within_days=30, today=TODAY)
        assert result == [soon]

    def test_no_filters_keeps_everything(self):
        matches = [_match(80), _match(70)]
        assert filter_matches(matches) == matches


class TestSortMatches:

    def test_sort_by_amount_descending(self):
        a, b = _match(90, amount="$1,000"), _match(60, amount="$5,000")
        assert sort_matches([a, b], "amount") == [b, a]

    def test_sort_by_deadline_unparseable_last(self):
        rolling = _match(90, deadline="Rolling")
        early = _match(60, deadline="2025-04-01")
        late = _match(70, deadline="2025-09-01")
        assert sort_matches([rolling, late, early], "deadline") == [early, late, rolling]

    def test_sort_by_recent(self):
        old = _match(90, created_at=datetime(2025, 1, 1))
        new = _match(60, created_at=datetime(2025, 3, 1))
        assert sort_matches([old, new], "recent") == [new, old]

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError):
            sort_matches([], "popularity")


def test_dashboard_stats():
    matches = [
        _match(95, amount="$10,000", deadline="2025-03-28"),
        _match(90, amount="$2,500", deadline="2025-05-01"),
        _match(65, amount="Varies", deadline="2025-03-05"),
    ]
    stats = dashboard_stats(matches, today=TODAY)
    assert stats == {
        "total_matches": 3,
        "high_match": 2,
        "due_this_month": 1,
        "total_value": 12500,
    }


def test_dashboard_stats_empty():
    assert dashboard_stats([], today=TODAY) == {
        "total_matches": 0,
        "high_match": 0,
        "due_this_month": 0,
        "total_value": 0,
    }
