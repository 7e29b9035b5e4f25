"""
Read-only dashboard views over persisted matches.
Nothing here writes to the session or mutates the matches it is given.
"""
from calendar import monthrange
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional
import re

from scholarmatch.models import ScholarshipMatch

HIGH_MATCH_SCORE = 90
AMOUNT_BUCKETS = (1000, 5000, 10000, 25000)
SORT_KEYS = ("match_score", "amount", "deadline", "recent")

# First run of digits, allowing grouping commas ("$10,000", "₹16,50,000")
_AMOUNT_RE = re.compile(r"\d[\d,]*")


def parse_amount(amount: Optional[str]) -> int:
    if not amount:
        return 0
    m = _AMOUNT_RE.search(amount)
    if not m:
        return 0
    return int(m.group(0).replace(",", ""))


def parse_deadline(deadline: Optional[str]) -> Optional[date]:
    if not deadline:
        return None
    try:
        return datetime.strptime(deadline.strip()[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def filter_matches(
    matches: List[ScholarshipMatch],
    scholarship_type: Optional[str] = None,
    min_amount: Optional[int] = None,
    deadline_within_days: Optional[int] = None,
    today: Optional[date] = None,
) -> List[ScholarshipMatch]:
    today = today or date.today()
    result = []
    for match in matches:
        s = match.scholarship
        if scholarship_type and getattr(s.type, "value", s.type) != scholarship_type:
            continue
        if min_amount is not None and parse_amount(s.amount) < min_amount:
            continue
        if deadline_within_days is not None:
            deadline = parse_deadline(s.deadline)
            if deadline is None or not (today <= deadline <= today + timedelta(days=deadline_within_days)):
                continue
        result.append(match)
    return result


def sort_matches(matches: List[ScholarshipMatch], sort_by: str = "match_score") -> List[ScholarshipMatch]:
    """Return a new sorted list; unknown keys raise ValueError"""
    if sort_by == "match_score":
        return sorted(matches, key=lambda m: m.match_score, reverse=True)
    if sort_by == "amount":
        return sorted(matches, key=lambda m: parse_amount(m.scholarship.amount), reverse=True)
    if sort_by == "deadline":
        # Unparseable deadlines sort last
        return sorted(matches, key=lambda m: parse_deadline(m.scholarship.deadline) or date.max)
    if sort_by == "recent":
        return sorted(matches, key=lambda m: (m.created_at is not None, m.created_at), reverse=True)
    raise ValueError(f"Unknown sort key: {sort_by}")


def dashboard_stats(matches: List[ScholarshipMatch], today: Optional[date] = None) -> Dict[str, int]:
    today = today or date.today()
    month_end = today.replace(day=monthrange(today.year, today.month)[1])

    due_this_month = 0
    for match in matches:
        deadline = parse_deadline(match.scholarship.deadline)
        if deadline is not None and today <= deadline <= month_end:
            due_this_month += 1

    return {
        "total_matches": len(matches),
        "high_match": sum(1 for m in matches if m.match_score >= HIGH_MATCH_SCORE),
        "due_this_month": due_this_month,
        "total_value": sum(parse_amount(m.scholarship.amount) for m in matches),
    }
