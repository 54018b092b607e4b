"""Split a stay into per-calendar-month night counts."""

from datetime import date, datetime, timedelta
from typing import Optional

from structlog import get_logger

from src.models.quote.breakdown import MonthSegment

logger = get_logger(__name__)


def _as_date(value: Optional[date]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


class DateSegmenter:
    """Counts nights per calendar month for month-specific rates."""

    @staticmethod
    def count_nights(check_in: Optional[date], check_out: Optional[date]) -> int:
        """Whole nights between check-in and the (exclusive) check-out, never negative."""
        check_in, check_out = _as_date(check_in), _as_date(check_out)
        if not check_in or not check_out:
            return 0
        return max(0, (check_out - check_in).days)

    @staticmethod
    def segment(
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> list[MonthSegment]:
        """Split a stay into chronological month buckets.

        Walks one night at a time from check-in up to, but excluding,
        check-out. Missing dates, a zero-night stay or an inverted range
        yield an empty list.

        Args:
            check_in: First night of the stay
            check_out: Departure day (not a night)

        Returns:
            One MonthSegment per calendar month touched, in order
        """
        check_in, check_out = _as_date(check_in), _as_date(check_out)
        if not check_in or not check_out:
            return []

        if check_in > check_out:
            logger.warning(
                "Check-out before check-in, pricing as zero nights",
                check_in=check_in.isoformat(),
                check_out=check_out.isoformat(),
            )
            return []

        buckets: dict[tuple[int, int], int] = {}
        cursor = check_in
        while cursor < check_out:
            key = (cursor.year, cursor.month)
            buckets[key] = buckets.get(key, 0) + 1
            cursor += timedelta(days=1)

        return [
            MonthSegment(year=year, month=month, night_count=nights)
            for (year, month), nights in buckets.items()
        ]
