"""날짜 필터 유틸리티."""

from datetime import date, datetime, time, timedelta


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day_exclusive(day: date) -> datetime:
    """day 다음 날 00:00 (범위 조회 시 < 비교용)"""
    return datetime.combine(day + timedelta(days=1), time.min)
