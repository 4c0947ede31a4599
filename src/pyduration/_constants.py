"""Millisecond factors for each duration unit."""

MILLISECONDS_IN_A_SECOND = 1000
MILLISECONDS_IN_A_MINUTE = MILLISECONDS_IN_A_SECOND * 60
MILLISECONDS_IN_AN_HOUR = MILLISECONDS_IN_A_MINUTE * 60
MILLISECONDS_IN_A_DAY = MILLISECONDS_IN_AN_HOUR * 24
MILLISECONDS_IN_A_WEEK = MILLISECONDS_IN_A_DAY * 7

DAYS_IN_A_YEAR = 365.25
"""Average Julian year length; calendar-free approximation."""

MILLISECONDS_IN_A_YEAR = int(MILLISECONDS_IN_A_DAY * DAYS_IN_A_YEAR)
MILLISECONDS_IN_A_MONTH = MILLISECONDS_IN_A_YEAR // 12
"""One twelfth of a year; a month has no fixed length."""
