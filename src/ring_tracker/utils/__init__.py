"""Utility helpers for ring-tracker."""

from .date_utils import (
    format_date,
    format_distance_to_now,
    format_full_date,
    get_end_of_week,
    get_start_of_week,
    get_week_number,
    parse_datetime,
    to_iso,
    utcnow,
)
from .formatting import format_time, parse_rest_time, slugify, unslugify

__all__ = [
    "format_date",
    "format_distance_to_now",
    "format_full_date",
    "format_time",
    "get_end_of_week",
    "get_start_of_week",
    "get_week_number",
    "parse_datetime",
    "parse_rest_time",
    "slugify",
    "to_iso",
    "unslugify",
    "utcnow",
]
