"""
Candidate dates and edition URL derivation.

Editions are addressed purely by calendar date. The URL path embeds the
year and month as directories and a ``DD_MM_YYYY`` token in the filename;
titles use ``DD.MM.YYYY``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Tuple, Union

from newspaper_viewer.config import PublicationConfig


def _as_date(value: Union[date, datetime]) -> date:
    """Reduce a datetime to the caller's local calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def candidate_dates(now: Union[date, datetime], lookback_days: int = 7) -> List[date]:
    """
    Enumerate the dates to probe, most recent first.

    Args:
        now: Current timestamp or date.
        lookback_days: Number of days before today to include.

    Returns:
        lookback_days + 1 dates, strictly decreasing by one day, starting at now.

    Raises:
        ValueError: If lookback_days is negative.

    Examples:
        >>> candidate_dates(date(2024, 3, 1), lookback_days=2)
        [datetime.date(2024, 3, 1), datetime.date(2024, 2, 29), datetime.date(2024, 2, 28)]
    """
    if lookback_days < 0:
        raise ValueError(f"lookback_days must not be negative, got {lookback_days}")

    today = _as_date(now)
    return [today - timedelta(days=offset) for offset in range(lookback_days + 1)]


def format_url_date(value: date) -> str:
    """Format a date as the filename token DD_MM_YYYY."""
    return f"{value.day:02d}_{value.month:02d}_{value.year:04d}"


def format_display_date(value: date) -> str:
    """Format a date for display as DD.MM.YYYY."""
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"


def url_path_segments(value: date) -> Tuple[str, str]:
    """Return the (YYYY, MM) directory segments for a date."""
    return f"{value.year:04d}", f"{value.month:02d}"


def build_edition_url(value: date, config: PublicationConfig) -> str:
    """
    Derive the edition URL for a date from the configured template.

    Args:
        value: Edition date.
        config: Publication configuration holding base URL and template.

    Returns:
        Absolute edition URL.

    Raises:
        ValueError: If the template references an unknown field or is malformed.

    Examples:
        >>> build_edition_url(date(2024, 3, 5), PublicationConfig())
        'https://www.nomo-norderney.de/media/ausgaben/2024/03/nomo_05_03_2024.pdf'
    """
    year, month = url_path_segments(value)
    fields = {
        "base_url": config.base_url.rstrip("/"),
        "year": year,
        "month": month,
        "day": f"{value.day:02d}",
        "prefix": config.file_prefix,
        "date_token": format_url_date(value),
    }
    try:
        return config.path_template.format(**fields)
    except KeyError as e:
        raise ValueError(f"Unknown field {e} in edition path template") from e
    except (IndexError, ValueError) as e:
        raise ValueError(f"Malformed edition path template: {e}") from e
